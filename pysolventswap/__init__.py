"""
pysolventswap
===================================

---------------------------------------------------------
Binary Vapor-Liquid Equilibrium and Solvent Swap Utilities
---------------------------------------------------------

Functions for ideal (Raoult's law) binary mixtures of process solvents, built around
Antoine vapor pressure correlations with multiple validity ranges per component.

Each submodule is imported separately, eg `import pysolventswap.vle as vle`

Includes functions to perform calculations including;

- Saturation pressure and boiling temperature from multi-segment Antoine correlations
- Bubble point temperature, vapor composition and K-values of binary mixtures
- T-x-y tables at fixed pressure
- Batch evaporation of a binary liquid on a mole or mass basis
- Multi-cycle put-and-take solvent swap simulation
- Mole, mass and volume fraction conversions for binary mixtures
- A bundled library of common solvents, and NIST Webbook / PubChem component lookup


"""

submodules = [
    'antoine',
    'classes',
    'component',
    'constants',
    'convert',
    'library',
    'shared_fns',
    'swap',
    'validate',
    'vle',
    'webbook'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pysolventswap.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pysolventswap' has no attribute '{name}'"
            )
