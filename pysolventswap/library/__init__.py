from .library import solvent_library, solvents
