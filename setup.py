#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pysolventswap',
    include_package_data=True,
    version='1.0.0',
    packages=find_packages(exclude=['pysolventswap.tests']),
    package_data={'pysolventswap': ['library/*.csv']},
    description='pySolventSwap - Binary VLE and Solvent Swap Utilities',
    long_description=long_description,
    long_description_content_type='text/markdown',
    keywords=['vle', 'antoine', 'bubble point', 'distillation', 'solvent swap'],
    classifiers=[],
    python_requires='>=3.9',
    install_requires=[
        'requests',
        'numpy',
        'scipy',
        'pandas',
        'tabulate',
        'loguru'
    ],
    extras_require={
        'test': ['pytest'],
    },
)
