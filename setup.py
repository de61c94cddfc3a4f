#!/usr/bin/env python3

from setuptools import setup, find_packages


setup(
    name='nfevents',
    version='0.1',
    description='Prioritized in-process event dispatcher with class-based listeners.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    extras_require={'test': ['pytest']},
    python_requires='>=3.8'
)
