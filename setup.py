#!/usr/bin/env python3

from setuptools import setup, find_packages

from ordered_hash.version import VERSION_STRING

setup(
    name="ordered-hash",
    version=VERSION_STRING,
    packages=find_packages(
        include=['ordered_hash', 'ordered_hash.*'],
    ),
    zip_safe=True,

    install_requires=['PyYAML>=5.1'],
    python_requires='>=3.6',

    test_suite='tests.unit',

    description='Map that keeps its keys in an explicitly controlled order',
)
