#!/usr/bin/env python3
"""
Setup script for recut
"""

from setuptools import setup, find_packages

setup(
    name="recut",
    version="0.1.0",
    description="Fragment assembly for double-stranded sequences cut by vertical and horizontal cuts",
    author="recut Team",
    author_email="example@example.org",
    packages=find_packages(include=["recut", "recut.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "biopython>=1.79",
        "pandas>=1.4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'recut=recut.cli.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
