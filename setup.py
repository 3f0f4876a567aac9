#!/usr/bin/env python3
"""
Setup script for regiontracker package
"""

from setuptools import setup, find_packages

setup(
    name="regiontracker",
    version="0.1.0",
    description="A lightweight Python library that tracks region ownership in a fixed-capacity address space",
    packages=find_packages(include=["regiontracker", "regiontracker.*"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'regiontracker=regiontracker.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
