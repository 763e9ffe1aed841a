#!/usr/bin/env python3
"""
Setup script for buildopts package.
"""

from setuptools import setup, find_packages

setup(
    name="buildopts",
    version="0.3",
    description="Read-only registry of parsed build options and external settings",
    author="buildopts Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "buildopts=buildopts.cli.main:app",
        ],
    },
)
