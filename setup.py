#!/usr/bin/env python3
"""Setup script for clipscript."""

from setuptools import setup, find_packages


setup(
    name="clipscript",
    version="1.0.0",
    description="Per-clipboard scripts that run before and after clipboard actions",
    author="Lightspeed DMS",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "clipscript=clipscript.cli:main",
        ],
    },
    package_data={
        "clipscript": ["messages/*/*.json"],
    },
    include_package_data=True,
)
