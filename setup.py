#!/usr/bin/env python3
"""
Setup script for leafdisk (synthetic leaf disk canopies).

Installs the ``leafdisk`` package and the ``run`` driver module, exposed as
the ``leafdisk`` console script.
"""

from pathlib import Path
from setuptools import setup, find_packages

project_root = Path(__file__).parent

setup(
    name="leafdisk",
    version="1.0.0",
    description="Leaf disk canopy generator with statistical leaf angle distributions",
    long_description=(project_root / "README.md").read_text(encoding="utf-8") if (project_root / "README.md").exists() else "",
    packages=find_packages(include=["leafdisk", "leafdisk.*"]),
    py_modules=["run"],
    entry_points={"console_scripts": ["leafdisk=run:main"]},
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=["numpy", "torch", "pyyaml", "matplotlib"],
    extras_require={"test": ["pytest"]},
)
