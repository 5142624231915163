#!/usr/bin/env python3
"""Setup script for the quoted table formatter."""

from setuptools import find_packages, setup

setup(
    name="quoted-table",
    version="1.0.0",
    description="Render streams of quoted text cells as column-aligned markdown tables",
    packages=find_packages(include=["quoted_table", "quoted_table.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["quoted-table = quoted_table.main:main"]},
    zip_safe=False,
)
