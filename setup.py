#!/usr/bin/env python3
"""
Setup script for the Vendor Catalog aggregation engine.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="vendor-catalog",
    version="1.0.0",
    author="Catalog Integrations Team",
    description="Supplier catalog search and product aggregation for promotional-products resellers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "lxml",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
