#!/usr/bin/env python3
"""
Setup script for nasue - command line options of the NAS UE process.

This package provides the option table, typed option accessors and the
command line entry point of the NAS (Non-Access Stratum) UE protocol-stack
process.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "nasue - command line options of the NAS UE process"

setup(
    name="nasue",
    version="0.1.0",
    author="NAS UE Development Team",
    description="Command line options of the NAS UE protocol-stack process",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests*', 'docs*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Telecommunications Industry",
        "Intended Audience :: Developers",
        "Topic :: System :: Networking",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "PyYAML>=6.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.4",
        ],
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nas-options=nasue.cli.run_nas:run_nas_main",
        ],
    },
    zip_safe=False,
    keywords="nas, ue, lte, command line, options",
)
