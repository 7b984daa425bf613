#!/usr/bin/env python3
"""
Setup script for atparsepy.
"""

from setuptools import setup, find_packages

setup(
    name="atparsepy",
    version="0.1.0",
    description="Python library for tokenizing AT commands and parsing modem responses",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-timeout>=2.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "atparse-cli=atparsepy.cli:main",
        ],
    },
    keywords=["modem", "cellular", "at-commands", "parser", "iot"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Communications",
        "Topic :: Text Processing",
        "License :: OSI Approved :: MIT License",
    ],
)
