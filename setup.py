"""
Setup script for PDF Chunker.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
readme = this_directory / "README.md"
long_description = readme.read_text(encoding='utf-8') if readme.exists() else ""

setup(
    name="pdf-chunker-cli",
    version="1.0.0",
    description="CLI tool and library for splitting PDF files into contiguous chunks of pages",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="PDF Chunker Contributors",
    author_email="",
    packages=find_packages(include=["pdf_chunker", "pdf_chunker.*"]),
    install_requires=[
        "pypdf>=6.0.0",
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-chunker=pdf_chunker.cli:cli",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: End Users/Desktop",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf split splitter cli chunks pages",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
