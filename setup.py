#!/usr/bin/env python3
"""Setup script for the Kinesis logging handler."""

from setuptools import setup, find_packages

setup(
    name="kinesis-logging",
    version="1.0.0",
    description="Logging handler that forwards structured log entries to AWS Kinesis",
    author="Your Organization",
    author_email="dev@yourorg.com",
    package_dir={"": "python-logger"},
    packages=find_packages(where="python-logger"),
    install_requires=[
        "boto3>=1.26",
        "botocore>=1.29",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
)
