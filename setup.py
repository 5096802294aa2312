#!/usr/bin/env python3
"""
Setup script for authconf.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="authconf",
    version="0.1.0",
    description="Properties-driven authentication configuration: clients, authenticators and password encoders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="authconf Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0.0",
        "argon2-cffi>=23.1.0",
        "passlib[bcrypt]>=1.7.4",
        # passlib 1.7.4 cannot load bcrypt 5.x
        "bcrypt>=4.0.1,<5.0",
        "PyYAML>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "authconf=authconf.cli.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="authentication configuration oauth saml cas oidc ldap properties",
)
