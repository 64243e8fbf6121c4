# SPDX-FileCopyrightText: 2025 vsss contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="vsss",
    version="0.1.0",
    description="Shamir's Secret Sharing and Feldman's Verifiable Secret Sharing",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=38.0.4",
        "sympy>=1.12",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "ruff>=0.2.0",
            "black>=23.1.0",
            "isort>=5.10.1",
            "mypy>=1.8.0",
            "bandit>=1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vsss=vsss.cli:main",
        ],
    },
)
