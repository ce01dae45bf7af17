#!/usr/bin/env python3
"""
Setup script for the i18n-resolver package
"""

from setuptools import setup, find_packages

setup(
    name="i18n-resolver",
    version="0.1.0",
    description="Dictionary-based translation with language fallback and placeholder interpolation",
    packages=find_packages(include=["i18n_resolver", "i18n_resolver.*"]),
    python_requires=">=3.9",
    install_requires=[
        # Web Framework
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",

        # Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "i18n-resolver=i18n_resolver.services.app:main",
        ],
    },
    package_data={
        "i18n_resolver": ["py.typed"],
    },
)
