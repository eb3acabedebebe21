# setup.py - Nesting index package and command line tool
from setuptools import setup, find_packages

setup(
    name="nesting_index",
    version="0.1.0",
    description="Nesting index of double occurrence words",
    packages=find_packages(include=["nesting_index", "nesting_index.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "nesting-index=nesting_index.cli:main",
        ],
    },
)
