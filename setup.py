# setup.py - Package build
from setuptools import setup, find_packages

setup(
    name="algebraic_structures",
    version="0.1.0",
    description="Algebraic structures (magma through field) with brute-force law verification",
    packages=find_packages(include=["algebraic_structures", "algebraic_structures.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "loguru",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
