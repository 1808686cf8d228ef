# setup.py - Pure-Python package; numpy backs dense tables and matrix coefficients
from setuptools import setup, find_packages

setup(
    name="convolution_algebra",
    version="0.1.0",
    description="Finite-support convolution algebras: monoid algebras, polynomials and Dirichlet convolution",
    packages=find_packages(include=["convolution_algebra", "convolution_algebra.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
