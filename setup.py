# setup.py - Package metadata
from setuptools import setup, find_packages

setup(
    name="graded_bits",
    version="0.1.0",
    description="Probabilistic Boolean algebra over fixed-width integers",
    packages=find_packages(include=["graded_bits", "graded_bits.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
