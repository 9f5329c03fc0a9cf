# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="A small Scheme-like expression evaluator",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
