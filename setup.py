# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="0.3.0",
    description="A small embeddable tree-walking interpreter for a parenthesised scripting language",
    packages=find_packages(include=["tinylisp", "tinylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
