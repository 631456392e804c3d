# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.3.0",
    description="A small Scheme interpreter with lexical closures and a fixed set of special forms",
    packages=find_packages(include=["minischeme", "minischeme.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minischeme=minischeme.repl:main"],
    },
    zip_safe=False,
)
