# setup.py
from setuptools import setup, find_packages

setup(
    name="emlisp",
    version="0.1.0",
    description="A small Lisp for driving editor buffers from evaluated expressions",
    packages=find_packages(include=["emlisp", "emlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["emlisp=emlisp.__main__:main"],
    },
    zip_safe=False,
)
