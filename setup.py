# setup.py
from setuptools import setup, find_packages

setup(
    name="clojette",
    version="0.1.0",
    description="A small tree-walking interpreter for a Clojure-flavoured Lisp",
    packages=find_packages(include=["clojette", "clojette.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["clojette=clojette.repl:main"],
    },
    zip_safe=False,
)
