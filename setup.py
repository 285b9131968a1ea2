# setup.py
from setuptools import setup, find_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="A small Lisp with q-expressions, currying and variadic lambdas",
    packages=find_packages(include=["mlisp", "mlisp.*"]),
    package_data={"mlisp": ["prelude/*.mlisp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["mlisp=mlisp.repl:main"]},
    zip_safe=False,
)
