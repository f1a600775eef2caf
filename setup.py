# setup.py
from setuptools import setup, find_packages

setup(
    name="lispc",
    version="0.0.1",
    description="A small Lisp-like expression evaluator",
    packages=find_packages(include=["lispc", "lispc.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispc=lispc.__main__:main"],
    },
    zip_safe=False,
)
