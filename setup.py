# setup.py
from setuptools import setup, find_packages

setup(
    name="schemelet",
    version="0.1.0",
    description="A minimal Scheme-style reader and evaluator",
    packages=find_packages(include=["schemelet", "schemelet.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemelet = schemelet.__main__:main"],
    },
    zip_safe=False,
)
