# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="peano",
    version="0.1.0",
    description="Interpreter for a small total functional language over unary natural numbers",
    packages=find_namespace_packages(include=["peano", "peano.*"]),
    package_data={"peano": ["prelude/*.peano"]},
    python_requires=">=3.10",
    install_requires=["termcolor>=2.3"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["peano=peano.cli:main"]},
    zip_safe=False,
)
