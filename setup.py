# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.3.0",
    description="A small homoiconic Lisp with fn/macro closures and a bootstrap prelude",
    packages=find_packages(include=["risp", "risp.*"]),
    package_data={"risp": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["risp = risp.cli:main"]},
    zip_safe=False,
)
