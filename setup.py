import os

from setuptools import find_packages, setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


__version__ = "0.0.1"

setup(
    name="foldseq",
    version=__version__,
    description="Fold sequences, sparse ones included, into a single value",
    entry_points={"console_scripts": ["foldseq=foldseq.__main__:main"]},
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv",
        "pandas",
        "matplotlib",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
