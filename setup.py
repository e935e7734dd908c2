from setuptools import setup, find_packages

setup(
    name="tagnum",
    version="0.1.0",
    packages=find_packages(include=["tagnum", "tagnum.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
        "docs": ["sphinx>=7.0", "furo"],
    },
    author="Adam Koltuniuk",
    author_email="adam@koltuni.uk",
    description=(
        "Tagged numeric values: a generic wrapper over numpy scalars with "
        "arithmetic, comparison and explicit reinterpretation, for building "
        "named unit types."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)
