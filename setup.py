"""Setup script for MiniHub."""
from setuptools import setup, find_packages

setup(
    name="minihub",
    version="0.1.0",
    packages=find_packages(include=["minihub", "minihub.*"]),
    py_modules=["cli"],
    package_data={"minihub": ["templates/*.html"]},
    install_requires=[
        "flask",
        "markdown",
        "pydantic>=2.5",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["minihub=cli:main"],
    },
    python_requires=">=3.10",
)
