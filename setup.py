from setuptools import setup

setup(
    name="avl",
    version="0.0.1",
    description="avl tree",
    author="thejchap",
    packages=["avl"],
    install_requires=[
        "black",
        "pylint",
        "flake8",
        "mypy",
        "pytest",
        "hypothesis",
        "structlog",
    ],
)
