# This file is maintained for compatibility with tools that don't support pyproject.toml
# For development, use Poetry: poetry install

from setuptools import setup

# Poetry handles dependencies and the errdigest package via pyproject.toml
setup()
