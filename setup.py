""" Python Packaging information

This file allows the module to be pip-installed into a python kernel.
Project metadata and dependencies are held in pyproject.toml.

See https://packaging.python.org/tutorials/packaging-projects/

To install your working copy into your local conda environment in "editable mode":

    pip install -e /path/to/working/copy

"""

from setuptools import setup

setup()
