"""Simple setup.py for Beam worker distribution (--setup_file); metadata lives in pyproject.toml."""
from setuptools import setup, find_packages

setup(
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    package_data={'emoji_scan': ['data/*.json']},
)
