"""Module which stores the current release version of the package."""

__version__ = "0.3.0"
