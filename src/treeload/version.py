"""Module which stores the current version of the treeload package."""

__version__ = "1.0.0"
