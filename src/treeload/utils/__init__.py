"""Utility modules shared across the treeload package."""
