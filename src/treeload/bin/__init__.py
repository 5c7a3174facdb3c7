"""Command line interface of the treeload package.

Main Components
---------------
cli.py : Loads a file with its includes and prints the diagnostics report and
         the resulting tree

Usage Examples
--------------
Main CLI usage::

    treeload config/app.info
    treeload config/app.xml --no-dump
    treeload settings.conf --format json --include-key Include
"""
