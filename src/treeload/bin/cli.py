#!/usr/bin/env python3
"""CLI entry point which loads a tree file and prints what was loaded."""

import argparse
import sys

from treeload.api import DEPTH_LIMIT, INCLUDE_KEY
from treeload.errors import TreeSerializeError, UnknownFormatError
from treeload.formats import ADAPTERS, adapter_factory, adapter_for_path
from treeload.resolver import IncludeResolver
from treeload.tree import Tree
from treeload.utils.logger import logger, set_verbosity


def main(
    path: str,
    fmt: str = None,
    include_key: str = INCLUDE_KEY,
    depth_limit: int = DEPTH_LIMIT,
    report: bool = True,
    dump: bool = True,
    verbosity: str = "info",
) -> int:
    """Load a file with its includes, print the diagnostics and the tree.

    Performs these basic functions:
    - Pick the format adapter (explicit or from the file extension)
    - Load the file and everything it includes
    - Print the diagnostics report and the serialized tree

    Parameters
    ----------
    path : str
        Path to the root file
    fmt : str, optional
        Name of the format. If not specified, inferred from the extension
    include_key : str, default 'IncludeFile'
        Key interpreted as an include directive
    depth_limit : int, default 20
        Maximum nesting level of included files
    report : bool, default True
        If `True`, print the diagnostics report
    dump : bool, default True
        If `True`, print the serialized tree
    verbosity : str, default 'info'
        Logging level

    Returns
    -------
    int
        Exit status (1 if the tree could not be serialized)

    Raises
    ------
    UnknownFormatError
        If the format cannot be determined
    """
    set_verbosity(verbosity)

    # Select the format adapter
    adapter = adapter_factory(fmt) if fmt is not None else adapter_for_path(path)
    logger.info("Assuming %s format...", adapter.name.upper())

    # Load the tree, failures end up in the diagnostics
    tree = Tree()
    resolver = IncludeResolver(
        tree, adapter, include_key=include_key, depth_limit=depth_limit
    )
    resolver.load(path)

    if report:
        print(resolver.report(), end="")

    if dump:
        try:
            print(resolver.dump_tree(), end="")
        except TreeSerializeError as exc:
            logger.error("Failed to dump the tree: %s", exc)
            return 1

    return 0


def cli(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="treeload - Load configuration trees with include directives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  treeload app.info                       Load an INFO file, print report and tree
  treeload app.xml --no-dump              Only print the diagnostics report
  treeload app.cfg --format json          Force the format of the file
  treeload app.json --include-key Include Use another include directive key

Formats: {', '.join(ADAPTERS)}
""",
    )

    # Add a version command
    parser.add_argument(
        "--version", "-v", action="version", version=f"treeload {get_version()}"
    )

    # Add the path to the root file
    parser.add_argument("path", help="Path to the file to load")

    # Add format and resolution options
    parser.add_argument(
        "-f",
        "--format",
        dest="fmt",
        choices=list(ADAPTERS),
        help="Format of the files (default: inferred from the extension)",
    )

    parser.add_argument(
        "--include-key",
        default=INCLUDE_KEY,
        help=f"Key interpreted as an include directive (default: {INCLUDE_KEY})",
    )

    parser.add_argument(
        "--depth-limit",
        type=int,
        default=DEPTH_LIMIT,
        help=f"Maximum nesting level of included files (default: {DEPTH_LIMIT})",
    )

    # Add output options
    parser.add_argument(
        "--no-report",
        dest="report",
        action="store_false",
        help="Do not print the diagnostics report",
    )

    parser.add_argument(
        "--no-dump",
        dest="dump",
        action="store_false",
        help="Do not print the loaded tree",
    )

    parser.add_argument(
        "--verbosity",
        default="info",
        help="Logging level (debug, info, warning, error)",
    )

    # Parse the arguments
    args = parser.parse_args(argv)

    if args.depth_limit < 1:
        parser.error("--depth-limit must be a positive integer")

    try:
        return main(
            path=args.path,
            fmt=args.fmt,
            include_key=args.include_key,
            depth_limit=args.depth_limit,
            report=args.report,
            dump=args.dump,
            verbosity=args.verbosity,
        )
    except (UnknownFormatError, ValueError) as exc:
        parser.error(str(exc))


def get_version():
    """Get the treeload version."""
    try:
        from treeload.version import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(cli())
