"""Recursive loader which resolves include directives.

Loading Semantics
-----------------

Any top-level key equal to the include key (``IncludeFile`` by default) is an
include directive. Its value is the path of another file, parsed with the
same format adapter::

    IncludeFile common.info     ; relative to the including file
    IncludeFile /etc/app.info   ; absolute, used as is
    server { port 8080 }

Every top-level entry of a file, include directives included, is appended to
the destination tree in document order. When an include directive is
appended, the referenced file is loaded right away, so that its entries land
between the directive and the next sibling. Nothing is ever replaced or
deduplicated: repeated keys, and repeated includes, are all kept.

Path Resolution:
    - The root path is resolved against the current working directory
    - Included paths are resolved against the directory of the including file
    - Absolute paths ignore the including directory
    - The result is canonicalized (``.``, ``..`` and symlinks), even if the
      target does not exist

Failures:
    Each include is loaded on a best-effort basis. A missing file, a file
    which cannot be parsed and an include nested deeper than the depth limit
    are recorded in the diagnostics and skip that file only: loading goes on
    with the next sibling entry. Nothing is raised to the caller of
    :meth:`IncludeResolver.load`.

Depth:
    The depth is the nesting level of a file in the include chain (the root
    file is level 1). A file nested deeper than the limit (20) is not loaded.
    This bounds cyclic includes without tracking the files being loaded. A
    file with many sibling includes is not affected by the limit.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .api import DEPTH_LIMIT, INCLUDE_KEY
from .diagnostics import Diagnostics
from .errors import DepthLimitError, PathNotFoundError
from .formats import FormatAdapter, adapter_for_path, adapter_factory
from .report import dump_tree
from .tree import Tree
from .utils.logger import logger

__all__ = ["IncludeResolver", "LoadStatus", "LoadOutcome", "load_tree"]


class LoadStatus(Enum):
    """Enumerates the possible results of loading one file."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    DEPTH_EXCEEDED = "depth_exceeded"


@dataclass
class LoadOutcome:
    """Result of one step of the recursive load.

    Attributes
    ----------
    status : LoadStatus
        What happened to the file
    path : str
        Effective path of the file (or the raw path if it was never resolved)
    message : str, optional
        Description of the failure, if any
    """

    status: LoadStatus
    path: str
    message: Optional[str] = None

    @property
    def success(self) -> bool:
        """Whether the file content was merged into the destination tree."""
        return self.status == LoadStatus.LOADED

    def describe(self) -> Optional[str]:
        """Diagnostic line describing a failure (None on success).

        Returns
        -------
        str
            Diagnostic line
        """
        if self.status == LoadStatus.LOADED:
            return None
        if self.status == LoadStatus.DEPTH_EXCEEDED:
            return "Recursive include loop detected. Exiting..."

        return self.message


class IncludeResolver:
    """Loads a file and every file it includes into one destination tree.

    The resolver is bound to a destination tree owned by the caller and to a
    single format adapter, used for the root file and for every included
    file. The tree is only ever appended to.

    Attributes
    ----------
    tree : Tree
        Destination tree
    adapter : FormatAdapter
        Adapter used to parse and serialize files
    include_key : str
        Key interpreted as an include directive
    depth_limit : int
        Maximum nesting level of a loaded file
    diagnostics : Diagnostics
        Log of everything the resolver did
    loaded_paths : List[str]
        Effective paths of the files merged so far, in loading order
    """

    def __init__(
        self,
        tree: Tree,
        adapter: FormatAdapter,
        include_key: str = INCLUDE_KEY,
        depth_limit: int = DEPTH_LIMIT,
    ):
        """Bind the resolver to a destination tree and a format adapter.

        Parameters
        ----------
        tree : Tree
            Destination tree, owned by the caller
        adapter : FormatAdapter
            Adapter used to parse every file and to dump the tree
        include_key : str, default 'IncludeFile'
            Key interpreted as an include directive (case-sensitive)
        depth_limit : int, default 20
            Maximum nesting level of a loaded file
        """
        assert depth_limit > 0, "The depth limit must be a positive integer."

        self.tree = tree
        self.adapter = adapter
        self.include_key = include_key
        self.depth_limit = depth_limit
        self.diagnostics = Diagnostics()
        self.loaded_paths: List[str] = []

    def load(self, path: Union[str, bytes, os.PathLike]):
        """Load a file and its includes into the destination tree.

        This never raises for a load failure: missing files, malformed files
        and over-nested includes are recorded in the diagnostics and whatever
        could be loaded is kept.

        Parameters
        ----------
        path : Union[str, bytes, os.PathLike]
            Absolute path, or path relative to the current working directory
        """
        path = os.fsdecode(path)
        base_dir = os.getcwd() if not os.path.isabs(path) else ""
        self._record(self._load_into(path, base_dir, depth=1))

    def report(self) -> str:
        """Framed report of every diagnostic recorded so far."""
        return self.diagnostics.report()

    def dump_tree(self) -> str:
        """Framed serialization of the destination tree.

        Returns
        -------
        str
            Serialized tree

        Raises
        ------
        TreeSerializeError
            If the tree cannot be written with the bound adapter
        """
        return dump_tree(self.tree, self.adapter)

    def _load_into(self, path: str, base_dir: str, depth: int) -> LoadOutcome:
        """Load one file and, recursively, the files it includes.

        Parameters
        ----------
        path : str            Path to load, absolute or relative to `base_dir`
        base_dir : str
            Directory of the including file
        depth : int
            Nesting level of this file (the root file is 1)

        Returns
        -------
        LoadOutcome
            Result of loading this file. Failures of nested includes are
            recorded on the spot and do not affect it
        """
        # Refuse to go deeper than the limit
        if depth > self.depth_limit:
            error = DepthLimitError(path, self.depth_limit)
            return LoadOutcome(LoadStatus.DEPTH_EXCEEDED, path, str(error))

        # Resolve the path against the directory of the including file
        try:
            effective_path = self.resolve_path(path, base_dir)
            exists = os.path.exists(effective_path)
        except (OSError, ValueError) as exc:
            return LoadOutcome(
                LoadStatus.NOT_FOUND, path, f"Path not found: {path} ({exc})"
            )

        if not exists:
            return LoadOutcome(
                LoadStatus.NOT_FOUND,
                effective_path,
                str(PathNotFoundError(effective_path)),
            )

        self.diagnostics.record(f"Loading: {effective_path}")

        # Parse the file on its own, so that a failure merges nothing
        try:
            subtree = self.adapter.parse(effective_path)
        except Exception as exc:
            # Keep one diagnostic line per event
            message = " ".join(str(exc).split())
            return LoadOutcome(
                LoadStatus.PARSE_ERROR, effective_path, f"Error: {message}"
            )

        self.loaded_paths.append(effective_path)

        # Merge the entries in order, following include directives as they come
        parent_dir = os.path.dirname(effective_path)
        for key, child in subtree:
            self.tree.add_child(key, child)
            if key == self.include_key:
                self._record(self._load_into(child.value, parent_dir, depth + 1))

        return LoadOutcome(LoadStatus.LOADED, effective_path)

    @staticmethod
    def resolve_path(path: str, base_dir: str) -> str:
        """Compute the effective path of a file.

        Parameters
        ----------
        path : str            Absolute path, or path relative to `base_dir`
        base_dir : str
            Directory relative paths are resolved against

        Returns
        -------
        str
            Canonical absolute path (the file need not exist)
        """
        if not os.path.isabs(path):
            path = os.path.join(base_dir, path)

        return os.path.realpath(path)

    def _record(self, outcome: LoadOutcome):
        """Record the diagnostic line of a failed step."""
        line = outcome.describe()
        if line is not None:
            self.diagnostics.record(line)
            logger.warning("Could not load %s: %s", outcome.path, outcome.message)


def load_tree(path: str, fmt: Optional[str] = None, **kwargs):
    """Load a file and its includes into a new tree.

    Parameters
    ----------
    path : str
        Path to the root file
    fmt : str, optional
        Name of the format. If not specified, it is inferred from the
        extension of `path`
    **kwargs : dict, optional
        Additional arguments passed to :class:`IncludeResolver`

    Returns
    -------
    tree : Tree
        Loaded tree
    resolver : IncludeResolver
        Resolver used to load the tree, which holds the diagnostics

    Examples
    --------
    >>> tree, resolver = load_tree("app.info")
    >>> print(tree.get("server.port"))
    8080
    """
    adapter = adapter_factory(fmt) if fmt is not None else adapter_for_path(path)

    tree = Tree()
    resolver = IncludeResolver(tree, adapter, **kwargs)
    resolver.load(path)

    return tree, resolver
