"""Top-level module of the treeload package.

This package loads hierarchical key-value trees from INFO, XML, JSON or YAML
files and resolves the include directives they contain:
- Include directives are reserved keys (``IncludeFile``) pointing at files
- Relative include paths are resolved against the including file
- Included content is merged in document order, duplicate keys preserved
- Failures are recorded as diagnostics instead of aborting the load

Main Entry Points
-----------------
IncludeResolver : Load files into a caller-owned tree
load_tree : Load a file into a new tree, format inferred from the extension
"""

from .api import API_VERSION, DEPTH_LIMIT, INCLUDE_KEY
from .diagnostics import Diagnostics
from .errors import (
    DepthLimitError,
    PathNotFoundError,
    TreeLoadError,
    TreeParseError,
    TreeSerializeError,
    UnknownFormatError,
)
from .formats import FormatAdapter, adapter_factory, adapter_for_path
from .resolver import IncludeResolver, LoadOutcome, LoadStatus, load_tree
from .tree import Tree
from .version import __version__

__all__ = [
    "Tree",
    "IncludeResolver",
    "LoadOutcome",
    "LoadStatus",
    "load_tree",
    "Diagnostics",
    "FormatAdapter",
    "adapter_factory",
    "adapter_for_path",
    "TreeLoadError",
    "PathNotFoundError",
    "TreeParseError",
    "DepthLimitError",
    "TreeSerializeError",
    "UnknownFormatError",
    "API_VERSION",
    "DEPTH_LIMIT",
    "INCLUDE_KEY",
]
