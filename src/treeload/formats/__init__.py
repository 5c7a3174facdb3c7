"""Format adapters which read files into trees and write trees back.

One adapter exists per supported text format:

- ``info``: brace-structured property tree syntax (``.info``)
- ``xml``: markup (``.xml``)
- ``json``: object notation (``.json``)
- ``yaml``: YAML (``.yaml``, ``.yml``)

Use :func:`adapter_factory` to build an adapter from a format name and
:func:`adapter_for_path` to pick one from a file extension.
"""

import os

from ..errors import UnknownFormatError
from .base import FormatAdapter
from .info import InfoAdapter
from .json import JsonAdapter
from .xml import XmlAdapter
from .yaml import YamlAdapter

__all__ = [
    "FormatAdapter",
    "InfoAdapter",
    "JsonAdapter",
    "XmlAdapter",
    "YamlAdapter",
    "ADAPTERS",
    "adapter_factory",
    "adapter_for_path",
]

# Maps format names onto adapter classes
ADAPTERS = {
    cls.name: cls for cls in (InfoAdapter, XmlAdapter, JsonAdapter, YamlAdapter)
}


def adapter_factory(name):
    """Instantiates a format adapter from the name of its format.

    Parameters
    ----------
    name : str
        Name of the format (case-insensitive)

    Returns
    -------
    FormatAdapter
        Adapter instance
    """
    key = name.lower()
    if key not in ADAPTERS:
        raise UnknownFormatError(
            f"Format not recognized: {name}. Must be one of "
            f"{list(ADAPTERS.keys())}."
        )

    return ADAPTERS[key]()


def adapter_for_path(path):
    """Instantiates the format adapter matching the extension of a path.

    Parameters
    ----------
    path : str
        Path to a file

    Returns
    -------
    FormatAdapter
        Adapter instance
    """
    ext = os.path.splitext(path)[1].lower()
    for cls in ADAPTERS.values():
        if ext in cls.extensions:
            return cls()

    valid = [e for cls in ADAPTERS.values() for e in cls.extensions]
    raise UnknownFormatError(
        f"Cannot infer the format of {path} from its extension. "
        f"Must be one of {valid}."
    )
