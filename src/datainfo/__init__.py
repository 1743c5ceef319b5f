"""
datainfo - configuration descriptors for relational data sources.

Build a ``DataInfo`` with ``new_default``, ``new_minimal`` or ``clone_with``
and the option functions in ``datainfo.options``.
"""

from . import options
from .builder import clone_with, new_default, new_minimal
from .data_info import DataInfo
from .defaults import DataInfoDefaults, get_defaults
from .exceptions import DataInfoError, OptionError, UnknownFieldError
from .options import DataOption
from .types import LimitPosition, SequenceGeneratorInfo

__all__ = [
    "DataInfo",
    "DataInfoDefaults",
    "DataInfoError",
    "DataOption",
    "LimitPosition",
    "OptionError",
    "SequenceGeneratorInfo",
    "UnknownFieldError",
    "clone_with",
    "get_defaults",
    "new_default",
    "new_minimal",
    "options",
]
