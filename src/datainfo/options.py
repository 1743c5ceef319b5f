"""
Functional options for building a ``DataInfo``.

Each factory captures one value and returns a ``DataOption``: a callable that
sets exactly one field on the descriptor it is given. Options signal success by
returning normally.

Three conventions apply to empty arguments:

- flags, ``schema``, ``result_limit_position`` and ``sequence_generator`` are
  set verbatim, so ``ping(False)`` or ``schema("")`` store that value;
- characters, the parameter placeholder, pool sizes and durations fall back to
  the process-wide default when given ``""`` or ``0``;
- ``connection_string``, ``driver_name``, ``helper_id`` and ``user_name`` are
  skipped when empty, leaving the field as it was.

Example::

    from datainfo import new_default, options

    info = new_default(
        options.connection_string("postgres://localhost/app"),
        options.driver_name("pgsql"),
        options.parameter_placeholder("$"),
        options.parameter_in_sequence(True),
    )
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import timedelta

from .data_info import DataInfo
from .defaults import get_defaults
from .types import LimitPosition, SequenceGeneratorInfo

DataOption = Callable[[DataInfo], None]


def _seconds(value: int | timedelta) -> int:
    # Non-zero deltas never round to zero.
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
        return math.ceil(seconds) if seconds > 0 else math.floor(seconds)
    return value


def schema(name: str) -> DataOption:
    """Set the schema of the data."""

    def apply(d: DataInfo) -> None:
        d.schema = name

    return apply


def reference_mode(indeed: bool) -> DataOption:
    """
    Turn reference mode on or off.

    In reference mode tables and views are addressed with a prefix, ``ref``
    unless changed by ``reference_mode_prefix``.
    """

    def apply(d: DataInfo) -> None:
        d.reference_mode = indeed

    return apply


def reference_mode_prefix(prefix: str) -> DataOption:
    """Set the reference mode prefix. The default is ``ref``."""

    def apply(d: DataInfo) -> None:
        d.reference_mode_prefix = prefix or get_defaults().reference_mode_prefix

    return apply


def interpolate_tables(indeed: bool) -> DataOption:
    """Interpolate table names enclosed in ``{}``."""

    def apply(d: DataInfo) -> None:
        d.interpolate_tables = indeed

    return apply


def connection_string(conn: str) -> DataOption:
    """Set the connection string. An empty string leaves the field untouched."""

    def apply(d: DataInfo) -> None:
        if not conn:
            return
        d.connection_string = conn

    return apply


def driver_name(name: str) -> DataOption:
    """Set the driver name. An empty string leaves the field untouched."""

    def apply(d: DataInfo) -> None:
        if not name:
            return
        d.driver_name = name

    return apply


def helper_id(id_: str) -> DataOption:
    """Select an alternate data helper implementation."""

    def apply(d: DataInfo) -> None:
        if not id_:
            return
        d.helper_id = id_

    return apply


def user_name(name: str) -> DataOption:
    def apply(d: DataInfo) -> None:
        if not name:
            return
        d.user_name = name

    return apply


def parameter_in_sequence(indeed: bool) -> DataOption:
    """Bound parameter placeholders are numbered in sequence (``$1``, ``$2``...)."""

    def apply(d: DataInfo) -> None:
        d.parameter_in_sequence = indeed

    return apply


def parameter_placeholder(holder: str) -> DataOption:
    """Set the bound parameter placeholder. The default is ``?``."""

    def apply(d: DataInfo) -> None:
        d.parameter_placeholder = holder or get_defaults().parameter_placeholder

    return apply


def string_enclosing_char(char: str) -> DataOption:
    """Set the character that encloses a string in a query."""

    def apply(d: DataInfo) -> None:
        d.string_enclosing_char = char or get_defaults().string_enclosing_char

    return apply


def string_escape_char(char: str) -> DataOption:
    """Set the character that escapes a reserved character inside a string."""

    def apply(d: DataInfo) -> None:
        d.string_escape_char = char or get_defaults().string_escape_char

    return apply


def reserved_word_escape_char(chars: str) -> DataOption:
    """
    Set the reserved word escape character(s).

    Give both characters when opening and closing differ, e.g. ``[]`` for
    SQL Server.
    """

    def apply(d: DataInfo) -> None:
        d.reserved_word_escape_char = chars or get_defaults().reserved_word_escape_char

    return apply


def max_open_connection(maximum: int) -> DataOption:
    def apply(d: DataInfo) -> None:
        d.max_open_connection = maximum or get_defaults().max_open_connection

    return apply


def max_idle_connection(maximum: int) -> DataOption:
    def apply(d: DataInfo) -> None:
        d.max_idle_connection = maximum or get_defaults().max_idle_connection

    return apply


def max_connection_lifetime(maximum: int | timedelta) -> DataOption:
    """
    Set the maximum lifetime of each open connection, in seconds.

    A ``timedelta`` is rounded up to whole seconds.
    """
    seconds = _seconds(maximum)

    def apply(d: DataInfo) -> None:
        d.max_connection_lifetime = seconds or get_defaults().max_connection_lifetime

    return apply


def max_connection_idle_time(maximum: int | timedelta) -> DataOption:
    """
    Set the maximum idle time of each connection, in seconds.

    A ``timedelta`` is rounded up to whole seconds.
    """
    seconds = _seconds(maximum)

    def apply(d: DataInfo) -> None:
        d.max_connection_idle_time = seconds or get_defaults().max_connection_idle_time

    return apply


def ping(indeed: bool) -> DataOption:
    """Ping the connection before executing a query."""

    def apply(d: DataInfo) -> None:
        d.ping = indeed

    return apply


def result_limit_position(position: LimitPosition) -> DataOption:
    def apply(d: DataInfo) -> None:
        d.result_limit_position = position

    return apply


def sequence_generator(info: SequenceGeneratorInfo) -> DataOption:
    """Set the sequence generator. The record is copied, not shared."""

    def apply(d: DataInfo) -> None:
        d.sequence_generator = info.copy()

    return apply


__all__ = [
    "DataOption",
    "connection_string",
    "driver_name",
    "helper_id",
    "interpolate_tables",
    "max_connection_idle_time",
    "max_connection_lifetime",
    "max_idle_connection",
    "max_open_connection",
    "parameter_in_sequence",
    "parameter_placeholder",
    "ping",
    "reference_mode",
    "reference_mode_prefix",
    "reserved_word_escape_char",
    "result_limit_position",
    "schema",
    "sequence_generator",
    "string_enclosing_char",
    "string_escape_char",
    "user_name",
]
