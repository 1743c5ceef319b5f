"""
Constructors for ``DataInfo``.

All three constructors apply their options in the order given and skip
``None`` entries, so callers can build option lists conditionally::

    info = new_minimal(
        "sqlserver://db/app",
        "dbo",
        "mssql",
        options.result_limit_position(LimitPosition.FRONT) if legacy else None,
    )

An option that fails stops construction: the exception propagates and the
partially built descriptor is discarded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import options as opt
from .data_info import DataInfo
from .defaults import get_defaults
from .exceptions import DataInfoError, OptionError
from .options import DataOption

logger = logging.getLogger(__name__)


def _apply_options(info: DataInfo, options: Iterable[DataOption | None]) -> DataInfo:
    for position, option in enumerate(options):
        if option is None:
            logger.debug(f"Skipping empty option at position {position}.")
            continue
        if not callable(option):
            raise OptionError(f"Option at position {position} is not callable: {option!r}", option=option)
        try:
            option(info)
        except DataInfoError as e:
            logger.error(f"Option at position {position} failed: {e}")
            raise
    return info


def new_default(*options: DataOption | None) -> DataInfo:
    """
    Create a descriptor populated from the process-wide defaults.

    Connection string, driver name, helper ID, user name and sequence
    generator are left unset.

    :param options: Options applied after the defaults, in order.
    :return: The new descriptor.
    """
    defaults = get_defaults()
    info = DataInfo(
        schema="",
        reference_mode=defaults.reference_mode,
        reference_mode_prefix=defaults.reference_mode_prefix,
        interpolate_tables=defaults.interpolate_tables,
        parameter_in_sequence=defaults.parameter_in_sequence,
        parameter_placeholder=defaults.parameter_placeholder,
        string_enclosing_char=defaults.string_enclosing_char,
        string_escape_char=defaults.string_escape_char,
        reserved_word_escape_char=defaults.reserved_word_escape_char,
        max_open_connection=defaults.max_open_connection,
        max_idle_connection=defaults.max_idle_connection,
        max_connection_lifetime=defaults.max_connection_lifetime,
        max_connection_idle_time=defaults.max_connection_idle_time,
        ping=defaults.ping,
        result_limit_position=defaults.result_limit_position,
    )
    return _apply_options(info, options)


def new_minimal(
    connection_string: str,
    schema: str,
    driver_name: str,
    *options: DataOption | None,
) -> DataInfo:
    """
    Create a descriptor from the minimal required set plus defaults.

    The required values go through their regular options, so an empty
    connection string or driver name leaves that field unset. Pass
    ``options.user_name(...)`` to record a user identity.
    """
    return new_default(
        opt.connection_string(connection_string),
        opt.schema(schema),
        opt.driver_name(driver_name),
        *options,
    )


def clone_with(source: DataInfo, *options: DataOption | None) -> DataInfo:
    """
    Copy a descriptor, then apply options to the copy.

    Only fields present on ``source`` are copied; absent fields stay absent.
    The sequence generator is copied field by field, and ``source`` is never
    modified.
    """
    info = DataInfo()
    present = source.present_fields()
    for name in present:
        value = getattr(source, name)
        if name == "sequence_generator":
            value = value.copy()
        setattr(info, name, value)
    info.result_limit_position = source.result_limit_position
    logger.debug(f"Cloned DataInfo fields: {', '.join(present) or '(none)'}")
    return _apply_options(info, options)


__all__ = ["clone_with", "new_default", "new_minimal"]
