"""
Process-wide default values for data descriptors.

``DataInfoDefaults`` is frozen: ``get_defaults()`` builds it once and every
constructor and option reads from that same instance.
"""

from __future__ import annotations

from functools import cache

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from .types import LimitPosition

DEFAULT_CONNECTION_LIFETIME = 5 * 60  # seconds
DEFAULT_CONNECTION_IDLE_TIME = 3 * 60  # seconds


class DataInfoDefaults(BaseModel):
    """Immutable table of values used when a descriptor field is not given."""

    model_config = ConfigDict(frozen=True)

    reference_mode: bool = False
    reference_mode_prefix: str = Field("ref", min_length=1)
    interpolate_tables: bool = True
    parameter_in_sequence: bool = True
    parameter_placeholder: str = Field("?", min_length=1)
    string_enclosing_char: str = Field("'", min_length=1)
    string_escape_char: str = Field("\\", min_length=1)
    reserved_word_escape_char: str = Field("[]", min_length=1, max_length=2)
    max_open_connection: PositiveInt = 25
    max_idle_connection: PositiveInt = 25
    max_connection_lifetime: PositiveInt = DEFAULT_CONNECTION_LIFETIME
    max_connection_idle_time: PositiveInt = DEFAULT_CONNECTION_IDLE_TIME
    ping: bool = False
    result_limit_position: LimitPosition = LimitPosition.REAR


@cache
def get_defaults() -> DataInfoDefaults:
    """Return the shared defaults instance, creating it on first use."""
    return DataInfoDefaults()


__all__ = [
    "DEFAULT_CONNECTION_IDLE_TIME",
    "DEFAULT_CONNECTION_LIFETIME",
    "DataInfoDefaults",
    "get_defaults",
]
