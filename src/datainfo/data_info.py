"""
Data source descriptor.

``DataInfo`` holds everything a data-access layer needs to open connections
and format queries for one relational source. Optional fields use ``None`` for
"never set"; an empty string, ``0`` or ``False`` is a deliberate value.

Descriptors are built by the constructors in ``datainfo.builder`` and treated
as read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta

from .exceptions import UnknownFieldError
from .types import LimitPosition, SequenceGeneratorInfo


@dataclass(slots=True)
class DataInfo:
    """
    Configuration for connecting to and querying a relational data source.

    Attributes:
        schema: Schema to use.
        reference_mode: Entities are addressed through a reference prefix.
        reference_mode_prefix: Prefix used in reference mode.
        interpolate_tables: Substitute table names enclosed in ``{}``.
        connection_string: Connection string (URI or DSN).
        driver_name: Driver or dialect name.
        helper_id: Alternate data helper implementation to use.
        user_name: User identity for the connection.
        parameter_in_sequence: Bound parameters are positional.
        parameter_placeholder: Bound parameter token.
        string_enclosing_char: Character enclosing a string literal.
        string_escape_char: Character escaping a reserved character in a literal.
        reserved_word_escape_char: One character, or an opening and a closing
            character (``[]`` for SQL Server), wrapping reserved identifiers.
        max_open_connection: Maximum open connections.
        max_idle_connection: Maximum idle connections.
        max_connection_lifetime: Maximum lifetime of a connection, in seconds.
        max_connection_idle_time: Maximum idle time of a connection, in seconds.
        ping: Ping the connection before executing a query.
        result_limit_position: Where the row-limiting clause is emitted.
        sequence_generator: Queries emulating sequences.
    """

    schema: str | None = None
    reference_mode: bool | None = None
    reference_mode_prefix: str | None = None
    interpolate_tables: bool | None = None
    connection_string: str | None = None
    driver_name: str | None = None
    helper_id: str | None = None
    user_name: str | None = None
    parameter_in_sequence: bool | None = None
    parameter_placeholder: str | None = None
    string_enclosing_char: str | None = None
    string_escape_char: str | None = None
    reserved_word_escape_char: str | None = None
    max_open_connection: int | None = None
    max_idle_connection: int | None = None
    max_connection_lifetime: int | None = None
    max_connection_idle_time: int | None = None
    ping: bool | None = None
    result_limit_position: LimitPosition = LimitPosition.REAR
    sequence_generator: SequenceGeneratorInfo | None = None

    @classmethod
    def optional_field_names(cls) -> list[str]:
        """Names of the fields that track presence, in declaration order."""
        return [f.name for f in fields(cls) if f.name != "result_limit_position"]

    def is_set(self, name: str) -> bool:
        """
        Check whether an optional field is present.

        :param name: The field name.
        :return: True when the field holds a value, even an empty one.
        :raises UnknownFieldError: If ``name`` is not an optional field.
        """
        if name not in self.optional_field_names():
            raise UnknownFieldError(f"Unknown DataInfo field: {name!r}", field=name)
        return getattr(self, name) is not None

    def present_fields(self) -> list[str]:
        return [name for name in self.optional_field_names() if getattr(self, name) is not None]

    def reserved_word_delimiters(self) -> tuple[str, str] | None:
        """
        Split ``reserved_word_escape_char`` into opening and closing characters.

        A single character is used on both sides. Returns None when the field is
        absent or empty.
        """
        chars = self.reserved_word_escape_char
        if not chars:
            return None
        if len(chars) == 1:
            return chars, chars
        return chars[0], chars[-1]

    def connection_lifetime(self) -> timedelta | None:
        if self.max_connection_lifetime is None:
            return None
        return timedelta(seconds=self.max_connection_lifetime)

    def connection_idle_time(self) -> timedelta | None:
        if self.max_connection_idle_time is None:
            return None
        return timedelta(seconds=self.max_connection_idle_time)


__all__ = ["DataInfo"]
