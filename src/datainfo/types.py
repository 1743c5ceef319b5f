"""
Type definitions for datainfo.

Enums and small records shared by the descriptor and its options.
"""

from dataclasses import dataclass
from enum import StrEnum


class LimitPosition(StrEnum):
    """
    Where the row-limiting clause goes in a generated query.

    - FRONT: before the result set declaration (``SELECT TOP 10 ...``), used by
      older SQL Server versions
    - REAR: after the query body (``... LIMIT 10``)
    """

    FRONT = "front"
    REAR = "rear"


@dataclass(slots=True)
class SequenceGeneratorInfo:
    """
    Queries used to emulate sequences on dialects without auto-increment.

    Attributes:
        upsert_query: Query that creates or bumps the named sequence.
        result_query: Query that reads the current sequence value.
        name_placeholder: Token in both queries replaced by the sequence name.
    """

    upsert_query: str = ""
    result_query: str = ""
    name_placeholder: str = ""

    def copy(self) -> "SequenceGeneratorInfo":
        return SequenceGeneratorInfo(
            upsert_query=self.upsert_query,
            result_query=self.result_query,
            name_placeholder=self.name_placeholder,
        )


__all__ = ["LimitPosition", "SequenceGeneratorInfo"]
