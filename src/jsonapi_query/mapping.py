"""ColumnMapper — public field name -> storage column name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@runtime_checkable
class ColumnMapper(Protocol):
    """Decide whether a field may be used and translate it to a column.

    Implementations: MapMapper, or any per-resource object with ``map``.
    """

    def map(self, name: str) -> str | None:
        """Return the column for *name*, or ``None`` when it is not allowed."""
        ...


class MapMapper:
    """ColumnMapper backed by a fixed table of allowed fields."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = dict(mapping)

    @classmethod
    def identity(cls, names: Iterable[str]) -> MapMapper:
        """Allow *names* and map each one to a column of the same name."""
        return cls({name: name for name in names})

    def map(self, name: str) -> str | None:
        return self._mapping.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._mapping

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mapping!r})"
