"""List indices as shown to the user (one-based) and used internally (zero-based)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Index:
    """A position in a user-facing list.

    Stored zero-based; construct through :meth:`from_one_based` or
    :meth:`from_zero_based` so the offset is explicit at the call site.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"Index cannot be negative: {self.zero_based}")

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> Index:
        return cls(zero_based_index)

    @classmethod
    def from_one_based(cls, one_based_index: int) -> Index:
        return cls(one_based_index - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)


@dataclass(frozen=True)
class IndexList:
    """Indices selected by a single command, highest first.

    Deleting by position from a mutable sequence must go from the highest
    index down so earlier removals do not shift later targets.
    Duplicates are kept.
    """

    indices: tuple[Index, ...] = ()

    @classmethod
    def descending(cls, indices: Iterable[Index]) -> IndexList:
        """Build an IndexList sorted from the highest index to the lowest."""
        return cls(tuple(sorted(indices, reverse=True)))

    def one_based(self) -> list[int]:
        return [index.one_based for index in self.indices]

    def zero_based(self) -> list[int]:
        return [index.zero_based for index in self.indices]

    def __iter__(self) -> Iterator[Index]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, position: int) -> Index:
        return self.indices[position]
