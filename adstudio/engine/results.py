"""Ordered result set - slot i holds the ad for creative direction i."""

from typing import Iterator

from ..errors import InvalidRequestError
from ..models import AdResult


class ResultSet:
    """Index-addressable ads of the current batch, mutable one slot at a time."""

    def __init__(self, size: int):
        self.size = size
        self._slots: list[AdResult] = []

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[AdResult]:
        return iter(list(self._slots))

    def __getitem__(self, index: int) -> AdResult:
        self.check_index(index)
        return self._slots[index]

    @property
    def is_empty(self) -> bool:
        return not self._slots

    def check_index(self, index: int) -> None:
        """Raise InvalidRequestError unless ``index`` addresses a populated slot."""
        if not isinstance(index, int) or not 0 <= index < len(self._slots):
            raise InvalidRequestError(
                f"Invalid result index: {index} (have {len(self._slots)} results)"
            )

    def clear(self) -> None:
        """Drop all results (start of a new batch)."""
        self._slots = []

    def fill(self, results: list[AdResult]) -> None:
        """Store a complete batch."""
        if len(results) != self.size:
            raise ValueError(f"Expected {self.size} results, got {len(results)}")
        self._slots = list(results)

    def replace(self, index: int, value: AdResult) -> None:
        """Replace one slot; other slots are untouched."""
        self.check_index(index)
        self._slots[index] = value

    def snapshot(self) -> list[AdResult]:
        """Copy of the current results."""
        return list(self._slots)
