"""Ordered nested entry lists.

Aggregates own their nested entries as immutable tuples ordered newest
first. These helpers return new tuples; the aggregate is then rebuilt with
``model_copy`` and saved as a whole.
"""

from typing import Callable, Sequence, TypeVar

E = TypeVar("E")


def prepend(entries: Sequence[E], entry: E) -> tuple[E, ...]:
    """Return a new list with ``entry`` at the head."""
    return (entry, *entries)


def index_of(entries: Sequence[E], match: Callable[[E], bool]) -> int:
    """Return the index of the first matching entry, or -1."""
    for index, entry in enumerate(entries):
        if match(entry):
            return index
    return -1


def remove_at(entries: Sequence[E], index: int) -> tuple[E, ...]:
    """Return a new list without the entry at ``index``."""
    if index < 0 or index >= len(entries):
        raise IndexError(f"Entry index out of range: {index}")
    return (*entries[:index], *entries[index + 1 :])
