"""Ownership-scoped mutation of nested entry lists.

Likes, comments, experience and education entries have no lifecycle of
their own. They change through the same steps:

1. load the parent aggregate (missing parent -> ``NotFoundError``),
2. prepend a new entry, or remove the first entry matching a predicate
   after checking that the caller may remove it,
3. save the whole aggregate.

Nothing is saved when any step fails. There is no optimistic locking: two
concurrent mutations of one aggregate can overwrite each other's change.
"""

from typing import Any, Awaitable, Callable, Generic, Sequence, TypeVar

import logfire
from pydantic import BaseModel

from connector.domain.error import DomainError, EntryNotFoundError, NotAuthorizedError
from connector.domain.model import entries
from connector.domain.value import UserId

from .base import Service

A = TypeVar("A", bound=BaseModel)
E = TypeVar("E")

Loader = Callable[[Any], Awaitable[A | None]]
Saver = Callable[[A], Awaitable[A]]


class NestedListMutator(Service, Generic[A, E]):
    """Insert into or remove from one nested list of an aggregate."""

    def __init__(
        self,
        resource: str,
        entry: str,
        field: str,
        load: Loader,
        save: Saver,
        missing_parent: Callable[[Any], DomainError],
    ) -> None:
        """Initialize mutator.

        Args:
            resource: Aggregate name used in logs and errors ("post")
            entry: Entry name used in logs and errors ("comment")
            field: Name of the nested tuple field on the aggregate
            load: Loads the aggregate by parent id
            save: Persists the whole aggregate
            missing_parent: Builds the error raised when the parent is absent
        """
        self.resource = resource
        self.entry = entry
        self.field = field
        self._load = load
        self._save = save
        self._missing_parent = missing_parent

    async def _load_parent(self, parent_id: Any) -> A:
        aggregate = await self._load(parent_id)
        if aggregate is None:
            logfire.warn(
                f"{self.resource.capitalize()} not found",
                resource=self.resource,
                parent_id=str(parent_id),
            )
            raise self._missing_parent(parent_id)
        return aggregate

    def _entries(self, aggregate: A) -> Sequence[E]:
        return getattr(aggregate, self.field)

    async def insert(
        self,
        parent_id: Any,
        entry: E,
        reject: Callable[[A], DomainError | None] | None = None,
    ) -> A:
        """Prepend an entry to the aggregate's list and save it.

        Args:
            parent_id: Identifier passed to the loader
            entry: Fully built entry, already attributed to the caller
            reject: Optional check returning an error that vetoes the insert

        Returns:
            The saved aggregate

        Raises:
            DomainError: Missing parent, or the error returned by ``reject``
        """
        with logfire.span(
            f"{self.resource}.{self.entry}.insert", parent_id=str(parent_id)
        ):
            aggregate = await self._load_parent(parent_id)

            if reject is not None:
                error = reject(aggregate)
                if error is not None:
                    logfire.warn(
                        f"{self.entry.capitalize()} insert rejected",
                        parent_id=str(parent_id),
                        kind=error.kind.value,
                    )
                    raise error

            updated = aggregate.model_copy(
                update={self.field: entries.prepend(self._entries(aggregate), entry)}
            )
            saved = await self._save(updated)
            logfire.info(
                f"{self.entry.capitalize()} added",
                parent_id=str(parent_id),
                count=len(self._entries(saved)),
            )
            return saved

    async def remove(
        self,
        parent_id: Any,
        caller_id: UserId,
        match: Callable[[E], bool],
        owner_of: Callable[[A, E], UserId],
        missing_entry: Callable[[], DomainError] | None = None,
        entry_id: str = "",
    ) -> A:
        """Remove the first matching entry if the caller may remove it.

        Args:
            parent_id: Identifier passed to the loader
            caller_id: Authenticated caller
            match: Selects the entry to remove
            owner_of: Returns the user entitled to remove the entry (the
                entry's author or the aggregate's owner)
            missing_entry: Builds the error for an absent entry
                (defaults to ``EntryNotFoundError``)
            entry_id: Entry identifier used in logs and errors

        Returns:
            The saved aggregate

        Raises:
            DomainError: Missing parent or entry
            NotAuthorizedError: If the caller is not entitled to the entry
        """
        with logfire.span(
            f"{self.resource}.{self.entry}.remove",
            parent_id=str(parent_id),
            entry_id=entry_id,
            caller_id=str(caller_id),
        ):
            aggregate = await self._load_parent(parent_id)
            current = self._entries(aggregate)

            index = entries.index_of(current, match)
            if index == -1:
                logfire.warn(
                    f"{self.entry.capitalize()} not found",
                    parent_id=str(parent_id),
                    entry_id=entry_id,
                )
                if missing_entry is not None:
                    raise missing_entry()
                raise EntryNotFoundError(self.entry.capitalize(), entry_id)

            if owner_of(aggregate, current[index]) != caller_id:
                logfire.warn(
                    f"Unauthorized {self.entry} removal attempt",
                    parent_id=str(parent_id),
                    entry_id=entry_id,
                    caller_id=str(caller_id),
                )
                raise NotAuthorizedError(self.entry, entry_id, str(caller_id))

            updated = aggregate.model_copy(
                update={self.field: entries.remove_at(current, index)}
            )
            saved = await self._save(updated)
            logfire.info(
                f"{self.entry.capitalize()} removed",
                parent_id=str(parent_id),
                entry_id=entry_id,
            )
            return saved
