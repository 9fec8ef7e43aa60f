"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for aggregates and their nested entries.

    Instances are frozen; changes produce a new instance via ``model_copy``
    and are persisted by saving the whole aggregate.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
