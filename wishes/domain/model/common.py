"""Entity base class."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes produce new instances via ``model_copy``.

    ``model_copy(update=...)`` skips validation, so methods that use it must
    keep the invariants themselves.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
