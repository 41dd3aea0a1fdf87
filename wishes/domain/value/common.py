"""Value object base classes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable multi-field value, equal to any other with the same fields."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive (an ID, a text, a count).

    Construct positionally, ``WishContent("...")``; read back with
    ``.value``. ``model_dump()`` yields the bare primitive, so wrappers
    serialize the same as what they wrap.

    Validators raise the domain ``ValidationError``. Pydantic only converts
    ``ValueError`` into its own error type, so the domain error reaches the
    caller untouched.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> T:
        return self.root

    def __str__(self) -> str:
        return str(self.root)
