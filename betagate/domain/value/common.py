"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared by value. Unknown keys are an error."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, available as ``.root``.

    Dumps to the bare primitive, so wrapped values serialize like the
    plain strings they replace.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
