"""Member descriptor models.

A member descriptor is the full definition of one attribute declared on one
ancestor level. It is either a stored value or a computed accessor. Both
variants keep the raw object found in the level's namespace, so copying a
descriptor never evaluates it.
"""

import inspect
from enum import Enum
from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class MemberKind(str, Enum):
    """Tag for the member descriptor union."""
    STORED = "stored"
    ACCESSOR = "accessor"


class _MemberBase(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Attribute name on its level")
    raw: Any = Field(default=None, description="Object exactly as found in the level namespace")
    writable: bool = Field(default=True, description="Whether the member can be reassigned")
    public: bool = Field(default=True, description="False for names using the leading underscore convention")


class StoredValue(_MemberBase):
    """A member whose value is stored rather than computed."""
    kind: Literal["stored"] = "stored"
    value: Any = None

    @property
    def is_callable(self) -> bool:
        # staticmethod, classmethod, partialmethod and singledispatchmethod
        # bind through __get__ even where the wrapper itself is not callable
        return callable(self.value) or inspect.ismethoddescriptor(self.value)


class Accessor(_MemberBase):
    """A member whose reads and writes are computed."""
    kind: Literal["accessor"] = "accessor"
    read: Any = None
    write: Any = None
    delete: Any = None

    @property
    def is_callable(self) -> bool:
        return False


MemberDescriptor = Annotated[Union[StoredValue, Accessor], Field(discriminator="kind")]


def is_capability(member: "StoredValue | Accessor") -> bool:
    """Check whether a member counts towards a protocol definition."""
    return member.kind == MemberKind.ACCESSOR or member.is_callable
