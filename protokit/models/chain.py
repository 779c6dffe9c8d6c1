"""Ancestor chain models."""

from typing import Any, Iterator
from pydantic import BaseModel, ConfigDict, Field

from protokit.models.member import MemberDescriptor, is_capability


class Level(BaseModel):
    """One level of an ancestor chain and the members declared directly on it."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., description="Display name of the level")
    origin: Any = Field(default=None, description="The class or instance this level was read from")
    members: dict[str, MemberDescriptor] = Field(
        default_factory=dict,
        description="Member name -> descriptor, in declaration order"
    )
    parent: int | None = Field(default=None, description="Arena index of the next level, None at the end")

    def capability_names(self) -> list[str]:
        """Names of the callable and accessor members on this level."""
        return [name for name, member in self.members.items() if is_capability(member)]


class AncestorChain(BaseModel):
    """Arena of levels linked by parent indexes.

    Index 0 is the most-derived level. Traversal follows ``parent`` until it
    reaches ``None``; the universal root is never stored.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    levels: list[Level] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Level]:
        index = 0 if self.levels else None
        seen = set()
        while index is not None and index not in seen:
            seen.add(index)
            level = self.levels[index]
            yield level
            index = level.parent

    def __len__(self) -> int:
        return len(self.levels)

    def append(self, level: Level) -> int:
        """Add a level to the end of the chain and link the previous tail to it."""
        index = len(self.levels)
        if self.levels:
            self.levels[-1].parent = index
        level.parent = None
        self.levels.append(level)
        return index

    def names(self) -> list[str]:
        return [level.name for level in self]
