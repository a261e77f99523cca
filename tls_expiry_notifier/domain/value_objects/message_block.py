"""Message block value object."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Self


class BlockKind(StrEnum):
    """Kind of a rendered notification block."""

    HEADER = auto()
    DIVIDER = auto()
    SECTION = auto()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class MessageBlock:
    """A single unit of notification content, identified only by its position."""

    kind: BlockKind
    text: str = ""

    @classmethod
    def header(cls, text: str) -> Self:
        return cls(kind=BlockKind.HEADER, text=text)

    @classmethod
    def divider(cls) -> Self:
        return cls(kind=BlockKind.DIVIDER)

    @classmethod
    def section(cls, text: str) -> Self:
        return cls(kind=BlockKind.SECTION, text=text)

    @classmethod
    def spacer(cls) -> Self:
        """Empty-looking section used to separate groups."""
        return cls(kind=BlockKind.SECTION, text=" ")
