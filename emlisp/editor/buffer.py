"""In-memory editor state: named buffers, the active one, the echo area."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from emlisp.config import get_scratch_message

SCRATCH = "*scratch*"
MESSAGES = "*Messages*"


@dataclass
class Buffer:
    name: str
    content: str = ""
    cursor: int = 0
    mode: str = "Fundamental"
    modified: bool = False
    read_only: bool = False

    def clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self.content)))

    def mode_line(self) -> str:
        # -U:--- Name  All  (Mode)
        status = "-" + ("%" if self.read_only else "-") + ("**" if self.modified else "--") + "-"
        return f"{status}  {self.name}  All  ({self.mode})"


def default_buffers() -> list[Buffer]:
    return [
        Buffer(SCRATCH, get_scratch_message(), mode="Lisp Interaction"),
        Buffer(MESSAGES, "Initialization complete.\n", read_only=True),
    ]


@dataclass
class EditorState:
    buffers: list[Buffer] = field(default_factory=default_buffers)
    active: str = SCRATCH
    message: str = ""

    def find(self, name: str) -> Optional[Buffer]:
        return next((b for b in self.buffers if b.name == name), None)

    def index_of(self, name: str) -> int:
        for i, b in enumerate(self.buffers):
            if b.name == name:
                return i
        return -1

    @property
    def active_buffer(self) -> Optional[Buffer]:
        return self.find(self.active)

    def names(self) -> list[str]:
        return [b.name for b in self.buffers]
