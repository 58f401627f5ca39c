"""Host capability interface.

The narrow set of editor operations the primitive library may call. The
interpreter only ever sees an object satisfying this protocol; the editor in
emlisp.editor provides one, and tests provide recording fakes.
"""

from __future__ import annotations
from typing import Protocol


class Host(Protocol):
    def message(self, text: str) -> None:
        """Show `text` in the echo area."""
        ...

    def insert(self, text: str) -> None:
        """Insert at the active cursor, advance it, mark the buffer modified."""
        ...

    def get_buffer_content(self) -> str: ...

    def get_cursor(self) -> int: ...

    def set_cursor(self, offset: int) -> None:
        """Move the cursor, clamped to [0, len(content)]."""
        ...

    def switch_buffer(self, name: str) -> None:
        """Activate `name`, creating an empty buffer if none exists."""
        ...

    def current_buffer_name(self) -> str: ...

    def kill_buffer(self, name: str) -> None:
        """Remove `name` unless it is the only buffer or unknown."""
        ...
