from __future__ import annotations

import logging

from emlisp.editor.buffer import Buffer, EditorState

logger = logging.getLogger(__name__)


class BufferHost:
    """Host capability interface over an EditorState.

    Every call mutates the state immediately, so a later primitive in the
    same evaluation observes the effect of an earlier one.
    """

    def __init__(self, state: EditorState):
        self.state = state

    def message(self, text: str) -> None:
        self.state.message = text

    def insert(self, text: str) -> None:
        buf = self.state.active_buffer
        if buf is None:
            return
        buf.content = buf.content[:buf.cursor] + text + buf.content[buf.cursor:]
        buf.cursor += len(text)
        buf.modified = True
        logger.debug("insert %r into %s, cursor now %d", text, buf.name, buf.cursor)

    def get_buffer_content(self) -> str:
        buf = self.state.active_buffer
        return buf.content if buf else ""

    def get_cursor(self) -> int:
        buf = self.state.active_buffer
        return buf.cursor if buf else 0

    def set_cursor(self, offset: int) -> None:
        buf = self.state.active_buffer
        if buf is not None:
            buf.cursor = buf.clamp(offset)

    def switch_buffer(self, name: str) -> None:
        if self.state.find(name) is None:
            self.state.buffers.append(Buffer(name))
            logger.debug("created buffer %s", name)
        self.state.active = name

    def current_buffer_name(self) -> str:
        buf = self.state.active_buffer
        return buf.name if buf else ""

    def kill_buffer(self, name: str) -> None:
        if len(self.state.buffers) <= 1:
            return
        idx = self.state.index_of(name)
        if idx == -1:
            return
        del self.state.buffers[idx]
        if self.state.active == name:
            self.state.active = self.state.buffers[0].name
        logger.debug("killed buffer %s", name)
