"""Editor command layer.

Each method is one interactive command (the key it is normally bound to is
noted in its docstring). Commands run to completion synchronously and
report through the echo area.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from emlisp.config import get_init_file
from emlisp.editor.buffer import Buffer, EditorState
from emlisp.editor.host_impl import BufferHost
from emlisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class Editor:
    def __init__(self, state: Optional[EditorState] = None, prelude: str | None = None):
        self.state = state if state is not None else EditorState()
        self.host = BufferHost(self.state)
        self.interp = Interpreter(self.host, prelude=prelude)
        self.commands: dict[str, Callable[[], None]] = {
            "kill-buffer": self.kill_current_buffer,
            "eval-last-sexp": self.eval_last_sexp,
            "save-buffer": self.save_buffer,
            "next-line": self.next_line,
            "previous-line": self.previous_line,
            "keyboard-quit": self.keyboard_quit,
        }

    @classmethod
    def from_config(cls) -> Editor:
        """A session with the configured init file, if any, already evaluated."""
        init = get_init_file()
        prelude = init.read_text(encoding="utf-8") if init is not None else None
        if init is not None:
            logger.info("loading init file %s", init)
        return cls(prelude=prelude)

    @property
    def buffer(self) -> Buffer:
        buf = self.state.active_buffer
        assert buf is not None, f"active buffer {self.state.active!r} is missing"
        return buf

    def echo(self, text: str) -> None:
        self.state.message = text

    # --- Lisp ---
    def eval_expression(self, source: str) -> str:
        """M-: evaluate `source` and echo the printed result or error."""
        return self.interp.eval_and_echo(source)

    def eval_last_sexp(self) -> None:
        """C-x C-e evaluate the expression before point."""
        buf = self.buffer
        self.interp.eval_last_sexp(buf.content, buf.cursor)

    # --- Buffers ---
    def find_file(self, name: str) -> None:
        """C-x C-f visit `name`, creating an empty buffer if needed."""
        if self.state.find(name) is not None:
            self.switch_to_buffer(name)
            return
        self.state.buffers.append(Buffer(name))
        self.state.active = name
        self.echo("(New file)")

    def switch_to_buffer(self, name: str) -> None:
        """C-x b"""
        if self.state.find(name) is None:
            self.find_file(name)
            return
        self.state.active = name
        self.echo(f"Switched to buffer {name}")

    def save_buffer(self) -> None:
        """C-x C-s (there is no file system: only clears the modified flag)."""
        buf = self.buffer
        buf.modified = False
        self.echo(f"Wrote {buf.name}")

    def kill_current_buffer(self) -> None:
        """C-x k"""
        buffers = self.state.buffers
        if len(buffers) <= 1:
            self.echo("Cannot kill the last buffer")
            return
        idx = self.state.index_of(self.state.active)
        successor = buffers[1 if idx == 0 else idx - 1]
        del buffers[idx]
        self.state.active = successor.name
        self.echo("Killed buffer")

    # --- Motion ---
    def previous_line(self) -> None:
        """C-p keep the column, clamped to the previous line's length."""
        buf = self.buffer
        content, pos = buf.content, buf.cursor
        line_start = content.rfind("\n", 0, pos) + 1
        if line_start == 0:
            return
        column = pos - line_start
        prev_end = line_start - 1
        prev_start = content.rfind("\n", 0, prev_end) + 1
        buf.cursor = prev_start + min(column, prev_end - prev_start)

    def next_line(self) -> None:
        """C-n keep the column, clamped to the next line's length."""
        buf = self.buffer
        content, pos = buf.content, buf.cursor
        line_start = content.rfind("\n", 0, pos) + 1
        column = pos - line_start
        line_end = content.find("\n", pos)
        if line_end == -1:
            return
        next_start = line_end + 1
        next_end = content.find("\n", next_start)
        if next_end == -1:
            next_end = len(content)
        buf.cursor = next_start + min(column, next_end - next_start)

    # --- Dispatch ---
    def keyboard_quit(self) -> None:
        """C-g"""
        self.echo("Quit")

    def execute_command(self, name: str) -> None:
        """M-x run a command by name."""
        command = self.commands.get(name.strip())
        if command is None:
            self.echo(f"Command not found: {name}")
            return
        logger.debug("M-x %s", name)
        command()

    def mode_line(self) -> str:
        return self.buffer.mode_line()
