import pytest

from emlisp.builtin.env_builtin import create_global_env
from emlisp.editor.buffer import Buffer, EditorState
from emlisp.editor.commands import Editor
from emlisp.editor.host_impl import BufferHost
from emlisp.interpreter import Interpreter


class RecordingHost:
    """A single-buffer fake host that records every call it receives."""

    def __init__(self, content: str = "", cursor: int = 0, name: str = "test"):
        self.content = content
        self.cursor = cursor
        self.name = name
        self.calls: list[tuple] = []
        self.messages: list[str] = []

    def message(self, text):
        self.calls.append(("message", text))
        self.messages.append(text)

    def insert(self, text):
        self.calls.append(("insert", text))
        self.content = self.content[:self.cursor] + text + self.content[self.cursor:]
        self.cursor += len(text)

    def get_buffer_content(self):
        return self.content

    def get_cursor(self):
        return self.cursor

    def set_cursor(self, offset):
        self.calls.append(("set_cursor", offset))
        self.cursor = max(0, min(offset, len(self.content)))

    def switch_buffer(self, name):
        self.calls.append(("switch_buffer", name))
        self.name = name

    def current_buffer_name(self):
        return self.name

    def kill_buffer(self, name):
        self.calls.append(("kill_buffer", name))


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def env(host):
    """A fresh global environment bound to a recording host."""
    return create_global_env(host)


@pytest.fixture
def interp(host):
    return Interpreter(host)


@pytest.fixture
def state():
    return EditorState(buffers=[Buffer("*scratch*", mode="Lisp Interaction"), Buffer("*Messages*", read_only=True)])


@pytest.fixture
def buffer_host(state):
    return BufferHost(state)


@pytest.fixture
def editor(state):
    return Editor(state)
