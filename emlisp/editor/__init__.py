from emlisp.editor.buffer import Buffer, EditorState
from emlisp.editor.host_impl import BufferHost
from emlisp.editor.commands import Editor

__all__ = ["Buffer", "EditorState", "BufferHost", "Editor"]
