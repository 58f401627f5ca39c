"""Line-oriented front end for an Editor session.

Lines starting with ':' are editor commands; anything else is read as an
Eval prompt. The echo area is printed after every line.
"""

from __future__ import annotations

import logging
import sys

from emlisp.config import get_log_level
from emlisp.editor.commands import Editor

HELP = """:eval-last-sexp      evaluate the expression before point
:buffers             list buffers
:switch NAME         switch to (or create) a buffer
:find NAME           visit a buffer
:kill                kill the current buffer
:save                mark the current buffer saved
:goto N              move point
:show                print the current buffer and its mode line
:x COMMAND           run an M-x command
:quit                exit"""


def run_command(editor: Editor, line: str) -> bool:
    """Run one ':' command. Returns False when the session should end."""
    cmd, _, arg = line[1:].partition(" ")
    arg = arg.strip()
    if cmd in ("quit", "q"):
        return False
    if cmd == "eval-last-sexp":
        editor.eval_last_sexp()
    elif cmd == "buffers":
        editor.echo(" ".join(editor.state.names()))
    elif cmd == "switch" and arg:
        editor.switch_to_buffer(arg)
    elif cmd == "find" and arg:
        editor.find_file(arg)
    elif cmd == "kill":
        editor.kill_current_buffer()
    elif cmd == "save":
        editor.save_buffer()
    elif cmd == "goto" and arg.lstrip("-").isdigit():
        editor.host.set_cursor(int(arg))
        editor.echo(str(editor.buffer.cursor))
    elif cmd == "show":
        buf = editor.buffer
        print(buf.content[:buf.cursor] + "|" + buf.content[buf.cursor:])
        editor.echo(editor.mode_line())
    elif cmd == "x" and arg:
        editor.execute_command(arg)
    else:
        editor.echo(HELP)
    return True


def main() -> int:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    editor = Editor.from_config()
    while True:
        try:
            line = input(f"{editor.state.active}> ")
        except EOFError:
            break
        if not line.strip():
            continue
        if line.startswith(":"):
            if not run_command(editor, line):
                break
        else:
            editor.eval_expression(line)
        print(editor.state.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
