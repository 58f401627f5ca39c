from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


DEFAULT_LOG_LEVEL = 'WARNING'

DEFAULT_SCRATCH_MESSAGE = """;; This buffer is for text that is not saved, and for Lisp evaluation.
;; To create a file, visit it with C-x C-f and enter text in your file's buffer.

Lisp Scratchpad:
Try evaluating these expressions with C-x C-e (place cursor at end of line):
(+ 2 2)
(message "Hello from Emacs!")
(insert " This text was inserted by Lisp.")
(progn (insert "A") (insert "B") (insert "C"))
"""


def path_from_env(var: str) -> Optional[Path]:
    raw = os.environ.get(var, '').strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def get_init_file() -> Optional[Path]:
    """Init file evaluated at session start, if configured and present."""
    p = path_from_env('EMLISP_INIT_FILE')
    if p is None or not p.is_file():
        return None
    return p


def get_log_level() -> int:
    name = os.environ.get('EMLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_scratch_message() -> str:
    return os.environ.get('EMLISP_SCRATCH_MESSAGE') or DEFAULT_SCRATCH_MESSAGE
