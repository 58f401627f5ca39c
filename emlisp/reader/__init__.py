from emlisp.reader.parser import parse, Reader
from emlisp.reader.scanner import find_last_expression

__all__ = ["parse", "Reader", "find_last_expression"]
