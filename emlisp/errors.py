

class EmLispError(Exception):
    """ Base class for all emlisp errors"""
    pass

class ParseError(EmLispError):
    """ Raised when the reader cannot complete an expression"""
    pass

class UnboundVariable(EmLispError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"Void variable: {name}")
        self.name = name

class MalformedSpecialForm(EmLispError):
    """ Raised when a special form has the wrong shape"""

class InvalidCall(EmLispError):
    """ Raised when the head of an application is not callable"""

class LispTypeError(EmLispError):
    """ Raised when a primitive receives an argument of the wrong type"""

class LispArityError(EmLispError):
    """ Raised when a primitive receives too few arguments"""
