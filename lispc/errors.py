class LispcError(Exception):
    """ Base class for all lispc host errors"""
    pass


class LispcSyntaxError(LispcError):
    """ Raised when the grammar rejects a line of source"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, col: int = 1):
        super().__init__(f"{filename}:{line}:{col}: error: {message}")
        self.filename = filename
        self.line = line
        self.col = col


class LispcReadError(LispcError):
    """ Raised when a syntax tree node cannot be converted into a value"""

# Evaluation failures (unbound symbols, bad arguments, division by zero, ...)
# are not exceptions: they are lispc.types.value.Error values.
