class MLispError(Exception):
    """ Base class for all MLisp host-level errors"""
    pass

class MLispUnboundSymbol(MLispError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"unbound symbol: {name}")
        self.name = name

class MLispConversionError(MLispError):
    """ Raised when a value is converted to a variant it does not hold"""

class MLispSyntaxError(MLispError):
    """ Raised when the reader cannot tokenize or parse its input"""

    def __init__(self, message: str, filename: str = "<input>", lineno: int = 0):
        super().__init__(f"{message} at {filename}:{lineno}")
        self.message = message
        self.filename = filename
        self.lineno = lineno
