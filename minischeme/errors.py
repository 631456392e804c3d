class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when source text or a special form is malformed"""

class SchemeUnboundVariable(SchemeError):
    """ Raised when a variable is looked up or assigned before it is bound"""

class SchemeArityError(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemeTypeError(SchemeError):
    """ Raised when a value of the wrong kind reaches an operation"""

class SchemeDivisionByZero(SchemeError):
    """ Raised when an integer division has a zero divisor"""

class SchemeRuntimeError(SchemeError):
    """ Raised when a value cannot be evaluated, e.g. a dotted application"""
