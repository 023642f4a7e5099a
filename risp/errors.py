

class RispError(Exception):
    """ Base class for all risp errors"""
    pass

class RispInvalidHandle(RispError):
    """ Raised when a symbol handle was not produced by the table resolving it"""
    pass

class RispSyntaxError(RispError):
    """ Raised when parsing collects one or more structural errors.

    Every collected error is kept, in discovery order, on ``errors``.
    ``partial`` holds the top-level structure built despite them.
    """

    def __init__(self, errors, partial=None):
        self.errors = list(errors)
        self.partial = partial if partial is not None else []
        super().__init__("; ".join(e.message for e in self.errors))

# -------------------------------
# Evaluation errors (fail-fast)
# -------------------------------
class RispEvalError(RispError):
    """ Base class for errors raised while evaluating an expression"""

class RispTypeError(RispEvalError):
    """ Raised when an operator receives an argument of the wrong type"""

class RispArityError(RispEvalError):
    """ Raised when the number of arguments passed to an operator is incorrect"""

class RispEmptyCallError(RispEvalError):
    """ Raised when a call has nothing to call or nothing to call it on"""

class RispNonSymbolHeadError(RispEvalError):
    """ Raised when the head of a call does not evaluate to a symbol"""

class RispNonBooleanConditionError(RispEvalError):
    """ Raised when an if condition is not a boolean"""

class RispUnknownOperatorError(RispEvalError):
    """ Raised when the head symbol names no operator"""

class RispZeroDivisionError(RispEvalError):
    """ Raised on division by zero"""

class RispOverflowError(RispEvalError):
    """ Raised when a result leaves the signed 64-bit range"""

class RispTooDeepError(RispEvalError):
    """ Raised when an expression is nested deeper than the configured limit"""
