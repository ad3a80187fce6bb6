class ZapError(Exception):
    """ Base class for all Zap errors"""
    pass

class ZapNotApplicable(ZapError):
    """ Raised when an integer is applied to an argument"""
    pass

class ZapNotAPair(ZapError):
    """ Raised when car/cdr (or isnil) receives something that is not a pair"""
    pass

class ZapNotANumber(ZapError):
    """ Raised when an arithmetic or comparison primitive receives a non-integer"""

class ZapNotAList(ZapError):
    """ Raised when list materialization reaches something other than a cons or nil"""

class ZapDivisionByZero(ZapError, ZeroDivisionError):
    """ Raised when div is forced with a zero divisor"""

class ZapDuplicateSymbol(ZapError):
    """ Raised when a name is defined twice in the same environment"""

class ZapUndefinedSymbol(ZapError):
    """ Raised when a deferred lookup is forced and the name is still unbound"""

class ZapSyntaxError(ZapError):
    """ Raised when a definition line or an expression is malformed"""
