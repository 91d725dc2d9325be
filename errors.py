#
# errors.py
#

class ExpressionError(ValueError):
    '''Base class for all interval expression parse failures'''

    def __init__(self, message, text=None):
        super().__init__(message)
        self.text = text


class InvalidOptions(ExpressionError):
    '''The ParseOptions given to the parser are unusable'''


class EmptyExpressionNotAllowed(ExpressionError):
    '''The input contained no subexpressions and the options forbid that'''

    def __init__(self, text):
        super().__init__('Empty expression not allowed by current options: %r' % text, text)


class MalformedToken(ExpressionError):
    '''A subexpression does not have any of the recognized shapes'''

    def __init__(self, text, position=None, detail=None):
        message = 'Invalid syntax in subexpression %r' % text
        if position is not None:
            message += ' at column %d' % (position + 1)
        if detail:
            message += ': %s' % detail

        super().__init__(message, text)
        self.position = position


class InvalidRange(ExpressionError):
    '''A two-endpoint subexpression ends before it starts'''

    def __init__(self, text, start, end):
        super().__init__('Invalid interval %r: end %d is less than start %d' % (text, end, start), text)
        self.start = start
        self.end = end


class NumericOverflow(ExpressionError):
    '''A numeric literal does not fit the native integer range'''

    def __init__(self, text, literal):
        super().__init__('Value %s in subexpression %r is out of range' % (literal, text), text)
        self.literal = literal
