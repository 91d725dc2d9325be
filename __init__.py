"""
intexpr - Integer Interval Expressions

Parse strings such as '1,3-5,7-' (the kind found in print dialog page
selectors or the field list of `cut`) and test integers against them:

    >>> import intexpr
    >>> expr = intexpr.parse('1,3-5,7-')
    >>> expr.matches(4), expr.matches(6), expr.matches(1000)
    (True, False, True)

The parsed expression never materializes the integers it describes, so
unbounded ranges cost nothing.
"""

from .errors import (
    ExpressionError,
    InvalidOptions,
    EmptyExpressionNotAllowed,
    MalformedToken,
    InvalidRange,
    NumericOverflow,
)
from .expression import (
    Expression,
    ParseOptions,
    DEFAULT_OPTIONS,
    default_options,
    parse,
    parse_default,
)
from .interval import SubInterval, Bounded, Unbounded, Wildcard, merge_intervals
from .parser import Parser, parse_subexpression


def matches(pattern, value, options=None):
    '''
    Test value against pattern. The pattern may be an expression string,
    which is parsed first, or an already parsed Expression.
    '''
    if isinstance(pattern, str):
        pattern = parse(pattern, options)

    if isinstance(pattern, Expression):
        return pattern.matches(value)

    raise TypeError(f"Unsupported pattern type: {type(pattern).__name__}")


__all__ = [
    'parse', 'parse_default', 'parse_subexpression', 'matches',
    'Expression', 'ParseOptions', 'DEFAULT_OPTIONS', 'default_options',
    'SubInterval', 'Bounded', 'Unbounded', 'Wildcard', 'merge_intervals',
    'Parser',
    'ExpressionError', 'InvalidOptions', 'EmptyExpressionNotAllowed',
    'MalformedToken', 'InvalidRange', 'NumericOverflow',
]
