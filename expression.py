#
# expression.py
#

import logging

from collections import namedtuple

from . import interval
from .errors import InvalidOptions, EmptyExpressionNotAllowed
from .parser import Parser

LOG = logging.getLogger(__name__)

# Options controlling how an expression string is interpreted.
#
# delimiter               separator between subexpressions, must not be empty
# allow_empty_expression  accept input with no subexpressions at all ("", ",,")
# post_process_normalize  return the normalized expression from parse()
#
ParseOptions = namedtuple(
    'ParseOptions',
    'delimiter allow_empty_expression post_process_normalize',
    defaults=(',', False, False),
)

DEFAULT_OPTIONS = ParseOptions()


def default_options():
    ''' Return the options used by parse_default() '''
    return DEFAULT_OPTIONS


class Expression:
    '''
    An ordered sequence of subintervals combined by logical OR.

    Expressions are produced by parse() or by Expression.normalize() and never
    change afterwards; every transformation returns a new Expression.

        >>> expr = parse_default('1,3-5,7-')
        >>> [expr.matches(x) for x in range(9)]
        [False, True, False, True, True, True, False, True, True]
    '''

    def __init__(self, subintervals=(), options=DEFAULT_OPTIONS):
        self._subintervals = tuple(subintervals)
        self._options = options

    @property
    def subintervals(self):
        return self._subintervals

    @property
    def options(self):
        return self._options

    def matches(self, value):
        ''' True if value lies in any of the subintervals '''
        return any(ival.contains(value) for ival in self._subintervals)

    def matches_none(self):
        ''' True if the expression has no subintervals and so matches nothing '''
        return not self._subintervals

    def matches_all(self):
        ''' True if the expression holds a wildcard and so matches everything '''
        return any(ival.iswildcard for ival in self._subintervals)

    def normalize(self):
        '''
        Return the equivalent expression with the fewest subintervals, sorted
        by start and pairwise disjoint. For example '1-4,2-5' normalizes to
        '1-5', and anything containing '*' normalizes to just '*'.
        '''
        if self.matches_none():
            return self

        if self.matches_all():
            return Expression([interval.Wildcard()], self._options)

        merged = interval.merge_intervals(self._subintervals)
        LOG.debug('Normalized %s => %s', self, self._options.delimiter.join(map(str, merged)))

        return Expression(merged, self._options)

    def to_string(self):
        return self._options.delimiter.join(str(ival) for ival in self._subintervals)

    __str__ = to_string

    def __contains__(self, value):
        return self.matches(value)

    def __iter__(self):
        return iter(self._subintervals)

    def __len__(self):
        return len(self._subintervals)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return self._subintervals == other._subintervals and self._options == other._options

    def __hash__(self):
        return hash((self._subintervals, self._options))

    def __repr__(self):
        return f'Expression({self.to_string()!r}, delimiter={self._options.delimiter!r})'


def parse(text, options=None):
    '''
    Parse an interval expression string such as '1,3-5,7-' into an Expression.

    The text is split on options.delimiter and each non-empty piece is parsed
    as a subexpression. Empty pieces (leading, trailing or repeated
    delimiters) are skipped. The first bad piece aborts the parse with an
    ExpressionError subclass; there is no partial result.
    '''
    if options is None:
        options = DEFAULT_OPTIONS

    if not options.delimiter:
        raise InvalidOptions('ParseOptions.delimiter is empty', text)

    parser = Parser()
    subintervals = []

    for token in text.split(options.delimiter):
        # '1,,3' is not pretty but not invalid either
        #
        if token == '':
            continue

        subintervals.append(parser.parse(token))

    expr = Expression(subintervals, options)

    if expr.matches_none() and not options.allow_empty_expression:
        raise EmptyExpressionNotAllowed(text)

    LOG.debug('Parsed %r into %d subintervals', text, len(expr))

    if options.post_process_normalize:
        return expr.normalize()

    return expr


def parse_default(text):
    ''' parse() with the default options '''
    return parse(text, DEFAULT_OPTIONS)
