import sys

from ply import yacc as yacc
from ply import lex as lex

from . import interval
from .errors import MalformedToken, InvalidRange, NumericOverflow

import logging
LOG = logging.getLogger(__name__)

# Largest value a subinterval endpoint may take. Literals above the native
# signed word are rejected rather than clamped.
#
INTEGER_MAX = sys.maxsize


class Parser:
    '''
    Parser for a single subexpression, i.e. one delimiter-separated token of
    an interval expression:

        *       wildcard
        n       single value
        n-      n and everything above it
        a-b     a through b inclusive

    Whitespace may surround the numbers, the dash and the star, but a number
    is always one unbroken run of ASCII digits.
    '''

    def __init__(self, **kwargs):
        self.lexer = lex.lex(module=self)
        self.parser = yacc.yacc(module=self, debug=False, write_tables=False, **kwargs)
        self.text = ''

    def parse(self, text):
        self.text = text
        result = self.parser.parse(text, lexer=self.lexer)
        LOG.debug('Subexpression %r => %r', text, result)
        return result

    def integer(self, p, n):
        ''' Convert the INTEGER literal at p[n], rejecting out of range values '''
        value = int(p[n])
        if value > INTEGER_MAX:
            raise NumericOverflow(self.text, p[n])
        return value

    tokens = (
        'STAR',
        'DASH',
        'INTEGER',
    )

    t_ignore = ' \t\r\n\f\v'

    t_STAR = r'\*'
    t_DASH = r'-'

    def t_INTEGER(self, t):
        r'[0-9]+'
        return t

    def t_error(self, t):
        LOG.debug("Illegal character '%s' at %d in %r", t.value[0], t.lexpos, self.text)
        raise MalformedToken(self.text, t.lexpos, f'illegal character {t.value[0]!r}')

    def p_subinterval_wildcard(self, p):
        'subinterval : STAR'
        p[0] = interval.Wildcard()

    def p_subinterval_single(self, p):
        'subinterval : INTEGER'
        p[0] = interval.Bounded(self.integer(p, 1))

    def p_subinterval_unbounded(self, p):
        'subinterval : INTEGER DASH'
        p[0] = interval.Unbounded(self.integer(p, 1))

    def p_subinterval_range(self, p):
        'subinterval : INTEGER DASH INTEGER'
        start = self.integer(p, 1)
        end = self.integer(p, 3)

        if end < start:
            LOG.debug('Range %d-%d in non-increasing order', start, end)
            raise InvalidRange(self.text, start, end)

        p[0] = interval.Bounded.span(start, end)

    def p_error(self, p):
        if p:
            LOG.debug('%d: Syntax error at \'%s\' in %r', p.lexpos + 1, p.value, self.text)
            raise MalformedToken(self.text, p.lexpos, f'unexpected {p.value!r}')

        LOG.debug('Syntax error at end of %r', self.text)
        raise MalformedToken(self.text, None, 'unexpected end of subexpression')


def parse_subexpression(text):
    ''' Parse one subexpression string into a SubInterval '''
    return Parser().parse(text)
