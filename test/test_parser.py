# intexpr/test/test_parser.py

import sys
import unittest

from intexpr import (
    Parser, parse_subexpression,
    Bounded, Unbounded, Wildcard,
    ExpressionError, MalformedToken, InvalidRange, NumericOverflow,
)


class TestShapes(unittest.TestCase):
    def test_wildcard(self):
        self.assertEqual(parse_subexpression('*'), Wildcard())

    def test_single(self):
        self.assertEqual(parse_subexpression('0'), Bounded(0))
        self.assertEqual(parse_subexpression('42'), Bounded(42))

    def test_leading_zeros(self):
        self.assertEqual(parse_subexpression('007'), Bounded(7))

    def test_unbounded(self):
        self.assertEqual(parse_subexpression('1-'), Unbounded(1))

    def test_range(self):
        self.assertEqual(parse_subexpression('5-7'), Bounded(5, 3))

    def test_degenerate_range(self):
        self.assertEqual(parse_subexpression('4-4'), Bounded(4))

    def test_largest_value(self):
        text = str(sys.maxsize)
        self.assertEqual(parse_subexpression(text), Bounded(sys.maxsize))


class TestWhitespace(unittest.TestCase):
    def test_around_tokens(self):
        for text, expected in [
            (' 3', Bounded(3)),
            ('3 ', Bounded(3)),
            ('\t3\n', Bounded(3)),
            (' * ', Wildcard()),
            (' 1-3', Bounded.span(1, 3)),
            ('1 - 3', Bounded.span(1, 3)),
            (' 7- ', Unbounded(7)),
        ]:
            with self.subTest(text=text):
                self.assertEqual(parse_subexpression(text), expected)

    def test_not_inside_numbers(self):
        with self.assertRaises(MalformedToken):
            parse_subexpression('1 2')

    def test_only_whitespace(self):
        with self.assertRaises(MalformedToken) as cm:
            parse_subexpression('   ')
        self.assertIsNone(cm.exception.position)


class TestErrors(unittest.TestCase):
    def test_malformed(self):
        for text in ['a', 'a-3', '1-b', '1@', '1@3', '-1', '-x', 'x-',
                     '1-2-3', '**', '*-', '1*', '+1', '1.5', '']:
            with self.subTest(text=text):
                with self.assertRaises(MalformedToken) as cm:
                    parse_subexpression(text)
                self.assertEqual(cm.exception.text, text)
                self.assertIn(repr(text), str(cm.exception))

    def test_malformed_position(self):
        with self.assertRaises(MalformedToken) as cm:
            parse_subexpression('6-x')
        self.assertEqual(cm.exception.position, 2)

        with self.assertRaises(MalformedToken) as cm:
            parse_subexpression('-1')
        self.assertEqual(cm.exception.position, 0)

    def test_non_ascii_digits(self):
        # Arabic-Indic three; int() would accept it, the grammar must not
        #
        with self.assertRaises(MalformedToken):
            parse_subexpression('٣')

    def test_invalid_range(self):
        with self.assertRaises(InvalidRange) as cm:
            parse_subexpression('7-5')
        self.assertEqual((cm.exception.start, cm.exception.end), (7, 5))
        self.assertEqual(cm.exception.text, '7-5')

    def test_overflow(self):
        too_big = str(sys.maxsize + 1)
        for text in [too_big, too_big + '-', '0-' + too_big, too_big + '-' + too_big]:
            with self.subTest(text=text):
                with self.assertRaises(NumericOverflow) as cm:
                    parse_subexpression(text)
                self.assertEqual(cm.exception.literal, too_big)

    def test_common_base(self):
        for text in ['x', '3-1', str(sys.maxsize + 1)]:
            with self.subTest(text=text):
                with self.assertRaises(ExpressionError):
                    parse_subexpression(text)
                with self.assertRaises(ValueError):
                    parse_subexpression(text)


class TestParserReuse(unittest.TestCase):
    def test_recovers_after_error(self):
        parser = Parser()
        self.assertEqual(parser.parse('1-3'), Bounded.span(1, 3))

        with self.assertRaises(MalformedToken):
            parser.parse('1-x')

        self.assertEqual(parser.parse('9-'), Unbounded(9))
        self.assertEqual(parser.parse('*'), Wildcard())


if __name__ == '__main__':
    unittest.main()
