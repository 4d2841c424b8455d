import logging
import re
from collections import namedtuple

from .config import DEFAULT_LIMITS
from .errors import ChemSyntaxError, InputLimitError
from .model import Component, Element, ElementTerm, Equation, Formula, GroupTerm

LOGGER = logging.getLogger(__name__)


class Token(namedtuple('Token', 'kind text start end')):
    __slots__ = ()

    @property
    def span(self):
        return (self.start, self.end)


class Tokenizer:
    tokens = [
        ('ELEM', r'[A-Z][a-z]?'),
        ('NUM', r'[1-9][0-9]*'),
        ('LPAREN', r'\('),
        ('RPAREN', r'\)'),
        ('PLUS', r'\+'),
        ('ARROW', r'->'),
        ('SPACE', r'[ \t]+'),
        ('INVALID', r'.')]

    # DOTALL so that newlines surface as INVALID instead of being skipped.
    matcher = re.compile('|'.join('(?P<{}>{})'.format(*pair) for pair in tokens), re.DOTALL)

    def __init__(self, pattern):
        self._mobs = Tokenizer.matcher.finditer(pattern)
        l = len(pattern)
        self._end_token = Token('END', '', l, l)
        self._peek = None

    def __iter__(self):
        return self

    def __next__(self):
        token = self.peek()
        # END is sticky; everything else is consumed.
        if token is not self._end_token:
            self._peek = None
        return token

    def peek(self):
        if self._peek is None:
            self._peek = self._advance()
        return self._peek

    def _advance(self):
        try:
            mob = next(self._mobs)
        except StopIteration:
            return self._end_token
        group = mob.lastgroup
        return Token(group, mob.group(group), *mob.span())


class Parser:
    """Recursive-descent parser with one method per grammar rule.

    element     = UPPER lower?
    index       = nonzero digit*
    formula     = (element index? | group index?)+
    group       = "(" formula ")"
    reactants   = coefficient? formula (ws? "+" ws? coefficient? formula)*
    equation    = reactants ws? "->" ws? products
    """

    def __init__(self, pattern, limits=DEFAULT_LIMITS):
        self._pattern = pattern
        self._limits = limits
        if limits.max_length is not None and len(pattern) > limits.max_length:
            pos = limits.max_length
            raise InputLimitError(pattern, pos, pattern[pos],
                                  'input of at most {} characters'.format(limits.max_length))
        self._tokens = Tokenizer(pattern)
        self._depth = 0
        self._last_end = 0

    # Entry points; each must consume the whole input.

    def parse_element(self):
        tok = self.token('ELEM')
        self.token('END')
        return Element(tok.text)

    def parse_formula(self):
        formula = self.formula()
        self.token('END')
        return formula

    def parse_equation(self):
        # END is checked inside equation() to reject trailing whitespace.
        return self.equation()

    # Grammar rules

    def equation(self):
        reactants, space = self.components()
        if space is None:
            self.optional_space()
        self.token('ARROW', 'PLUS or ARROW')
        self.optional_space()
        products, space = self.components()
        if space is not None:
            # Whitespace is only allowed around "+" and "->".
            self.fail(space, 'PLUS or END')
        self.token('END', 'PLUS or END')
        return Equation(reactants, products, self._pattern)

    def components(self):
        """Parse one side; returns the components and any trailing SPACE token."""
        items = []
        while True:
            items.append(self.component())
            space = self.optional_space()
            if not self.test('PLUS'):
                return tuple(items), space
            self.token('PLUS')
            self.optional_space()

    def component(self):
        coefficient = self.number()
        formula = self.formula()
        return Component(formula, coefficient)

    def formula(self):
        start = self._tokens.peek().start
        terms = []
        while True:
            if self.test('LPAREN'):
                terms.append(self.group())
            elif self.test('ELEM'):
                tok = self.token('ELEM')
                terms.append(ElementTerm(Element(tok.text), self.number()))
            else:
                break

        if not terms:
            self.fail(self._tokens.peek(), 'ELEM or LPAREN')

        return Formula(tuple(terms), self._pattern[start:self._last_end])

    def group(self):
        lparen = self.token('LPAREN')
        self._depth += 1
        if self._depth > self._limits.max_depth:
            raise InputLimitError(self._pattern, lparen.start, lparen.text,
                                  'nesting depth of at most {}'.format(self._limits.max_depth))
        formula = self.formula()
        self.token('RPAREN', 'ELEM, LPAREN or RPAREN')
        self._depth -= 1
        return GroupTerm(formula, self.number())

    def number(self):
        if not self.test('NUM'):
            return None
        tok = self.token('NUM')
        # More digits than max_count can only overflow; also keeps int() under
        # the interpreter's digit limit.
        digits = len(str(self._limits.max_count))
        if len(tok.text) > digits:
            raise InputLimitError(self._pattern, tok.start, tok.text,
                                  'a number of at most {} digits'.format(digits))
        return int(tok.text)

    def optional_space(self):
        if self.test('SPACE'):
            return self.token('SPACE')
        return None

    # Token helpers

    def token(self, tokentype, expected=None):
        token = next(self._tokens)
        if token.kind != tokentype:
            self.fail(token, expected or tokentype)
        self._last_end = token.end
        return token

    def test(self, tokentype):
        return self._tokens.peek().kind == tokentype

    def fail(self, token, expected):
        raise ChemSyntaxError(self._pattern, token.start, token.text, expected,
                              token.kind)


def parse_element(text, limits=DEFAULT_LIMITS):
    element = Parser(text, limits).parse_element()
    LOGGER.debug('Parsed element %s', element.symbol)
    return element


def parse_formula(text, limits=DEFAULT_LIMITS):
    formula = Parser(text, limits).parse_formula()
    LOGGER.debug('Parsed formula %s with %d top-level terms', text, len(formula.terms))
    return formula


def parse_equation(text, limits=DEFAULT_LIMITS):
    equation = Parser(text, limits).parse_equation()
    LOGGER.debug('Parsed equation %s: %d reactants, %d products',
                 text, len(equation.reactants), len(equation.products))
    return equation
