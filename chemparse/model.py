"""Immutable parse tree for formulas and equations.

A formula is a tuple of terms; a term is either an element or a
parenthesized group owning a nested formula. ``index`` and ``coefficient``
are ``None`` when not written in the source text, so ``str()`` rebuilds text
that re-parses to an identical value.
"""
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

ELEMENT_PATTERN = re.compile(r'[A-Z][a-z]?')


@dataclass(frozen=True)
class Element:
    symbol: str

    def __post_init__(self):
        if not ELEMENT_PATTERN.fullmatch(self.symbol):
            raise ValueError('malformed element symbol: {!r}'.format(self.symbol))

    def __str__(self):
        return self.symbol


def _suffix(n):
    return '' if n is None else str(n)


@dataclass(frozen=True)
class ElementTerm:
    element: Element
    index: Optional[int] = None

    @property
    def count(self):
        return 1 if self.index is None else self.index

    def __str__(self):
        return self.element.symbol + _suffix(self.index)


@dataclass(frozen=True)
class GroupTerm:
    formula: 'Formula'
    index: Optional[int] = None

    @property
    def count(self):
        return 1 if self.index is None else self.index

    def __str__(self):
        return '({}){}'.format(self.formula, _suffix(self.index))


Term = Union[ElementTerm, GroupTerm]


@dataclass(frozen=True)
class Formula:
    terms: Tuple[Term, ...]
    # Source substring, ignored by equality.
    text: str = field(default='', compare=False)

    def __post_init__(self):
        if not self.terms:
            raise ValueError('a formula needs at least one term')

    def depth(self):
        """Parenthesis nesting depth, 0 for a formula without groups."""
        inner = [t.formula.depth() + 1 for t in self.terms if isinstance(t, GroupTerm)]
        return max(inner, default=0)

    def __str__(self):
        return ''.join(str(t) for t in self.terms)


@dataclass(frozen=True)
class Component:
    """One formula on a side of an equation with its optional coefficient."""

    formula: Formula
    coefficient: Optional[int] = None

    @property
    def multiplier(self):
        return 1 if self.coefficient is None else self.coefficient

    def __str__(self):
        return _suffix(self.coefficient) + str(self.formula)


@dataclass(frozen=True)
class Equation:
    reactants: Tuple[Component, ...]
    products: Tuple[Component, ...]
    text: str = field(default='', compare=False)

    def __post_init__(self):
        if not self.reactants or not self.products:
            raise ValueError('both sides of an equation need a formula')

    def __str__(self):
        lhs = ' + '.join(str(c) for c in self.reactants)
        rhs = ' + '.join(str(c) for c in self.products)
        return lhs + ' -> ' + rhs
