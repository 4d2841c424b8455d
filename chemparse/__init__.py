"""Parse chemical formulas and equations and check equations for balance."""
from .analyze import analyze, check_balance, composition_matrix, imbalance, is_balanced  # noqa: F401
from .config import DEFAULT_LIMITS, Limits  # noqa: F401
from .errors import (  # noqa: F401
    ChemError,
    ChemSyntaxError,
    CountOverflowError,
    InputLimitError,
    UnknownElementError,
)
from .expand import expand_formula  # noqa: F401
from .model import Component, Element, ElementTerm, Equation, Formula, GroupTerm  # noqa: F401
from .parse import parse_element, parse_equation, parse_formula  # noqa: F401

__version__ = '0.1.0'

__all__ = [
    'ChemError', 'ChemSyntaxError', 'Component', 'CountOverflowError', 'DEFAULT_LIMITS',
    'Element', 'ElementTerm', 'Equation', 'Formula', 'GroupTerm', 'InputLimitError',
    'Limits', 'UnknownElementError', 'analyze', 'check_balance', 'composition_matrix',
    'expand_formula', 'imbalance', 'is_balanced', 'parse_element', 'parse_equation',
    'parse_formula',
]
