"""Reduce a formula tree to an element -> atom count mapping.

Group counts are scaled with one multiplication per term, so the work is
linear in the size of the tree and not in the number of atoms it denotes:
``((((C)9)9)9)9`` costs four multiplications, not 6561 additions.
"""
import logging

from .config import DEFAULT_LIMITS, INT64_MAX
from .errors import CountOverflowError
from .model import GroupTerm
from .parse import parse_formula

LOGGER = logging.getLogger(__name__)


def muladd(mola, molb, n, max_count=INT64_MAX):
    """Add ``n`` times every count of ``molb`` into ``mola`` in place."""
    for elem, count in molb.items():
        total = n * count + mola.get(elem, 0)
        if total > max_count:
            raise CountOverflowError(elem, max_count)
        mola[elem] = total
    return mola


def scale(mol, n, max_count=INT64_MAX):
    return muladd({}, mol, n, max_count)


def _expand(formula, max_count):
    mol = {}
    for term in formula.terms:
        if isinstance(term, GroupTerm):
            muladd(mol, _expand(term.formula, max_count), term.count, max_count)
        else:
            muladd(mol, {term.element.symbol: 1}, term.count, max_count)
    return mol


def expand_formula(formula, limits=DEFAULT_LIMITS):
    """Return the element counts of ``formula`` in order of first appearance.

    ``formula`` may be a parsed :class:`~chemparse.model.Formula` or formula
    text, which is parsed with the same ``limits`` first.
    """
    if isinstance(formula, str):
        formula = parse_formula(formula, limits)
    mol = _expand(formula, limits.max_count)
    LOGGER.debug('Expanded %s to %s', formula, mol)
    return mol
