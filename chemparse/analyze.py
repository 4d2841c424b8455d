import logging

import numpy as np

from .config import DEFAULT_LIMITS, INT64_MAX
from .expand import expand_formula, muladd
from .parse import parse_equation

LOGGER = logging.getLogger(__name__)


def _as_equation(equation, limits):
    if isinstance(equation, str):
        return parse_equation(equation, limits)
    return equation


def side_totals(components, limits=DEFAULT_LIMITS):
    """Sum the expanded counts of ``components``, each scaled by its coefficient."""
    totals = {}
    for component in components:
        mol = expand_formula(component.formula, limits)
        muladd(totals, mol, component.multiplier, limits.max_count)
    return totals


def analyze(equation, limits=DEFAULT_LIMITS):
    """Return ``(reactant_totals, product_totals)`` for ``equation``."""
    equation = _as_equation(equation, limits)
    lhs = side_totals(equation.reactants, limits)
    rhs = side_totals(equation.products, limits)
    LOGGER.debug('Totals for %s: reactants %s, products %s', equation, lhs, rhs)
    return lhs, rhs


def totals_equal(mola, molb):
    # Zero entries count as absent.
    return ({k: v for k, v in mola.items() if v} ==
            {k: v for k, v in molb.items() if v})


def check_balance(equation, limits=DEFAULT_LIMITS):
    lhs, rhs = analyze(equation, limits)
    return totals_equal(lhs, rhs)


is_balanced = check_balance


def imbalance(equation, limits=DEFAULT_LIMITS):
    """Map every element whose totals differ to ``products - reactants``."""
    equation = _as_equation(equation, limits)
    symbols, system = composition_matrix(equation, limits)
    # Each row of system . coefficients is reactants - products for one element.
    residual = system.astype(object).dot(coefficient_vector(equation))
    return {elem: -int(diff) for elem, diff in zip(symbols, residual) if diff}


def composition_matrix(equation, limits=DEFAULT_LIMITS):
    """Build the element-by-component stoichiometric matrix of ``equation``.

    Rows follow the returned sorted element symbols, columns follow the
    reactants and then the products. Reactant counts are positive, product
    counts negative; coefficients are not applied, so the matrix times the
    coefficient vector is zero exactly when the equation is balanced.
    """
    equation = _as_equation(equation, limits)
    lhs = [expand_formula(c.formula, limits) for c in equation.reactants]
    rhs = [expand_formula(c.formula, limits) for c in equation.products]

    elems = set()
    for mol in lhs + rhs:
        elems.update(mol.keys())
    index = list(sorted(elems))
    revindex = {elem: idx for idx, elem in enumerate(index)}

    # int64 holds every count allowed by the default limit.
    dtype = np.int64 if limits.max_count <= INT64_MAX else object
    system = np.zeros((len(index), len(lhs) + len(rhs)), dtype=dtype)
    for col, mol in enumerate(lhs):
        for elem, count in mol.items():
            system[revindex[elem], col] = count
    for col, mol in enumerate(rhs, len(lhs)):
        for elem, count in mol.items():
            system[revindex[elem], col] = -count

    return index, system


def coefficient_vector(equation, limits=DEFAULT_LIMITS):
    """Coefficients of ``equation`` in :func:`composition_matrix` column order.

    Object dtype; multiplied with ``matrix.astype(object)`` the arithmetic
    stays in Python integers and cannot wrap.
    """
    equation = _as_equation(equation, limits)
    return np.array([c.multiplier for c in equation.reactants + equation.products],
                    dtype=object)
