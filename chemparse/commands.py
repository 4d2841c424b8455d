"""Text command façade over the parse, expand and balance-check operations.

Each command returns human readable text or raises a :class:`ChemError`;
only ``file`` reports errors inline, one per failing line.
"""
import logging
from pathlib import Path

from .analyze import analyze, imbalance, totals_equal
from .config import DEFAULT_LIMITS
from .elements import PeriodicTable, formula_mass
from .errors import ChemError, CommandUsageError, UnknownCommandError, UnknownElementError
from .expand import expand_formula
from .parse import parse_element, parse_equation, parse_formula

LOGGER = logging.getLogger(__name__)

HELP = '\n'.join([
    'Use following commands:',
    '  help                            Show all commands',
    '  symbol <element-symbol>         Parse the element and print information about it',
    '  formula <chemical-formula>      Parse the formula and print information about it',
    '  equation <chemical-equation>    Parse the chemical equation and print its formulas',
    '  check <chemical-equation>       Check if the chemical equation is balanced',
    '  file <file-path>                Check every chemical equation in the file',
])


def format_counts(mol):
    return ', '.join('{}: {}'.format(elem, count) for elem, count in mol.items())


def format_side(components):
    return ', '.join('{} {}'.format(c.multiplier, c.formula) for c in components)


class Commands:
    def __init__(self, table=None, limits=DEFAULT_LIMITS):
        self._table = table
        self._limits = limits
        self._handlers = {
            'help': self.help,
            'symbol': self.symbol,
            'formula': self.formula,
            'equation': self.equation,
            'check': self.check,
            'file': self.file,
        }

    @property
    def table(self):
        # Loaded lazily; commands other than symbol/formula never need it.
        if self._table is None:
            self._table = PeriodicTable.default()
        return self._table

    def run(self, command, argument=None):
        try:
            handler = self._handlers[command]
        except KeyError:
            raise UnknownCommandError(command) from None
        if command == 'help':
            return handler()
        if argument is None:
            raise CommandUsageError("Command '{}' needs an argument".format(command))
        LOGGER.debug('Running %s %r', command, argument)
        return handler(argument)

    def help(self):
        return HELP

    def symbol(self, text):
        element = parse_element(text, self._limits)
        return 'Element: {}'.format(self.table.lookup(element.symbol))

    def formula(self, text):
        formula = parse_formula(text, self._limits)
        mol = expand_formula(formula, self._limits)
        try:
            mass = '{:.3f}'.format(formula_mass(mol, self.table))
        except UnknownElementError as exc:
            mass = 'unknown (no data for {})'.format(exc.symbol)
        return 'Formula: {}\nElements: {}\nMass: {}'.format(formula.text, format_counts(mol), mass)

    def equation(self, text):
        equation = parse_equation(text, self._limits)
        return self._describe(equation)

    def check(self, text):
        equation = parse_equation(text, self._limits)
        lhs, rhs = analyze(equation, self._limits)
        lines = [
            self._describe(equation),
            'Reactant atoms: {}'.format(format_counts(lhs)),
            'Product atoms: {}'.format(format_counts(rhs)),
        ]
        if totals_equal(lhs, rhs):
            lines.append('Equation is balanced.')
        else:
            lines.append('Difference (products - reactants): {}'.format(
                format_counts(imbalance(equation, self._limits))))
            lines.append('Equation is not balanced.')
        return '\n'.join(lines)

    def file(self, path):
        content = Path(path).read_text(encoding='utf-8')
        out = []
        for i, line in enumerate(content.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            try:
                out.append('{}. {}'.format(i, self.check(line)))
            except ChemError as exc:
                LOGGER.warning('%s line %d: %s', path, i, exc)
                out.append('Error on line {}: {}'.format(i, exc))
        return '\n'.join(out)

    def _describe(self, equation):
        return 'Equation: {}\nReactants: {}\nProducts: {}'.format(
            equation, format_side(equation.reactants), format_side(equation.products))


def run_command(command, argument=None, table=None, limits=DEFAULT_LIMITS):
    return Commands(table, limits).run(command, argument)
