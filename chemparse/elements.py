"""Element metadata lookup.

The parser accepts any symbol of the right shape; whether a symbol names a
real element is only decided here, for display and mass calculations.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources

import numpy as np

from .errors import UnknownElementError

LOGGER = logging.getLogger(__name__)

COLUMNS = ('symbol', 'name', 'atomic_number', 'atomic_mass')


@dataclass(frozen=True)
class ElementInfo:
    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float

    def __str__(self):
        return '{} ({})\nAtomic number: {}\nAtomic mass: {}' \
               .format(self.symbol, self.name, self.atomic_number, self.atomic_mass)


class PeriodicTable(Mapping):
    """Read-only ``symbol -> ElementInfo`` mapping."""

    def __init__(self, elements):
        self._elements = dict(elements)

    def __getitem__(self, symbol):
        return self._elements[symbol]

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def lookup(self, symbol):
        try:
            return self._elements[symbol]
        except KeyError:
            raise UnknownElementError(symbol) from None

    @classmethod
    def from_csv(cls, path):
        """Load a CSV file with a ``symbol,name,atomic_number,atomic_mass`` header."""
        rows = np.genfromtxt(path, delimiter=',', names=True, dtype=None,
                             encoding='utf-8', autostrip=True)
        missing = [c for c in COLUMNS if c not in (rows.dtype.names or ())]
        if missing:
            raise ValueError('{}: missing columns {}'.format(path, ', '.join(missing)))

        elements = {}
        for row in np.atleast_1d(rows):
            info = ElementInfo(str(row['symbol']), str(row['name']),
                               int(row['atomic_number']), float(row['atomic_mass']))
            elements[info.symbol] = info
        LOGGER.debug('Loaded %d elements from %s', len(elements), path)
        return cls(elements)

    @classmethod
    def default(cls):
        return _default_table()


@lru_cache(maxsize=None)
def _default_table():
    source = resources.files('chemparse') / 'data' / 'elements.csv'
    with resources.as_file(source) as path:
        return PeriodicTable.from_csv(path)


def formula_mass(counts, table):
    """Molar mass of an element count mapping, in g/mol."""
    return sum(count * table.lookup(symbol).atomic_mass
               for symbol, count in counts.items())
