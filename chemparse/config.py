import sys
from dataclasses import dataclass
from typing import Optional

INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Limits:
    """Bounds applied while parsing and expanding untrusted text.

    ``max_length`` caps the number of characters accepted (``None`` for no
    cap), ``max_depth`` the parenthesis nesting depth and ``max_count`` the
    largest atom count a single element may reach.
    """

    max_length: Optional[int] = None
    max_depth: int = 100
    max_count: int = INT64_MAX

    def __post_init__(self):
        if self.max_length is not None and self.max_length < 1:
            raise ValueError('max_length must be positive')
        if self.max_depth < 0:
            raise ValueError('max_depth must not be negative')
        # Parsing and expansion recurse a few frames per nesting level.
        ceiling = sys.getrecursionlimit() // 4
        if self.max_depth > ceiling:
            raise ValueError('max_depth must not exceed {}'.format(ceiling))
        if self.max_count < 1:
            raise ValueError('max_count must be positive')
        # str(max_count) has to stay below the int/str digit limit.
        if self.max_count.bit_length() > 12000:
            raise ValueError('max_count is too large')


DEFAULT_LIMITS = Limits()
