class ChemError(Exception):
    pass


class ChemSyntaxError(ChemError, ValueError):
    """Malformed element, formula, group or equation text."""

    def __init__(self, text, position, found, expected, found_type=None):
        self.text = text
        self.position = position
        self.found = found
        self.expected = expected
        self.found_type = found_type
        super().__init__(self._message())

    def _message(self):
        found = self.found if self.found else 'end of input'
        kind = ' ({})'.format(self.found_type) if self.found_type else ''
        return 'Parse error: "{}"{} at {} (expected {}).' \
               .format(found, kind, self.position, self.expected)

    def pointer(self):
        # Two-line rendering with a caret under the offending character.
        return '{}\n{}^'.format(self.text, ' ' * self.position)


class InputLimitError(ChemSyntaxError):
    def _message(self):
        return 'Input rejected at {}: {}.'.format(self.position, self.expected)


class CountOverflowError(ChemError, OverflowError):
    def __init__(self, symbol, limit):
        self.symbol = symbol
        self.limit = limit
        super().__init__(
            'Atom count for {} exceeds the limit of {}.'.format(symbol, limit))


class UnknownElementError(ChemError, LookupError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__('Unknown element symbol: {}'.format(symbol))


class CommandUsageError(ChemError):
    pass


class UnknownCommandError(CommandUsageError):
    def __init__(self, command):
        self.command = command
        super().__init__("Unknown command '{}'".format(command))
