import pytest

from chemparse import ChemSyntaxError, UnknownElementError
from chemparse.commands import Commands, run_command
from chemparse.elements import ElementInfo, PeriodicTable
from chemparse.errors import CommandUsageError, UnknownCommandError


@pytest.fixture
def commands():
    return Commands()


def test_help(commands):
    text = commands.run('help')
    assert text.startswith('Use following commands:')
    assert 'check <chemical-equation>' in text


def test_symbol(commands):
    assert commands.run('symbol', 'H') == \
        'Element: H (Hydrogen)\nAtomic number: 1\nAtomic mass: 1.008'


def test_symbol_errors(commands):
    with pytest.raises(UnknownElementError):
        commands.run('symbol', 'Xx')
    with pytest.raises(ChemSyntaxError):
        commands.run('symbol', 'h')


def test_formula(commands):
    assert commands.run('formula', 'H2O') == 'Formula: H2O\nElements: H: 2, O: 1\nMass: 18.015'


def test_formula_with_unknown_element(commands):
    text = commands.run('formula', 'Xx2O')
    assert text.splitlines()[-1] == 'Mass: unknown (no data for Xx)'


def test_equation(commands):
    assert commands.run('equation', '2H2 + O2 -> 2H2O') == \
        'Equation: 2H2 + O2 -> 2H2O\nReactants: 2 H2, 1 O2\nProducts: 2 H2O'


def test_check(commands):
    balanced = commands.run('check', '2H2 + O2 -> 2H2O').splitlines()
    assert balanced[-3:] == [
        'Reactant atoms: H: 4, O: 2',
        'Product atoms: H: 4, O: 2',
        'Equation is balanced.',
    ]
    unbalanced = commands.run('check', 'H2 + O2 -> H2O')
    assert unbalanced.endswith('Equation is not balanced.')


def test_file(commands, tmp_path):
    path = tmp_path / 'equations.txt'
    path.write_text('2H2 + O2 -> 2H2O\n\nH2 + O2 -> H2O\n2 + O2 -> 2H2O\n', encoding='utf-8')
    lines = commands.run('file', str(path)).splitlines()
    assert lines[0] == '1. Equation: 2H2 + O2 -> 2H2O'
    assert 'Equation is balanced.' in lines
    assert '3. Equation: H2 + O2 -> H2O' in lines
    assert 'Equation is not balanced.' in lines
    assert lines[-1].startswith('Error on line 4: Parse error: " " (SPACE) at 1')


def test_file_missing(commands, tmp_path):
    with pytest.raises(FileNotFoundError):
        commands.run('file', str(tmp_path / 'missing.txt'))


def test_unknown_command(commands):
    with pytest.raises(UnknownCommandError) as info:
        commands.run('balance', 'H2 -> H2')
    assert str(info.value) == "Unknown command 'balance'"


def test_missing_argument(commands):
    with pytest.raises(CommandUsageError):
        commands.run('check')


def test_injected_table():
    table = PeriodicTable({'Q': ElementInfo('Q', 'Quux', 200, 10.0)})
    assert run_command('formula', 'Q3', table=table).endswith('Mass: 30.000')


def test_file_reports_oversized_number_and_continues(commands, tmp_path):
    path = tmp_path / 'equations.txt'
    path.write_text('H2 -> H2\n' + '9' * 5000 + 'H2 -> H2\nO2 -> 2O\n', encoding='utf-8')
    lines = commands.run('file', str(path)).splitlines()
    assert 'Error on line 2: Input rejected at 0: a number of at most 19 digits.' in lines
    assert '3. Equation: O2 -> 2O' in lines


def test_check_reports_difference(commands):
    lines = commands.run('check', 'H2 + O2 -> H2O').splitlines()
    assert lines[-2:] == [
        'Difference (products - reactants): O: -1',
        'Equation is not balanced.',
    ]
