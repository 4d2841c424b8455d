import pytest

from chemparse import CountOverflowError, Limits, expand_formula, parse_formula
from chemparse.config import INT64_MAX
from chemparse.expand import muladd, scale


@pytest.mark.parametrize('text, expected', [
    ('H2O', {'H': 2, 'O': 1}),
    ('(H2O)1', {'H': 2, 'O': 1}),
    ('NaCl', {'Na': 1, 'Cl': 1}),
    ('Al2(SO4)3', {'Al': 2, 'S': 3, 'O': 12}),
    ('Cu2(OH)2CO3', {'Cu': 2, 'O': 5, 'H': 2, 'C': 1}),
    ('CH3(CH2)4CH3', {'C': 6, 'H': 14}),
    ('(AB2)3', {'A': 3, 'B': 6}),
    ('((A)2)3', {'A': 6}),
    ('K4(Fe(CN)6)', {'K': 4, 'Fe': 1, 'C': 6, 'N': 6}),
    ('Al2(Si2O5)(OH)4', {'Al': 2, 'Si': 2, 'O': 9, 'H': 4}),
])
def test_expand_formula(text, expected):
    assert expand_formula(parse_formula(text)) == expected


def test_expand_accepts_text():
    assert expand_formula('C6H12O6') == expand_formula(parse_formula('C6H12O6'))


def test_counts_follow_first_appearance():
    assert list(expand_formula('CH3(CH2)4CH3')) == ['C', 'H']
    assert list(expand_formula('OH2')) == ['O', 'H']


def test_group_scaling_distributes():
    assert expand_formula('(AB2)3') == scale(expand_formula('AB2'), 3)


def test_deep_nesting_multiplies():
    assert expand_formula('((((C)9)9)9)9') == {'C': 9 ** 4}
    deep = '(' * 40 + 'C' + ')2' * 40
    assert expand_formula(deep) == {'C': 2 ** 40}


def test_overflow_is_reported():
    limits = Limits(max_count=100)
    assert expand_formula('C100', limits) == {'C': 100}
    with pytest.raises(CountOverflowError) as info:
        expand_formula('((C)10)11', limits)
    assert info.value.symbol == 'C'
    assert info.value.limit == 100


def test_default_limit_is_int64():
    assert expand_formula('C{}'.format(INT64_MAX)) == {'C': INT64_MAX}
    with pytest.raises(CountOverflowError):
        expand_formula('(C{})2'.format(INT64_MAX))
    with pytest.raises(CountOverflowError):
        expand_formula('C{}C'.format(INT64_MAX))


def test_muladd_accumulates_in_place():
    mol = {'H': 2}
    assert muladd(mol, {'H': 1, 'O': 1}, 3) is mol
    assert mol == {'H': 5, 'O': 3}
