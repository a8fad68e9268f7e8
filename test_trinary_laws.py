"""
test_trinary_laws.py

Boolean algebra laws over the full domain, checked directly with the
operators and through check_laws.
"""

from itertools import product

import pytest

from trinary_core import DOMAIN, LOGICS, Trinary, Trilean, L3Logic, KleeneLogic, PriestLogic
from trinary_analysis import check_laws

T, M, F = Trinary.TRUE, Trinary.MAYBE, Trinary.FALSE

SQUARE = list(product(DOMAIN, repeat=2))
CUBE = list(product(DOMAIN, repeat=3))


# ----------------------------------------------------------------------------
# Monotone laws, via the operator sugar
# ----------------------------------------------------------------------------

def test_associativity():
    for a, b, c in CUBE:
        assert (a | (b | c)) is ((a | b) | c)
        assert (a & (b & c)) is ((a & b) & c)


def test_commutativity():
    for a, b in SQUARE:
        assert (a | b) is (b | a)
        assert (a & b) is (b & a)


def test_distributivity():
    for a, b, c in CUBE:
        assert (a & (b | c)) is ((a & b) | (a & c))
        assert (a | (b & c)) is ((a | b) & (a | c))


def test_identity_and_annihilation():
    for a in DOMAIN:
        assert (a | F) is a
        assert (a & T) is a
        assert (a | T) is T
        assert (a & F) is F


def test_idempotence():
    for a in DOMAIN:
        assert (a | a) is a
        assert (a & a) is a


def test_absorption():
    for a, b in SQUARE:
        assert (a & (a | b)) is a
        assert (a | (a & b)) is a


# ----------------------------------------------------------------------------
# Non-monotone laws
# ----------------------------------------------------------------------------

def test_complementation_fails_exactly_at_maybe():
    for a in (F, T):
        assert (a & ~a) is F
        assert (a | ~a) is T
    assert (M & ~M) is M
    assert (M | ~M) is M


def test_involution():
    for a in DOMAIN:
        assert ~~a is a


def test_de_morgan():
    for a, b in SQUARE:
        assert (~a & ~b) is ~(a | b)
        assert (~a | ~b) is ~(a & b)


@pytest.mark.parametrize("logic", LOGICS, ids=lambda l: l.name)
def test_de_morgan_under_each_negation(logic):
    for a, b in SQUARE:
        assert logic.not_(logic.or_(a, b)) is logic.and_(logic.not_(a), logic.not_(b))


def test_cyclic_negation_is_not_involutive():
    assert any(Trilean.cyc_neg(Trilean.cyc_neg(a)) is not a for a in DOMAIN)


# ----------------------------------------------------------------------------
# check_laws
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("logic", LOGICS, ids=lambda l: l.name)
def test_every_logic_behaves_as_expected(logic):
    report = check_laws(logic)
    assert report.as_expected(), report.to_string()
    assert report.unexpected() == []


@pytest.mark.parametrize("logic", LOGICS, ids=lambda l: l.name)
def test_complementation_counterexample_is_maybe(logic):
    report = check_laws(logic)
    assert report["complementation"].counterexamples == [(M,)]
    assert report["excluded middle"].counterexamples == [(M,)]
    assert not report["complementation"].holds


def test_cyclic_laws_only_for_trilean():
    report = check_laws(Trilean)
    assert report["cyclic order"].holds
    assert not report["cyclic involution"].holds
    assert len(report["cyclic involution"].counterexamples) == 3

    with pytest.raises(KeyError):
        check_laws(KleeneLogic)["cyclic order"]


def test_law_cross_products_are_complete():
    report = check_laws(L3Logic)
    arities = {r.name: r.arity for r in report}
    assert arities["and associativity"] == 3
    assert arities["or commutativity"] == 2
    assert arities["involution"] == 1


def test_verbose_check_reports_to_stderr(capsys):
    check_laws(PriestLogic, verbose=True)
    captured = capsys.readouterr()
    assert "Checking" in captured.err
    assert "Priest" in captured.err
    assert captured.out == ""


def test_report_rendering():
    text = check_laws(KleeneLogic).to_string()
    assert text.startswith("Laws for Kleene:")
    assert "complementation: fails on 1 (not a law here)" in text
