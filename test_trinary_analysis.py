"""
test_trinary_analysis.py

Tests for truth tables, logic comparison, value-set closures and the
order posets.
"""

import pytest

from trinary_core import (
    DOMAIN, Trinary, PriestLogic, KleeneLogic, L3Logic, Trilean,
    Notation, set_notation, reset_notation,
)
from trinary_analysis import (
    TruthTable, TruthOrderPoset, ValueSet, Divergence,
    compare_logics, logic_operators, operator_table, operator_tables,
)

T, M, F = Trinary.TRUE, Trinary.MAYBE, Trinary.FALSE


@pytest.fixture(autouse=True)
def default_notation():
    reset_notation()
    yield
    reset_notation()


# ----------------------------------------------------------------------------
# Truth tables
# ----------------------------------------------------------------------------

def test_table_from_operator():
    table = TruthTable.from_operator(KleeneLogic.and_, 2, name="and")
    assert len(table.cells()) == 9
    assert table.lookup(T, M) is M
    assert table.cells()[0] == ((F, F), F)


def test_table_requires_every_input():
    with pytest.raises(ValueError):
        TruthTable("partial", 1, {(T,): F})
    with pytest.raises(ValueError):
        TruthTable.from_operator(lambda a, b, c: a, 3)


def test_unary_table_rendering():
    table = operator_table(KleeneLogic, "not_")
    assert table.to_string() == "\n".join([
        "| A | not_(A) |",
        "|---|---|",
        "| F | T |",
        "| M | M |",
        "| T | F |",
    ])


def test_binary_table_rendering():
    table = operator_table(L3Logic, "implies")
    lines = table.to_string().split("\n")
    assert lines[0] == "|       | F | M | T |"
    assert lines[3] == "| **M** | M | T | T |"


def test_bool_cells_render_as_truth_values():
    set_notation(Notation.words())
    table = operator_table(Trilean, "necessary")
    assert "| maybe | false |" in table.to_string()


def test_operator_tables_cover_the_contract():
    kleene = operator_tables(KleeneLogic)
    assert set(kleene) == {name for name, _ in logic_operators(KleeneLogic)}
    assert "cyc_neg" not in kleene

    trilean = operator_tables(Trilean)
    for name in ("cyc_neg", "possible", "necessary", "is_exactly_indeterminate"):
        assert name in trilean


def test_tables_compare_by_rows():
    assert operator_table(PriestLogic, "and_") == operator_table(L3Logic, "and_")
    assert operator_table(KleeneLogic, "implies") != operator_table(L3Logic, "implies")


def test_unknown_operator():
    with pytest.raises(ValueError):
        operator_table(KleeneLogic, "cyc_neg")


# ----------------------------------------------------------------------------
# Comparing logics
# ----------------------------------------------------------------------------

def test_kleene_and_l3_differ_in_one_cell():
    assert compare_logics(KleeneLogic, L3Logic) == [Divergence("implies", (M, M), M, T)]


def test_priest_and_kleene_differ_only_in_classifiers():
    divergences = compare_logics(PriestLogic, KleeneLogic)
    assert {d.operator for d in divergences} == {"is_true", "is_false", "truthy", "falsy"}
    assert all(d.inputs == (M,) for d in divergences)


def test_trilean_matches_kleene_on_shared_operators():
    assert compare_logics(Trilean, KleeneLogic) == []


def test_logic_agrees_with_itself():
    for logic in (PriestLogic, KleeneLogic, L3Logic, Trilean):
        assert compare_logics(logic, logic) == []


def test_divergence_rendering():
    (divergence,) = compare_logics(KleeneLogic, L3Logic)
    assert divergence.to_string() == "implies(M, M): M vs T"


# ----------------------------------------------------------------------------
# Value set closures
# ----------------------------------------------------------------------------

def test_negation_closure():
    values = ValueSet([T], logic=KleeneLogic).negclose()
    assert values.to_list() == [T, F]


def test_cyclic_closure_reaches_whole_domain():
    values = ValueSet([T]).cycclose()
    assert values.to_list() == [T, M, F]
    assert values.is_complete()


def test_cyclic_closure_needs_cyclic_negation():
    with pytest.raises(ValueError):
        ValueSet([T], logic=PriestLogic).cycclose()


def test_maybe_is_closed_in_kleene_but_not_l3():
    assert ValueSet([M], logic=KleeneLogic).close().to_list() == [M]
    assert set(ValueSet([M], logic=L3Logic).close()) == set(DOMAIN)


def test_definite_values_stay_definite():
    for logic in (PriestLogic, KleeneLogic, L3Logic):
        assert set(ValueSet([T, F], logic=logic).close()) == {T, F}


def test_value_set_rejects_foreign_values():
    values = ValueSet()
    with pytest.raises(TypeError):
        values.add(True)
    assert values.add(M) is True
    assert values.add(M) is False
    assert M in values and len(values) == 1


def test_value_set_needs_an_iterable_of_values():
    with pytest.raises(TypeError, match="iterable"):
        ValueSet(T)
    with pytest.raises(TypeError, match="Expected Trinary"):
        ValueSet([T, True])
    assert len(ValueSet(None)) == 0


def test_verbose_closure_reports_to_stderr(capsys):
    ValueSet([M], logic=L3Logic).close(verbose=True)
    assert "Closure pass" in capsys.readouterr().err


# ----------------------------------------------------------------------------
# Order posets
# ----------------------------------------------------------------------------

def test_truth_order():
    poset = TruthOrderPoset("truth")
    assert set(poset.graph.edges()) == {(F, M), (F, T), (M, T)}
    assert poset.minimal() == [F]
    assert poset.maximal() == [T]
    assert poset.leq(F, T) and not poset.leq(T, M)


def test_truth_order_reduction_is_a_chain():
    reduced = TruthOrderPoset("truth").transitive_reduction()
    assert set(reduced.graph.edges()) == {(F, M), (M, T)}
    assert reduced.successors(F) == [M]
    assert reduced.predecessors(T) == [M]


def test_information_order():
    poset = TruthOrderPoset("information")
    assert set(poset.graph.edges()) == {(M, F), (M, T)}
    assert poset.minimal() == [M]
    assert set(poset.maximal()) == {F, T}
    assert not poset.leq(F, T) and not poset.leq(T, F)


def test_unknown_order_type():
    with pytest.raises(ValueError):
        TruthOrderPoset("alphabetical")
