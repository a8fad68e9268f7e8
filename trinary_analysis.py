"""
trinary_analysis.py

Truth tables, law checking, closures and order posets for three-valued logics.

This module works on the logic classes from trinary_core:
- TruthTable evaluates an operator over the whole domain
- compare_logics lists the cells where two logics disagree
- check_laws runs the boolean algebra laws over the full cross products
- ValueSet closes a set of values under a logic's operators
- TruthOrderPoset builds the truth and information orders as NetworkX graphs
"""

import sys
from itertools import product

import networkx as nx
from tqdm import tqdm

from trinary_core import DOMAIN, Trilean, Trinary


# Operators every Logic defines, with their arity
CONTRACT_OPERATORS = (
    ("not_", 1),
    ("and_", 2),
    ("or_", 2),
    ("equivalence", 2),
    ("implies", 2),
    ("is_possible", 1),
    ("is_unknown", 1),
    ("is_true", 1),
    ("is_false", 1),
    ("truthy", 1),
    ("falsy", 1),
)

# Operators only some logics define
EXTENDED_OPERATORS = (
    ("cyc_neg", 1),
    ("possible", 1),
    ("necessary", 1),
    ("is_exactly_indeterminate", 1),
)


def logic_operators(logic):
    """
    List the operators a logic defines.

    Args:
        logic: Logic class

    Returns:
        list of (name, arity) pairs
    """
    operators = list(CONTRACT_OPERATORS)
    for name, arity in EXTENDED_OPERATORS:
        if hasattr(logic, name):
            operators.append((name, arity))
    return operators


def cell_to_string(value):
    """Render a table cell; bool cells (truthy, possible, ...) render as T/F."""
    if isinstance(value, bool):
        value = Trinary.from_bool(value)
    return value.to_string()


def cell_degree(value):
    if isinstance(value, bool):
        return 1 if value else 0
    return value.degree


# ============================================================================
# SECTION 1: TRUTH TABLES
# ============================================================================

class TruthTable:
    """
    The complete graph of a unary or binary operator over the domain.

    Rows map input tuples to outputs: (a,) -> out for unary operators,
    (a, b) -> out for binary ones.
    """

    def __init__(self, name, arity, rows):
        if arity not in (1, 2):
            raise ValueError(f"Unsupported arity: {arity} (truth tables are unary or binary)")
        expected = set(product(DOMAIN, repeat=arity))
        if set(rows) != expected:
            raise ValueError(f"Truth table {name!r} must define all {len(expected)} input combinations")
        self.name = name
        self.arity = arity
        self.rows = dict(rows)

    @classmethod
    def from_operator(cls, fn, arity, name=None):
        """
        Evaluate an operator over every input combination.

        Args:
            fn: callable taking `arity` Trinary values
            arity: 1 or 2
            name: table name (defaults to fn.__name__)

        Returns:
            TruthTable
        """
        if arity not in (1, 2):
            raise ValueError(f"Unsupported arity: {arity} (truth tables are unary or binary)")
        rows = {args: fn(*args) for args in product(DOMAIN, repeat=arity)}
        return cls(name or fn.__name__, arity, rows)

    def lookup(self, *args):
        return self.rows[args]

    def cells(self):
        """Return (inputs, output) pairs in domain order."""
        return [(args, self.rows[args]) for args in product(DOMAIN, repeat=self.arity)]

    def __eq__(self, other):
        if not isinstance(other, TruthTable):
            return False
        return self.arity == other.arity and self.rows == other.rows

    def __hash__(self):
        return hash((self.arity, tuple(self.rows[args] for args in product(DOMAIN, repeat=self.arity))))

    def __repr__(self):
        return f"TruthTable({self.name!r}, arity={self.arity})"

    def to_string(self):
        """
        Render as a markdown table.

        Unary tables get one row per input; binary tables are a grid with
        the first operand down the side and the second across the top.
        """
        if self.arity == 1:
            lines = [f"| A | {self.name}(A) |", "|---|---|"]
            for (a,), out in self.cells():
                lines.append(f"| {a.to_string()} | {cell_to_string(out)} |")
            return "\n".join(lines)

        header = "|       | " + " | ".join(b.to_string() for b in DOMAIN) + " |"
        lines = [header, "|---" + "|---" * len(DOMAIN) + "|"]
        for a in DOMAIN:
            row = " | ".join(cell_to_string(self.rows[a, b]) for b in DOMAIN)
            lines.append(f"| **{a.to_string()}** | {row} |")
        return "\n".join(lines)


def operator_table(logic, operator_name):
    """
    Build the truth table of one operator of a logic.

    Raises:
        ValueError: If the logic has no such operator
    """
    for name, arity in logic_operators(logic):
        if name == operator_name:
            return TruthTable.from_operator(getattr(logic, name), arity, name=name)
    raise ValueError(f"Unknown operator for {logic.name}: {operator_name}")


def operator_tables(logic):
    """
    Build the truth tables of every operator a logic defines.

    Returns:
        dict mapping operator name -> TruthTable
    """
    return {name: TruthTable.from_operator(getattr(logic, name), arity, name=name)
            for name, arity in logic_operators(logic)}


# ============================================================================
# SECTION 2: COMPARING LOGICS
# ============================================================================

class Divergence:
    """One truth-table cell where two logics disagree."""

    def __init__(self, operator, inputs, first_value, second_value):
        self.operator = operator
        self.inputs = inputs
        self.first_value = first_value
        self.second_value = second_value

    def __repr__(self):
        return (f"Divergence({self.operator}, {self.inputs}, "
                f"{self.first_value!r}, {self.second_value!r})")

    def __eq__(self, other):
        if not isinstance(other, Divergence):
            return False
        return (self.operator, self.inputs, self.first_value, self.second_value) == \
            (other.operator, other.inputs, other.first_value, other.second_value)

    def __hash__(self):
        return hash((self.operator, self.inputs, self.first_value, self.second_value))

    def to_string(self):
        args = ", ".join(a.to_string() for a in self.inputs)
        return (f"{self.operator}({args}): "
                f"{cell_to_string(self.first_value)} vs {cell_to_string(self.second_value)}")


def compare_logics(first, second):
    """
    Find every cell where two logics' shared operators disagree.

    Only operators both logics define are compared.

    Args:
        first: Logic class
        second: Logic class

    Returns:
        list of Divergence, in operator then domain order
    """
    second_ops = set(logic_operators(second))
    divergences = []
    for name, arity in logic_operators(first):
        if (name, arity) not in second_ops:
            continue
        first_fn = getattr(first, name)
        second_fn = getattr(second, name)
        for args in product(DOMAIN, repeat=arity):
            a, b = first_fn(*args), second_fn(*args)
            if a != b:
                divergences.append(Divergence(name, args, a, b))
    return divergences


# ============================================================================
# SECTION 3: ALGEBRAIC LAWS
# ============================================================================

class LawResult:
    """
    Outcome of checking one law.

    Attributes:
        name: law name
        arity: number of free variables (1, 2 or 3)
        expected: whether the law is supposed to hold in three-valued logic
        counterexamples: variable assignments where it fails
    """

    def __init__(self, name, arity, expected, counterexamples):
        self.name = name
        self.arity = arity
        self.expected = expected
        self.counterexamples = counterexamples

    @property
    def holds(self):
        return not self.counterexamples

    @property
    def as_expected(self):
        return self.holds == self.expected

    def __repr__(self):
        status = "holds" if self.holds else f"fails ({len(self.counterexamples)} cases)"
        return f"LawResult({self.name}: {status})"


class LawReport:
    """Results of check_laws for one logic."""

    def __init__(self, logic, results):
        self.logic = logic
        self.results = results

    def __getitem__(self, name):
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(name)

    def __iter__(self):
        return iter(self.results)

    def __len__(self):
        return len(self.results)

    def as_expected(self):
        """True when every law holds or fails exactly as it should."""
        return all(r.as_expected for r in self.results)

    def unexpected(self):
        return [r for r in self.results if not r.as_expected]

    def to_string(self):
        lines = [f"Laws for {self.logic.name}:"]
        for r in self.results:
            mark = "✓" if r.as_expected else "✗"
            state = "holds" if r.holds else f"fails on {len(r.counterexamples)}"
            note = "" if r.expected else " (not a law here)"
            lines.append(f"  {mark} {r.name}: {state}{note}")
        return "\n".join(lines)


def _laws(logic):
    """
    Law predicates for a logic.

    Returns:
        list of (name, arity, expected, predicate)
    """
    n, a_, o_ = logic.not_, logic.and_, logic.or_
    T, F = Trinary.TRUE, Trinary.FALSE

    laws = [
        ("and commutativity", 2, True, lambda a, b: a_(a, b) == a_(b, a)),
        ("or commutativity", 2, True, lambda a, b: o_(a, b) == o_(b, a)),
        ("and associativity", 3, True, lambda a, b, c: a_(a, a_(b, c)) == a_(a_(a, b), c)),
        ("or associativity", 3, True, lambda a, b, c: o_(a, o_(b, c)) == o_(o_(a, b), c)),
        ("and over or distributivity", 3, True,
         lambda a, b, c: a_(a, o_(b, c)) == o_(a_(a, b), a_(a, c))),
        ("or over and distributivity", 3, True,
         lambda a, b, c: o_(a, a_(b, c)) == a_(o_(a, b), o_(a, c))),
        ("and identity", 1, True, lambda a: a_(a, T) == a),
        ("or identity", 1, True, lambda a: o_(a, F) == a),
        ("and annihilation", 1, True, lambda a: a_(a, F) == F),
        ("or annihilation", 1, True, lambda a: o_(a, T) == T),
        ("and idempotence", 1, True, lambda a: a_(a, a) == a),
        ("or idempotence", 1, True, lambda a: o_(a, a) == a),
        ("and absorption", 2, True, lambda a, b: a_(a, o_(a, b)) == a),
        ("or absorption", 2, True, lambda a, b: o_(a, a_(a, b)) == a),
        ("De Morgan (not or)", 2, True, lambda a, b: n(o_(a, b)) == a_(n(a), n(b))),
        ("De Morgan (not and)", 2, True, lambda a, b: n(a_(a, b)) == o_(n(a), n(b))),
        ("involution", 1, True, lambda a: n(n(a)) == a),
        # Fail exactly at MAYBE
        ("complementation", 1, False, lambda a: a_(a, n(a)) == F),
        ("excluded middle", 1, False, lambda a: o_(a, n(a)) == T),
    ]

    if hasattr(logic, "cyc_neg"):
        c = logic.cyc_neg
        laws.append(("cyclic order", 1, True, lambda a: c(c(c(a))) == a))
        laws.append(("cyclic involution", 1, False, lambda a: c(c(a)) == a))

    return laws


def check_laws(logic, verbose=False):
    """
    Check the boolean algebra laws for a logic over the full domain.

    Unary laws are checked on all 3 values, binary laws on all 9 pairs
    and ternary laws on all 27 triples.

    Args:
        logic: Logic class
        verbose: If True, print progress to stderr

    Returns:
        LawReport
    """
    laws = _laws(logic)
    if verbose:
        print(f"Checking {len(laws)} laws for {logic.name}...", file=sys.stderr)
        laws_iter = tqdm(laws, file=sys.stderr)
    else:
        laws_iter = laws

    results = []
    for name, arity, expected, predicate in laws_iter:
        counterexamples = [args for args in product(DOMAIN, repeat=arity)
                           if not predicate(*args)]
        results.append(LawResult(name, arity, expected, counterexamples))

    report = LawReport(logic, results)
    if verbose:
        print(f"{len(report.unexpected())} unexpected results", file=sys.stderr)
    return report


# ============================================================================
# SECTION 4: VALUE SET WITH CLOSURE OPERATIONS
# ============================================================================

class ValueSet:
    """
    A collection of trinary values with closure operations.

    Which values a set of generators can reach under a logic's operators
    shows what the operators can express; e.g. {TRUE} closes to
    {TRUE, FALSE} under ordinary negation but to the whole domain under
    cyclic negation.
    """

    def __init__(self, values=None, logic=Trilean):
        """
        Create a value set.

        Args:
            values: iterable of Trinary values
            logic: Logic class whose operators drive the closures
                (default: Trilean)
        """
        self.logic = logic
        self._value_set = set()
        self._value_list = []
        if isinstance(values, Trinary):
            raise TypeError("Expected an iterable of Trinary values, got a single Trinary")
        if values is not None:
            for value in values:
                self.add(value)

    def __len__(self):
        return len(self._value_list)

    def __iter__(self):
        return iter(self._value_list)

    def __contains__(self, value):
        return value in self._value_set

    def add(self, value):
        """Add a value if not already present."""
        if not isinstance(value, Trinary):
            raise TypeError(f"Expected Trinary, got {type(value)}")
        if value not in self._value_set:
            self._value_set.add(value)
            self._value_list.append(value)
            return True
        return False

    def to_list(self):
        return list(self._value_list)

    def is_complete(self):
        """True when every domain value has been reached."""
        return len(self._value_set) == len(DOMAIN)

    def _unary_close(self, fn, symbol, verbose):
        n = 0
        while n < len(self._value_list):
            new = fn(self._value_list[n])
            if self.add(new) and verbose:
                print(f"{len(self)}: {new.to_string()} = {symbol}{n}", file=sys.stderr)
            n += 1
        return self

    def _binary_close(self, fn, symbol, verbose):
        n = 0
        while n < len(self._value_list):
            m = 0
            while m <= n:
                for left, right in ((m, n), (n, m)):
                    new = fn(self._value_list[left], self._value_list[right])
                    if self.add(new) and verbose:
                        print(f"{len(self)}: {new.to_string()} = {left} {symbol} {right}",
                              file=sys.stderr)
                m += 1
            n += 1
        return self

    def negclose(self, verbose=False):
        """Close under negation. Returns self (for chaining)."""
        return self._unary_close(self.logic.not_, "~", verbose)

    def cycclose(self, verbose=False):
        """
        Close under cyclic negation.

        Raises:
            ValueError: If the logic has no cyclic negation
        """
        if not hasattr(self.logic, "cyc_neg"):
            raise ValueError(f"{self.logic.name} has no cyclic negation")
        return self._unary_close(self.logic.cyc_neg, "cyc ", verbose)

    def conjclose(self, verbose=False):
        return self._binary_close(self.logic.and_, "^", verbose)

    def disjclose(self, verbose=False):
        return self._binary_close(self.logic.or_, "v", verbose)

    def implclose(self, verbose=False):
        """Close under implication (operands in both orders)."""
        return self._binary_close(self.logic.implies, "->", verbose)

    def close(self, verbose=False):
        """
        Close under every operator of the logic until nothing new appears.

        Returns:
            self (for chaining)
        """
        steps = [self.negclose, self.conjclose, self.disjclose, self.implclose]
        if hasattr(self.logic, "cyc_neg"):
            steps.append(self.cycclose)

        while True:
            before = len(self)
            for step in steps:
                step(verbose=verbose)
            if verbose:
                print(f"Closure pass: {before} -> {len(self)} values", file=sys.stderr)
            if len(self) == before:
                break
        return self


# ============================================================================
# SECTION 5: ORDER POSETS
# ============================================================================

class TruthOrderPoset:
    """
    An ordering of the three values as a NetworkX DiGraph.

    Edges point from smaller to larger values.
    - 'truth': a <= b iff a v b = b, giving F < M < T
    - 'information': MAYBE carries no information and sits below both
      definite values, which are incomparable
    """

    def __init__(self, order_type="truth", logic=Trilean):
        """
        Build the poset.

        Args:
            order_type: 'truth' or 'information'
            logic: Logic class whose disjunction defines the truth order
                (default: Trilean)
        """
        if order_type == "truth":
            test_fn = lambda a, b: logic.or_(a, b) == b
        elif order_type == "information":
            test_fn = lambda a, b: a is Trinary.MAYBE
        else:
            raise ValueError(f"Unknown order_type: {order_type}")

        self.order_type = order_type
        self.values = list(DOMAIN)
        self.graph = nx.DiGraph()
        self.graph.add_nodes_from(self.values)
        for a in self.values:
            for b in self.values:
                if a != b and test_fn(a, b):
                    self.graph.add_edge(a, b)

    def transitive_reduction(self):
        """
        Return the transitive reduction of this poset (its Hasse diagram).

        Returns:
            TruthOrderPoset with reduced graph
        """
        reduced = TruthOrderPoset.__new__(TruthOrderPoset)
        reduced.order_type = self.order_type
        reduced.values = self.values
        reduced.graph = nx.transitive_reduction(self.graph)
        return reduced

    def leq(self, a, b):
        """True if a <= b in this order."""
        return a == b or self.graph.has_edge(a, b) or nx.has_path(self.graph, a, b)

    def predecessors(self, value):
        return list(self.graph.predecessors(value))

    def successors(self, value):
        return list(self.graph.successors(value))

    def minimal(self):
        return [v for v in self.values if self.graph.in_degree(v) == 0]

    def maximal(self):
        return [v for v in self.values if self.graph.out_degree(v) == 0]
