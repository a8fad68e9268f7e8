"""
trinary_core.py

Core data structures and operations for three-valued logic.

This module implements a closed three-valued domain and several logics over it:
- Trinary values are members of a closed enum: TRUE, MAYBE (indeterminate), FALSE
- Each logic is a class used as a static namespace of truth-table operators
- Priest (paraconsistent), Strong Kleene and Lukasiewicz L3 share one contract
  and differ only where their truth tables actually differ
- Trilean is the extended K3+ algebra (Kleene tables plus cyclic negation and
  boolean-returning modal classifiers); the operator sugar on Trinary uses it

The notation used to render and parse values is configurable at module level:
- Letters T/M/F (default)
- Kleene style T/U/F
- Numeric 1/½/0
- Words true/maybe/false
"""

from enum import Enum
from functools import reduce


# ============================================================================
# SECTION 0: NOTATION (rendering and parsing of values)
# ============================================================================

class Notation:
    """
    Symbol set used to render and parse trinary values.

    A notation only changes how values look as strings. It never changes
    what any operator computes.
    """

    def __init__(self, true_symbol, maybe_symbol, false_symbol, name="custom"):
        """
        Create a notation.

        Args:
            true_symbol: Symbol for TRUE (e.g., "T")
            maybe_symbol: Symbol for MAYBE (e.g., "M")
            false_symbol: Symbol for FALSE (e.g., "F")
            name: Label for the notation

        Raises:
            ValueError: If a symbol is empty or the symbols are not distinct
        """
        symbols = (true_symbol, maybe_symbol, false_symbol)
        for symbol in symbols:
            if not isinstance(symbol, str) or not symbol.strip():
                raise ValueError(f"Notation symbols must be non-empty strings, got {symbol!r}")
        if len(set(symbols)) != 3:
            raise ValueError(f"Notation symbols must be distinct, got {symbols}")

        self.name = name
        # Keyed by member name; the enum is defined below this class
        self._symbols = {"TRUE": true_symbol, "MAYBE": maybe_symbol, "FALSE": false_symbol}
        self._names = {symbol: member for member, symbol in self._symbols.items()}

    @classmethod
    def letters(cls):
        """T / M / F"""
        return cls("T", "M", "F", name="letters")

    @classmethod
    def kleene(cls):
        """T / U / F, as in Kleene's tables"""
        return cls("T", "U", "F", name="kleene")

    @classmethod
    def numeric(cls):
        """1 / ½ / 0, the Lukasiewicz degrees"""
        return cls("1", "½", "0", name="numeric")

    @classmethod
    def words(cls):
        return cls("true", "maybe", "false", name="words")

    def symbol(self, value):
        """Return the symbol for a Trinary value."""
        return self._symbols[value.name]

    def parse(self, string):
        """
        Look up a symbol of this notation.

        Returns:
            Member name ("TRUE", "MAYBE", "FALSE"), or None if the string
            is not one of this notation's symbols
        """
        return self._names.get(string)

    def __repr__(self):
        return (f"Notation({self._symbols['TRUE']!r}, {self._symbols['MAYBE']!r}, "
                f"{self._symbols['FALSE']!r}, name={self.name!r})")


# Global notation (module-level)
_current_notation = None


def get_notation():
    """Get the current notation, creating the default if needed."""
    global _current_notation
    if _current_notation is None:
        _current_notation = Notation.letters()
    return _current_notation


def set_notation(notation):
    """Set the global notation."""
    global _current_notation
    if not isinstance(notation, Notation):
        raise TypeError(f"Expected Notation, got {type(notation)}")
    _current_notation = notation


def reset_notation():
    """Reset to default (will be re-created on next access)."""
    global _current_notation
    _current_notation = None


# Accepted in from_string regardless of the current notation (lowercased)
_ALIASES = {
    "t": "TRUE", "true": "TRUE", "1": "TRUE",
    "f": "FALSE", "false": "FALSE", "0": "FALSE",
    "m": "MAYBE", "maybe": "MAYBE", "u": "MAYBE", "unknown": "MAYBE",
    "i": "MAYBE", "indeterminate": "MAYBE", "?": "MAYBE",
    "½": "MAYBE", "0.5": "MAYBE", "1/2": "MAYBE",
}

_DEGREES = {"FALSE": 0, "MAYBE": 0.5, "TRUE": 1}


# ============================================================================
# SECTION 1: TRINARY VALUE
# ============================================================================

class Trinary(Enum):
    """
    A three-valued truth value: TRUE, MAYBE (indeterminate) or FALSE.

    The enum is closed; Python booleans, None and strings are not members
    and must be converted explicitly with from_bool / from_string /
    from_degree, which reject anything outside the domain.

    Members refuse implicit conversion to bool. Collapse a value to a
    two-valued decision through a logic's truthy()/falsy() or a guard.
    """

    FALSE = 0
    MAYBE = 1
    TRUE = 2

    def __bool__(self):
        raise TypeError(
            f"{self!r} cannot be converted to bool; use a logic's truthy()/falsy() "
            "or a guard such as is_true()"
        )

    def __str__(self):
        return self.to_string()

    @property
    def degree(self):
        """Lukasiewicz degree of truth: 0, 0.5 or 1."""
        return _DEGREES[self.name]

    @property
    def is_definite(self):
        """True for TRUE and FALSE, False for MAYBE."""
        return self is not Trinary.MAYBE

    def to_string(self):
        """Render with the current notation."""
        return get_notation().symbol(self)

    @classmethod
    def from_string(cls, string):
        """
        Parse a value from a string.

        Accepts the current notation's symbols exactly, or any of the
        fixed aliases (case-insensitive): t/true/1, f/false/0,
        m/maybe/u/unknown/i/indeterminate/?/½/0.5.

        Raises:
            TypeError: If string is not a str
            ValueError: If the string names no trinary value
        """
        if not isinstance(string, str):
            raise TypeError(f"Expected str, got {type(string)}")
        string = string.strip()
        name = get_notation().parse(string)
        if name is None:
            name = _ALIASES.get(string.lower())
        if name is None:
            raise ValueError(f"Not a trinary value: {string!r}")
        return cls[name]

    @classmethod
    def from_bool(cls, value):
        """Convert a Python bool. Anything else (including None) is rejected."""
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value)}")
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def from_degree(cls, degree):
        """Convert a Lukasiewicz degree (0, 0.5 or 1)."""
        if isinstance(degree, bool) or not isinstance(degree, (int, float)):
            raise TypeError(f"Expected a number, got {type(degree)}")
        for name, value in _DEGREES.items():
            if degree == value:
                return cls[name]
        raise ValueError(f"Not a trinary degree: {degree!r} (valid degrees: 0, 0.5, 1)")

    # Operator sugar; forwards to the extended algebra unchanged

    def __invert__(self):
        """~a is negation."""
        return Trilean.not_(self)

    def __and__(self, other):
        """a & b is conjunction."""
        if not isinstance(other, Trinary):
            return NotImplemented
        return Trilean.and_(self, other)

    def __or__(self, other):
        """a | b is disjunction."""
        if not isinstance(other, Trinary):
            return NotImplemented
        return Trilean.or_(self, other)

    def __rshift__(self, other):
        """a >> b is implication."""
        if not isinstance(other, Trinary):
            return NotImplemented
        return Trilean.implies(self, other)

    def implies(self, other):
        if not isinstance(other, Trinary):
            raise TypeError(f"Expected Trinary, got {type(other)}")
        return Trilean.implies(self, other)

    def equivalent(self, other):
        if not isinstance(other, Trinary):
            raise TypeError(f"Expected Trinary, got {type(other)}")
        return Trilean.equivalence(self, other)


_T = Trinary.TRUE
_M = Trinary.MAYBE
_F = Trinary.FALSE

# Values in truth order, used for every truth-table enumeration
DOMAIN = (_F, _M, _T)


def true():
    """Return the TRUE value."""
    return Trinary.TRUE


def false():
    """Return the FALSE value."""
    return Trinary.FALSE


def maybe():
    """Return the indeterminate value."""
    return Trinary.MAYBE


indeterminate = maybe


def is_trinary(value):
    """Return True iff value is one of the three domain members."""
    return isinstance(value, Trinary)


# ============================================================================
# SECTION 2: LOGIC CONTRACT
# ============================================================================

# Tables shared by every logic in this module

_CONJUNCTION = {
    (_F, _F): _F, (_F, _M): _F, (_F, _T): _F,
    (_M, _F): _F, (_M, _M): _M, (_M, _T): _M,
    (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
}

_DISJUNCTION = {
    (_F, _F): _F, (_F, _M): _M, (_F, _T): _T,
    (_M, _F): _M, (_M, _M): _M, (_M, _T): _T,
    (_T, _F): _T, (_T, _M): _T, (_T, _T): _T,
}

_EQUIVALENCE = {
    (_F, _F): _T, (_F, _M): _M, (_F, _T): _F,
    (_M, _F): _M, (_M, _M): _M, (_M, _T): _M,
    (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
}

_POSSIBILITY = {_F: _F, _M: _T, _T: _T}

_CONTINGENCY = {_F: _F, _M: _T, _T: _F}


class Logic:
    """
    Operator contract for a three-valued logic.

    A logic is used as a namespace of class methods: pick the class at the
    call site (KleeneLogic.implies(a, b)) rather than instantiating it.

    Conjunction, disjunction, equivalence, possibility and contingency have
    the same table in every logic and are implemented here. Negation,
    implication and the is_true / is_false classifiers are where logics
    disagree, so each subclass supplies its own tables for them.

    No operator checks its arguments; values come from the Trinary enum.
    """

    name = "logic"
    reading = ""

    @classmethod
    def not_(cls, a):
        raise NotImplementedError(f"{cls.__name__} does not define negation")

    @classmethod
    def and_(cls, a, b):
        return _CONJUNCTION[a, b]

    @classmethod
    def or_(cls, a, b):
        return _DISJUNCTION[a, b]

    @classmethod
    def equivalence(cls, a, b):
        return _EQUIVALENCE[a, b]

    @classmethod
    def implies(cls, a, b):
        raise NotImplementedError(f"{cls.__name__} does not define implication")

    @classmethod
    def is_possible(cls, a):
        """M operator: "it is possible that...". FALSE only for FALSE."""
        return _POSSIBILITY[a]

    @classmethod
    def is_unknown(cls, a):
        """I operator: "it is contingent that...". TRUE only for MAYBE."""
        return _CONTINGENCY[a]

    @classmethod
    def is_true(cls, a):
        raise NotImplementedError(f"{cls.__name__} does not define is_true")

    @classmethod
    def is_false(cls, a):
        raise NotImplementedError(f"{cls.__name__} does not define is_false")

    @classmethod
    def truthy(cls, a):
        """is_true as a Python bool, for ordinary if statements."""
        return cls.is_true(a) is Trinary.TRUE

    @classmethod
    def falsy(cls, a):
        """is_false as a Python bool."""
        return cls.is_false(a) is Trinary.TRUE


# ============================================================================
# SECTION 3: PRIEST LOGIC (LP)
# ============================================================================

class PriestLogic(Logic):
    """
    Priest's logic of paradox.

    The third value is a glut: both true and false. Both classifiers
    therefore accept MAYBE.
    """

    name = "Priest"
    reading = "indeterminate is both true and false"

    _NEGATION = {_F: _T, _M: _M, _T: _F}

    _IMPLICATION = {
        (_F, _F): _T, (_F, _M): _T, (_F, _T): _T,
        (_M, _F): _M, (_M, _M): _M, (_M, _T): _T,
        (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
    }

    _IS_TRUE = {_F: _F, _M: _T, _T: _T}

    _IS_FALSE = {_F: _T, _M: _T, _T: _F}

    @classmethod
    def not_(cls, a):
        return cls._NEGATION[a]

    @classmethod
    def implies(cls, a, b):
        return cls._IMPLICATION[a, b]

    @classmethod
    def is_true(cls, a):
        """L operator. MAYBE counts as true."""
        return cls._IS_TRUE[a]

    @classmethod
    def is_false(cls, a):
        """MAYBE counts as false too."""
        return cls._IS_FALSE[a]


# ============================================================================
# SECTION 4: STRONG KLEENE LOGIC (K3)
# ============================================================================

class KleeneLogic(Logic):
    """
    Kleene's strong logic of indeterminacy.

    The third value is a gap: neither true nor false. Both classifiers
    reject MAYBE.
    """

    name = "Kleene"
    reading = "indeterminate is neither true nor false"

    _NEGATION = {_F: _T, _M: _M, _T: _F}

    _IMPLICATION = {
        (_F, _F): _T, (_F, _M): _T, (_F, _T): _T,
        (_M, _F): _M, (_M, _M): _M, (_M, _T): _T,
        (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
    }

    _IS_TRUE = {_F: _F, _M: _F, _T: _T}

    _IS_FALSE = {_F: _T, _M: _F, _T: _F}

    @classmethod
    def not_(cls, a):
        return cls._NEGATION[a]

    @classmethod
    def implies(cls, a, b):
        return cls._IMPLICATION[a, b]

    @classmethod
    def is_true(cls, a):
        return cls._IS_TRUE[a]

    @classmethod
    def is_false(cls, a):
        return cls._IS_FALSE[a]


# ============================================================================
# SECTION 5: LUKASIEWICZ LOGIC (L3)
# ============================================================================

class L3Logic(Logic):
    """
    Lukasiewicz's three-valued logic.

    Classifies like Kleene; implication differs only at MAYBE -> MAYBE,
    which is TRUE (implication is min(1, 1 - a + b) on degrees).
    """

    name = "L3"
    reading = "indeterminate is neither true nor false; unknown implies unknown"

    _NEGATION = {_F: _T, _M: _M, _T: _F}

    _IMPLICATION = {
        (_F, _F): _T, (_F, _M): _T, (_F, _T): _T,
        (_M, _F): _M, (_M, _M): _T, (_M, _T): _T,
        (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
    }

    _IS_TRUE = {_F: _F, _M: _F, _T: _T}

    _IS_FALSE = {_F: _T, _M: _F, _T: _F}

    @classmethod
    def not_(cls, a):
        return cls._NEGATION[a]

    @classmethod
    def implies(cls, a, b):
        return cls._IMPLICATION[a, b]

    @classmethod
    def is_true(cls, a):
        return cls._IS_TRUE[a]

    @classmethod
    def is_false(cls, a):
        return cls._IS_FALSE[a]


# ============================================================================
# SECTION 6: EXTENDED ALGEBRA (K3+)
# ============================================================================

class Trilean(Logic):
    """
    K3+: strong Kleene tables extended with cyclic negation and modal
    classifiers that return Python bools.

    This is the algebra behind the operators on Trinary (~, &, |, >>).

    Cyclic negation rotates TRUE -> MAYBE -> FALSE -> TRUE. It is not an
    involution: applying it twice moves a value one step back, three
    times returns it.
    """

    name = "K3+"
    reading = "strong Kleene with cyclic negation"

    _NEGATION = {_F: _T, _M: _M, _T: _F}

    _CYCLIC_NEGATION = {_T: _M, _M: _F, _F: _T}

    _IMPLICATION = {
        (_F, _F): _T, (_F, _M): _T, (_F, _T): _T,
        (_M, _F): _M, (_M, _M): _M, (_M, _T): _T,
        (_T, _F): _F, (_T, _M): _M, (_T, _T): _T,
    }

    _IS_TRUE = {_F: _F, _M: _F, _T: _T}

    _IS_FALSE = {_F: _T, _M: _F, _T: _F}

    @classmethod
    def not_(cls, a):
        return cls._NEGATION[a]

    @classmethod
    def cyc_neg(cls, a):
        return cls._CYCLIC_NEGATION[a]

    @classmethod
    def implies(cls, a, b):
        return cls._IMPLICATION[a, b]

    @classmethod
    def is_true(cls, a):
        return cls._IS_TRUE[a]

    @classmethod
    def is_false(cls, a):
        return cls._IS_FALSE[a]

    @classmethod
    def possible(cls, a):
        """Possibility as a bool: False only for FALSE."""
        return a is not Trinary.FALSE

    @classmethod
    def necessary(cls, a):
        """Necessity as a bool: True only for TRUE."""
        return a is Trinary.TRUE

    @classmethod
    def is_exactly_indeterminate(cls, a):
        return a is Trinary.MAYBE


# The three named logics plus the extended algebra, in presentation order
LOGICS = (PriestLogic, KleeneLogic, L3Logic, Trilean)


# ============================================================================
# SECTION 7: GUARDS
# ============================================================================
#
# Membership tests over arbitrary Python objects. They never raise, so they
# are safe in `if` statements and `case ... if` guards.

def is_true(value):
    """True iff value is the TRUE member."""
    return value is Trinary.TRUE


def is_false(value):
    """True iff value is the FALSE member. Python False is not."""
    return value is Trinary.FALSE


def is_maybe(value):
    return value is Trinary.MAYBE


def is_possible(value):
    """True iff value is a trinary value other than FALSE."""
    return is_trinary(value) and value is not Trinary.FALSE


# ============================================================================
# SECTION 8: CONVENIENCE FUNCTIONS
# ============================================================================

def conjoin_all(values, logic=Trilean):
    """
    Conjunction of any number of values.

    Args:
        values: iterable of Trinary values
        logic: Logic class supplying and_ (default: Trilean)

    Returns:
        Trinary: TRUE for an empty iterable
    """
    return reduce(logic.and_, values, Trinary.TRUE)


def disjoin_all(values, logic=Trilean):
    """
    Disjunction of any number of values.

    Returns:
        Trinary: FALSE for an empty iterable
    """
    return reduce(logic.or_, values, Trinary.FALSE)


def parse_values(strings):
    """
    Parse several values.

    Args:
        strings: a whitespace/comma separated string, or an iterable of strings

    Returns:
        list of Trinary
    """
    if isinstance(strings, str):
        strings = strings.replace(",", " ").split()
    return [Trinary.from_string(s) for s in strings]


def values_to_string(values):
    """Render an iterable of values as a space separated string."""
    return " ".join(v.to_string() for v in values)
