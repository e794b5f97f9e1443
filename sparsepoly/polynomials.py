"""Sparse polynomials of one variable.

A Polynomial is a list of Terms whose exponents strictly decrease from head to
tail.  Only terms that are present are stored, so x^1000 + 1 costs two terms.

Important functions:
 - add / subtract: merge two polynomials into a new one
 - evaluate: compute p(x) in floating point
 - to_string / equal: the canonical text form and the equality built on it
 - for_each: apply an in-place edit to every term
 - destroy: release every term of a polynomial

Equality is purely textual: two polynomials are equal iff `to_string` gives
the same characters for both.  So `+0x +1` and `+1` are *not* equal even
though they are the same function; use `normalize` first, or
`sparsepoly.solver.equivalent`, when that matters.

Subtraction does not compact interior cancellations: (x + 1) - x is
`+0x +1`, not `+1`.  Only a trailing (0, 0) term is ever dropped.
"""

import math
import sys

from sparsepoly.common import No
from sparsepoly.errors import InvalidInputError
from sparsepoly.logging import task, event
from sparsepoly.opts import Option
from sparsepoly.terms import Term, create_term

check_well_formed = Option("check-well-formed", bool, True, description="Reject add/subtract operands whose exponents are not strictly descending")

# What to_string returns for a polynomial with no terms.  It is deliberately
# not a valid arithmetic expression.
EMPTY = "List empty"

ADDITION    = "add"
SUBTRACTION = "subtract"

class Polynomial(object):
    """An ordered list of terms with strictly descending exponents.

    The constructor takes ownership of the given Term objects; it does not
    copy them.  Use `Polynomial.from_pairs` to build one from plain tuples.
    """
    __slots__ = ("terms",)

    def __init__(self, terms=()):
        self.terms = []
        for t in terms:
            self.append(t)

    @staticmethod
    def from_pairs(pairs):
        """Build a polynomial from (coefficient, exponent) pairs, in order."""
        return Polynomial(create_term(c, e) for (c, e) in pairs)

    def append(self, term):
        if not isinstance(term, Term):
            raise InvalidInputError("expected a Term, got {!r}".format(term))
        self.terms.append(term)

    def pairs(self):
        return [t.as_pair() for t in self.terms]

    def degree(self):
        """Exponent of the head term, or None for the empty polynomial."""
        if not self.terms:
            return None
        return self.terms[0].exponent

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __bool__(self):
        return bool(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return equal(self, other)

    # mutable (see for_each), so not hashable
    __hash__ = None

    def __str__(self):
        return to_string(self)

    def __repr__(self):
        return "Polynomial({!r})".format(self.terms)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self):
        return Polynomial(create_term(-t.coefficient, t.exponent) for t in self.terms)

    def __call__(self, x):
        return evaluate(self, x)

def destroy(polynomial):
    """Release every term of `polynomial`, head first.

    Destroying None or an already-empty polynomial does nothing.
    """
    if polynomial is None:
        return
    terms = polynomial.terms
    polynomial.terms = []
    terms.reverse()
    while terms:
        terms.pop()

def term_count(polynomial):
    if polynomial is None:
        return 0
    return len(polynomial.terms)

def copy(polynomial):
    """A new polynomial with new Term objects and the same contents."""
    return Polynomial(t.copy() for t in polynomial.terms)

def is_well_formed(polynomial):
    """Check that exponents strictly decrease from head to tail.

    Returns True, or a falsy No explaining the first violation.
    """
    terms = polynomial.terms
    for i in range(1, len(terms)):
        if terms[i].exponent >= terms[i-1].exponent:
            return No("exponent {} at position {} does not decrease from {} at position {}".format(
                terms[i].exponent, i, terms[i-1].exponent, i-1))
    return True

def normalize(polynomial):
    """A new polynomial without any zero-coefficient terms.

    This is never applied implicitly; add and subtract keep interior zeros.
    """
    return Polynomial(t.copy() for t in polynomial.terms if not t.is_zero())

def _render_term(term):
    s = "{:+}".format(term.coefficient)
    if term.exponent > 1:
        s += "x^{}".format(term.exponent)
    elif term.exponent == 1:
        s += "x"
    return s

def to_string(polynomial):
    """The canonical text form, e.g. "+4x^2 +2x -1".

    Every term is rendered, zero coefficients included ("+0x"), so that
    equality can tell them apart.  An empty polynomial gives EMPTY.
    """
    if polynomial is None or not polynomial.terms:
        return EMPTY
    return " ".join(_render_term(t) for t in polynomial.terms)

def print_polynomial(polynomial, file=None):
    """Print a human-readable form that leaves out zero-coefficient terms."""
    if file is None:
        file = sys.stdout
    if polynomial is None or not polynomial.terms:
        print(EMPTY, file=file)
        return
    print(" ".join(_render_term(t) for t in polynomial.terms if not t.is_zero()), file=file)

def evaluate(polynomial, x):
    """Sum of coefficient * x^exponent over all terms, head to tail.

    A power too large for a float counts as an infinity of the right sign,
    so the result may be inf, -inf or nan but evaluation never raises.
    """
    x = float(x)
    ret = 0.0
    if polynomial is None:
        return ret
    for t in polynomial.terms:
        try:
            ret += x ** t.exponent * t.coefficient
        except OverflowError:
            if t.coefficient == 0:
                continue
            negative = (t.coefficient < 0) != (x < 0 and t.exponent % 2 == 1)
            ret += -math.inf if negative else math.inf
    return ret

def equal(a, b):
    return to_string(a) == to_string(b)

def for_each(polynomial, transform):
    """Call transform(term) on every term, head to tail.

    A transform may leave a non-integral coefficient behind (halving, say);
    rendering and evaluation still work, but create_term would reject it.
    """
    if polynomial is None:
        return
    for t in polynomial.terms:
        transform(t)

def add(a, b):
    return _merge(a, b, ADDITION)

def subtract(a, b):
    return _merge(a, b, SUBTRACTION)

class _Result(object):
    """Output of a merge, built in a working (0, 0) terminal slot.

    Each emission fills the current slot; a fresh slot is opened only when the
    next emission arrives.  So at the end the last entry is either the last
    emitted term or, if nothing was emitted, the untouched (0, 0) slot.
    """

    def __init__(self):
        self.terms = [create_term(0, 0)]
        self.filled = False

    def emit(self, coefficient, exponent):
        if self.filled:
            self.terms.append(create_term(0, 0))
        slot = self.terms[-1]
        slot.coefficient = coefficient
        slot.exponent = exponent
        self.filled = True

    def finish(self):
        if self.terms[-1].is_sentinel():
            self.terms.pop()
            event("pruned trailing (0, 0) term")
        return Polynomial(self.terms)

def _check_operand(p, name):
    if not isinstance(p, Polynomial):
        raise InvalidInputError("{} is not a Polynomial: {!r}".format(name, p))
    if check_well_formed.value:
        wf = is_well_formed(p)
        if not wf:
            raise InvalidInputError("{} is not well-formed: {}".format(name, wf.msg))

def _merge(a, b, op):
    """Walk a and b in lockstep by descending exponent and combine them.

    An empty operand acts as zero.  Neither operand is modified; every term of
    the result is newly created.
    """
    assert op in (ADDITION, SUBTRACTION)
    _check_operand(a, "left operand")
    _check_operand(b, "right operand")

    sign = 1 if op == ADDITION else -1
    a_terms = a.terms
    b_terms = b.terms
    i = 0
    j = 0
    out = _Result()

    with task("merge", op=op, left=len(a_terms), right=len(b_terms)):
        while i < len(a_terms) and j < len(b_terms):
            x = a_terms[i]
            y = b_terms[j]
            if x.exponent > y.exponent:
                out.emit(x.coefficient, x.exponent)
                i += 1
            elif y.exponent > x.exponent:
                out.emit(sign * y.coefficient, y.exponent)
                j += 1
            else:
                out.emit(x.coefficient + sign * y.coefficient, x.exponent)
                i += 1
                j += 1

        # at most one of these has anything left
        for x in a_terms[i:]:
            out.emit(x.coefficient, x.exponent)
        for y in b_terms[j:]:
            out.emit(sign * y.coefficient, y.exponent)

        return out.finish()
