"""The Term record: one (coefficient, exponent) pair of a polynomial."""

from sparsepoly.common import typechecked
from sparsepoly.errors import AllocationError, InvalidInputError

class Term(object):
    """A term of the form coefficient*x^exponent.

    Terms are mutable so that `for_each` transforms can edit them in place.
    A zero coefficient is allowed but means "no term".
    """
    __slots__ = ("coefficient", "exponent")

    def __init__(self, coefficient, exponent):
        self.coefficient = coefficient
        self.exponent = exponent

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.coefficient == other.coefficient and self.exponent == other.exponent

    __hash__ = None

    def __repr__(self):
        return "Term({}, {})".format(self.coefficient, self.exponent)

    def as_pair(self):
        return (self.coefficient, self.exponent)

    def is_zero(self):
        return self.coefficient == 0

    def is_sentinel(self):
        return self.coefficient == 0 and self.exponent == 0

    def copy(self):
        return Term(self.coefficient, self.exponent)

@typechecked
def create_term(coefficient : int, exponent : int) -> Term:
    """Allocate one term.

    Raises InvalidInputError for a negative exponent or a field that is not an
    int (bools included), and AllocationError if the term cannot be allocated.
    """
    if exponent < 0:
        raise InvalidInputError("exponent must be non-negative, got {}".format(exponent))
    try:
        return Term(coefficient, exponent)
    except MemoryError as e:
        raise AllocationError("could not allocate term ({}, {})".format(coefficient, exponent)) from e
