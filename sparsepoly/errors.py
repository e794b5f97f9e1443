"""Exceptions raised by sparsepoly.

All of them derive from PolynomialError, so callers can catch the whole
family at once.  The concrete classes also derive from the closest builtin
(MemoryError, ValueError) for callers that already handle those.
"""

class PolynomialError(Exception):
    pass

class AllocationError(PolynomialError, MemoryError):
    """A term could not be created."""
    pass

class InvalidInputError(PolynomialError, ValueError):
    """A term or polynomial does not satisfy the library's preconditions.

    Raised for terms with a non-integer coefficient or a negative exponent,
    and for operands to add/subtract whose exponents are not strictly
    descending.
    """
    pass
