"""Semantic comparison of polynomials using Z3.

`polynomials.equal` compares rendered strings, so it reports `+0x +1` and `+1`
as different.  The functions here answer the mathematical question instead:
do two polynomials agree at every real x?

Important functions:
 - find_difference: search for a real x where two polynomials disagree
 - equivalent: check whether no such x exists
"""

from fractions import Fraction
import threading

import z3

from sparsepoly.logging import task, event
from sparsepoly.opts import Option
from sparsepoly.polynomials import subtract

solver_timeout = Option("solver-timeout", int, 0, metavar="MS", description="Timeout for each Z3 query in milliseconds (0 means no timeout)")

# Z3 contexts are not thread safe; each query gets its own, created under
# this lock.
_LOCK = threading.RLock()

class SolverReportedUnknown(Exception):
    pass

def _monomial(x, exponent):
    if exponent == 0:
        return None
    if exponent == 1:
        return x
    return x ** exponent

def to_z3(polynomial, x, ctx):
    """Encode `polynomial` as a Z3 real expression in the variable x."""
    summands = []
    for t in polynomial.terms:
        m = _monomial(x, t.exponent)
        c = z3.RealVal(t.coefficient, ctx)
        summands.append(c if m is None else c * m)
    if not summands:
        return z3.RealVal(0, ctx)
    if len(summands) == 1:
        return summands[0]
    return z3.Sum(summands)

def _to_python_number(value):
    if z3.is_algebraic_value(value):
        value = value.approx(20)
    return float(Fraction(value.as_fraction()))

def find_difference(a, b, timeout=None):
    """Return a real x with a(x) != b(x), or None if they are the same function.

    Raises SolverReportedUnknown if Z3 cannot decide.
    """
    if timeout is None:
        timeout = solver_timeout.value
    diff = subtract(a, b)
    with _LOCK:
        ctx = z3.Context()
        solver = z3.Solver(ctx=ctx)
        if timeout:
            solver.set("timeout", int(timeout))
        x = z3.Real("x", ctx)
        solver.add(to_z3(diff, x, ctx) != z3.RealVal(0, ctx))
        with task("invoke Z3", terms=len(diff)):
            res = solver.check()
        if res == z3.unsat:
            return None
        if res == z3.unknown:
            raise SolverReportedUnknown("z3 reported unknown: {}".format(solver.reason_unknown()))
        model = solver.model()
        value = model.eval(x, model_completion=True)
        witness = _to_python_number(value)
        event("polynomials differ at x={}".format(witness))
        return witness

def equivalent(a, b, timeout=None):
    """Whether a(x) == b(x) for every real x."""
    return find_difference(a, b, timeout=timeout) is None
