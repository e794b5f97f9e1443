"""Utility functions and classes shared by the sparsepoly modules.

Important functions and classes:
 - @typechecked: decorator to perform runtime typechecking of arguments
 - No: a falsy object carrying the reason for the "no"
"""

from functools import wraps
import inspect

from sparsepoly.errors import InvalidInputError

def check_type(value, ty, value_name="value"):
    """
    Verify that `value` is an instance of `ty`, raising InvalidInputError
    otherwise.  A ty of None does no checking.  `value_name` is the variable
    or expression that evaluates to `value`, for the diagnostic message.

    bool is not accepted where int is expected, even though it subclasses int.
    """
    if ty is None:
        return
    if not isinstance(value, ty) or (ty is int and isinstance(value, bool)):
        raise InvalidInputError("{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__))

def typechecked(f):
    """
    Use the @typechecked decorator on a function to check its arguments and
    return value against its annotations at run time.  The docstring for
    `check_type` describes how annotations should look.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

class No(object):
    """A falsy object with a message.

    This is useful if you want to return False with an associated reason."""
    def __init__(self, msg):
        self.msg = msg
    def __bool__(self):
        return False
    def __str__(self):
        return "no: {}".format(self.msg)
    def __repr__(self):
        return "No({!r})".format(self.msg)
