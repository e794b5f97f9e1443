"""Indented, timed log messages for polynomial operations.

Important functions:
 - task: a context manager wrapping one self-contained operation (a merge, a
   solver query, ...); nested tasks are indented under their parent
 - event: print a log message at the current indentation
 - dump_profile: write accumulated task durations to the `profile-path` file

Nothing is printed unless the `verbose` option is on.  Durations are always
accumulated so that a profile can be dumped after the fact.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from sparsepoly.opts import Option

verbose = Option("verbose", bool, False, description="Print a trace of polynomial operations")
profile_path = Option("profile-path", str, "/tmp/sparsepoly.profile", metavar="PATH", description="Where dump_profile writes task timings")

_times = defaultdict(float)
_counts = defaultdict(int)
_task_stack = []
_begin = datetime.datetime.now()

def log(string, file=None):
    if verbose.value:
        print(string, file=file if file is not None else sys.stdout)

def _format_kwargs(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

def task_begin(name, **kwargs):
    start = datetime.datetime.now()
    _task_stack.append((name, start))
    if not verbose.value:
        return
    indent = "  " * (len(_task_stack) - 1)
    log("{indent}{name}{kwargs}...".format(indent=indent, name=name, kwargs=_format_kwargs(kwargs)))

def task_end():
    end = datetime.datetime.now()
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (end - start).total_seconds()
    _times[key] += duration
    _counts[key] += 1
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}Finished {name} [duration={duration:.3}s]".format(indent=indent, name=name, duration=duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}{name}".format(indent=indent, name=name))

def task_count(*names):
    """How many times the task with the given nesting path has finished."""
    return _counts.get(tuple(names), 0)

def reset_profile():
    global _begin
    _times.clear()
    _counts.clear()
    _begin = datetime.datetime.now()

def dump_profile(path=None):
    """Write one line per task path, slowest first, and return the path."""
    if path is None:
        path = profile_path.value
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n".format(duration))
        f.write("Currently in: {}\n\n".format(", ".join(name for (name, start) in _task_stack)))
        for k in sorted(_times.keys(), key=_times.get, reverse=True):
            f.write("{:16.3}".format(_times[k]))
            f.write(" {:8d} ".format(_counts[k]))
            f.write(", ".join(k))
            f.write("\n")
    return path
