"""Module-local options for sparsepoly.

Each sparsepoly module that has a tunable setting declares an Option for it
right next to the code that reads it:

    check_well_formed = Option("check-well-formed", bool, True)
    ...
    if check_well_formed.value:
        ...

An embedding program can collect every declared option into its own argparse
parser with `setup` and apply the parsed values with `read`.  Tests use
`snapshot` and `restore` to change settings temporarily.
"""

# Declared options, by name, in declaration order.
_OPTS = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        assert name not in _OPTS, "option {} declared twice".format(name)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = default
        self.metavar = metavar
        _OPTS[name] = self

    def __bool__(self):
        raise Exception(
            "Option {!r} used as a boolean; read `.value` instead.".format(self.name))

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    def flag(self):
        """The command-line flag; bool options that default to True are negated."""
        if self.type is bool and self.default:
            return "--no-" + self.name
        return "--" + self.name

def all_options():
    return list(_OPTS.values())

def get(name):
    return _OPTS[name]

def setup(parser):
    for o in _OPTS.values():
        if o.type is bool:
            parser.add_argument(o.flag(), action="store_true", default=False, help=o.description)
        else:
            help = "default={!r}".format(o.default)
            if o.description:
                help = "{} ({})".format(o.description, help)
            parser.add_argument(o.flag(), metavar=o.metavar, type=o.type, default=o.default, help=help)

def read(args):
    for o in _OPTS.values():
        value = getattr(args, o.flag()[2:].replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.value = o.type(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { name : o.value for name, o in _OPTS.items() }

def restore(snap):
    """Set option values from a snapshot; names not declared are ignored."""
    for name, value in snap.items():
        if name in _OPTS:
            _OPTS[name].value = value
