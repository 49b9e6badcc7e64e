"""Named combining functions usable from the command line."""
import operator


def concat(acc, val):
    return list(acc) + list(val)


def count(acc, val):
    acc = dict(acc or {})
    acc[val] = acc.get(val, 0) + 1
    return acc


def last(acc, val):
    return val


OPERATORS = {
    "add": operator.add,
    "mul": operator.mul,
    "min": lambda acc, val: min(acc, val),
    "max": lambda acc, val: max(acc, val),
    "concat": concat,
    "count": count,
    "last": last,
}

# seed used when the operator cannot start from the first element
DEFAULT_INITIAL = {
    "count": {},
}


def get_operator(name):
    try:
        return OPERATORS[name]
    except KeyError:
        raise KeyError(f"Unknown operator '{name}', choose one of {', '.join(sorted(OPERATORS))}") from None
