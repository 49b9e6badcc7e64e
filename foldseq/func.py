import inspect
from collections import namedtuple

Step = namedtuple("Step", ["index", "element", "accumulator"])


class _Omitted:
    """Marker for an initial value that was not given. Distinct from None."""

    def __repr__(self):
        return "OMITTED"

    def __bool__(self):
        return False


OMITTED = _Omitted()


class EmptyReduceError(TypeError):
    def __init__(self, msg="reduce of empty sequence with no initial value"):
        super().__init__(msg)


def has_index(seq, index):
    """True when seq holds an own element at index.

    Sequences that know about holes expose has_own(), anything else is
    considered dense and checked against its current length.
    """
    has_own = getattr(seq, "has_own", None)
    if has_own is not None:
        return has_own(index)
    return 0 <= index < len(seq)


def _arity(func):
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 4

    count = 0
    for p in params:
        if p.kind == p.VAR_POSITIONAL:
            return 4
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(count, 4)


def reduce(sequence, func, initial=OMITTED):
    """Fold sequence into a single value.

    func is called as func(accumulator, element, index, sequence) for every
    present element, in ascending index order. Functions declaring fewer
    positional parameters get only the leading arguments.

    Arguments:
    sequence - object supporting len() and integer indexing, not None
    func - combining function
    initial - seed value, when OMITTED the first present element is used

    raises:
    TypeError - sequence is None or func is not callable
    EmptyReduceError - no present element and no initial value
    """
    if sequence is None:
        raise TypeError("reduce called on None")

    length = len(sequence)

    if not callable(func):
        raise TypeError(f"{func!r} is not callable")

    nargs = _arity(func)

    index = 0
    if initial is OMITTED:
        while index < length and not has_index(sequence, index):
            index += 1
        if index >= length:
            raise EmptyReduceError()
        acc = sequence[index]
        index += 1
    else:
        acc = initial

    while index < length:
        if has_index(sequence, index):
            args = (acc, sequence[index], index, sequence)
            acc = func(*args[:nargs])
        index += 1

    return acc


def foldl(func, init, seq):
    return reduce(seq, lambda acc, val: func(acc, val), init)


def trace(sequence, func, initial=OMITTED):
    """Fold like reduce() and record every step.

    Returns a tuple (result, steps) where steps is a list of Step(index, element, accumulator),
    accumulator being the value after the combining call. When initial is omitted
    the seed element is recorded first.
    """
    if sequence is None:
        raise TypeError("reduce called on None")
    if not callable(func):
        raise TypeError(f"{func!r} is not callable")

    steps = []
    nargs = _arity(func)

    def recording(acc, element, index, seq):
        if initial is OMITTED and not steps:
            seed = _seed_index(seq, index)
            steps.append(Step(seed, acc, acc))
        args = (acc, element, index, seq)
        acc = func(*args[:nargs])
        steps.append(Step(index, element, acc))
        return acc

    result = reduce(sequence, recording, initial)

    if initial is OMITTED and not steps:
        # single present element, func was never called
        seed = _seed_index(sequence, len(sequence))
        steps.append(Step(seed, result, result))

    return result, steps


def _seed_index(seq, stop):
    for i in range(stop):
        if has_index(seq, i):
            return i
    return None  # pragma: no cover
