"""Sparse sequences with holes and shared defaults.

A SparseArray has a length and a set of own elements. Positions below the
length without an own element are holes. An optional defaults mapping, which
may be shared between many arrays, supplies values for reads at positions the
array does not hold itself; those values are never own elements.
"""
from .func import OMITTED, reduce


class _Hole:
    def __repr__(self):
        return "<hole>"


HOLE = _Hole()


class SparseArray:
    def __init__(self, values=(), length=None, defaults=None):
        """Create an array from values, HOLE entries become holes.

        Arguments:
        values - iterable of elements
        length - total length, pads with trailing holes when larger than values
        defaults - mapping of index to value consulted for positions without an own element
        """
        self._elements = {}
        count = 0
        for i, v in enumerate(values):
            if v is not HOLE:
                self._elements[i] = v
            count = i + 1

        if length is not None:
            if length < count:
                raise ValueError(f"length {length} is shorter than the {count} values given")
            count = length

        self._length = count
        self.defaults = defaults if defaults is not None else {}

    def __len__(self):
        return self._length

    def _normalize(self, index):
        if not isinstance(index, int):
            raise TypeError(f"indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._length
        return index

    def has_own(self, index):
        return index in self._elements

    def __getitem__(self, index):
        index = self._normalize(index)
        if index in self._elements:
            return self._elements[index]
        if index in self.defaults:
            return self.defaults[index]
        if 0 <= index < self._length:
            return None
        raise IndexError("SparseArray index out of range")

    def __setitem__(self, index, value):
        index = self._normalize(index)
        if index < 0:
            raise IndexError("SparseArray assignment index out of range")
        self._elements[index] = value
        if index >= self._length:
            self._length = index + 1

    def __delitem__(self, index):
        index = self._normalize(index)
        if not 0 <= index < self._length:
            raise IndexError("SparseArray deletion index out of range")
        self._elements.pop(index, None)

    def __iter__(self):
        for i in range(self._length):
            yield self[i]

    def __eq__(self, other):
        if not isinstance(other, SparseArray):
            return NotImplemented
        return self._length == other._length and self._elements == other._elements

    def __repr__(self):
        items = ", ".join(repr(self._elements[i]) if i in self._elements else repr(HOLE) for i in range(self._length))
        return f"SparseArray([{items}])"

    def append(self, value):
        self._elements[self._length] = value
        self._length += 1

    def own_indices(self):
        return sorted(self._elements)

    def reduce(self, func, initial=OMITTED):
        return reduce(self, func, initial)
