# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""The multiset data structure

A multiset (or bag) is an unordered collection in which every element
carries a non-negative integer multiplicity. The multiset class below
is a dict that maps elements to their multiplicities. Elements that
are not stored have multiplicity zero.

Multiplicities that drop to zero are not purged right away. Call
multiset.clean to remove such stale entries. Hashing and comparisons
ignore them.
"""

import logging
from collections.abc import Mapping
from numbers import Integral

from . import display


class InvalidMultiplicity(ValueError):
    """Raised when an element is assigned a negative multiplicity."""


def _check_multiplicity(count):
    if not isinstance(count, Integral):
        raise TypeError("multiset multiplicities must be integers, got %r" % (count,))
    if count < 0:
        raise InvalidMultiplicity("multiplicity must be nonnegative, got %d" % count)


def _common_base(types):
    """Most specific class that all given types derive from"""
    first = next(iter(types))
    for base in first.__mro__:
        if all(issubclass(cls, base) for cls in types):
            return base
    return object


class multiset(dict):
    """A multiset implementation

    Elements are mapped to non-negative integer multiplicities.
    Multisets are created empty, from an iterable (repetitions become
    multiplicities), from a mapping of elements to multiplicities, or
    with multiset.of from a variable argument list:

    >>> multiset([1, 2, 2, 3, 3, 3])[3]
    3
    >>> multiset({'a': 1, 'z': 2}) == multiset.of('z', 'a', 'z')
    True

    Union and intersection take pointwise maxima and minima, and
    subset relations compare multiplicities pointwise.
    (c.f. https://en.wikipedia.org/wiki/Multiset)
    """
    def __init__(self, *args, **opts):
        if len(args) > 1:
            raise TypeError("multiset expects at most 1 argument, got %d" % len(args))
        super(multiset, self).__init__()
        arg = args[0] if args else ()
        if isinstance(arg, Mapping):
            self.update(arg)
        else:
            for item in arg:
                self.insert(item)
        self.update(opts)

    @classmethod
    def of(cls, *elements):
        """Create a multiset from the given elements"""
        return cls(elements)

    @property
    def domain(self):
        """The underlying domain (set)"""
        return set(item for item, count in self.items() if count > 0)

    @property
    def element_type(self):
        """The most specific common class of all elements

        Returns object for an empty multiset.
        """
        types = set(type(item) for item in self.domain)
        return _common_base(types) if types else object

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, super(multiset, self).__repr__())

    def __str__(self):
        return display.render(self)

    def __format__(self, spec):
        if not spec:
            return str(self)
        return display.render(self, spec)

    def __eq__(self, other):
        if isinstance(other, multiset):
            return len(self) == len(other) and self.issubset(other)
        elif isinstance(other, Mapping):
            return (all(other.get(item, 0) == count for item, count in self.items())
                    and all(self[item] == count for item, count in other.items()))
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        # zero entries are skipped, not purged
        return hash(frozenset((item, count) for item, count in self.items() if count))

    def __le__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.issubset(other) and self != other

    def __ge__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.issuperset(other) and self != other

    def __len__(self):
        return sum(self.values())

    def __contains__(self, item):
        return self[item] > 0

    def __getitem__(self, item):
        return self.get(item, 0)

    def __setitem__(self, item, count):
        _check_multiplicity(count)
        super(multiset, self).__setitem__(item, count)

    def __delitem__(self, item):
        if dict.__contains__(self, item):
            super(multiset, self).__delitem__(item)

    def get(self, item, default=0):
        """Multiplicity of item, or default if item is not stored"""
        return super(multiset, self).get(item, default)

    def set(self, item, count):
        """Set the multiplicity of item

        Raises InvalidMultiplicity for negative counts, in which
        case the multiset is left unchanged.
        """
        self[item] = count

    def insert(self, item, incr=1):
        """Increase the multiplicity of item by incr

        incr may be negative. The resulting multiplicity is clamped
        at zero. Returns the multiset itself.
        """
        if not isinstance(incr, Integral):
            raise TypeError("multiset increments must be integers, got %r" % (incr,))
        count = self[item] + incr
        if count < 0:
            logging.debug("Clamped multiplicity of %r at 0 (increment %d).", item, incr)
            count = 0
        super(multiset, self).__setitem__(item, count)
        return self

    def remove(self, item):
        """Remove item from the multiset, regardless of its multiplicity"""
        del self[item]
        return self

    def clean(self):
        """Purge all entries of multiplicity zero"""
        zeros = [item for item, count in self.items() if not count]
        for item in zeros:
            super(multiset, self).__delitem__(item)
        return self

    def update(self, *args, **opts):
        """update multiplicities with values from mappings

        All values are validated before any is written, so a failing
        update leaves the multiset unchanged.
        """
        counts = dict(*args, **opts)
        for count in counts.values():
            _check_multiplicity(count)
        super(multiset, self).update(counts)

    def setdefault(self, item, count=0):
        """Multiplicity of item, set to count if item is not stored"""
        _check_multiplicity(count)
        if not dict.__contains__(self, item):
            self[item] = count
        return self[item]

    @classmethod
    def fromkeys(cls, iterable, count=1):
        """Multiset in which every element of iterable has multiplicity count"""
        _check_multiplicity(count)
        result = cls()
        for item in iterable:
            result[item] = count
        return result

    def copy(self):
        return type(self)(self)

    def size(self):
        """Total number of elements, counting multiplicities"""
        return len(self)

    def to_set(self):
        """Set of elements with positive multiplicity"""
        return self.domain

    def elements(self):
        """List of all elements, repeated by multiplicity, in storage order"""
        return [item for item, count in self.items() for _ in range(count)]

    def sorted_elements(self):
        """Sorted list of all elements, repeated by multiplicity

        Raises TypeError if the elements cannot be ordered.
        """
        return sorted(self.elements())

    def to_list(self):
        """List of all elements, repeated by multiplicity

        The list is sorted if the elements can be ordered, and
        returned in storage order otherwise.
        """
        elements = self.elements()
        try:
            return sorted(elements)
        except TypeError as exc:
            logging.debug("Elements of %s are not orderable: %s", type(self).__name__, exc)
            return elements

    def issubset(self, other):
        """True if no element is more frequent in self than in other"""
        other = _as_multiset(other)
        return all(count <= other[item] for item, count in self.items())

    def issuperset(self, other):
        """True if no element is more frequent in other than in self"""
        return _as_multiset(other).issubset(self)

    def __or__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.union(other)

    __ror__ = __or__

    def __ior__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        for item, count in _as_multiset(other).items():
            if count > self[item]:
                self[item] = count
        return self

    def __and__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.intersection(other)

    __rand__ = __and__

    def __iand__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        result = self.intersection(other)
        self.clear()
        super(multiset, self).update(result)
        return self

    def __add__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        result = type(self)(self)
        result += other
        return result

    __radd__ = __add__

    def __iadd__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        for item, count in _as_multiset(other).items():
            self.insert(item, count)
        return self

    def __sub__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        result = type(self)(self)
        result -= other
        return result

    def __rsub__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return type(self)(other) - self

    def __isub__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        for item, count in _as_multiset(other).items():
            if self[item] > count:
                self[item] -= count
            else:
                del self[item]
        return self

    def __mul__(self, factor):
        if not isinstance(factor, Integral):
            return NotImplemented
        result = type(self)(self)
        result *= factor
        return result

    __rmul__ = __mul__

    def __imul__(self, factor):
        if not isinstance(factor, Integral):
            return NotImplemented
        _check_multiplicity(factor)
        if not factor:
            self.clear()
        else:
            for item in self:
                self[item] *= factor
        return self

    def union(self, *others):
        """The union (pointwise maximum) of self and all other multisets"""
        result = type(self)(self)
        for other in others:
            result |= _as_multiset(other)
        return result

    def intersection(self, *others):
        """The intersection (pointwise minimum) of self and all other multisets"""
        others = [_as_multiset(other) for other in others]
        result = type(self)()
        for item, count in self.items():
            count = min([count] + [other[item] for other in others])
            if count:
                result[item] = count
        return result

    def sum(self, *others):
        """The sum of self and all other multisets"""
        result = type(self)(self)
        for other in others:
            result += _as_multiset(other)
        return result

    def difference(self, *others):
        """The difference of self and all other multisets"""
        result = type(self)(self)
        for other in others:
            result -= _as_multiset(other)
        return result

    def symmetric_difference(self, *others):
        """The symmetric difference of self and all other multisets"""
        result = type(self)(self)
        for other in others:
            for item, count in _as_multiset(other).items():
                if result[item] > count:
                    result[item] -= count
                elif result[item] < count:
                    result[item] = count - result[item]
                else:
                    del result[item]
        return result


def _as_multiset(other):
    return other if isinstance(other, multiset) else multiset(other)


def union(first, second):
    """Pointwise maximum of two multisets"""
    return _as_multiset(first).union(second)


def intersect(first, second):
    """Pointwise minimum of two multisets over the elements of first"""
    return _as_multiset(first).intersection(second)


def is_subset(first, second):
    """True if every element of first is at most as frequent in second"""
    return _as_multiset(first).issubset(second)


def to_set(mset):
    """Set of elements with positive multiplicity"""
    return _as_multiset(mset).to_set()
