'''
:class:`CountedMultiset` is a set that remembers how many times each of its
members was added. Membership, equality and the set-algebra predicates work on
the distinct elements, while :meth:`~CountedMultiset.add` and
:meth:`~CountedMultiset.remove` keep an occurrence count for each of them.

>>> vowels = CountedMultiset("aeiou")
>>> vowels.add("a")
>>> len(vowels)
5
>>> vowels.count_for_element("a")
2
>>> vowels.remove("a")
'a'
>>> vowels.count_for_element("a")
1
>>> vowels.remove("e", always=True)
'e'
>>> "e" in vowels
False

'''
import logging
from functools import reduce as _reduce

from .base import check_count

logger = logging.getLogger(__name__)


class CountedMultiset(object):
    '''
    Implements a counted set on top of a dictionary mapping each element
    to the number of times it has been added.

    A stored count is always at least 1. When an element's count would
    drop to 0, the element is deleted instead.

    Attributes
    ----------
    minimum_capacity: int
        The capacity hint this set was created with. It does not limit the
        number of elements.
    '''

    def __init__(self, iterable=None, minimum_capacity=0):
        self.minimum_capacity = check_count(minimum_capacity, "minimum_capacity")
        self._contents = {}
        if iterable is not None:
            self.extend(iterable)

    @classmethod
    def from_elements(cls, *elements):
        '''
        Create a set from its arguments, as a literal list would.

        >>> CountedMultiset.from_elements("A", "A", "B").count_for_element("A")
        2
        '''
        return cls(elements)

    @classmethod
    def from_counts(cls, mapping):
        '''
        Create a set from a mapping of element to occurrence count.

        Parameters
        ----------
        mapping: dict
            Elements with a count of 0 are skipped.

        Returns
        -------
        CountedMultiset

        Raises
        ------
        CountedSetError:
            If a count is negative or not an integer
        '''
        inst = cls()
        for element, count in mapping.items():
            if check_count(count):
                inst._contents[element] = count
        return inst

    def copy(self):
        dup = self.__class__(minimum_capacity=self.minimum_capacity)
        dup._contents = dict(self._contents)
        return dup

    __copy__ = copy

    @property
    def count(self):
        '''The number of distinct elements in the set'''
        return len(self._contents)

    @property
    def total(self):
        '''The number of occurrences of all elements in the set'''
        return sum(self._contents.values())

    @property
    def is_empty(self):
        return not self._contents

    @property
    def elements(self):
        '''The distinct elements of the set as a :class:`list`'''
        return list(self._contents)

    def contains(self, element):
        return self._contents.get(element, 0) > 0

    def count_for_element(self, element):
        '''
        Returns the number of times `element` occurs in the set, or
        0 if it is not a member.
        '''
        return self._contents.get(element, 0)

    def any_element(self):
        '''
        Returns an arbitrary member of the set, or :const:`None` if the
        set is empty. The same element is returned until the set changes.
        '''
        for element in self._contents:
            return element
        return None

    def items(self):
        return list(self._contents.items())

    def expanded(self):
        '''
        Returns a :class:`list` holding each element as many times as it
        occurs in the set. Copies of the same element are adjacent.

        >>> sorted(CountedMultiset("AAABBC").expanded())
        ['A', 'A', 'A', 'B', 'B', 'C']
        '''
        result = []
        for element, count in self._contents.items():
            result.extend([element] * count)
        return result

    def add(self, element, *elements):
        '''
        Add one occurrence of each argument to the set, in order.
        '''
        contents = self._contents
        contents[element] = contents.get(element, 0) + 1
        for element in elements:
            contents[element] = contents.get(element, 0) + 1

    def append(self, element):
        self.add(element)

    def extend(self, iterable):
        '''Add every item of `iterable`, once per occurrence'''
        for element in iterable:
            self.add(element)

    def reserve_capacity(self, n):
        # dict grows on demand, only the hint is kept
        self.minimum_capacity = max(self.minimum_capacity, check_count(n, "capacity"))

    def remove(self, element, always=False):
        '''
        Remove `element` from the set.

        Parameters
        ----------
        element: object
            The element to remove
        always: bool, optional
            If :const:`True`, delete every occurrence of `element`. Otherwise
            remove a single occurrence, deleting the element only when its
            count reaches zero. Defaults to :const:`False`

        Returns
        -------
        object:
            `element` if it was a member of the set, else :const:`None`
        '''
        count = self._contents.get(element, 0)
        if count < 1:
            return None
        if always or count == 1:
            del self._contents[element]
        else:
            self._contents[element] = count - 1
        return element

    def remove_all(self):
        logger.debug("Discarding %d elements", len(self._contents))
        self._contents = {}

    def capacity_merge(self, other):
        '''
        Raise the count of each element of `other` in this set to the larger
        of the two counts. Counts are never lowered, and elements which are
        not members of `other` are left as they are.

        Unlike :meth:`union_set`, counts are not summed.

        Parameters
        ----------
        other: CountedMultiset
        '''
        logger.debug("Merging capacity of %d elements", len(other._contents))
        contents = self._contents
        for element, count in other._contents.items():
            if count > contents.get(element, 0):
                contents[element] = count

    def filter(self, include_element):
        '''
        Returns a new set of the distinct elements `x` for which
        `include_element(x)` is true. Each survivor is added once, so the
        original counts are not kept.
        '''
        return self.__class__(x for x in self._contents if include_element(x))

    def map(self, transform):
        '''
        Returns a new set built by adding `transform(x)` once for each
        distinct element `x`. Elements which transform to the same value
        are counted together.
        '''
        return self.__class__(transform(x) for x in self._contents)

    def reduce(self, initial, combine):
        '''
        Fold `combine(accumulator, x)` over the distinct elements of the
        set, starting from `initial`.
        '''
        return _reduce(combine, self, initial)

    # Set Operations

    def is_equal_to_set(self, other):
        return self._contents == other._contents

    def intersects_with_set(self, other):
        for element in self:
            if other.contains(element):
                return True
        return False

    def is_subset_of_set(self, other):
        for element in self:
            if not other.contains(element):
                return False
        return True

    def is_superset_of_set(self, other):
        return other.is_subset_of_set(self)

    def union_set(self, other):
        '''
        Add each distinct element of `other` to this set once, regardless
        of its count in `other`.
        '''
        logger.debug("Union with %d elements", len(other._contents))
        for element in other:
            self.add(element)

    def subtract_set(self, other, always_remove=False):
        '''
        Call :meth:`remove` once for each distinct element of `other`.

        Parameters
        ----------
        other: CountedMultiset
        always_remove: bool, optional
            Passed to :meth:`remove` as `always`. Defaults to :const:`False`
        '''
        logger.debug("Subtracting %d elements", len(other._contents))
        for element in other:
            self.remove(element, always=always_remove)

    def intersect_set(self, other):
        '''
        Keep only the members of this set which are also members of `other`.
        As with :meth:`filter`, each survivor is left with a count of 1.
        '''
        logger.debug("Intersecting with %d elements", len(other._contents))
        self._contents = self.filter(other.contains)._contents

    def set_by_union_with_set(self, other):
        result = other.copy()
        result.extend(self)
        return result

    def set_by_intersection_with_set(self, other):
        result = other.copy()
        result.intersect_set(self)
        return result

    def set_by_subtracting_set(self, other, always_remove=False):
        result = self.copy()
        result.subtract_set(other, always_remove=always_remove)
        return result

    # Python protocols

    def __len__(self):
        return len(self._contents)

    def __bool__(self):
        return bool(self._contents)

    def __contains__(self, element):
        return self.contains(element)

    def __getitem__(self, element):
        return self.count_for_element(element)

    def __iter__(self):
        '''
        Returns an iterator over the distinct elements of the set as they
        were when iteration began.
        '''
        for element in list(self._contents):
            yield element

    def __iadd__(self, other):
        if isinstance(other, CountedMultiset):
            self.union_set(other)
        else:
            self.add(other)
        return self

    def __add__(self, other):
        if not isinstance(other, CountedMultiset):
            return NotImplemented
        return self.set_by_union_with_set(other)

    def __eq__(self, other):
        if not isinstance(other, CountedMultiset):
            return NotImplemented
        return self.is_equal_to_set(other)

    __hash__ = None

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.elements)

    __str__ = __repr__


#: Alias of :class:`CountedMultiset`
CountedSet = CountedMultiset

__all__ = ["CountedMultiset", "CountedSet"]
