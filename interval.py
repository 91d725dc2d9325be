#
# interval.py
#

import logging

LOG = logging.getLogger(__name__)

# A subinterval is one contiguous set of non-negative integers, or the
# wildcard which matches every integer:
#
# n     Bounded(n, 1)          {n}
# a-b   Bounded(a, b - a + 1)  {a, a+1, ..., b}
# n-    Unbounded(n)           {n, n+1, ...}
# *     Wildcard()             everything
#
# The 'count' attribute keeps the compact encoding used in the textual
# contract: 1 is a single value, >1 is a closed range, 0 is unbounded.
#
class SubInterval:
    '''Base class for all subinterval objects'''

    iswildcard = False
    isunbounded = False

    @classmethod
    def _make(cls, key, **fields):
        self = object.__new__(cls)
        object.__setattr__(self, 'key', key)
        for name, value in fields.items():
            object.__setattr__(self, name, value)

        return self

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, self.key[1:])

    def contains(self, value):
        raise NotImplementedError('contains')

    def __contains__(self, value):
        return self.contains(value)

    def __eq__(self, other):
        if not isinstance(other, SubInterval):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self)


class Bounded(SubInterval):
    '''A single value (count == 1) or a closed range of values (count > 1)'''

    def __new__(cls, start, count=1):
        if start < 0:
            raise ValueError(f'Subinterval start must be non-negative, got {start}')
        if count < 1:
            raise ValueError(f'Bounded subinterval count must be positive, got {count}')

        return cls._make((cls, start, count), start=start, count=count)

    @classmethod
    def span(cls, start, end):
        ''' Create the subinterval covering start..end inclusive '''
        return cls(start, end - start + 1)

    @property
    def end(self):
        return self.start + self.count - 1

    def contains(self, value):
        return self.start <= value <= self.end

    def __str__(self):
        if self.count == 1:
            return '%d' % self.start
        return '%d-%d' % (self.start, self.end)


class Unbounded(SubInterval):
    '''Half-open range: start and every integer above it'''

    isunbounded = True
    count = 0
    end = None

    def __new__(cls, start):
        if start < 0:
            raise ValueError(f'Subinterval start must be non-negative, got {start}')

        return cls._make((cls, start), start=start)

    def contains(self, value):
        return value >= self.start

    def __str__(self):
        return '%d-' % self.start


class Wildcard(SubInterval):
    '''Matches every integer'''

    iswildcard = True
    start = 0
    count = 0
    end = None

    def __new__(cls):
        return cls._make((cls,))

    def contains(self, value):
        return True

    def __str__(self):
        return '*'


def merge_intervals(intervals):
    ''' Merge subintervals into the fewest disjoint ones, ordered by start '''

    if not intervals:
        return []

    # The wildcard swallows everything else
    #
    if any(ival.iswildcard for ival in intervals):
        return [Wildcard()]

    # Sort a copy; the caller's sequence is left as it was. sorted() is stable
    # so equal starts keep their relative order.
    #
    ordered = sorted(intervals, key=lambda x: x.start)

    merged = []
    current = ordered[0]

    for ival in ordered[1:]:
        # Nothing extends past infinity
        #
        if current.isunbounded:
            break

        # Overlapping or touching: fold ival into current
        #
        if ival.start - current.end <= 1:
            if ival.isunbounded:
                LOG.debug('Merge %s and %s into %d-', current, ival, current.start)
                current = Unbounded(current.start)
                break

            if ival.end > current.end:
                LOG.debug('Merge %s and %s into %d-%d', current, ival, current.start, ival.end)
                current = Bounded.span(current.start, ival.end)

        # A gap of at least one value: current is final
        #
        else:
            merged.append(current)
            current = ival
            if current.isunbounded:
                break

    merged.append(current)

    return merged
