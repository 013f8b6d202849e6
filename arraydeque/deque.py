"""Array-backed double-ended queue.

An ArrayDeque keeps its elements in a single ring of slots (see
storage.py) instead of a linked list of blocks, so that indexing is O(1)
anywhere in the deque while pushes and pops at both ends stay O(1)
amortized.  The ring is grown and shrunk by the class-level 'policy'
(capacity.py).

Bounded deques (maxlen is not None) never grow beyond maxlen elements: a
push on a full bounded deque first discards one element from the opposite
end, exactly like collections.deque.
"""

import operator
from collections import deque as _collections_deque
from operator import index as _index
from reprlib import recursive_repr as _recursive_repr
from types import GenericAlias as _GenericAlias

from arraydeque import indexing
from arraydeque.capacity import CapacityPolicy
from arraydeque.config.dequeoption import get_deque_config
from arraydeque.rotation import rotate as _rotate
from arraydeque.storage import CircularStorage


default_config = get_deque_config()
default_config.freeze()


class Lock(object):
    pass


class ArrayDeque(object):
    """ArrayDeque([iterable[, maxlen]]) --> ArrayDeque object

A list-like sequence optimized for data accesses near its endpoints."""

    __slots__ = ('_storage', '_maxlen', '_lock', '__weakref__')

    policy = CapacityPolicy.from_config(default_config)

    def __new__(cls, *args, **kwds):
        self = super(ArrayDeque, cls).__new__(cls)
        self._storage = CircularStorage(cls.policy.initial_capacity())
        self._maxlen = None
        # lightweight locking: any modification to the content of the deque
        # sets the lock to None.  Taking an iterator sets it to a non-None
        # value.  The iterator can check if further modifications occurred
        # by checking if the lock still has the same non-None value.
        self._lock = None
        return self

    def __init__(self, iterable=(), maxlen=None):
        if maxlen is not None:
            maxlen = _index(maxlen)
            if maxlen < 0:
                raise ValueError("maxlen must be non-negative")
        self._maxlen = maxlen
        if self._storage.length > 0:
            self.clear()
        if iterable is not None:
            self.extend(iterable)

    def _modified(self):
        self._lock = None

    def _getlock(self):
        if self._lock is None:
            self._lock = Lock()
        return self._lock

    def _checklock(self, lock):
        if lock is not self._lock:
            raise RuntimeError("deque mutated during iteration")

    @property
    def maxlen(self):
        "maximum size of a deque or None if unbounded"
        return self._maxlen

    # bounded eviction: a push on a full bounded deque drops one element
    # from the opposite end first.  Neither trim reflows the ring, the
    # push that follows reuses the freed slot.

    def _trimleft(self):
        self._storage.pop_left()

    def _trimright(self):
        self._storage.pop_right()

    def append(self, x):
        "Add an element to the right side of the deque."
        storage = self._storage
        maxlen = self._maxlen
        if maxlen is not None and storage.length >= maxlen:
            if maxlen == 0:
                return
            self._trimleft()
        else:
            self.policy.make_room(storage)
        storage.push_right(x)
        self._modified()

    def appendleft(self, x):
        "Add an element to the left side of the deque."
        storage = self._storage
        maxlen = self._maxlen
        if maxlen is not None and storage.length >= maxlen:
            if maxlen == 0:
                return
            self._trimright()
        else:
            self.policy.make_room(storage)
        storage.push_left(x)
        self._modified()

    def extend(self, iterable):
        "Extend the right side of the deque with elements from the iterable"
        # Handle case where id(deque) == id(iterable)
        if iterable is self:
            iterable = list(iterable)
        add = self.append
        for elem in iterable:
            add(elem)

    def extendleft(self, iterable):
        "Extend the left side of the deque with elements from the iterable"
        if iterable is self:
            iterable = list(iterable)
        add = self.appendleft
        for elem in iterable:
            add(elem)

    def pop(self):
        "Remove and return the rightmost element."
        storage = self._storage
        if storage.length == 0:
            raise IndexError("pop from an empty deque")
        x = storage.pop_right()
        self.policy.release(storage)
        self._modified()
        return x

    def popleft(self):
        "Remove and return the leftmost element."
        storage = self._storage
        if storage.length == 0:
            raise IndexError("pop from an empty deque")
        x = storage.pop_left()
        self.policy.release(storage)
        self._modified()
        return x

    def clear(self):
        "Remove all elements from the deque."
        self.policy.reset(self._storage)
        self._modified()

    def remove(self, x):
        "Remove first occurrence of value."
        storage = self._storage
        lock = self._getlock()
        for i in range(storage.length):
            item = storage.read(storage.slot(i))
            equal = item is x or item == x
            if lock is not self._lock:
                raise IndexError("deque mutated during remove().")
            if equal:
                storage.delete(i)
                self.policy.release(storage)
                self._modified()
                return
        raise ValueError("deque.remove(x): x not in deque")

    def count(self, x):
        "Return number of occurrences of value."
        storage = self._storage
        lock = self._getlock()
        result = 0
        for i in range(storage.length):
            item = storage.read(storage.slot(i))
            if item is x or item == x:
                result += 1
            self._checklock(lock)
        return result

    def __contains__(self, x):
        lock = self._getlock()

        def visit(item):
            equal = item is x or item == x
            self._checklock(lock)
            return equal

        return bool(self._storage.traverse(visit))

    def index(self, x, start=0, stop=None):
        """Return first index of value.
        Raises ValueError if the value is not present."""
        storage = self._storage
        length = storage.length
        start = _index(start)
        if start < 0:
            start += length
            if start < 0:
                start = 0
        if stop is None:
            stop = length
        else:
            stop = _index(stop)
            if stop < 0:
                stop += length
                if stop < 0:
                    stop = 0
            if stop > length:
                stop = length
        lock = self._getlock()
        for i in range(start, stop):
            item = storage.read(storage.slot(i))
            equal = item is x or item == x
            self._checklock(lock)
            if equal:
                return i
        raise ValueError("%r is not in deque" % (x,))

    def reverse(self):
        "Reverse *IN PLACE*."
        self._storage.reverse()
        self._modified()

    def rotate(self, n=1):
        "Rotate the deque n steps to the right (default n=1).  If n is negative, rotates left."
        _rotate(self._storage, n)
        self._modified()

    def __len__(self):
        return self._storage.length

    def __iter__(self):
        return ArrayDequeIter(self)

    def __reversed__(self):
        "Return a reverse iterator over the deque."
        return ArrayDequeRevIter(self)

    def __getitem__(self, index):
        storage = self._storage
        pos = indexing.translate(index, storage.head, storage.length,
                                 storage.capacity())
        return storage.read(pos)

    def __setitem__(self, index, value):
        storage = self._storage
        pos = indexing.translate(index, storage.head, storage.length,
                                 storage.capacity(),
                                 "deque assignment index out of range")
        storage.write(pos, value)

    def __delitem__(self, index):
        raise TypeError("deque doesn't support item deletion")

    @_recursive_repr('[...]')
    def __repr__(self):
        listrepr = repr(self._storage.linearize())
        if self._maxlen is None:
            return '%s(%s)' % (type(self).__name__, listrepr)
        return '%s(%s, maxlen=%d)' % (type(self).__name__, listrepr,
                                      self._maxlen)

    def copy(self):
        "Return a shallow copy of a deque."
        if self._maxlen is None:
            return type(self)(self)
        return type(self)(self, self._maxlen)

    __copy__ = copy

    def __reduce__(self):
        "Return state information for pickling."
        # The elements travel as list items, appended to an already built
        # empty deque, so a deque that contains itself survives deepcopy
        # and pickle.
        state = getattr(self, '__dict__', None) or None
        if self._maxlen is None:
            args = ()
        else:
            args = ((), self._maxlen)
        return type(self), args, state, iter(self._storage.linearize())

    def __add__(self, other):
        if not isinstance(other, ArrayDeque):
            return NotImplemented
        copied = self.copy()
        copied.extend(other)
        return copied

    def __iadd__(self, iterable):
        self.extend(iterable)
        return self

    __hash__ = None

    __class_getitem__ = classmethod(_GenericAlias)

    def _compare(self, other, op):
        if not isinstance(other, (ArrayDeque, _collections_deque)):
            return NotImplemented
        return op(self._storage.linearize(), list(other))

    def __lt__(self, other):
        return self._compare(other, operator.lt)
    def __le__(self, other):
        return self._compare(other, operator.le)
    def __eq__(self, other):
        return self._compare(other, operator.eq)
    def __ne__(self, other):
        return self._compare(other, operator.ne)
    def __gt__(self, other):
        return self._compare(other, operator.gt)
    def __ge__(self, other):
        return self._compare(other, operator.ge)

# ------------------------------------------------------------

class ArrayDequeIter(object):
    __slots__ = ('deque', 'index', 'counter', 'lock')

    def __init__(self, deque):
        self.deque = deque
        self.index = 0
        self.counter = len(deque)
        self.lock = deque._getlock()

    def __iter__(self):
        return self

    def __length_hint__(self):
        return self.counter

    def _advance(self):
        self.index += 1

    def __next__(self):
        if self.lock is not self.deque._lock:
            self.counter = 0
            raise RuntimeError("deque mutated during iteration")
        if self.counter == 0:
            raise StopIteration
        self.counter -= 1
        storage = self.deque._storage
        x = storage.read(storage.slot(self.index))
        self._advance()
        return x

# ------------------------------------------------------------

class ArrayDequeRevIter(ArrayDequeIter):
    __slots__ = ()

    def __init__(self, deque):
        ArrayDequeIter.__init__(self, deque)
        self.index = self.counter - 1

    def _advance(self):
        self.index -= 1
