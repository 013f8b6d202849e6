"""Logical to physical index translation.

A deque of 'length' elements stored in a ring of 'capacity' slots keeps
its logical element i at slot (head + i) % capacity.  The helpers here
never look at the slots themselves.
"""

from operator import index as _index


def decode_index(index):
    """Return 'index' as an int, or raise TypeError.  Slices are
    rejected too: deques do not support them."""
    if isinstance(index, slice):
        raise TypeError("deque indices must be integers, not slice")
    try:
        return _index(index)
    except TypeError:
        raise TypeError("deque indices must be integers, not %s"
                        % (type(index).__name__,))


def normalize(i, length, msg="deque index out of range"):
    if i < 0:
        i += length
    if i < 0 or i >= length:
        raise IndexError(msg)
    return i


def physical(head, i, capacity):
    return (head + i) % capacity


def translate(index, head, length, capacity,
              msg="deque index out of range"):
    """Full translation: type check, negative remapping, bounds check,
    wrap-around."""
    i = normalize(decode_index(index), length, msg)
    return physical(head, i, capacity)
