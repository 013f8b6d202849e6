"""Array-backed deque implementation.

- ArrayDeque:      drop-in replacement for collections.deque stored in a
                   single growable ring of slots
- CapacityPolicy:  grow/shrink policy of that ring
"""

from arraydeque.capacity import CapacityPolicy
from arraydeque.deque import ArrayDeque

__version__ = '0.1.0'

__all__ = ['ArrayDeque', 'CapacityPolicy', '__version__']
