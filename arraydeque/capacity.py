"""Slot array sizing.

Growing multiplies the capacity by 'growth' when a push finds the ring
full; shrinking divides it by 'growth' once a pop leaves the ring at
1/'shrink' occupancy or less.  shrink must be larger than growth: a
freshly grown or shrunk ring is then never at the opposite threshold.
A single reflow costs O(length); N pushes and pops cost O(N) overall.
"""

import py

log = py.log.Producer("arraydeque")
py.log.setconsumer("arraydeque", None)


class CapacityPolicy(object):

    def __init__(self, minimum=8, growth=2, shrink=4):
        if minimum < 1:
            raise ValueError("minimum capacity must be at least 1, got %d"
                             % (minimum,))
        if growth < 2:
            raise ValueError("growth factor must be at least 2, got %d"
                             % (growth,))
        if shrink <= growth:
            raise ValueError("shrink divisor (%d) must be larger than the "
                             "growth factor (%d)" % (shrink, growth))
        self.minimum = minimum
        self.growth = growth
        self.shrink = shrink

    @classmethod
    def from_config(cls, config):
        capacity = config.capacity
        return cls(capacity.minimum, capacity.growth, capacity.shrink)

    def __repr__(self):
        return '%s(minimum=%d, growth=%d, shrink=%d)' % (
            self.__class__.__name__, self.minimum, self.growth, self.shrink)

    def initial_capacity(self):
        return self.minimum

    def grown_capacity(self, capacity):
        return capacity * self.growth

    def shrunk_capacity(self, capacity, length):
        """Return the capacity to shrink to, or 0 if the ring should keep
        its current size."""
        if capacity <= self.minimum or length * self.shrink > capacity:
            return 0
        return max(capacity // self.growth, self.minimum, length)

    def make_room(self, storage):
        "Called before every push that does not evict."
        if storage.isfull():
            old = storage.capacity()
            new = self.grown_capacity(old)
            log.grow("%d -> %d slots (%d elements)" % (old, new,
                                                       storage.length))
            storage.reflow(new)

    def release(self, storage):
        "Called after every pop and every removal."
        old = storage.capacity()
        new = self.shrunk_capacity(old, storage.length)
        if new:
            log.shrink("%d -> %d slots (%d elements)" % (old, new,
                                                         storage.length))
            storage.reflow(new)

    def reset(self, storage):
        "Called by clear()."
        if storage.capacity() != self.minimum:
            log.reset("%d -> %d slots" % (storage.capacity(), self.minimum))
        storage.reset(self.minimum)
