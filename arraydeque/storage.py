from arraydeque.indexing import physical


# A CircularStorage is a single list of 'capacity' slots used as a ring.
# The first element is at slots[head] and element i is at
# slots[(head + i) % capacity]; the slots outside the live window always
# hold None.
#
# The storage itself never changes its capacity on push or pop: callers
# must make room first (see capacity.py) and must not push into a full
# ring.  reflow() is the only place where the slot list is replaced.
#
# Empty storages have length == 0 and head == 0.

class CircularStorage(object):
    __slots__ = ('slots', 'head', 'length')

    def __init__(self, capacity):
        assert capacity > 0
        self.slots = [None] * capacity
        self.head = 0
        self.length = 0

    def capacity(self):
        return len(self.slots)

    def isfull(self):
        return self.length == len(self.slots)

    def slot(self, i):
        "Physical slot of logical element i (0 <= i <= length)."
        return physical(self.head, i, len(self.slots))

    def read(self, pos):
        return self.slots[pos]

    def write(self, pos, x):
        self.slots[pos] = x

    def push_right(self, x):
        assert self.length < len(self.slots)
        self.slots[self.slot(self.length)] = x
        self.length += 1

    def push_left(self, x):
        assert self.length < len(self.slots)
        self.head = (self.head - 1) % len(self.slots)
        self.slots[self.head] = x
        self.length += 1

    def pop_right(self):
        assert self.length > 0
        self.length -= 1
        pos = self.slot(self.length)
        x = self.slots[pos]
        self.slots[pos] = None
        if self.length == 0:
            self.head = 0
        return x

    def pop_left(self):
        assert self.length > 0
        pos = self.head
        x = self.slots[pos]
        self.slots[pos] = None
        self.length -= 1
        if self.length == 0:
            self.head = 0
        else:
            self.head = (pos + 1) % len(self.slots)
        return x

    def delete(self, i):
        """Drop logical element i.  Shifts whichever side of i is
        shorter by one slot, so the cost is min(i, length - 1 - i)."""
        length = self.length
        assert 0 <= i < length
        slots = self.slots
        capacity = len(slots)
        if i < length - 1 - i:
            # move elements 0..i-1 one slot to the right
            for j in range(i, 0, -1):
                slots[physical(self.head, j, capacity)] = \
                    slots[physical(self.head, j - 1, capacity)]
            self.pop_left()
        else:
            # move elements i+1..length-1 one slot to the left
            for j in range(i, length - 1):
                slots[physical(self.head, j, capacity)] = \
                    slots[physical(self.head, j + 1, capacity)]
            self.pop_right()

    def linearize(self):
        "Return the live elements as a new list, in logical order."
        head = self.head
        end = head + self.length
        slots = self.slots
        if end <= len(slots):
            return slots[head:end]
        return slots[head:] + slots[:end - len(slots)]

    def reflow(self, new_capacity):
        """Replace the slot list with one of 'new_capacity' slots, live
        elements first starting at slot 0."""
        assert new_capacity >= self.length
        items = self.linearize()
        items.extend([None] * (new_capacity - self.length))
        self.slots = items
        self.head = 0

    def reset(self, capacity):
        "Drop every element and start over with 'capacity' empty slots."
        self.slots = [None] * capacity
        self.head = 0
        self.length = 0

    def traverse(self, visit):
        """Call visit(x) on each held element in logical order.
        Stops and returns the first true result of visit(); returns None
        if every call returned a false value."""
        i = 0
        while i < self.length:
            result = visit(self.slots[self.slot(i)])
            if result:
                return result
            i += 1
        return None

    def reverse(self):
        slots = self.slots
        capacity = len(slots)
        left = 0
        right = self.length - 1
        while left < right:
            li = physical(self.head, left, capacity)
            ri = physical(self.head, right, capacity)
            slots[li], slots[ri] = slots[ri], slots[li]
            left += 1
            right -= 1
