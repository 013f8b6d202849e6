from operator import index as _index


def normalize_rotation(n, length):
    """Reduce a rotation by 'n' steps to the right on a deque of 'length'
    elements to the cheapest equivalent: a positive result means that many
    single-step rotations to the right, a negative one that many to the
    left.  Never more than length // 2 steps either way."""
    if length <= 1:
        return 0
    n %= length
    if n > length >> 1:
        n -= length
    return n


def rotate(storage, n=1):
    """Rotate the elements of 'storage' n steps to the right (the last
    element becomes the first); a negative n rotates to the left.

    The slot list is never resized.  A full ring only needs its head moved;
    otherwise every step moves one element from one end of the live window
    to the free slot just past the other end."""
    n = normalize_rotation(_index(n), storage.length)
    if n == 0:
        return
    slots = storage.slots
    capacity = len(slots)
    length = storage.length
    if length == capacity:
        storage.head = (storage.head - n) % capacity
        return
    head = storage.head
    while n > 0:
        # last element -> slot before the head
        tail = (head + length - 1) % capacity
        head = (head - 1) % capacity
        slots[head] = slots[tail]
        slots[tail] = None
        n -= 1
    while n < 0:
        # first element -> slot after the tail
        tail = (head + length) % capacity
        slots[tail] = slots[head]
        slots[head] = None
        head = (head + 1) % capacity
        n += 1
    storage.head = head
