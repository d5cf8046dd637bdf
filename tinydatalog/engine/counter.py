"""
Candidate generator for the brute-force search over variable assignments.
"""


class Counter:
    """
    Counts through every tuple of a given length whose elements lie in `0..max-1`.

    Think of the cursor as a number written in base `max`: digit i of the
    cursor is element i of the next tuple, so slot 0 varies fastest.
    Exactly `max ** length` tuples are produced, each once. A counter with
    `length == 0` or `max == 0` is empty from the start.

    A counter is a one-shot iterator; build a new one to enumerate again.
    """
    __slots__ = ("length", "max", "_cursor", "_end")

    def __init__(self, length: int, max: int) -> None:
        if length < 0 or max < 0:
            raise ValueError(f"Counter: length and max must be non-negative, got length={length}, max={max}")
        self.length = length
        self.max = max
        self._cursor = 0
        self._end = 0 if length == 0 else max ** length

    def __len__(self) -> int:
        """Number of tuples not yet produced."""
        return self._end - self._cursor

    def is_empty(self) -> bool:
        return self._cursor >= self._end

    def __iter__(self) -> 'Counter':
        return self

    def __next__(self) -> tuple[int, ...]:
        if self.is_empty():
            raise StopIteration
        n = self._cursor
        digits = []
        for _ in range(self.length):
            n, digit = divmod(n, self.max)
            digits.append(digit)
        self._cursor += 1
        return tuple(digits)
