# core/interval.py
import math

class Interval:
    """
    Closed range [min, max] over a real line, used both for the valid ray
    parameter range of a hit query and for the per-axis extent of a box.

    An interval with min > max is empty.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        self.min = minimum
        self.max = maximum

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        """
        Tightest interval enclosing both a and b.
        """
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def shift(self, offset: float) -> "Interval":
        return Interval(self.min + offset, self.max + offset)

    def with_max(self, maximum: float) -> "Interval":
        return Interval(self.min, maximum)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
