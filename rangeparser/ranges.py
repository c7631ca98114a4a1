from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Range:
    """
    An inclusive interval of positions within a resource.

    Both `start` and `end` are 0-based and *inclusive*, like the values
    written in a Range header: `bytes=0-0` is a single position.
    """

    start: int
    end: int

    def size(self) -> int:
        return self.end - self.start + 1

    def as_tuple(self) -> Tuple[int, int]:
        return self.start, self.end


@dataclass
class RangeSet:
    """
    Ordered ranges tagged with the unit name found in the header.

    The unit is passed through verbatim and never interpreted.
    """

    unit: str = ''
    ranges: List[Range] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __getitem__(self, index: int) -> Range:
        return self.ranges[index]

    def to_list(self) -> List[Range]:
        return list(self.ranges)

    def combine(self) -> 'RangeSet':
        from .combine import combine_ranges

        return combine_ranges(self)
