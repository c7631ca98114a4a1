from dataclasses import dataclass

from .log import logger
from .ranges import Range, RangeSet


@dataclass
class _IndexedRange:
    start: int
    end: int
    index: int


def combine_ranges(ranges: RangeSet) -> RangeSet:
    """
    Merge overlapping and adjacent ranges of a valid set.

    The result covers exactly the same positions with the fewest ranges.
    Blocks are returned ordered by the earliest header position among the
    ranges that opened or extended them. A range falling entirely inside
    a block does not move it.

    Examples:
        >>> combine_ranges(RangeSet('bytes', [Range(0, 4), Range(90, 99), Range(5, 75)])).to_list()
        [Range(start=0, end=75), Range(start=90, end=99)]
        >>> combine_ranges(RangeSet('bytes', [Range(149, 149), Range(20, 100), Range(0, 1)])).to_list()
        [Range(start=149, end=149), Range(start=20, end=100), Range(start=0, end=1)]
    """
    ordered = sorted(
        (_IndexedRange(item.start, item.end, index) for index, item in enumerate(ranges)),
        key=lambda item: (item.start, item.index),
    )

    blocks = []
    for item in ordered:
        if not blocks or item.start > blocks[-1].end + 1:
            blocks.append(item)
            continue
        current = blocks[-1]
        if item.end > current.end:
            current.end = item.end
            current.index = min(current.index, item.index)

    blocks.sort(key=lambda item: item.index)
    logger.debug('Combined %d range(s) into %d', len(ranges), len(blocks))
    return RangeSet(ranges.unit, [Range(item.start, item.end) for item in blocks])
