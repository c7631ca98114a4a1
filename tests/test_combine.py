import pytest

from rangeparser import ParseOptions, Range, RangeSet, combine_ranges, parse_range


class TestCombineRanges:
    """Test merging of overlapping and adjacent ranges."""

    def test_combine_overlapping(self):
        ranges = parse_range(150, 'bytes=0-4,90-99,5-75,100-199,101-102', combine=True)
        assert ranges.unit == 'bytes'
        assert ranges.to_list() == [Range(0, 75), Range(90, 149)]

    def test_combine_retains_original_order(self):
        ranges = parse_range(150, 'bytes=-1,20-100,0-1,101-120', combine=True)
        assert ranges.unit == 'bytes'
        assert ranges.to_list() == [Range(149, 149), Range(20, 120), Range(0, 1)]

    def test_combine_through_options(self):
        ranges = parse_range(150, 'bytes=0-4,5-9', ParseOptions(combine=True))
        assert ranges.to_list() == [Range(0, 9)]

        ranges = parse_range(150, 'bytes=0-4,5-9', {'combine': True})
        assert ranges.to_list() == [Range(0, 9)]

    def test_no_combine_by_default(self):
        ranges = parse_range(150, 'bytes=0-4,5-9')
        assert ranges.to_list() == [Range(0, 4), Range(5, 9)]

    def test_adjacent_ranges(self):
        ranges = combine_ranges(RangeSet('bytes', [Range(10, 19), Range(20, 29), Range(0, 9)]))
        assert ranges.to_list() == [Range(0, 29)]

    def test_gap_is_kept(self):
        ranges = combine_ranges(RangeSet('bytes', [Range(0, 9), Range(11, 20)]))
        assert ranges.to_list() == [Range(0, 9), Range(11, 20)]

    def test_contained_range(self):
        ranges = combine_ranges(RangeSet('bytes', [Range(300, 310), Range(0, 100), Range(50, 60)]))
        assert ranges.to_list() == [Range(300, 310), Range(0, 100)]

    def test_contained_range_keeps_block_position(self):
        """Test a fully contained range does not move the block it falls into."""
        ranges = combine_ranges(RangeSet('bytes', [Range(50, 60), Range(300, 310), Range(0, 100)]))
        assert ranges.to_list() == [Range(300, 310), Range(0, 100)]

    def test_extending_range_moves_block_position(self):
        ranges = combine_ranges(RangeSet('bytes', [Range(50, 120), Range(300, 310), Range(0, 100)]))
        assert ranges.to_list() == [Range(0, 120), Range(300, 310)]

    def test_duplicates(self):
        ranges = combine_ranges(RangeSet('items', [Range(5, 5), Range(5, 5), Range(5, 5)]))
        assert ranges.unit == 'items'
        assert ranges.to_list() == [Range(5, 5)]

    def test_empty(self):
        ranges = combine_ranges(RangeSet('bytes'))
        assert ranges.unit == 'bytes'
        assert ranges.to_list() == []

    def test_input_untouched(self):
        source = RangeSet('bytes', [Range(0, 4), Range(3, 9)])
        combined = source.combine()
        assert combined is not source
        assert source.to_list() == [Range(0, 4), Range(3, 9)]
        assert combined.to_list() == [Range(0, 9)]

    @pytest.mark.parametrize(
        'header',
        (
            'bytes=0-4,90-99,5-75,100-199,101-102',
            'bytes=-1,20-100,0-1,101-120',
            'bytes=0-0,2-2,4-4,1-1',
            'bytes=40-80,81-90,-1',
        ),
    )
    def test_combine_is_idempotent(self, header):
        combined = parse_range(150, header, combine=True)
        assert combined.combine() == combined

    @pytest.mark.parametrize(
        'header',
        (
            'bytes=0-4,90-99,5-75,100-199,101-102',
            'bytes=-1,20-100,0-1,101-120',
            'bytes=10-20,15-25,30-35,-10,0-',
        ),
    )
    def test_combine_covers_same_positions(self, header):
        ranges = parse_range(150, header)
        combined = ranges.combine()

        def positions(items):
            return {pos for item in items for pos in range(item.start, item.end + 1)}

        assert positions(combined) == positions(ranges)
        assert sum(item.size() for item in combined) == len(positions(ranges))
