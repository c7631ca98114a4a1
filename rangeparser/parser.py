"""HTTP Range header parsing against a known resource size."""

import re
from collections.abc import Mapping
from typing import Any, Optional, Tuple, Union

from .combine import combine_ranges
from .constants import ErrorCodes
from .errors import InvalidArgumentError
from .log import logger
from .options import ParseOptions
from .ranges import Range, RangeSet


_digits_re = re.compile(r'[0-9]+')


def _parse_number(value: str, ceiling: int) -> Optional[int]:
    if not _digits_re.fullmatch(value):
        return None
    try:
        return min(int(value.lstrip('0') or '0'), ceiling)
    except ValueError:
        # over the interpreter limit for integer string conversion
        return ceiling


def _parse_spec(spec: str, size: int) -> Optional[Tuple[int, int]]:
    """
    Resolve a single range spec into numeric bounds.

    Returns None when the spec is malformed. The returned bounds are not
    validated against each other nor against zero: that's left to the caller.
    """
    if '-' not in spec:
        return None

    start_str, end_str = spec.split('-', 1)
    # any bound above the size resolves to the same outcome
    ceiling = size + 1

    if not start_str:
        # Case: "-500" (last 500 positions)
        suffix = _parse_number(end_str, ceiling)
        if suffix is None:
            return None
        start, end = size - suffix, size - 1
    elif not end_str:
        # Case: "500-" (from 500 to the end)
        start = _parse_number(start_str, ceiling)
        if start is None:
            return None
        end = size - 1
    else:
        start, end = _parse_number(start_str, ceiling), _parse_number(end_str, ceiling)
        if start is None or end is None:
            return None

    return start, min(end, size - 1)


def _build_options(options: Union[ParseOptions, Mapping, None], **overrides: Optional[bool]) -> ParseOptions:
    if options is None:
        rv = ParseOptions()
    elif isinstance(options, ParseOptions):
        rv = ParseOptions(combine=options.combine, throw_error=options.throw_error)
    else:
        rv = ParseOptions(**options)
    for key, value in overrides.items():
        if value is not None:
            setattr(rv, key, value)
    return rv


def _invalid_argument(throw_error: bool, argument: str, expected: str) -> ErrorCodes:
    if throw_error:
        raise InvalidArgumentError(argument, expected)
    return ErrorCodes.INVALID_ARGUMENT


def parse_range(
    size: Any,
    header: Any,
    options: Union[ParseOptions, Mapping, None] = None,
    *,
    combine: Optional[bool] = None,
    throw_error: Optional[bool] = None,
) -> Union[RangeSet, ErrorCodes]:
    """
    Parse a Range header value relative to the given resource size.

    Args:
        size: The resource length, expressed in the header's unit
        header: The Range header value (e.g., "bytes=0-499")
        options: A `ParseOptions` instance or a mapping of its fields
        combine: Merge overlapping and adjacent ranges (overrides options)
        throw_error: Raise on invalid arguments instead of returning
            `ErrorCodes.INVALID_ARGUMENT` (overrides options)

    Returns:
        A `RangeSet` holding the satisfiable ranges, in header order, or:
        - `ErrorCodes.NOT_A_HEADER`: no "=" in header, or no spec could be parsed
        - `ErrorCodes.UNSATISFIABLE`: specs parsed, but none fits the resource
        - `ErrorCodes.INVALID_ARGUMENT`: wrong argument types (only when
          `throw_error` is disabled)

    Raises:
        InvalidArgumentError: `size` is not a non-negative integer or
            `header` is not a string, and `throw_error` is enabled.

    Examples:
        >>> parse_range(1000, "bytes=0-499").to_list()
        [Range(start=0, end=499)]
        >>> parse_range(1000, "bytes=-400").to_list()
        [Range(start=600, end=999)]
        >>> parse_range(1000, "bytes=400-").to_list()
        [Range(start=400, end=999)]
        >>> parse_range(200, "bytes=500-600")
        <ErrorCodes.UNSATISFIABLE: -1>
    """
    opts = _build_options(options, combine=combine, throw_error=throw_error)

    if isinstance(size, bool) or not isinstance(size, int):
        return _invalid_argument(opts.throw_error, 'size', 'an integer')
    if size < 0:
        return _invalid_argument(opts.throw_error, 'size', 'a non-negative integer')
    if not isinstance(header, str):
        return _invalid_argument(opts.throw_error, 'header', 'a string')

    unit, sep, specs = header.partition('=')
    if not sep:
        return ErrorCodes.NOT_A_HEADER

    ranges = RangeSet(unit)
    unsatisfiable = False

    for spec in (item.strip() for item in specs.split(',')):
        bounds = _parse_spec(spec, size)
        if bounds is None:
            logger.debug('Dropping malformed range spec %r', spec)
            continue
        start, end = bounds
        if start < 0 or start > end:
            logger.debug('Dropping unsatisfiable range spec %r for size %d', spec, size)
            unsatisfiable = True
            continue
        ranges.ranges.append(Range(start, end))

    if not ranges:
        return ErrorCodes.UNSATISFIABLE if unsatisfiable else ErrorCodes.NOT_A_HEADER

    return combine_ranges(ranges) if opts.combine else ranges
