from .combine import combine_ranges as combine_ranges
from .constants import (
    INVALID_ARGUMENT as INVALID_ARGUMENT,
    NOT_A_HEADER as NOT_A_HEADER,
    UNSATISFIABLE as UNSATISFIABLE,
    ErrorCodes as ErrorCodes,
)
from .errors import InvalidArgumentError as InvalidArgumentError, RangeParserError as RangeParserError
from .options import ParseOptions as ParseOptions
from .parser import parse_range as parse_range
from .ranges import Range as Range, RangeSet as RangeSet


__version__ = '1.0.0'
