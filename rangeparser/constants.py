from enum import Enum, IntEnum


class StrEnum(str, Enum):
    def __str__(self) -> str:
        return str(self.value)


class ErrorCodes(IntEnum):
    INVALID_ARGUMENT = -3
    NOT_A_HEADER = -2
    UNSATISFIABLE = -1


class OutputFormats(StrEnum):
    json = 'json'
    text = 'text'


INVALID_ARGUMENT = ErrorCodes.INVALID_ARGUMENT
NOT_A_HEADER = ErrorCodes.NOT_A_HEADER
UNSATISFIABLE = ErrorCodes.UNSATISFIABLE
