class RangeParserError(Exception):
    pass


class InvalidArgumentError(RangeParserError, TypeError):
    def __init__(self, argument: str, expected: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must be {expected}.")
