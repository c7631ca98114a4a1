from dataclasses import dataclass


@dataclass
class ParseOptions:
    combine: bool = False
    throw_error: bool = True
