"""Parser configuration options."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParserOptions:
    """
    Settings controlling how source text is located and classified.

    The defaults reproduce the reference behavior: 64-bit signed integers
    are numeric literals, anything wider is kept as a string literal.
    """
    filename: str = "<input>"
    integer_bits: Optional[int] = 64

    def __post_init__(self):
        if self.integer_bits is not None and self.integer_bits < 1:
            raise ValueError(f"integer_bits must be positive, got {self.integer_bits}")

    @staticmethod
    def for_file(path: str, **kwargs) -> "ParserOptions":
        """Options for parsing the contents of a file at path."""
        return ParserOptions(filename=os.fspath(path), **kwargs)
