# filename: huffman_errors.py

import enum
from dataclasses import dataclass
from typing import Optional


class ErrorKind(enum.Enum):
    NONE = "none"
    FORMAT = "format"
    TRUNCATED = "truncated"
    INTERNAL = "internal"


class HuffException(Exception):
    kind = ErrorKind.INTERNAL


class HuffInternalError(HuffException):
    """A tree invariant was broken while compressing."""
    kind = ErrorKind.INTERNAL


class HuffFormatError(HuffException):
    """Compressed data does not start with the tree-header magic, or the header is corrupt."""
    kind = ErrorKind.FORMAT


class HuffTruncatedError(HuffException):
    """The bit source ran out before the header or the sentinel was complete."""
    kind = ErrorKind.TRUNCATED


@dataclass
class HuffResult:
    kind: ErrorKind = ErrorKind.NONE
    error: Optional[HuffException] = None
    bits_read: int = 0
    bits_written: int = 0

    @property
    def ok(self) -> bool:
        return self.kind is ErrorKind.NONE

    @classmethod
    def failure(cls, error: HuffException, bits_read=0, bits_written=0):
        return cls(kind=error.kind, error=error, bits_read=bits_read, bits_written=bits_written)

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self
