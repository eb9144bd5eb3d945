# filename: huffman_config.py

import os
from dataclasses import dataclass

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
# 9 bits so a leaf can hold PSEUDO_EOF as well as any byte
HEADER_SYMBOL_BITS = BITS_PER_WORD + 1

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4

DEBUG_ENV_VAR = "HUFF_DEBUG"


@dataclass(frozen=True)
class HuffConfig:
    debug: int = 0

    @classmethod
    def from_env(cls, environ=None):
        """Read the debug level from HUFF_DEBUG, falling back to 0."""
        environ = os.environ if environ is None else environ
        raw = environ.get(DEBUG_ENV_VAR, "0")
        try:
            level = int(raw)
        except ValueError:
            level = 0
        return cls(debug=max(level, 0))
