# filename: bit_streams.py

"""
Bit-oriented input and output over binary file objects.

Bits are packed most-significant first inside each byte, in the order
they are written. Readers report end-of-stream with -1 instead of raising,
so callers decide what running out of bits means for them.
"""

CHUNK_SIZE = 64 * 1024


class BitInputStream:
    def __init__(self, stream, owns_stream=False):
        self.stream = stream
        self.owns_stream = owns_stream
        self.bits_read = 0
        self._chunk = b""
        self._pos = 0
        self._buffer = 0
        self._bit_count = 0

    @classmethod
    def from_path(cls, path):
        return cls(open(path, "rb"), owns_stream=True)

    def _next_byte(self):
        if self._pos >= len(self._chunk):
            self._chunk = self.stream.read(CHUNK_SIZE)
            self._pos = 0
            if not self._chunk:
                return None
        byte = self._chunk[self._pos]
        self._pos += 1
        return byte

    def read_bits(self, n):
        """Return the next n bits as an unsigned int, or -1 if fewer than n remain."""
        while self._bit_count < n:
            byte = self._next_byte()
            if byte is None:
                return -1
            self._buffer = (self._buffer << 8) | byte
            self._bit_count += 8
        self._bit_count -= n
        value = (self._buffer >> self._bit_count) & ((1 << n) - 1)
        self._buffer &= (1 << self._bit_count) - 1
        self.bits_read += n
        return value

    def reset(self):
        """Rewind to the first bit. The underlying stream must be seekable."""
        self.stream.seek(0)
        self._chunk = b""
        self._pos = 0
        self._buffer = 0
        self._bit_count = 0

    def close(self):
        if self.owns_stream and not self.stream.closed:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class BitOutputStream:
    def __init__(self, stream, owns_stream=False):
        self.stream = stream
        self.owns_stream = owns_stream
        self.bits_written = 0
        self.closed = False
        self._pending = bytearray()
        self._buffer = 0
        self._bit_count = 0

    @classmethod
    def from_path(cls, path):
        return cls(open(path, "wb"), owns_stream=True)

    def write_bits(self, n, value):
        """Append the low n bits of value. Writing zero bits is a no-op."""
        if n <= 0:
            return
        self._buffer = (self._buffer << n) | (value & ((1 << n) - 1))
        self._bit_count += n
        self.bits_written += n
        while self._bit_count >= 8:
            self._bit_count -= 8
            self._pending.append((self._buffer >> self._bit_count) & 0xFF)
        self._buffer &= (1 << self._bit_count) - 1
        if len(self._pending) >= CHUNK_SIZE:
            self._drain()

    def _drain(self):
        if self._pending:
            self.stream.write(bytes(self._pending))
            self._pending.clear()

    def close(self):
        """Pad the last partial byte with zeros, flush, and close an owned file."""
        if self.closed:
            return
        self.closed = True
        if self._bit_count:
            self._pending.append((self._buffer << (8 - self._bit_count)) & 0xFF)
            self._buffer = 0
            self._bit_count = 0
        self._drain()
        self.stream.flush()
        if self.owns_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
