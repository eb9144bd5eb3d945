# filename: huffman_service.py

import io
import logging

from bit_streams import BitInputStream, BitOutputStream
from huffman_config import BITS_PER_INT, DEBUG_HIGH, DEBUG_LOW, HUFF_TREE, HuffConfig
from huffman_core import HuffmanLogic
from huffman_errors import HuffException, HuffFormatError, HuffResult

logger = logging.getLogger(__name__)


class HuffProcessor:
    """
    Compresses and decompresses bit streams with a Huffman tree stored in the header.

    Both operations return a HuffResult instead of raising: check ``result.ok``
    or call ``result.unwrap()``. The output stream is always closed, so a
    failed run still leaves whatever was written flushed to disk.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else HuffConfig()
        self.logic = HuffmanLogic()

    def compress(self, bit_in, bit_out):
        try:
            counts = self.logic.count_frequencies(bit_in)
            root = self.logic.build_tree(counts)
            codes = self.logic.generate_codes(root)
            if self.config.debug >= DEBUG_HIGH:
                logger.debug("counts: %s", {s: c for s, c in enumerate(counts) if c})
                logger.debug("codes: %s", codes)

            bit_out.write_bits(BITS_PER_INT, HUFF_TREE)
            self.logic.write_header(root, bit_out)

            bit_in.reset()
            self.logic.write_compressed(codes, bit_in, bit_out)
        except HuffException as e:
            return HuffResult.failure(e, bit_in.bits_read, bit_out.bits_written)
        finally:
            bit_out.close()

        if self.config.debug >= DEBUG_LOW:
            logger.debug("compress: read %d bits, wrote %d bits", bit_in.bits_read, bit_out.bits_written)
        return HuffResult(bits_read=bit_in.bits_read, bits_written=bit_out.bits_written)

    def decompress(self, bit_in, bit_out):
        try:
            magic = bit_in.read_bits(BITS_PER_INT)
            if magic != HUFF_TREE:
                raise HuffFormatError(f"illegal header starts with {magic}")

            root = self.logic.read_header(bit_in)
            if self.config.debug >= DEBUG_HIGH:
                logger.debug("codes: %s", self.logic.generate_codes(root))
            self.logic.read_compressed(root, bit_in, bit_out)
        except HuffException as e:
            return HuffResult.failure(e, bit_in.bits_read, bit_out.bits_written)
        finally:
            bit_out.close()

        if self.config.debug >= DEBUG_LOW:
            logger.debug("decompress: read %d bits, wrote %d bits", bit_in.bits_read, bit_out.bits_written)
        return HuffResult(bits_read=bit_in.bits_read, bits_written=bit_out.bits_written)


class HuffmanService:
    def __init__(self, config=None):
        self.processor = HuffProcessor(config)

    def compress(self, data):
        out = io.BytesIO()
        self.processor.compress(BitInputStream(io.BytesIO(data)), BitOutputStream(out)).unwrap()
        return out.getvalue()

    def decompress(self, data):
        out = io.BytesIO()
        self.processor.decompress(BitInputStream(io.BytesIO(data)), BitOutputStream(out)).unwrap()
        return out.getvalue()
