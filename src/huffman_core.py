# filename: huffman_core.py

import heapq
import itertools

from huffman_config import ALPH_SIZE, BITS_PER_WORD, HEADER_SYMBOL_BITS, PSEUDO_EOF
from huffman_errors import HuffFormatError, HuffInternalError, HuffTruncatedError


class HuffmanNode:
    def __init__(self, symbol, freq, left=None, right=None):
        # symbol is None for internal nodes
        self.symbol = symbol
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq})"


class HuffmanLogic:
    def count_frequencies(self, bit_in):
        """
        Count every byte of bit_in, one slot per symbol including PSEUDO_EOF.

        The PSEUDO_EOF slot is always 1 so the sentinel makes it into the tree,
        even for empty input.
        """
        counts = [0] * (ALPH_SIZE + 1)
        while True:
            byte = bit_in.read_bits(BITS_PER_WORD)
            if byte == -1:
                break
            counts[byte] += 1
        counts[PSEUDO_EOF] = 1
        return counts

    def build_tree(self, counts):
        # Heap entries are (weight, insertion order, node). Leaves go in by
        # ascending symbol, merged nodes take the next sequence number, so
        # equal weights always pop in the same order.
        sequence = itertools.count()
        priority_queue = [
            (freq, next(sequence), HuffmanNode(symbol, freq))
            for symbol, freq in enumerate(counts)
            if freq > 0
        ]
        heapq.heapify(priority_queue)

        while len(priority_queue) > 1:
            left_freq, _, left = heapq.heappop(priority_queue)
            right_freq, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left_freq + right_freq, left, right)
            if merged.freq <= 0:
                raise HuffInternalError(f"merged node has non-positive weight {merged.freq}")
            heapq.heappush(priority_queue, (merged.freq, next(sequence), merged))

        return priority_queue[0][2] if priority_queue else None

    def generate_codes(self, node):
        codes = {}

        def walk(current, path):
            if current.is_leaf:
                codes[current.symbol] = path
                return
            walk(current.left, path + "0")
            walk(current.right, path + "1")

        if node is not None:
            walk(node, "")
        return codes

    def write_header(self, node, bit_out):
        if node.is_leaf:
            bit_out.write_bits(1, 1)
            bit_out.write_bits(HEADER_SYMBOL_BITS, node.symbol)
            return
        bit_out.write_bits(1, 0)
        self.write_header(node.left, bit_out)
        self.write_header(node.right, bit_out)

    def read_header(self, bit_in, depth=0):
        bit = bit_in.read_bits(1)
        if bit == -1:
            raise HuffTruncatedError("header ended while reading a tree node")
        if bit == 0:
            # 257 leaves cannot sit deeper than 256 edges
            if depth >= PSEUDO_EOF:
                raise HuffFormatError("header tree is deeper than the alphabet allows")
            left = self.read_header(bit_in, depth + 1)
            right = self.read_header(bit_in, depth + 1)
            return HuffmanNode(None, 0, left, right)

        symbol = bit_in.read_bits(HEADER_SYMBOL_BITS)
        if symbol == -1:
            raise HuffTruncatedError("header ended while reading a leaf symbol")
        if symbol > PSEUDO_EOF:
            raise HuffFormatError(f"header leaf holds {symbol}, outside the alphabet")
        return HuffmanNode(symbol, 0)

    def write_compressed(self, codes, bit_in, bit_out):
        # (length, value) pairs so each byte costs one write
        packed = {symbol: (len(code), int(code, 2) if code else 0) for symbol, code in codes.items()}
        while True:
            byte = bit_in.read_bits(BITS_PER_WORD)
            if byte == -1:
                break
            bit_out.write_bits(*packed[byte])
        bit_out.write_bits(*packed[PSEUDO_EOF])

    def read_compressed(self, root, bit_in, bit_out):
        # A lone sentinel leaf means the input was empty: no body bits to read.
        if root.is_leaf:
            if root.symbol == PSEUDO_EOF:
                return
            raise HuffFormatError(f"header is a lone leaf {root.symbol} with no PSEUDO_EOF")
        current = root
        while True:
            bit = bit_in.read_bits(1)
            if bit == -1:
                raise HuffTruncatedError("bad input, no PSEUDO_EOF")
            current = current.left if bit == 0 else current.right
            if current.is_leaf:
                if current.symbol == PSEUDO_EOF:
                    break
                bit_out.write_bits(BITS_PER_WORD, current.symbol)
                current = root
