# filename: huffman_service.py

import io
import logging

from huffman_core import HuffmanLogic
from huffman_frequency import count_frequencies
from text_source import LINE_TERMINATOR, read_lines, split_lines

logger = logging.getLogger(__name__)


class HuffmanService:
    """Huffman code built from the character frequencies of one text source.

    The frequency table, tree and code table are built once in the
    constructor and never change afterwards. Every operation reports
    failure by returning an empty string.
    """

    def __init__(self, source, encoding="utf-8"):
        self.logic = HuffmanLogic()
        self.encoding = encoding
        lines = read_lines(source, encoding)
        self._build(lines or [])

    @classmethod
    def from_text(cls, text):
        return cls(io.StringIO(text))

    def _build(self, lines):
        self._frequencies = count_frequencies(lines)
        self._root = self.logic.build_tree(self._frequencies)
        self._codes = self.logic.generate_codes(self._root)
        logger.debug(
            "built code for %d symbols from %d characters",
            len(self._codes), sum(self._frequencies.values()),
        )

    @property
    def frequencies(self):
        return self._frequencies

    @property
    def codes(self):
        return self._codes

    @property
    def root(self):
        return self._root

    def get_code(self, symbol):
        return self._codes.get(symbol, "")

    def encode(self, source):
        lines = read_lines(source, self.encoding)
        if lines is None:
            return ""
        return self._encode_lines(lines)

    def encode_text(self, text):
        return self._encode_lines(split_lines(text))

    def _encode_lines(self, lines):
        # All or nothing: one unknown symbol discards the whole output
        parts = []
        for line, terminated in lines:
            for char in line:
                code = self._codes.get(char)
                if code is None:
                    logger.debug("symbol %r has no code", char)
                    return ""
                parts.append(code)
            if terminated:
                code = self._codes.get(LINE_TERMINATOR)
                if code is None:
                    logger.debug("line terminator has no code")
                    return ""
                parts.append(code)
        return "".join(parts)

    def decode(self, bits):
        if not bits:
            return ""
        if self._root is None:
            logger.debug("cannot decode with an empty code table")
            return ""

        if self._root.is_leaf:
            if bits.strip("0"):
                logger.debug("single symbol code accepts only '0' bits")
                return ""
            return self._root.symbol * len(bits)

        decoded = []
        node = self._root
        for bit in bits:
            if bit == "0":
                node = node.left
            elif bit == "1":
                node = node.right
            else:
                logger.debug("invalid bit %r in encoded string", bit)
                return ""
            if node.is_leaf:
                decoded.append(node.symbol)
                node = self._root

        if node is not self._root:
            logger.debug("encoded string ends in the middle of a code")
            return ""
        return "".join(decoded)
