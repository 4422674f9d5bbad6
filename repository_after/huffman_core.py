# filename: huffman_core.py

import heapq
import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)


class HuffmanNode:
    is_leaf = False

    def __init__(self, freq):
        self.freq = freq

    def __lt__(self, other):
        return self.freq < other.freq


class HuffmanLeaf(HuffmanNode):
    is_leaf = True

    def __init__(self, symbol, freq):
        super().__init__(freq)
        self.symbol = symbol

    def __repr__(self):
        return "HuffmanLeaf(%r, %d)" % (self.symbol, self.freq)


class HuffmanInternal(HuffmanNode):
    def __init__(self, freq, left, right):
        if left is None or right is None:
            raise ValueError("internal node requires both children")
        super().__init__(freq)
        self.left = left
        self.right = right

    def __repr__(self):
        return "HuffmanInternal(%d)" % self.freq


class HuffmanLogic:
    def build_tree(self, freqs):
        """Merge the two least frequent nodes until one root remains.

        Returns None for an empty frequency table. A table with a single
        symbol yields that leaf as the root.
        """
        priority_queue = []
        # Sorted symbols keep tie-breaking deterministic
        for symbol in sorted(freqs):
            freq = freqs[symbol]
            if freq <= 0:
                logger.debug("skipping symbol %r with frequency %d", symbol, freq)
                continue
            priority_queue.append(HuffmanLeaf(symbol, freq))
        heapq.heapify(priority_queue)

        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            merged = HuffmanInternal(left.freq + right.freq, left, right)
            heapq.heappush(priority_queue, merged)

        return priority_queue[0] if priority_queue else None

    def generate_codes(self, root):
        """Map every leaf symbol to its path from the root ('0' left, '1' right)."""
        codes = {}
        if root is None:
            return MappingProxyType(codes)
        if root.is_leaf:
            # A lone leaf has no path, so it gets the one-bit code
            codes[root.symbol] = "0"
            return MappingProxyType(codes)

        def walk(node, current_code):
            if node.is_leaf:
                codes[node.symbol] = current_code
                return
            walk(node.left, current_code + "0")
            walk(node.right, current_code + "1")

        walk(root, "")
        return MappingProxyType(codes)
