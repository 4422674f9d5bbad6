# filename: huffman_frequency.py

from collections import Counter
from types import MappingProxyType

from text_source import LINE_TERMINATOR, split_lines


def count_frequencies(lines):
    # lines: iterable of (line, terminated) pairs
    freqs = Counter()
    terminators = 0
    for line, terminated in lines:
        freqs.update(line)
        if terminated:
            terminators += 1

    # Terminator stays absent rather than zero when no line ended with one
    if terminators > 0:
        freqs[LINE_TERMINATOR] = terminators
    return MappingProxyType(dict(freqs))


def frequency_table_from_text(text):
    return count_frequencies(split_lines(text))
