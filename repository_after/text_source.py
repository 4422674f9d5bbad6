# filename: text_source.py

import io
import logging
import os

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


def split_lines(text):
    """Split text into ``(line, terminated)`` pairs.

    ``terminated`` is True when the line was followed by a line terminator.
    A trailing terminator does not produce an extra empty line.
    """
    pairs = []
    for raw in io.StringIO(text):
        if raw.endswith(LINE_TERMINATOR):
            pairs.append((raw[:-1], True))
        else:
            pairs.append((raw, False))
    return pairs


def read_lines(source, encoding="utf-8"):
    """Read a path or an open text stream into ``(line, terminated)`` pairs.

    Files are read without newline translation so a carriage return stays content.
    Returns None when the source cannot be read. Streams are read but left
    open for the caller.
    """
    if isinstance(source, (str, bytes, os.PathLike)):
        try:
            with open(source, "r", encoding=encoding, newline="") as handle:
                text = handle.read()
        except (OSError, ValueError) as exc:
            logger.warning("cannot read text source %r: %s", source, exc)
            return None
    elif hasattr(source, "read"):
        try:
            text = source.read()
        except (OSError, ValueError) as exc:
            logger.warning("cannot read text stream %r: %s", source, exc)
            return None
        if not isinstance(text, str):
            raise TypeError("text stream returned %s, expected str" % type(text).__name__)
    else:
        raise TypeError("unsupported text source type: %s" % type(source).__name__)

    return split_lines(text)
