"""
Line markers for the hypa format.

A marker is the first character of a trimmed line. The payload starts after
the marker and exactly one separator character ("@ url", "? label").
"""

LINK_MARKER = "@"
LABEL_MARKER = "?"
COMMENT_MARKER = "#"
COMMENT_BLOCK_MARKER = "###"

PAYLOAD_OFFSET = 2


def payload(line: str) -> str:
    """Strip the marker and its separator from a line."""
    return line[PAYLOAD_OFFSET:]


def is_link(line: str) -> bool:
    return line.startswith(LINK_MARKER)


def is_label(line: str) -> bool:
    return line.startswith(LABEL_MARKER)


def is_comment_block_fence(line: str) -> bool:
    # Prefix check on the first three characters, so "####" also counts
    return line[:3] == COMMENT_BLOCK_MARKER


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_MARKER)
