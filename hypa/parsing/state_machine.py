"""
Entry point for parsing hypa text into blocks.
This module acts as a facade for the HypaParser class.
"""

from .blocks import Block
from .parser import HypaParser


def parse_hypa(text: str) -> tuple[Block, ...]:
    """
    Parse a hypa document into blocks using a fresh HypaParser.

    Returns:
        The ordered, immutable block sequence.
    """
    return HypaParser().parse(text)
