"""
Hypa parsing submodule.
"""

from .blocks import Block, BlockSequence, LinkBlock, TextBlock
from .parser import HypaParser, ParserState
from .state_machine import parse_hypa

__all__ = [
    "Block",
    "BlockSequence",
    "HypaParser",
    "LinkBlock",
    "ParserState",
    "TextBlock",
    "parse_hypa",
]
