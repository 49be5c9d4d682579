"""
Hypa Parser Class.

Turns the lines of a hypa document into an ordered sequence of blocks.
"""

from enum import Enum

from loguru import logger

from .blocks import Block, BlockSequence, LinkBlock, TextBlock
from .patterns import (
    is_comment,
    is_comment_block_fence,
    is_label,
    is_link,
    payload,
)


class ParserState(Enum):
    """The three mutually exclusive parser states."""
    NORMAL = "normal"
    AWAITING_LABEL = "awaiting_label"
    IN_COMMENT_BLOCK = "in_comment_block"


class HypaParser:
    """
    State machine implementation for converting hypa lines into blocks.

    Blocks are defined per line:
        "@ url"   starts a link, which may be labeled by the next line
        "? label" labels the link on the previous line
        "# ..."   single-line comment
        "###"     opens or closes a multi-line comment
        blank     separates blocks and is never rendered
        anything else is a text block

    A parser instance holds the state of one parse; call parse() once.
    """

    def __init__(self):
        self.blocks = BlockSequence()
        self.state = ParserState.NORMAL

    def parse(self, text: str) -> tuple[Block, ...]:
        """
        Converts a complete hypa document into blocks.

        Args:
            text: The whole input, newline-delimited.

        Returns:
            The blocks in input order.

        Raises:
            MalformedStateError: If a label line has no link to attach to.
        """
        lines = text.split("\n")
        for idx, raw in enumerate(lines):
            self._process_line(idx, raw.strip())

        # An unterminated comment or an unlabeled trailing link is fine
        if self.state is not ParserState.NORMAL:
            logger.debug(f"Input ended in state {self.state.value}")

        logger.debug(f"Parsed {len(self.blocks)} blocks from {len(lines)} lines")
        return self.blocks.freeze()

    def _process_line(self, idx: int, line: str):
        """
        Core logic for processing a single trimmed line and updating parser state.
        """
        if self.state is ParserState.IN_COMMENT_BLOCK:
            if is_comment_block_fence(line):
                self.state = ParserState.NORMAL
            return

        if self.state is ParserState.AWAITING_LABEL:
            self.state = ParserState.NORMAL
            if is_label(line):
                self.blocks.relabel_last(payload(line), idx)
                return
            # Not a label: the same line is classified under normal rules

        self._process_normal(line)

    def _process_normal(self, line: str):
        if is_link(line):
            self.blocks.append(LinkBlock(url=payload(line)))
            self.state = ParserState.AWAITING_LABEL
        elif is_comment_block_fence(line):
            self.state = ParserState.IN_COMMENT_BLOCK
        elif is_comment(line):
            pass
        elif line:
            self.blocks.append(TextBlock(content=line))
