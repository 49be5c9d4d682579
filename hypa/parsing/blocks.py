"""
Block model produced by the parser.

A block is either a LinkBlock or a TextBlock. Blocks are frozen; the only
post-creation change is the label of the most recent link, done by replacing
the last element of a BlockSequence.
"""

from dataclasses import dataclass, replace

from hypa.errors import MalformedStateError


@dataclass(frozen=True)
class LinkBlock:
    """
    A hyperlink on its own line.

    Attributes:
        url: Target of the link, taken verbatim from the "@" line.
        label: Text from the following "?" line, or None if there was none.
    """
    url: str
    label: str | None = None

    @property
    def text(self) -> str:
        """Visible text: the label, falling back to the url when empty."""
        return self.label or self.url


@dataclass(frozen=True)
class TextBlock:
    """A paragraph holding one trimmed input line."""
    content: str


Block = LinkBlock | TextBlock


class BlockSequence:
    """
    Append-only container of blocks in input order.
    """

    def __init__(self):
        self._blocks: list[Block] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self):
        return iter(self._blocks)

    def append(self, block: Block) -> None:
        self._blocks.append(block)

    def relabel_last(self, label: str, line_index: int) -> LinkBlock:
        """
        Sets the label of the last block, which must be a link.

        Args:
            label: New label text.
            line_index: Index of the label line, used in the error message.

        Returns:
            The replaced LinkBlock.

        Raises:
            MalformedStateError: If the sequence is empty or ends with a non-link.
        """
        if not self._blocks or not isinstance(self._blocks[-1], LinkBlock):
            raise MalformedStateError(line_index)

        labeled = replace(self._blocks[-1], label=label)
        self._blocks[-1] = labeled
        return labeled

    def freeze(self) -> tuple[Block, ...]:
        return tuple(self._blocks)
