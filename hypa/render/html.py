"""
HTML Rendering Module.

Maps parsed blocks to HTML fragments and wraps them in a page shell with an
inlined stylesheet. Content is inserted verbatim; nothing is escaped.
"""

from pathlib import Path

from loguru import logger

from hypa.constants import DEFAULT_TITLE
from hypa.parsing.blocks import Block, LinkBlock, TextBlock

BUNDLED_STYLESHEET = Path(__file__).with_name("render.css")

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
\t<meta charset="UTF-8">
\t<meta http-equiv="X-UA-Compatible" content="IE=edge">
\t<meta name="viewport" content="width=device-width, initial-scale=1.0">
\t<title>{title}</title>
\t<style>{css}</style>
</head>
<body>
\t<main>{content}</main>
</body>
</html>
"""


def load_stylesheet(path: Path | None = None) -> str:
    """
    Reads the stylesheet to inline into the document.

    Args:
        path: Explicit stylesheet file; the bundled render.css when None.

    Raises:
        FileNotFoundError: If the stylesheet does not exist.
    """
    css_path = Path(path) if path else BUNDLED_STYLESHEET
    if not css_path.exists():
        raise FileNotFoundError(f"Stylesheet not found: {css_path}")
    return css_path.read_text(encoding="utf-8")


def render_link(url: str, label: str | None = None) -> str:
    # An empty label falls back to the url, same as a missing one
    return f"""
<div>
  <a href="{url}">{label or url}</a>
</div>
"""


def render_text(content: str) -> str:
    return f"<p>{content}</p>"


def render_block(block: Block) -> str:
    """Render one block; raises TypeError for anything that is not a block."""
    if isinstance(block, LinkBlock):
        return render_link(block.url, block.label)
    if isinstance(block, TextBlock):
        return render_text(block.content)
    raise TypeError(f"Cannot render {type(block).__name__}")


def build_html(
    blocks: tuple[Block, ...] | list[Block],
    title: str = DEFAULT_TITLE,
    css: str | None = None,
) -> str:
    """
    Build the complete HTML document.

    Args:
        blocks: Parsed blocks, rendered in order with no separator.
        title: Document title.
        css: Stylesheet text; the bundled stylesheet is loaded when None.

    Returns:
        The document as a string.
    """
    if css is None:
        css = load_stylesheet()

    content = "".join(render_block(block) for block in blocks)
    logger.debug(f"Rendered {len(blocks)} blocks into '{title}'")

    return PAGE_TEMPLATE.format(title=title, css=css, content=content)
