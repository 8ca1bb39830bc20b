"""Markup body rendering with markdown-it"""

import logging

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from mdpost.core.utils.slug import slugify
from mdpost.errors import MarkupRenderError


logger = logging.getLogger(__name__)


def _heading_anchors(state: StateCore) -> None:
    """Core rule: give every heading a stable id derived from its text."""
    used: set[str] = set()
    tokens = state.tokens
    for i, tok in enumerate(tokens):
        if tok.type != 'heading_open':
            continue
        inline = tokens[i + 1]
        text = ''.join(c.content for c in inline.children or [] if c.type in ('text', 'code_inline'))
        base = slugify(text) or 'section'
        anchor, n = base, 0
        while anchor in used:
            n += 1
            anchor = f"{base}-{n}"
        used.add(anchor)
        tok.attrSet('id', anchor)


def make_parser(preset: str = 'gfm-like', heading_anchors: bool = True) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name.

    Raw HTML in the body is escaped rather than passed through.
    """
    md = MarkdownIt(preset, options_update={"linkify": False, "html": False})
    if heading_anchors:
        md.core.ruler.push('heading_anchors', _heading_anchors)
    return md


def _fence_closed(tok: Token, lines: list[str]) -> bool:
    """True if the last line covered by a fence token is a closing fence."""
    start, end = tok.map
    if end - 1 <= start or end > len(lines):
        return False
    # fences nested in block quotes or list items carry the container prefix
    closing = lines[end - 1].lstrip(' \t>').rstrip()
    return closing.startswith(tok.markup) and set(closing) == {tok.markup[0]}


def check_fences(tokens: list[Token], body: str, line_offset: int = 0) -> None:
    """Raise MarkupRenderError for the first code fence left open at end of input."""
    lines = body.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    for tok in tokens:
        if tok.type == 'fence' and tok.map and not _fence_closed(tok, lines):
            line = tok.map[0] + line_offset + 1
            raise MarkupRenderError(f"Unterminated code fence opened at line {line}", line=line)


def render_markdown(
    body: str,
    parser_config: str = 'gfm-like',
    heading_anchors: bool = True,
    line_offset: int = 0,
    ) -> str:
    """Render a markup body to an HTML fragment.

    Fenced code keeps its language tag as class="language-<lang>" for
    downstream highlighting. line_offset shifts reported line numbers so they
    point into the original file rather than the body.
    """
    md = make_parser(parser_config, heading_anchors)
    tokens = md.parse(body)
    check_fences(tokens, body, line_offset)
    html = md.renderer.render(tokens, md.options, {})
    logger.debug("Rendered %d tokens to %d chars of HTML", len(tokens), len(html))
    return html
