"""Unit tests for core/render.py"""

import pytest

from mdpost.core.render import render_markdown
from mdpost.errors import MarkupRenderError


def test_fenced_go_block_has_language_class_and_escapes():
    """A fence tagged go renders as <code class="language-go"> with special characters escaped."""
    html = render_markdown('```go\nif a < b && s == "x" {\n}\n```\n')
    assert '<pre><code class="language-go">' in html
    assert 'if a &lt; b &amp;&amp; s == &quot;x&quot; {' in html


def test_fence_without_language():
    html = render_markdown('```\nplain\n```\n')
    assert '<pre><code>plain\n</code></pre>' in html


def test_headings_get_anchor_ids():
    """Headings keep their level and receive slug ids; repeats get a numeric suffix."""
    html = render_markdown('# Go Modules\n\n## Setup\n\n## Setup\n')
    assert '<h1 id="go-modules">Go Modules</h1>' in html
    assert '<h2 id="setup">Setup</h2>' in html
    assert '<h2 id="setup-1">Setup</h2>' in html


def test_heading_anchors_never_collide():
    """Generated suffixes are reserved, so a later heading cannot reuse them."""
    html = render_markdown('# Setup\n\n# Setup\n\n# Setup 1\n')
    assert '<h1 id="setup">Setup</h1>' in html
    assert '<h1 id="setup-1">Setup</h1>' in html
    assert '<h1 id="setup-1-1">Setup 1</h1>' in html
    assert html.count('id="setup-1"') == 1


def test_heading_anchor_includes_inline_code():
    html = render_markdown('## Running `go mod tidy`\n')
    assert 'id="running-go-mod-tidy"' in html


def test_heading_anchors_disabled():
    html = render_markdown('## Setup\n', heading_anchors=False)
    assert '<h2>Setup</h2>' in html


def test_emphasis_and_links():
    html = render_markdown('*one* **two** [Go](https://go.dev)\n')
    assert '<em>one</em>' in html
    assert '<strong>two</strong>' in html
    assert '<a href="https://go.dev">Go</a>' in html


def test_block_quote():
    html = render_markdown('> quoted text\n')
    assert '<blockquote>\n<p>quoted text</p>\n</blockquote>' in html


def test_raw_html_is_escaped():
    """Raw HTML in the body is rendered as text, not passed through."""
    html = render_markdown('<script>alert(1)</script>\n')
    assert '<script>' not in html
    assert '&lt;script&gt;' in html


def test_render_is_deterministic(sample_post):
    """Rendering the same body twice yields identical HTML."""
    assert render_markdown(sample_post) == render_markdown(sample_post)


@pytest.mark.parametrize("body", [
    '```go\nfunc main() {}\n```\n',
    '~~~\nx\n~~~\n',
    '```\nx\n`````\n',
    '```\n```\n',
    '> ```go\n> x := 1\n> ```\n',
    '- item\n\n  ```go\n  x := 1\n  ```\n',
])
def test_closed_fences_render(body):
    assert '<code' in render_markdown(body)


@pytest.mark.parametrize("body,line", [
    ('```go\nfunc main() {}\n', 1),
    ('Intro.\n\n```\n', 3),
    ('Text\n\n~~~python\nprint(1)\n```\n', 3),
])
def test_unterminated_fence_raises(body, line):
    """An unterminated code fence fails with MarkupRenderError naming the opening line."""
    with pytest.raises(MarkupRenderError) as exc:
        render_markdown(body)
    assert exc.value.line == line


def test_unterminated_fence_line_offset():
    with pytest.raises(MarkupRenderError, match="line 7"):
        render_markdown('\n```go\n', line_offset=5)
