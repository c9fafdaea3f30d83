from snippetblog.utils import render_markdown, strip_zero_width


def test_render_markdown_handles_fenced_code():
    html = render_markdown("```\nsay 42\n```\n")
    assert "<code>say 42" in html


def test_render_markdown_paragraph():
    assert render_markdown("Hello *world*") == "<p>Hello <em>world</em></p>"


def test_strip_zero_width_removes_only_zero_width_spaces():
    assert strip_zero_width("a\u200bb\u200b c") == "ab c"
    assert strip_zero_width("plain") == "plain"
