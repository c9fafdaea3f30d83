import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
ZERO_WIDTH_SPACE = "\u200b"


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def strip_zero_width(text: str) -> str:
    # Pasted code from rendered posts can carry zero-width spaces
    return text.replace(ZERO_WIDTH_SPACE, "")
