import logging
import re
from typing import Dict, Tuple

import frontmatter
from frontmatter.default_handlers import BaseHandler

logger = logging.getLogger(__name__)

# "%% key: value" anchored at the start of the remaining text
HEADER_LINE = re.compile(r"%%[ \t]*(\w+)[ \t]*:(.+)(?:\n|\Z)")

DEFAULT_ABRIDGE_LIMIT = 1000


class PercentHandler(BaseHandler):
    """
    Front matter made of leading ``%% key: value`` lines.

    Unlike YAML or TOML front matter there are no delimiters: the header is
    every contiguous matching line from the top of the file, and the body
    starts at the first line that does not match.
    """

    # BaseHandler.__init__ refuses a handler without a boundary pattern
    FM_BOUNDARY = HEADER_LINE

    def detect(self, text: str) -> bool:
        return HEADER_LINE.match(text) is not None

    def split(self, text: str) -> Tuple[str, str]:
        pos = 0
        while True:
            match = HEADER_LINE.match(text, pos)
            if match is None:
                break
            pos = match.end()
        return text[:pos], text[pos:]

    def load(self, fm: str, **kwargs) -> Dict[str, str]:
        metadata: Dict[str, str] = {}
        for key, value in HEADER_LINE.findall(fm):
            # later lines win
            metadata[key] = value.strip()
        return metadata


handler = PercentHandler()


def parse_front_matter(text: str) -> Tuple[Dict[str, str], str]:
    """Split raw post text into its header mapping and the untouched body."""
    if not handler.detect(text):
        return {}, text

    header, body = handler.split(text)
    metadata = handler.load(header)
    logger.debug(f"Parsed {len(metadata)} front matter keys")
    return metadata, body


def load_post(text: str) -> frontmatter.Post:
    metadata, body = parse_front_matter(text)
    post = frontmatter.Post(body, handler=handler)
    post.metadata.update(metadata)
    return post


def abridge_content(body: str, limit: int = DEFAULT_ABRIDGE_LIMIT) -> str:
    """
    Build a preview from the leading lines of ``body``.

    Lines are appended (newline-prefixed) until the preview is already longer
    than ``limit``, so the result can overshoot by one line. Short bodies come
    back whole with a leading newline.
    """
    if not body:
        return ""

    preview = ""
    for line in body.split("\n"):
        if len(preview) > limit:
            break
        preview += "\n" + line
    return preview
