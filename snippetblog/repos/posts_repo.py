import logging
import os
import re
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")


class InvalidSlugError(ValueError):
    pass


class FilePostsRepo:
    """Read-only access to a directory of ``<slug><extension>`` post files."""

    def __init__(self, posts_dir, extension: str = ".md"):
        self.posts_dir = Path(posts_dir)
        self.extension = extension

    def list_slugs(self) -> List[str]:
        # iterdir() raises FileNotFoundError for a missing directory
        slugs = [
            entry.name[: -len(self.extension)]
            for entry in self.posts_dir.iterdir()
            if entry.name.endswith(self.extension) and not entry.is_dir()
        ]
        for slug in slugs:
            self._check_slug(slug)
        return sorted(slugs)

    def read_post(self, slug: str) -> str:
        self._check_slug(slug)
        return self.path_for(slug).read_text(encoding="utf-8")

    def get_post_text(self, slug: str) -> Optional[str]:
        if not self.is_valid_slug(slug):
            logger.debug(f"Rejected malformed slug {slug!r}")
            return None

        path = self.path_for(slug)
        if not path.is_file() or not os.access(path, os.R_OK):
            logger.debug(f"No readable post file at {path}")
            return None
        return path.read_text(encoding="utf-8")

    def path_for(self, slug: str) -> Path:
        return self.posts_dir / f"{slug}{self.extension}"

    @staticmethod
    def is_valid_slug(slug: str) -> bool:
        return bool(slug) and SLUG_PATTERN.fullmatch(slug) is not None

    def _check_slug(self, slug: str) -> None:
        if not self.is_valid_slug(slug):
            raise InvalidSlugError(
                f"Malformed post filename {slug}{self.extension} in {self.posts_dir}"
            )
