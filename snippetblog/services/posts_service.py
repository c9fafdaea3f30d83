import logging
from typing import Callable, List, Optional

from snippetblog.schemas.blog import PostDetail, PostSummary
from snippetblog.services.content_parser import (
    DEFAULT_ABRIDGE_LIMIT,
    abridge_content,
    load_post,
    parse_front_matter,
)
from snippetblog.utils import render_markdown

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        renderer: Callable[[str], str] = render_markdown,
        abridge_limit: int = DEFAULT_ABRIDGE_LIMIT,
    ):
        self.repo = repo
        self.renderer = renderer
        self.abridge_limit = abridge_limit

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for slug in self.repo.list_slugs():
            metadata, body = parse_front_matter(self.repo.read_post(slug))
            preview = abridge_content(body, self.abridge_limit)
            posts.append(
                PostSummary(
                    name=slug,
                    title=metadata.get("title"),
                    date=metadata.get("date"),
                    link=f"/{slug}",
                    content=self.renderer(preview),
                )
            )

        # slugs arrive sorted, and sort() is stable, so equal dates keep slug order
        posts.sort(key=lambda p: p.date or "", reverse=True)
        logger.debug(f"Listed {len(posts)} posts")
        return posts

    def get_post(self, slug: str) -> Optional[PostDetail]:
        text = self.repo.get_post_text(slug)
        if text is None:
            return None

        post = load_post(text)
        # The body goes out as markdown; rendering is up to the page
        return PostDetail(
            slug=slug,
            title=post.get("title"),
            date=post.get("date"),
            metadata=post.metadata,
            content=post.content,
        )
