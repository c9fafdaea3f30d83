import textwrap

import pytest


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, texts: dict[str, str]):
        self.texts = texts
        self.calls = []

    def list_slugs(self):
        self.calls.append("list_slugs")
        return sorted(self.texts)

    def read_post(self, slug: str) -> str:
        self.calls.append(slug)
        return textwrap.dedent(self.texts[slug]).lstrip()

    def get_post_text(self, slug: str) -> str | None:
        self.calls.append(slug)
        raw = self.texts.get(slug)
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return


class FakeCodeRunner:
    """
    Records submitted code and returns a canned output.
    """

    def __init__(self, output: str = "", error: Exception | None = None):
        self.output = output
        self.error = error
        self.calls = []

    async def run(self, code: str) -> str:
        self.calls.append(code)
        if self.error:
            raise self.error
        return self.output


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "post"
    directory.mkdir()
    return directory


@pytest.fixture
def write_post(posts_dir):
    def _write(slug: str, text: str, extension: str = ".md"):
        path = posts_dir / f"{slug}{extension}"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
