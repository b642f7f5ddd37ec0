import textwrap

import pytest


class FakeRepo:
    """
    Minimal content repo stand-in used in service tests.
    Values of None simulate unreadable files.
    """

    def __init__(self, texts: dict):
        self.texts = texts
        self.reads = []

    def list_slugs(self):
        return sorted(self.texts)

    def read(self, slug):
        self.reads.append(slug)
        raw = self.texts.get(slug)
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, tags_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._tags_return = tags_return or []
        self.tag_filters = []

    def list_posts(self, tag=None):
        self.tag_filters.append(tag)
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return

    def list_tags(self):
        return self._tags_return


class FakePagesService:
    """
    Minimal pages service stand-in for router tests.
    """

    def __init__(self, list_pages_return=None, get_page_return=None):
        self._list_pages_return = list_pages_return or []
        self._get_page_return = get_page_return

    def list_pages(self):
        return self._list_pages_return

    def get_page(self, slug: str):
        return self._get_page_return


@pytest.fixture
def write_content(tmp_path):
    """Write a dedented content file into tmp_path and return its path."""

    def _write(name: str, text: str, directory=None):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write
