import logging
from typing import List, Optional

from app.schemas.pages import PageDetail, PageSummary
from app.services.content_parser import (
    ContentParser,
    derive_title,
    normalize_tags,
    passthrough,
)

logger = logging.getLogger(__name__)

PAGE_FIELDS = ("title", "excerpt", "order", "tags")


class PagesService:
    """Service descriptions and project case studies, one directory each."""

    def __init__(self, repo, parser: Optional[ContentParser] = None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def list_pages(self) -> List[PageSummary]:
        pages = []
        for slug in self.repo.list_slugs():
            page = self.get_page(slug)
            if page:
                pages.append(page)

        pages.sort(key=_order_key)
        return [PageSummary(**p.model_dump(exclude={"content"})) for p in pages]

    def get_page(self, slug: str) -> Optional[PageDetail]:
        text = self.repo.read(slug)
        if text is None:
            return None
        try:
            return parse_page(text, slug, parser=self.parser)
        except Exception as e:
            logger.warning(f"Failed to parse page {slug}: {e}")
            return None


def parse_page(text: str, slug: str, *, parser: Optional[ContentParser] = None) -> PageDetail:
    metadata, content = (parser or ContentParser()).split(text)
    extra = passthrough(metadata, PAGE_FIELDS)
    order = _coerce_order(metadata.get("order"))
    if order is None and metadata.get("order") is not None:
        logger.warning(
            f"Page {slug} has non-integer order {metadata['order']!r}; kept in extra"
        )
        extra["order"] = metadata["order"]

    return PageDetail(
        slug=slug,
        title=derive_title(metadata, slug),
        excerpt=str(metadata.get("excerpt") or ""),
        order=order,
        tags=normalize_tags(metadata.get("tags")),
        content=content,
        extra=extra,
    )


def _coerce_order(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _order_key(page: PageDetail):
    return (page.order is None, page.order or 0, page.title.casefold())
