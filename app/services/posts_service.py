import datetime
import logging
from collections import Counter
from typing import List, Optional

from dateutil import parser as date_parser

from app.schemas.blog import PostDetail, PostSummary, TagCount
from app.services.content_parser import (
    ContentParser,
    convert_date,
    derive_title,
    normalize_tags,
    passthrough,
)
from app.utils import DEFAULT_WORDS_PER_MINUTE, calculate_reading_time

logger = logging.getLogger(__name__)

POST_FIELDS = ("title", "date", "excerpt", "tags")
OLDEST = datetime.datetime.min


class PostsService:
    def __init__(
        self,
        repo,
        parser: Optional[ContentParser] = None,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ):
        self.repo = repo
        self.parser = parser or ContentParser()
        self.words_per_minute = words_per_minute

    def list_posts(self, tag: Optional[str] = None) -> List[PostSummary]:
        posts = self._load_all()
        if tag:
            wanted = tag.casefold()
            posts = [p for p in posts if wanted in (t.casefold() for t in p.tags)]
        return [PostSummary(**p.model_dump(exclude={"content"})) for p in posts]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        text = self.repo.read(slug)
        if text is None:
            return None
        return self._parse(text, slug)

    def list_tags(self) -> List[TagCount]:
        counts = Counter(t for post in self._load_all() for t in post.tags)
        return [
            TagCount(tag=tag, count=count)
            for tag, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        ]

    def _load_all(self) -> List[PostDetail]:
        posts = []
        for slug in self.repo.list_slugs():
            text = self.repo.read(slug)
            if text is None:
                continue
            post = self._parse(text, slug)
            if post:
                posts.append(post)

        # Stable sort: posts sharing a date keep slug order
        posts.sort(key=lambda p: _date_sort_key(p.date), reverse=True)
        return posts

    def _parse(self, text: str, slug: str) -> Optional[PostDetail]:
        try:
            return parse_post(
                text, slug, parser=self.parser, words_per_minute=self.words_per_minute
            )
        except Exception as e:
            logger.warning(f"Failed to parse post {slug}: {e}")
            return None


def parse_post(
    text: str,
    slug: str,
    *,
    parser: Optional[ContentParser] = None,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> PostDetail:
    """Parse one content file into a post. Raises on malformed front matter."""
    metadata, content = (parser or ContentParser()).split(text)

    return PostDetail(
        slug=slug,
        title=derive_title(metadata, slug),
        date=convert_date(metadata.get("date")),
        excerpt=str(metadata.get("excerpt") or ""),
        tags=normalize_tags(metadata.get("tags")),
        readingTime=calculate_reading_time(content, words_per_minute),
        content=content,
        extra=passthrough(metadata, POST_FIELDS),
    )


def _date_sort_key(value: Optional[str]) -> datetime.datetime:
    """Missing or unparsable dates sort as the oldest.

    ISO dates are tried first, then free-form ones such as "January 5, 2024".
    """
    if not value:
        return OLDEST
    try:
        parsed = date_parser.isoparse(value)
    except ValueError:
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            return OLDEST
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed
