import datetime
import os
from typing import Any, List, Tuple

import frontmatter


class MalformedFrontMatter(ValueError):
    """Raised when a header block cannot be loaded as a mapping."""


class ContentParser:
    def __init__(self, handlers=None):
        self.handlers = handlers if handlers is not None else frontmatter.handlers

    def split(self, text: str) -> Tuple[dict, str]:
        """Split a content file into its front-matter mapping and raw body.

        The body is returned as written, minus the line break that ends the
        closing delimiter. Files without a header block yield ``{}`` and the
        whole text.
        """
        text = text.removeprefix("\ufeff")
        handler = frontmatter.detect_format(text, self.handlers)
        if handler is None:
            return {}, text

        try:
            fm, _ = handler.split(text)
        except ValueError:
            # Opening delimiter without a closing one
            return {}, text

        try:
            metadata = handler.load(fm)
        except Exception as e:
            raise MalformedFrontMatter(f"Could not load front matter: {e}") from e

        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise MalformedFrontMatter(
                f"Front matter must be a mapping, got {type(metadata).__name__}"
            )
        return metadata, _body_after_header(handler, text)


def _body_after_header(handler, text: str) -> str:
    # Body starts after the line break ending the closing delimiter line;
    # FM_BOUNDARY's trailing \s* may also match blank lines below it.
    boundaries = handler.FM_BOUNDARY.finditer(text)
    next(boundaries)
    closing = next(boundaries)
    line_end = text.find("\n", closing.start())
    if line_end == -1:
        return ""
    return text[line_end + 1 :]


def normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def derive_title(metadata: dict, slug: str) -> str:
    if metadata and metadata.get("title"):
        return str(metadata["title"])
    clean_slug = os.path.basename(slug)
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def passthrough(metadata: dict, known: Tuple[str, ...]) -> dict[str, Any]:
    return {str(key): value for key, value in metadata.items() if key not in known}
