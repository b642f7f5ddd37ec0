import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class FilesystemContentRepo:
    """Reads content files of one extension from a single directory."""

    def __init__(self, content_dir, extension: str = ".mdx"):
        self.content_dir = Path(content_dir)
        self.extension = extension

    def list_slugs(self) -> List[str]:
        if not self.content_dir.is_dir():
            logger.info(f"Content directory {self.content_dir} does not exist")
            return []
        return sorted(
            path.name[: -len(self.extension)]
            for path in self.content_dir.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        )

    def path_for(self, slug: str) -> Optional[Path]:
        if not slug or "/" in slug or "\\" in slug or slug in (".", ".."):
            return None
        root = self.content_dir.resolve()
        path = (root / f"{slug}{self.extension}").resolve()
        if path.parent != root:
            return None
        return path

    def read(self, slug: str) -> Optional[str]:
        path = self.path_for(slug)
        if path is None:
            logger.warning(f"Rejected invalid slug {slug!r}")
            return None
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None
