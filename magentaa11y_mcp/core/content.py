"""Content store: loads content.json once per process and serves it read-only."""

import json
import logging
import threading
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from magentaa11y_mcp.config import get_config
from magentaa11y_mcp.models.domain import CategorySummary, DocumentCollection

logger = logging.getLogger(__name__)

PACKAGED_CONTENT_PATH = Path(__file__).resolve().parent.parent / "data" / "content.json"

_load_lock = threading.Lock()


class LoadError(Exception):
    """Raised when the content artifact is missing or structurally invalid."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


def resolve_content_path(path: Path | str | None = None) -> Path:
    """Pick the content artifact: explicit path, then settings, then packaged data."""
    if path is None:
        path = get_config().content_path
    if path is None:
        return PACKAGED_CONTENT_PATH
    return Path(path).expanduser().resolve()


def parse_content(raw: object, source: Path | None = None) -> DocumentCollection:
    """Validate a decoded JSON tree into a DocumentCollection.

    Raises:
        LoadError: If the tree does not match the content shape
    """
    if not isinstance(raw, dict):
        raise LoadError(
            f"Content root must be an object, got {type(raw).__name__}", source
        )
    try:
        return DocumentCollection.model_validate(raw)
    except ValidationError as e:
        raise LoadError(f"Invalid content structure: {e}", source) from e


@lru_cache(maxsize=None)
def _read_collection(path: Path) -> DocumentCollection:
    if not path.is_file():
        raise LoadError(f"Content file not found: {path}", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except UnicodeDecodeError as e:
        raise LoadError(f"Content file is not valid UTF-8: {e}", path) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Content file is not valid JSON: {e}", path) from e
    except OSError as e:
        raise LoadError(f"Cannot read content file: {e}", path) from e

    collection = parse_content(raw, path)
    logger.info(
        "Loaded accessibility content",
        extra={
            "extra_data": {
                "path": path,
                "web": collection.component_count("web"),
                "native": collection.component_count("native"),
            }
        },
    )
    return collection


def load_content(path: Path | str | None = None) -> DocumentCollection:
    """Return the process-wide document collection, loading it on first use.

    Every call for the same artifact returns the same instance. Concurrent
    first calls load at most once.

    Raises:
        LoadError: If the artifact is absent or invalid
    """
    resolved = resolve_content_path(path)
    with _load_lock:
        return _read_collection(resolved)


def reset_content_cache() -> None:
    """Forget loaded collections so the next load re-reads the artifact."""
    with _load_lock:
        _read_collection.cache_clear()


def list_categories(
    platform: str, content: DocumentCollection | None = None
) -> list[CategorySummary]:
    """List a platform's categories with their component counts."""
    content = content if content is not None else load_content()
    return [
        CategorySummary(
            name=category.name,
            label=category.label,
            component_count=len(category.children),
        )
        for category in content.categories(platform)
    ]
