from __future__ import annotations

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from snippetvault import language_registry
from snippetvault.config_manager import VaultConfig
from snippetvault.errors import DirectoryError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
FIELD_SEPARATOR = "_"
# Limits are in encoded bytes.
MAX_TAG_BYTES = 40
MAX_FILENAME_BYTES = 255

_SEPARATOR_RUN = re.compile(r"[\s_]+")
_UNSAFE_CHARS = re.compile(r"[^\w.+#-]")
_DASH_RUN = re.compile(r"-{2,}")


def byte_length(text: str) -> int:
    return len(os.fsencode(text))


def truncate_bytes(text: str, limit: int) -> str:
    """Shorten ``text`` to at most ``limit`` encoded bytes without splitting a character."""
    while text and byte_length(text) > limit:
        text = text[:-1]
    return text


def sanitize_tag(tag: str) -> Optional[str]:
    """Make a free-form tag safe to embed in a filename.

    Returns ``None`` when nothing usable is left, in which case the tag is
    simply left out of the name.
    """
    cleaned = _SEPARATOR_RUN.sub("-", tag.strip())
    cleaned = _UNSAFE_CHARS.sub("", cleaned)
    cleaned = _DASH_RUN.sub("-", cleaned).strip("-.")
    cleaned = truncate_bytes(cleaned, MAX_TAG_BYTES).rstrip("-.")
    return cleaned or None


def format_timestamp(timestamp: datetime) -> str:
    return timestamp.strftime(TIMESTAMP_FORMAT)


class PathManager:
    """Resolve the snippet directory and build snippet file paths."""

    def __init__(self, config: VaultConfig) -> None:
        self._config = config

    @property
    def storage_dir(self) -> Path:
        return Path(self._config.storage_dir)

    def resolve_storage_dir(self) -> Path:
        return self.storage_dir

    def ensure_storage_dir(self) -> Path:
        target = self.storage_dir
        if target.is_dir():
            return target
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryError(f"Cannot create snippet directory {target}: {exc}") from exc
        logger.info("Directory created: %s", target)
        return target

    def build_filename(self, language: str, tags: Sequence[str], timestamp: datetime) -> str:
        extension = language_registry.extension_for(language)
        suffix = f".{extension}"
        parts: List[str] = [format_timestamp(timestamp), language]
        for raw in tags:
            tag = sanitize_tag(raw)
            if tag is None:
                logger.debug("Dropping tag %r: nothing left after sanitizing", raw)
                continue
            candidate = FIELD_SEPARATOR.join(parts + [tag]) + suffix
            if byte_length(candidate) > MAX_FILENAME_BYTES:
                logger.warning("Dropping tag %r and any after it: filename would be too long", raw)
                break
            parts.append(tag)
        return FIELD_SEPARATOR.join(parts) + suffix

    def build_snippet_path(self, language: str, tags: Sequence[str], timestamp: datetime) -> Path:
        return self.storage_dir / self.build_filename(language, tags, timestamp)
