from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from snippetvault import language_registry
from snippetvault.errors import DirectoryError
from snippetvault.language_registry import LanguageEntry
from snippetvault.path_manager import PathManager
from snippetvault.tool_bridge import ToolBridge

logger = logging.getLogger(__name__)

MARKDOWN_TEMPLATE = """# Title: {language} - Snippet
# ---
### Tags: {tags}

### Content

```{language}

```
### Link:
### Note:
"""


def render_template(entry: LanguageEntry, tags: Sequence[str]) -> str:
    """Initial body of a new snippet file for ``entry``."""
    tag_text = ", ".join(tags)
    if entry.extension == "md":
        return MARKDOWN_TEMPLATE.format(language=entry.name, tags=tag_text)
    if entry.comment:
        return (
            f"{entry.comment} Title: {entry.name} - Snippet\n"
            f"{entry.comment} Tags: {tag_text}\n"
            "\n"
        )
    return ""


class SnippetStore:
    """Create, list and open snippet files kept in a single flat directory."""

    def __init__(self, paths: PathManager, bridge: ToolBridge) -> None:
        self.paths = paths
        self.bridge = bridge

    def create(self, language: str, tags: Sequence[str] = (), now: Optional[datetime] = None) -> Path:
        """Create a snippet and open it in the editor.

        Nothing touches the disk if the language is unknown or the editor
        cannot be found. An existing file at the computed path is opened as-is.
        """
        entry = language_registry.get(language)
        self.bridge.require_editor()
        self.paths.ensure_storage_dir()

        target = self.paths.build_snippet_path(language, tags, now or datetime.now())
        try:
            if target.exists():
                logger.warning("Snippet already exists, opening it unchanged: %s", target)
            else:
                target.write_text(render_template(entry, list(tags)), encoding="utf-8")
                logger.info("Snippet created: %s", target)
        except OSError as exc:
            raise DirectoryError(f"Cannot write snippet {target}: {exc}") from exc

        self.bridge.open_editor(target)
        if self.bridge.is_available(self.bridge.config.previewer):
            self.bridge.preview(target)
        else:
            logger.warning("Skipping preview: %s is not installed", self.bridge.config.previewer)
        return target

    def list_snippets(self) -> List[Path]:
        directory = self.paths.storage_dir
        if not directory.is_dir():
            logger.info("Snippet directory does not exist yet: %s", directory)
            return []
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            raise DirectoryError(f"Cannot read snippet directory {directory}: {exc}") from exc
        return sorted(p for p in entries if p.is_file() and not p.name.startswith("."))

    def _select(self, candidates: Sequence[str], preview_command: str) -> Optional[Path]:
        directory = self.paths.storage_dir
        selected = self.bridge.fuzzy_select(candidates, cwd=directory, preview_command=preview_command)
        if selected is None:
            return None
        return directory / selected

    def _select_and_open(self) -> Optional[Path]:
        self.bridge.require_editor()
        snippets = self.list_snippets()
        if not snippets:
            return None
        chosen = self._select([p.name for p in snippets], self.bridge.preview_command())
        if chosen is not None:
            self.bridge.open_editor(chosen)
        return chosen

    def browse(self) -> Optional[Path]:
        """Fuzzy list with a rendered preview pane; the pick is opened for editing."""
        return self._select_and_open()

    def edit(self) -> Optional[Path]:
        """Fuzzy-select an existing snippet and open it in the editor."""
        return self._select_and_open()

    def find_in_files(self, term: str) -> Optional[Path]:
        """Pick among snippets whose content matches ``term`` and open the pick."""
        directory = self.paths.storage_dir
        if not directory.is_dir():
            logger.info("Snippet directory does not exist yet: %s", directory)
            return None
        self.bridge.require_editor()
        matches = self.bridge.search_files(term, directory)
        if not matches:
            return None
        chosen = self._select(matches, self.bridge.search_preview_command(term))
        if chosen is not None:
            self.bridge.open_editor(chosen)
        return chosen
