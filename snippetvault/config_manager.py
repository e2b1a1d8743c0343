from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SNIPPET_DIR = Path("Documents") / "myObsidianDoc" / "mysnippetsCollection"
DEFAULT_CONFIG_PATH = Path(".config") / "snippetvault" / "config.yml"

# Checked in order before falling back to a bare "nvim" on PATH.
EDITOR_CANDIDATES = (
    "~/dev/nvim/bin/nvim",
    "~/dev/neovim/build/bin/nvim",
    "~/dev/neovim/bin/nvim",
    "/usr/local/bin/nvim",
)

ENV_STORAGE_DIR = "SNIPPETVAULT_DIR"
ENV_EDITOR = "SNIPPETVAULT_EDITOR"
ENV_CONFIG = "SNIPPETVAULT_CONFIG"


@dataclass(frozen=True)
class VaultConfig:
    storage_dir: Path
    editor: str
    finder: str = "fzf"
    previewer: str = "glow"
    searcher: str = "rg"
    preview_style: str = "dark"


class ConfigManager:
    """Resolve a :class:`VaultConfig` from the environment, a YAML file and defaults.

    Precedence is environment, then config file, then built-in defaults. Tests
    pass ``environ`` and ``home`` so nothing is read from the real user profile.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._home = Path(home) if home is not None else Path.home()
        if config_path is None and self._environ.get(ENV_CONFIG):
            config_path = Path(self._environ[ENV_CONFIG])
        self.config_path = self._expand(config_path) if config_path is not None else self._home / DEFAULT_CONFIG_PATH
        self._preferences: Dict[str, Any] = self._load_preferences()

    def _expand(self, value: Any) -> Path:
        text = str(value)
        if text == "~" or text.startswith("~/"):
            return self._home / text[2:]
        return Path(text)

    def _load_preferences(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}
        try:
            data = yaml.safe_load(self.config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", self.config_path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a mapping at top level", self.config_path)
            return {}
        return data

    def get_preferences(self) -> Dict[str, Any]:
        return dict(self._preferences)

    def _pick(self, env_key: Optional[str], pref_key: str) -> Optional[str]:
        if env_key and self._environ.get(env_key):
            return self._environ[env_key]
        value = self._preferences.get(pref_key)
        if value:
            return str(value)
        return None

    def get_storage_dir(self) -> Path:
        override = self._pick(ENV_STORAGE_DIR, "storage_dir")
        if override:
            return self._expand(override)
        return self._home / DEFAULT_SNIPPET_DIR

    def get_editor(self) -> str:
        override = self._pick(ENV_EDITOR, "editor")
        if override:
            return str(self._expand(override)) if override.startswith("~") else override
        for candidate in EDITOR_CANDIDATES:
            path = self._expand(candidate)
            if path.exists():
                return str(path)
        return "nvim"

    def load(self) -> VaultConfig:
        config = VaultConfig(
            storage_dir=self.get_storage_dir(),
            editor=self.get_editor(),
            finder=self._pick(None, "finder") or "fzf",
            previewer=self._pick(None, "previewer") or "glow",
            searcher=self._pick(None, "searcher") or "rg",
            preview_style=self._pick(None, "preview_style") or "dark",
        )
        logger.debug("Loaded configuration: %s", config)
        return config
