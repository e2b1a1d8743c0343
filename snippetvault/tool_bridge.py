from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from snippetvault.config_manager import VaultConfig
from snippetvault.errors import DependencyMissing, ExternalToolError

logger = logging.getLogger(__name__)

# fzf: 1 = no match, 130 = interrupted with Ctrl-C/Esc.
FINDER_CANCEL_CODES = (1, 130)

FINDER_OPTIONS = (
    "--exact",
    "--info=inline",
    "--border",
    "--margin=1",
    "--padding=1",
    "--sort",
    "--preview-window",
    "down:80%:wrap",
)

PathLike = Union[str, Path]


class ToolBridge:
    """Blocking wrapper around the editor, fuzzy finder, previewer and searcher.

    Each call hands the terminal to a child process and returns once it exits.
    ``runner`` and ``which`` default to :func:`subprocess.run` and
    :func:`shutil.which`; tests inject fakes instead of launching binaries.
    """

    def __init__(
        self,
        config: VaultConfig,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
        which: Optional[Callable[[str], Optional[str]]] = None,
    ) -> None:
        self._config = config
        self._runner = runner or subprocess.run
        self._which = which or shutil.which

    @property
    def config(self) -> VaultConfig:
        return self._config

    def resolve(self, tool: str) -> str:
        """Return an invocable path for ``tool`` or raise :class:`DependencyMissing`."""
        if os.sep in tool:
            if os.path.isfile(tool) and os.access(tool, os.X_OK):
                return tool
            raise DependencyMissing(tool)
        path = self._which(tool)
        if not path:
            raise DependencyMissing(tool)
        return path

    def is_available(self, tool: str) -> bool:
        try:
            self.resolve(tool)
        except DependencyMissing:
            return False
        return True

    def require_editor(self) -> str:
        return self.resolve(self._config.editor)

    def open_editor(self, *paths: PathLike) -> int:
        editor = self.require_editor()
        cmd = [editor] + [str(p) for p in paths]
        logger.debug("Running editor: %s", cmd)
        result = self._runner(cmd, check=False)
        if result.returncode != 0:
            logger.warning("Editor %s exited with status %s", self._config.editor, result.returncode)
        return result.returncode

    def preview_command(self) -> str:
        previewer = self.resolve(self._config.previewer)
        return f"{shlex.quote(previewer)} --style={shlex.quote(self._config.preview_style)} {{}}"

    def search_preview_command(self, term: str) -> str:
        searcher = self.resolve(self._config.searcher)
        return (
            f"{shlex.quote(searcher)} --ignore-case --pretty --context 10 "
            f"--colors 'match:bg:red' --colors 'match:fg:white' -- {shlex.quote(term)} {{}}"
        )

    def fuzzy_select(
        self,
        candidates: Sequence[str],
        cwd: Optional[PathLike] = None,
        preview_command: Optional[str] = None,
    ) -> Optional[str]:
        """Let the user pick one of ``candidates``; ``None`` means cancelled."""
        finder = self.resolve(self._config.finder)
        cmd: List[str] = [finder] + list(FINDER_OPTIONS)
        if preview_command:
            cmd += ["--preview", preview_command]
        logger.debug("Running finder over %d candidates: %s", len(candidates), cmd)
        result = self._runner(
            cmd,
            input="\n".join(candidates),
            stdout=subprocess.PIPE,
            text=True,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
        )
        if result.returncode in FINDER_CANCEL_CODES:
            logger.info("Selection cancelled")
            return None
        if result.returncode != 0:
            raise ExternalToolError(self._config.finder, result.returncode)
        selected = (result.stdout or "").strip("\n")
        return selected or None

    def preview(self, path: PathLike) -> int:
        previewer = self.resolve(self._config.previewer)
        cmd = [previewer, f"--style={self._config.preview_style}", str(path)]
        result = self._runner(cmd, check=False)
        if result.returncode != 0:
            logger.warning("Previewer %s exited with status %s", self._config.previewer, result.returncode)
        return result.returncode

    def search_files(self, term: str, cwd: PathLike) -> List[str]:
        """Names of files under ``cwd`` whose content matches ``term``."""
        searcher = self.resolve(self._config.searcher)
        cmd = [searcher, "--files-with-matches", "--no-messages", "--", term]
        result = self._runner(cmd, stdout=subprocess.PIPE, text=True, cwd=str(cwd), check=False)
        # rg: 1 means nothing matched
        if result.returncode == 1:
            return []
        if result.returncode != 0:
            raise ExternalToolError(self._config.searcher, result.returncode)
        return sorted(line for line in (result.stdout or "").splitlines() if line)
