from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from snippetvault.errors import UnsupportedLanguage


@dataclass(frozen=True)
class LanguageEntry:
    name: str
    extension: str
    comment: Optional[str] = None


# Order is the order printed by --languages.
_LANGUAGES = (
    LanguageEntry("python", "py", "#"),
    LanguageEntry("cpp", "cpp", "//"),
    LanguageEntry("c++", "cpp", "//"),
    LanguageEntry("c", "c", "//"),
    LanguageEntry("c#", "cs", "//"),
    LanguageEntry("bash", "sh", "#"),
    LanguageEntry("terminal", "sh", "#"),
    LanguageEntry("shell", "sh", "#"),
    LanguageEntry("zsh", "zsh", "#"),
    LanguageEntry("powershell", "ps1", "#"),
    LanguageEntry("bat", "bat", "REM"),
    LanguageEntry("php", "php", "//"),
    LanguageEntry("typescript", "ts", "//"),
    LanguageEntry("javascript", "js", "//"),
    LanguageEntry("html", "html"),
    LanguageEntry("css", "css"),
    LanguageEntry("scala", "scala", "//"),
    LanguageEntry("kotlin", "kt", "//"),
    LanguageEntry("java", "java", "//"),
    LanguageEntry("groovy", "groovy", "//"),
    LanguageEntry("swift", "swift", "//"),
    LanguageEntry("rust", "rs", "//"),
    LanguageEntry("golang", "go", "//"),
    LanguageEntry("go", "go", "//"),
    LanguageEntry("ruby", "rb", "#"),
    LanguageEntry("perl", "pl", "#"),
    LanguageEntry("haskell", "hs", "--"),
    LanguageEntry("lua", "lua", "--"),
    LanguageEntry("sql", "sql", "--"),
    LanguageEntry("matlab", "m", "%"),
    LanguageEntry("r", "r", "#"),
    LanguageEntry("awk", "awk", "#"),
    LanguageEntry("sed", "sed", "#"),
    LanguageEntry("gnuplot", "gp", "#"),
    LanguageEntry("applescript", "applescript", "--"),
    LanguageEntry("vim", "vim", '"'),
    LanguageEntry("nvim", "vim", '"'),
    LanguageEntry("neovim", "vim", '"'),
    LanguageEntry("emacs", "el", ";;"),
    LanguageEntry("latex", "tex", "%"),
    LanguageEntry("docker", "dockerfile", "#"),
    LanguageEntry("docker-compose", "yml", "#"),
    LanguageEntry("kubernetes", "yaml", "#"),
    LanguageEntry("markdown", "md"),
    LanguageEntry("org", "org"),
    LanguageEntry("text", "txt"),
    LanguageEntry("pdf", "md"),
    LanguageEntry("jupyter", "md"),
    LanguageEntry("jupyterlab", "md"),
    LanguageEntry("lab", "md"),
    LanguageEntry("git", "md"),
    LanguageEntry("github", "md"),
    LanguageEntry("linux", "md"),
    LanguageEntry("gnu-linux", "md"),
    LanguageEntry("ubuntu", "md"),
    LanguageEntry("apple", "md"),
    LanguageEntry("mac", "md"),
    LanguageEntry("macos", "md"),
    LanguageEntry("tr", "md"),
    LanguageEntry("cat", "md"),
    LanguageEntry("note", "md"),
    LanguageEntry("memo", "md"),
)

_BY_NAME: Dict[str, LanguageEntry] = {entry.name: entry for entry in _LANGUAGES}


def get(language: str) -> LanguageEntry:
    """Return the registry entry for ``language`` (exact, case-sensitive)."""
    try:
        return _BY_NAME[language]
    except KeyError:
        raise UnsupportedLanguage(language) from None


def extension_for(language: str) -> str:
    return get(language).extension


def list_supported() -> List[LanguageEntry]:
    return list(_LANGUAGES)