from __future__ import annotations


class SnippetVaultError(Exception):
    """Base class for failures reported to the terminal with a non-zero exit."""

    exit_code = 1


class UnsupportedLanguage(SnippetVaultError):
    def __init__(self, language: str) -> None:
        super().__init__(f"Language not supported: {language!r}. Run --languages to see the list.")
        self.language = language


class DirectoryError(SnippetVaultError):
    pass


class DependencyMissing(SnippetVaultError):
    exit_code = 127

    def __init__(self, tool: str) -> None:
        super().__init__(f"Required program not found on PATH: {tool}")
        self.tool = tool


class ExternalToolError(SnippetVaultError):
    def __init__(self, tool: str, returncode: int) -> None:
        super().__init__(f"{tool} exited with status {returncode}")
        self.tool = tool
        self.returncode = returncode


class UsageError(SnippetVaultError):
    exit_code = 2
