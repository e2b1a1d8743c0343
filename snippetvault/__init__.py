"""SnippetVault: a small vault for code snippets kept as plain files."""

__version__ = "0.1.0"
