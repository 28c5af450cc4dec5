"""Shared constants."""

DEFAULT_EXTENSIONS = (".md", ".markdown")
DEFAULT_EXCLUDE_DIRNAMES = (".git", "node_modules", ".venv", "__pycache__")
DEFAULT_EXTERNAL_SCHEMES = ("http", "https", "mailto", "ftp", "ftps", "file", "tel", "data", "ssh", "git")

EXIT_OK = 0
EXIT_DANGLING = 1
EXIT_FATAL = 2

NONE_FOUND = "none found"
