"""Configuration for mdxref runs."""

from .MdxrefConfig import CONFIG_FILENAME, MdxrefConfig

__all__ = ["CONFIG_FILENAME", "MdxrefConfig"]
