"""Jinja2 environment for the plain-text report."""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined

from .api._constants import NONE_FOUND


def link_line(item: Dict[str, Any]) -> str:
    """Format a link finding as ``source:line -> raw_target``, marking embeds."""
    line = f"{item['source']}:{item['line_number']} -> {item['raw_target']}"
    return f"{line} (embed)" if item.get("is_embed") else line


_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)
_ENV.filters["link_line"] = link_line
# Printed for every empty report section
_ENV.globals["none_found"] = NONE_FOUND


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
