"""Render an integrity report as plain text."""

from typing import Any

from ..templating import render_template

REPORT_TEMPLATE = """\
Link integrity report: {{ root }}
Documents: {{ document_count }}
Links: {{ link_count }}

Dangling links ({{ dangling_count }}):
{% for item in dangling %}
  {{ item | link_line }}
{% else %}
  {{ none_found }}
{% endfor %}

Orphan documents ({{ orphan_count }}):
{% for path in orphans %}
  {{ path }}
{% else %}
  {{ none_found }}
{% endfor %}

Isolated documents ({{ isolated_count }}):
{% for path in isolated %}
  {{ path }}
{% else %}
  {{ none_found }}
{% endfor %}

Self-references ({{ self_reference_count }}):
{% for item in self_references %}
  {{ item | link_line }}
{% else %}
  {{ none_found }}
{% endfor %}

Non-document targets ({{ resource_count }}):
{% for item in resources %}
  {{ item | link_line }}
{% else %}
  {{ none_found }}
{% endfor %}

Skipped files ({{ skipped_count }}):
{% for item in skipped %}
  {{ item.path }}: {{ item.reason }}
{% else %}
  {{ none_found }}
{% endfor %}
"""


def _render_report(report: dict[str, Any]) -> str:
    """Render the ``IntegrityReport.model_dump()`` dict with the text template."""
    return render_template(REPORT_TEMPLATE, report) + "\n"
