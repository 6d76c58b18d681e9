"""CLI command handlers."""

from .render import render_template
from .listing import list_filters, scan_template

__all__ = ['render_template', 'list_filters', 'scan_template']
