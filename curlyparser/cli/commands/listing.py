"""Commands that report on filters and templates without rendering."""

import logging
from argparse import Namespace
from pathlib import Path

from curlyparser import default_filters
from curlyparser.variables import decode_variable, scan_variables


logger = logging.getLogger(__name__)


def list_filters(args: Namespace) -> int:
    """Print all valid filter names, one per line."""
    for name in sorted(default_filters.valid_filters()):
        print(name)
    return 0


def scan_template(args: Namespace) -> int:
    """Print each token of a template file with its decoded name and filter."""
    template_path = Path(args.template)
    if not template_path.exists():
        logger.error(f"Template file not found: {template_path}")
        return 1

    text = template_path.read_text(encoding='utf-8')
    for token in scan_variables(text):
        try:
            variable = decode_variable(token)
        except ValueError as e:
            # More than one filter segment, printed without name or filter
            logger.warning(str(e))
            print(f"{token}\t\t")
            continue
        print(f"{token}\t{variable.name}\t{variable.filter or ''}")
    return 0
