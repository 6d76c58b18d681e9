"""Main CLI entry point for curlyparser."""

import argparse
import sys
from typing import Optional

from curlyparser.variables import DEFAULT_REPLACE_PATTERN, UnresolvedPolicy
from .commands import render_template


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the curlyparse CLI."""
    parser = argparse.ArgumentParser(
        prog='curlyparse',
        description='Resolve {{variable|filter}} placeholders in templates'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a template file')
    render_parser.add_argument(
        'template',
        type=str,
        help='Path to template file'
    )
    render_parser.add_argument(
        '--var',
        action='append',
        metavar='KEY=VALUE',
        help='Template variables (can be specified multiple times)'
    )
    render_parser.add_argument(
        '--vars-file',
        type=str,
        help='Path to YAML or JSON file containing template variables'
    )
    render_parser.add_argument(
        '--unresolved',
        choices=[policy.value for policy in UnresolvedPolicy],
        default=UnresolvedPolicy.RAISE.value,
        help='How to handle variables that cannot be resolved'
    )
    render_parser.add_argument(
        '--replace-pattern',
        type=str,
        default=DEFAULT_REPLACE_PATTERN,
        help=r'Replacement for unresolved variables with --unresolved replace (\1 name, \2 filter)'
    )
    output_group = render_parser.add_mutually_exclusive_group()
    output_group.add_argument(
        '--output', '-o',
        type=str,
        metavar='PATH',
        help='Write the result to PATH instead of stdout'
    )
    output_group.add_argument(
        '--in-place',
        action='store_true',
        help='Overwrite the template file with the result'
    )
    render_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    render_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    render_parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    render_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )

    # Filters command
    subparsers.add_parser('filters', help='List valid filter names')

    # Scan command
    scan_parser = subparsers.add_parser('scan', help='List variables used in a template file')
    scan_parser.add_argument(
        'template',
        type=str,
        help='Path to template file'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'render':
        return render_template(parsed_args)
    elif parsed_args.command == 'filters':
        from curlyparser.cli.commands import list_filters
        return list_filters(parsed_args)
    elif parsed_args.command == 'scan':
        from curlyparser.cli.commands import scan_template
        return scan_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
