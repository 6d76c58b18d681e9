"""Render command implementation."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Dict

from curlyparser import default_parser
from curlyparser.exceptions import CurlyParserError, VarsFileValidationError
from curlyparser.files import parse_file, parse_file_in_place, render_to
from curlyparser.loader import VarsLoader


logger = logging.getLogger(__name__)


def parse_variables(args: Namespace) -> Dict[str, str]:
    """Collect template variables from the variables file and KEY=VALUE arguments.

    Command line pairs override values from the file.
    """
    variables: Dict[str, str] = {}

    if args.vars_file:
        variables.update(VarsLoader().load(args.vars_file))

    if args.var:
        for item in args.var:
            if '=' not in item:
                raise ValueError(f"Invalid variable format: {item}. Expected KEY=VALUE")
            key, value = item.split('=', 1)
            if not key:
                raise ValueError(f"Invalid KEY in pair: {item}")
            variables[key] = value

    return variables


def configure_logging(args: Namespace) -> None:
    """Set the log level from command line flags."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def render_template(args: Namespace) -> int:
    """
    Render a template file.

    Writes the result to stdout, to --output, or back to the template with
    --in-place.
    """
    configure_logging(args)

    try:
        template_path = Path(args.template)
        if not template_path.exists():
            logger.error(f"Template file not found: {template_path}")
            return 1

        variables = parse_variables(args)
        logger.info(f"Rendering {template_path} with {len(variables)} variable(s)")

        options = dict(
            unresolved=args.unresolved,
            replace_pattern=args.replace_pattern,
            parser=default_parser,
        )

        if args.in_place:
            parse_file_in_place(template_path, variables, **options)
        elif args.output:
            render_to(template_path, Path(args.output), variables, **options)
        else:
            sys.stdout.write(parse_file(template_path, variables, **options))

        return 0

    except VarsFileValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code
    except CurlyParserError as e:
        logger.error(str(e))
        return e.exit_code
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
