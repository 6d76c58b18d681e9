"""
File operations around template parsing.

Reads a template file, parses it and either returns the result, writes it
to another path, or writes it back over the template.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .variables import DEFAULT_REPLACE_PATTERN, TemplateParser, UnresolvedPolicy


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _default_parser() -> TemplateParser:
    from curlyparser import default_parser
    return default_parser


def parse_file(
    path: PathLike,
    variables: Optional[Mapping[str, Any]] = None,
    unresolved: Union[UnresolvedPolicy, str] = UnresolvedPolicy.RAISE,
    replace_pattern: str = DEFAULT_REPLACE_PATTERN,
    parser: Optional[TemplateParser] = None,
    encoding: str = 'utf-8'
) -> str:
    """
    Parse the content of a file and return it. The file is not modified.

    Args:
        path: Template file
        variables: Caller variables
        unresolved: Policy for tokens left after substitution
        replace_pattern: Pattern used with UnresolvedPolicy.REPLACE
        parser: Parser to use (the process-wide one if omitted)
        encoding: File encoding

    Returns:
        Parsed content

    Raises:
        OSError: If the file cannot be read
        CurlyParserError: If parsing fails
    """
    parser = parser or _default_parser()
    content = Path(path).read_text(encoding=encoding)
    logger.debug(f"Parsing template file: {path}")
    return parser.parse(content, variables, unresolved=unresolved, replace_pattern=replace_pattern)


def _write_atomic(path: Path, content: str, encoding: str) -> None:
    """Write a file via a uniquely named temporary sibling and rename.

    An existing file keeps its permission bits.
    """
    with tempfile.NamedTemporaryFile(
        "w", encoding=encoding, dir=path.parent,
        prefix=f".{path.name}.", suffix=".tmp", delete=False
    ) as f:
        temp_path = Path(f.name)
        try:
            f.write(content)
        except Exception:
            f.close()
            temp_path.unlink()
            raise

    try:
        if path.exists():
            os.chmod(temp_path, stat.S_IMODE(path.stat().st_mode))
        temp_path.replace(path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise


def parse_file_in_place(
    path: PathLike,
    variables: Optional[Mapping[str, Any]] = None,
    unresolved: Union[UnresolvedPolicy, str] = UnresolvedPolicy.RAISE,
    replace_pattern: str = DEFAULT_REPLACE_PATTERN,
    parser: Optional[TemplateParser] = None,
    encoding: str = 'utf-8'
) -> str:
    """
    Parse the content of a file and write the result back to it.

    The file is only overwritten when parsing succeeds.

    Returns:
        Parsed content
    """
    path = Path(path)
    parsed = parse_file(path, variables, unresolved, replace_pattern, parser, encoding)
    _write_atomic(path, parsed, encoding)
    logger.info(f"Rewrote template file in place: {path}")
    return parsed


def render_to(
    template_path: PathLike,
    output_path: PathLike,
    variables: Optional[Mapping[str, Any]] = None,
    unresolved: Union[UnresolvedPolicy, str] = UnresolvedPolicy.RAISE,
    replace_pattern: str = DEFAULT_REPLACE_PATTERN,
    parser: Optional[TemplateParser] = None,
    encoding: str = 'utf-8'
) -> str:
    """
    Parse a template file and write the result to another path.

    Parent directories of the output are created as needed.

    Returns:
        Parsed content
    """
    parsed = parse_file(template_path, variables, unresolved, replace_pattern, parser, encoding)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _write_atomic(output_path, parsed, encoding)
    logger.info(f"Rendered {template_path} to {output_path}")
    return parsed
