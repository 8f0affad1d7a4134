"""
IFX reading logic.

Ties the pieces together:

1. ``parse_header()`` consumes the header and the ``[Data]`` marker.
2. The rest of the stream is read eagerly, line by line with
   ``readline()`` as the header was.  Blank lines and full-line comments
   (``#`` after leading whitespace) are dropped here.
3. ``pandas.read_csv`` tokenizes what is left, splitting on runs of
   whitespace and using the declared columns as the header.  The data
   section itself never carries a header row.
4. ``attach_metadata()`` copies the header onto ``DataFrame.attrs``.

Type inference is left entirely to pandas: all-integer columns become
``int64``, other numeric columns ``float64``, and a column holding any
non-numeric token keeps every value as its original string.  Tokens
such as ``NA`` or ``null`` are data, not missing values.

Errors from pandas (``ParserError``, duplicate column names, ...) are not
wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import IO, TextIO

import pandas as pd

from ifx_files.annotations import attach_metadata
from ifx_files.config import ReaderConfig
from ifx_files.exceptions import EmptyDataSectionError
from ifx_files.header import Header, parse_header

logger = logging.getLogger(__name__)

# One or more whitespace characters; also swallows trailing whitespace
_FIELD_SEPARATOR = r"\s+"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read(
    source: str | os.PathLike[str] | IO,
    config: ReaderConfig | None = None,
) -> pd.DataFrame:
    """Read an IFX file from a path or an open stream.

    Args:
        source: A filesystem path (``str`` or ``os.PathLike``) or a
            readable stream (text or binary).
        config: Reader options.  Defaults to ``ReaderConfig()``.

    Returns:
        A ``DataFrame`` with one column per declared name and the header
        metadata in ``df.attrs``.

    Raises:
        TypeError: If *source* is neither a path nor a readable stream.
    """
    if isinstance(source, (str, os.PathLike)):
        return read_path(source, config)
    if hasattr(source, "readline"):
        return read_stream(source, config)
    raise TypeError(
        f"Expected a path or a readable stream, got {type(source).__name__}"
    )


def read_path(
    path: str | os.PathLike[str],
    config: ReaderConfig | None = None,
) -> pd.DataFrame:
    """Open *path* read-only, parse it, and close it again.

    The file is closed on every exit path, including parse errors.

    Raises:
        FileNotFoundError / OSError: If the file cannot be opened.
    """
    config = config or ReaderConfig()
    path = Path(path)
    logger.debug("Opening %s (encoding=%s)", path, config.encoding)
    with open(path, "r", encoding=config.encoding) as f:
        return read_stream(f, config)


def read_stream(stream: IO, config: ReaderConfig | None = None) -> pd.DataFrame:
    """Parse an IFX document from an open, readable stream.

    The stream is read once, front to back, and is not closed.  Binary
    streams are decoded with ``config.encoding``.

    Raises:
        MalformedHeaderLineError: A header line is not ``key=value``.
        UnterminatedHeaderError: No ``[Data]`` marker (default policy).
        MissingColumnsError: No ``Columns=`` declaration.
        EmptyDataSectionError: No data rows and ``allow_empty_data`` is off.
    """
    config = config or ReaderConfig()

    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        text = io.TextIOWrapper(stream, encoding=config.encoding)
        try:
            return _read_text_stream(text, config)
        finally:
            # Leave the caller's binary stream open
            text.detach()

    return _read_text_stream(stream, config)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _read_text_stream(stream: TextIO, config: ReaderConfig) -> pd.DataFrame:
    header = parse_header(stream, config)
    data_lines = _collect_data_lines(stream, config.comment)

    if not data_lines and not config.allow_empty_data:
        raise EmptyDataSectionError(
            f"No data rows after the {config.data_marker} marker"
        )

    df = _read_data_section(data_lines, header)
    attach_metadata(df, header.metadata)

    logger.info(
        "Read IFX %s: %d rows x %d columns, %d metadata keys",
        getattr(stream, "name", "<stream>"),
        len(df),
        len(df.columns),
        len(header.metadata),
    )
    return df


def _collect_data_lines(stream: TextIO, comment: str) -> list[str]:
    """Return the remaining data lines, stripped, minus blanks and comments."""
    lines: list[str] = []
    skipped = 0
    for raw_line in iter(stream.readline, ""):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(comment):
            skipped += 1
            continue
        lines.append(line)
    if skipped:
        logger.debug("Skipped %d comment lines in data section", skipped)
    return lines


def _read_data_section(data_lines: list[str], header: Header) -> pd.DataFrame:
    """Tokenize the data lines into a DataFrame with the declared columns."""
    if not data_lines:
        return pd.DataFrame(columns=header.columns)

    return pd.read_csv(
        io.StringIO("\n".join(data_lines)),
        sep=_FIELD_SEPARATOR,
        header=None,
        names=header.columns,
        index_col=False,
        keep_default_na=False,
        skip_blank_lines=True,
    )
