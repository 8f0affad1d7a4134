"""
Header parsing for IFX files.

An IFX file opens with a block of ``key=value`` lines, ends that block
with a marker line (``[Data]``), and continues with whitespace-delimited
rows.  ``parse_header()`` consumes the stream up to and including the
marker, so the caller can hand the same stream straight to a table
reader.

Header rules:
- Every line is stripped before it is looked at.
- Blank lines are skipped wherever they appear.
- A line that *starts with* the marker ends the header; it is consumed.
- Anything else must contain ``=`` with a non-empty key before it.  Only
  the first ``=`` separates key from value, so ``Equation=E=mc^2``
  stores ``"E=mc^2"``.
- Keys are case-sensitive; a repeated key overwrites the earlier value.
- ``Columns`` is mandatory and is split on ``,`` into the column names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from ifx_files.config import ReaderConfig
from ifx_files.exceptions import (
    MalformedHeaderLineError,
    MissingColumnsError,
    UnterminatedHeaderError,
)

logger = logging.getLogger(__name__)


@dataclass
class Header:
    """Parsed header section.

    Attributes:
        metadata: Every ``key=value`` pair in the header, in first-seen
            order.  Includes the columns declaration itself.
        columns: Column names split from the columns declaration.
        marker_found: ``False`` only when ``require_data_marker`` is off
            and the input ended without a marker line.
    """
    metadata: dict[str, str] = field(default_factory=dict)
    columns: list[str] = field(default_factory=list)
    marker_found: bool = True


def split_columns(value: str, separator: str = ",") -> list[str]:
    """Split a columns declaration into stripped names.

    Names are neither deduplicated nor checked for emptiness:
    ``"A,,B"`` gives ``["A", "", "B"]``.
    """
    return [name.strip() for name in value.split(separator)]


def parse_header(stream: TextIO, config: ReaderConfig | None = None) -> Header:
    """Read the header section of an IFX stream.

    Lines are pulled with ``readline()`` so the stream is left positioned
    on the first line after the marker.

    Args:
        stream: Readable text stream positioned at the start of the file.
        config: Reader options.  Defaults to ``ReaderConfig()``.

    Returns:
        A ``Header`` with the metadata map and column names.

    Raises:
        MalformedHeaderLineError: A header line has no ``=`` or an empty
            key.  Raised as soon as the line is seen.
        UnterminatedHeaderError: The stream ended before the marker and
            ``config.require_data_marker`` is set.
        MissingColumnsError: The header has no columns declaration.
            Checked only after the whole header has been read.
    """
    config = config or ReaderConfig()
    metadata: dict[str, str] = {}
    marker_found = False
    line_number = 0

    for line_number, raw_line in enumerate(iter(stream.readline, ""), start=1):
        stripped = raw_line.strip()
        if not stripped:
            continue
        if stripped.startswith(config.data_marker):
            marker_found = True
            logger.debug("Found %s marker on line %d", config.data_marker, line_number)
            break

        key, sep, value = stripped.partition("=")
        key = key.strip()
        if not sep or not key:
            raise MalformedHeaderLineError(line_number, stripped)
        if key in metadata:
            logger.debug(
                "Header key %r repeated on line %d; overwriting %r",
                key, line_number, metadata[key],
            )
        metadata[key] = value

    if not marker_found:
        if config.require_data_marker:
            raise UnterminatedHeaderError(
                f"Reached end of input after {line_number} lines without a "
                f"{config.data_marker} line"
            )
        logger.debug(
            "No %s marker; treating end of input as end of header",
            config.data_marker,
        )

    if config.columns_key not in metadata:
        raise MissingColumnsError(config.columns_key)

    columns = split_columns(metadata[config.columns_key], config.column_separator)
    logger.debug("Header: %d keys, columns=%s", len(metadata), columns)

    return Header(metadata=metadata, columns=columns, marker_found=marker_found)
