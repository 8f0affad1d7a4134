"""
ifx-files: read IFX text files into pandas DataFrames.

An IFX file is a block of ``key=value`` header lines, a ``[Data]``
marker line, and a whitespace-delimited table whose column names come
from the mandatory ``Columns=`` header entry::

    Author=Jane
    Columns=A,B

    [Data]
    1 2
    3 4

Public API surface:

- ``read(source, config=None)`` -- **recommended entry point**.
  Polymorphic: accepts a path or an open stream and returns a
  ``DataFrame`` whose ``attrs`` hold the header metadata.
- ``read_path(path)`` / ``read_stream(stream)`` -- the two concrete
  forms behind ``read()``.
- ``parse_header(stream)`` -- header only, leaves the stream on the
  first data line.
- ``get_annotation(df, key)`` and friends -- access the attached
  metadata.
- ``ReaderConfig`` / ``load_config()`` / ``save_config()`` -- dialect
  and policy options, optionally kept in YAML.

Example::

    import ifx_files

    df = ifx_files.read("inputs/example.ifx")
    ifx_files.get_annotation(df, "Columns")   # "Time,Voltage,Current,Status"
"""

from __future__ import annotations

from ifx_files.annotations import (
    annotation_keys,
    annotations,
    attach_metadata,
    get_annotation,
    set_annotation,
)
from ifx_files.config import ReaderConfig, load_config, save_config
from ifx_files.exceptions import (
    ConfigValidationError,
    EmptyDataSectionError,
    HeaderError,
    IfxFilesError,
    MalformedHeaderLineError,
    MissingAnnotationError,
    MissingColumnsError,
    UnterminatedHeaderError,
)
from ifx_files.header import Header, parse_header, split_columns
from ifx_files.reader import read, read_path, read_stream

__all__ = [
    "read",
    "read_path",
    "read_stream",
    "parse_header",
    "split_columns",
    "Header",
    "ReaderConfig",
    "load_config",
    "save_config",
    "set_annotation",
    "get_annotation",
    "annotation_keys",
    "annotations",
    "attach_metadata",
    "IfxFilesError",
    "HeaderError",
    "MalformedHeaderLineError",
    "MissingColumnsError",
    "UnterminatedHeaderError",
    "EmptyDataSectionError",
    "ConfigValidationError",
    "MissingAnnotationError",
]
