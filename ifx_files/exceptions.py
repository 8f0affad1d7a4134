"""
Custom exception hierarchy for ifx-files.

Callers can branch on the cause of a failed ``read()`` (a malformed
header line vs. a missing ``Columns`` declaration vs. a file that never
reaches its ``[Data]`` marker) without matching on message text.

Errors raised by collaborators are deliberately NOT part of this
hierarchy and propagate unchanged:
- ``OSError`` / ``FileNotFoundError`` when a path cannot be opened.
- ``pandas.errors.ParserError`` and friends from the data section.
"""


class IfxFilesError(Exception):
    """Base exception for all ifx-files errors."""


class HeaderError(IfxFilesError):
    """Raised when the header section of an IFX file cannot be parsed."""


class MalformedHeaderLineError(HeaderError, ValueError):
    """Raised when a header line is neither blank, the marker, nor ``key=value``.

    Attributes:
        line_number: 1-based line number within the stream.
        line: The offending line, whitespace-stripped.
    """

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed header line {line_number}: {line!r} "
            "(expected 'key=value')"
        )


class MissingColumnsError(HeaderError):
    """Raised when the header never declares its column names.

    Attributes:
        key: The header key that was required (``"Columns"`` by default).
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Could not find {key}= line in header")


class UnterminatedHeaderError(HeaderError):
    """Raised when the input ends before the data marker line is found."""


class EmptyDataSectionError(IfxFilesError):
    """Raised when the data section is empty and empty data is not allowed."""


class ConfigValidationError(IfxFilesError):
    """Raised when a reader config file cannot be loaded.

    Schema violations surface as ``pydantic.ValidationError``; this error
    covers problems before validation runs (e.g., an empty YAML file).
    """


class MissingAnnotationError(IfxFilesError, KeyError):
    """Raised when a table carries no annotation for the requested key."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s its argument
        return str(self.args[0]) if self.args else ""
