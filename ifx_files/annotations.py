"""
Table annotations for ifx-files.

Header metadata travels with the table in ``DataFrame.attrs``.  Each
header key becomes one annotation whose value is the header's original
string -- no numeric or date coercion -- so ``Threshold=1.5e-3`` reads
back as ``"1.5e-3"``.

The ``Columns`` declaration is attached like any other key, so the
declared column list can always be recovered from the table alone.

Note that pandas propagates ``attrs`` through most operations
(``copy()``, slicing, arithmetic), but not through every one; callers
that need the metadata after heavy reshaping should read it first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import pandas as pd

from ifx_files.exceptions import MissingAnnotationError

logger = logging.getLogger(__name__)


def set_annotation(df: pd.DataFrame, key: str, value: str) -> None:
    """Attach a single string annotation to *df*, replacing any existing one."""
    if not isinstance(value, str):
        raise TypeError(
            f"Annotation values must be str, got {type(value).__name__} for {key!r}"
        )
    df.attrs[key] = value


def get_annotation(df: pd.DataFrame, key: str) -> str:
    """Return the annotation stored under *key*.

    Raises:
        MissingAnnotationError: If *df* has no annotation named *key*.
    """
    try:
        return df.attrs[key]
    except KeyError:
        raise MissingAnnotationError(
            f"No annotation {key!r} on table. "
            f"Available: {sorted(df.attrs)}"
        ) from None


def annotation_keys(df: pd.DataFrame) -> set[str]:
    """Return the set of annotation keys on *df*."""
    return set(df.attrs)


def annotations(df: pd.DataFrame) -> dict[str, str]:
    """Return a copy of every annotation on *df*."""
    return dict(df.attrs)


def attach_metadata(df: pd.DataFrame, metadata: Mapping[str, str]) -> pd.DataFrame:
    """Copy every header key/value pair onto *df* as annotations.

    Returns *df* itself (annotated in place) for call chaining.
    """
    for key, value in metadata.items():
        set_annotation(df, key, value)
    logger.debug("Attached %d annotations", len(metadata))
    return df
