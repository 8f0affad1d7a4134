"""
Unit tests for table annotations (ifx_files.annotations).
"""

from __future__ import annotations

import pandas as pd
import pytest

from ifx_files.annotations import (
    annotation_keys,
    annotations,
    attach_metadata,
    get_annotation,
    set_annotation,
)
from ifx_files.exceptions import MissingAnnotationError


def _make_df() -> pd.DataFrame:
    return pd.DataFrame({"A": [1, 3], "B": [2, 4]})


class TestSetGet:
    """Tests for set_annotation() / get_annotation()."""

    def test_round_trip(self):
        df = _make_df()
        set_annotation(df, "Author", "Jane")
        assert get_annotation(df, "Author") == "Jane"

    def test_overwrite(self):
        df = _make_df()
        set_annotation(df, "Author", "Jane")
        set_annotation(df, "Author", "John")
        assert get_annotation(df, "Author") == "John"
        assert annotation_keys(df) == {"Author"}

    def test_non_string_value_rejected(self):
        df = _make_df()
        with pytest.raises(TypeError, match="must be str"):
            set_annotation(df, "Version", 1.0)

    def test_missing_key(self):
        df = _make_df()
        set_annotation(df, "Author", "Jane")
        with pytest.raises(MissingAnnotationError, match="Available: \\['Author'\\]"):
            get_annotation(df, "Date")

    def test_missing_key_is_key_error(self):
        with pytest.raises(KeyError):
            get_annotation(_make_df(), "Date")


class TestAttachMetadata:
    """Tests for attach_metadata()."""

    def test_every_key_attached(self):
        metadata = {"Author": "Jane", "Columns": "A,B"}
        df = attach_metadata(_make_df(), metadata)
        assert annotation_keys(df) == {"Author", "Columns"}
        assert annotations(df) == metadata

    def test_returns_same_frame(self):
        df = _make_df()
        assert attach_metadata(df, {"K": "v"}) is df

    def test_empty_metadata(self):
        df = attach_metadata(_make_df(), {})
        assert annotation_keys(df) == set()

    def test_annotations_is_a_copy(self):
        df = attach_metadata(_make_df(), {"K": "v"})
        snapshot = annotations(df)
        snapshot["K"] = "changed"
        assert get_annotation(df, "K") == "v"

    def test_survives_copy(self):
        df = attach_metadata(_make_df(), {"Author": "Jane"})
        assert get_annotation(df.copy(), "Author") == "Jane"
