"""
Tests for the tolerant timestamp/value scanner.

Covers the anchor/delimiter walk, value parsing, rejection of malformed
candidates, and the collection bounds.
"""

import pytest

from tempsort import MAX_TIMESTAMP_LEN, Record, extract


# =============================================================================
# Category 1: Well-formed input
# =============================================================================


class TestBasicExtraction:
    """Records are read in text order with their values."""

    def test_three_records(self):
        """Mixed-sign values are extracted in order."""
        text = (
            'key: "2014-01-01 00:00:00": 5.5, '
            '"2014-01-01 01:00:00": 3.2, '
            '"2014-01-01 02:00:00": -1.0'
        )
        records = extract(text)
        assert len(records) == 3
        assert records.values() == [5.5, 3.2, -1.0]
        assert records.timestamps() == [
            "2014-01-01 00:00:00",
            "2014-01-01 01:00:00",
            "2014-01-01 02:00:00",
        ]

    def test_json_dump_with_quoted_values(self):
        """tempm.txt style: quoted keys and quoted values."""
        text = '{"2014-02-13T06:20:00": "3.0", "2014-02-13T06:50:00": "-1.5"}'
        records = extract(text)
        assert list(records) == [
            Record("2014-02-13T06:20:00", 3.0),
            Record("2014-02-13T06:50:00", -1.5),
        ]

    def test_empty_text(self):
        """Empty input gives an empty collection."""
        assert len(extract("")) == 0

    def test_no_anchor(self):
        """Text without the anchor gives nothing."""
        assert len(extract('{"2013-12-31T23:30:00": "1.0"}')) == 0

    def test_custom_anchor(self):
        """The anchor literal can be changed."""
        records = extract('{"2015-01-01": 4}', anchor="2015-")
        assert records.values() == [4.0]

    def test_empty_anchor_rejected(self):
        with pytest.raises(ValueError):
            extract("2014-", anchor="")


# =============================================================================
# Category 2: Delimiter equivalence
# =============================================================================


class TestDelimiters:
    """All quote-like characters delimit fields interchangeably."""

    @pytest.mark.parametrize(
        "open_q, close_q",
        [('"', '"'), ("'", "'"), ("“", "”"), ("‘", "’"), ('"', "”")],
    )
    def test_quote_styles(self, open_q, close_q):
        text = f"{{{open_q}2014-03-01T00:00:00{close_q}: {open_q}2.5{close_q}}}"
        records = extract(text)
        assert list(records) == [Record("2014-03-01T00:00:00", 2.5)]

    def test_unquoted_anchor_rejected(self):
        """No opening delimiter before the anchor means no record."""
        assert len(extract("2014-01-01: 5.0")) == 0

    def test_anchor_at_text_start_rejected(self):
        """The backward walk never wraps around the start of the text."""
        assert len(extract('2014-01-01": 5.0 "')) == 0

    def test_timestamp_runs_to_end_of_text(self):
        """A timestamp with no closing delimiter has no colon after it."""
        assert len(extract('"2014-01-01')) == 0


# =============================================================================
# Category 3: Value parsing
# =============================================================================


class TestValues:
    """The longest float prefix after the colon becomes the value."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("5", 5.0),
            ("+4.25", 4.25),
            ("-0.5", -0.5),
            (".5", 0.5),
            ("7.", 7.0),
            ("1e2", 100.0),
            ("2.5E-1", 0.25),
            ("3.5abc", 3.5),
            ("1e", 1.0),
        ],
    )
    def test_float_prefix(self, raw, expected):
        records = extract(f'"2014-01-01": {raw},')
        assert records.values() == [pytest.approx(expected)]

    def test_whitespace_and_quotes_skipped(self):
        """Blanks and delimiters between colon and value are skipped."""
        records = extract('"2014-01-01":\n\t  "“ 8.5"')
        assert records.values() == [8.5]

    @pytest.mark.parametrize("space", ["\u00a0", "\u2003", "\u3000"])
    def test_unicode_whitespace_skipped(self, space):
        """Non-breaking and wide spaces from pasted dumps count as blanks."""
        records = extract(f'"2014-01-01":{space}5.0')
        assert records.values() == [5.0]

    @pytest.mark.parametrize("raw", ["abc", '"N/A"', "-", ".", "+.", "--1", "1e999"])
    def test_unparsable_values_rejected(self, raw):
        assert len(extract(f'"2014-01-01": {raw}')) == 0

    def test_missing_colon_rejected(self):
        assert len(extract('"2014-01-01" 5.0')) == 0


# =============================================================================
# Category 4: Malformed regions and recovery
# =============================================================================


class TestRecovery:
    """Malformed candidates are skipped and scanning continues."""

    def test_non_numeric_fragment_then_valid(self):
        """A bad value does not hide the next record."""
        text = '"2014-13-99": abc, "2014-01-01 00:00:00": 1.5'
        records = extract(text)
        assert list(records) == [Record("2014-01-01 00:00:00", 1.5)]

    def test_overlong_timestamp_skipped(self):
        """Timestamps past the maximum length are skipped, not truncated."""
        long_ts = "2014-" + "0" * MAX_TIMESTAMP_LEN
        text = f'"{long_ts}": 1.0, "2014-02-02": 2.0'
        records = extract(text)
        assert list(records) == [Record("2014-02-02", 2.0)]

    def test_timestamp_at_max_length_kept(self):
        ts = "2014-" + "1" * (MAX_TIMESTAMP_LEN - 5)
        assert len(ts) == MAX_TIMESTAMP_LEN
        records = extract(f'"{ts}": 9.0')
        assert records.timestamps() == [ts]

    def test_anchor_retried_inside_field(self):
        """A second anchor inside a field is tried on its own."""
        text = '"2014-xx 2014-01": 3.0'
        records = extract(text)
        # The inner anchor has no opening delimiter between it and the
        # previous anchor, so only the outer candidate survives.
        assert records.timestamps() == ["2014-xx 2014-01"]

    def test_no_timestamp_exceeds_limit(self):
        text = ", ".join(f'"2014-{"9" * n}": {n}' for n in range(40))
        records = extract(text)
        assert all(len(r.timestamp) <= MAX_TIMESTAMP_LEN for r in records)
        assert len(records) == MAX_TIMESTAMP_LEN - 5 + 1


# =============================================================================
# Category 5: Capacity
# =============================================================================


class TestCapacity:
    """Extraction stops quietly when the collection is full."""

    def test_stops_at_max_entries(self):
        text = ", ".join(f'"2014-01-{i:02d}": {i}' for i in range(1, 21))
        records = extract(text, max_entries=5)
        assert len(records) == 5
        assert records.values() == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_zero_capacity(self):
        assert len(extract('"2014-01-01": 1', max_entries=0)) == 0

    def test_default_capacity(self):
        text = ", ".join(f'"2014-{i}": 1' for i in range(10_050))
        records = extract(text)
        assert len(records) == 10_000
        assert records.is_full
