"""
Tests for reading points and rendering segments.
"""

import pytest

from quadhatch.exceptions import InputFileError, OutputFileError
from quadhatch.fileio import (
    format_number,
    format_segment,
    parse_points,
    read_points,
    write_segments,
)
from quadhatch.geometry import Point, Segment


def test_parse_points_reads_pairs():
    assert parse_points("0 0\n10 0\n0 10\n10 10\n") == [
        Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10),
    ]


def test_parse_points_accepts_any_whitespace():
    assert parse_points("  1.5\t-2\n\n3e1   4 ") == [Point(1.5, -2), Point(30, 4)]


def test_parse_points_stops_at_first_bad_token():
    assert parse_points("1 2\n3 4\nfive 6\n7 8\n") == [Point(1, 2), Point(3, 4)]
    assert parse_points("1 2\n3 x\n") == [Point(1, 2)]


@pytest.mark.parametrize("bad", ["nan", "inf", "-inf", "NaN", "infinity", "1e400", "1_0"])
def test_parse_points_stops_at_non_finite_or_separated_numbers(bad):
    text = f"0 0\n10 0\n0 10\n{bad} 10\n"

    assert parse_points(text) == [Point(0, 0), Point(10, 0), Point(0, 10)]


def test_parse_points_ignores_unpaired_number():
    assert parse_points("1 2 3") == [Point(1, 2)]
    assert parse_points("") == []


def test_read_points_from_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n4 0\n0 2\n4 2\n", encoding="utf-8")

    assert read_points(str(path)) == [Point(0, 0), Point(4, 0), Point(0, 2), Point(4, 2)]


def test_read_points_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"

    with pytest.raises(InputFileError) as excinfo:
        read_points(str(missing))

    assert excinfo.value.path == str(missing)
    assert "Cannot open input file" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-0.0, "-0"),
        (10.0, "10"),
        (0.5, "0.5"),
        (-3.25, "-3.25"),
        (1.0 / 3.0, "0.333333"),
        (123456789.0, "1.23457e+08"),
        (1e-7, "1e-07"),
    ],
)
def test_numbers_render_like_a_default_stream(value, expected):
    assert format_number(value) == expected


def test_format_segment_has_no_space_after_comma():
    segment = Segment(Point(0.5, -1), Point(7.07107, 2))

    assert format_segment(3, segment) == "Line 3: (0.5,-1) -> (7.07107,2)"


def test_write_segments_to_console(capsys):
    segments = [Segment(Point(0, 0), Point(10, 0)), Segment(Point(0, 1), Point(10, 1))]

    write_segments(segments, "console")

    assert capsys.readouterr().out == "Line 1: (0,0) -> (10,0)\nLine 2: (0,1) -> (10,1)\n"


def test_write_segments_to_file(tmp_path, capsys):
    output = tmp_path / "result.txt"

    write_segments([Segment(Point(1, 2), Point(3, 4))], str(output))

    assert output.read_text(encoding="utf-8") == "Line 1: (1,2) -> (3,4)\n"
    assert capsys.readouterr().out == f"Results written to {output}\n"


def test_write_no_segments_creates_empty_file(tmp_path):
    output = tmp_path / "empty.txt"

    write_segments([], str(output))

    assert output.read_text(encoding="utf-8") == ""


def test_read_points_stops_at_undecodable_bytes(tmp_path):
    trailing = tmp_path / "trailing.bin"
    trailing.write_bytes(b"0 0\n10 0\n0 10\n10 10\n\xff\xfe\n")
    middle = tmp_path / "middle.bin"
    middle.write_bytes(b"0 0\n\xff 1\n2 3\n")

    assert read_points(str(trailing)) == [Point(0, 0), Point(10, 0), Point(0, 10), Point(10, 10)]
    assert read_points(str(middle)) == [Point(0, 0)]


def test_write_segments_to_unwritable_path(tmp_path, capsys):
    output = tmp_path / "missing" / "result.txt"

    with pytest.raises(OutputFileError) as excinfo:
        write_segments([Segment(Point(1, 2), Point(3, 4))], str(output))

    assert excinfo.value.path == str(output)
    assert "Cannot write output file" in str(excinfo.value)
    assert capsys.readouterr().out == ""
