from __future__ import annotations

import dataclasses

import pytest

from loosever import InvalidVersion, SegmentTooLarge, Version, parse


def test_record_is_immutable() -> None:
    version = parse("1.2.3")
    with pytest.raises(dataclasses.FrozenInstanceError):
        version.tag = "beta"  # type: ignore[misc]


def test_equality_ignores_original() -> None:
    assert Version((1, 2, 0, 0), "", original="1.2") == Version((1, 2, 0, 0), "", original=[1, 2])
    assert hash(parse("v1.2")) == hash(parse("1.2.0.0"))
    assert parse("1.2-a") != parse("1.2-b")


def test_segments_are_normalized_to_tuple() -> None:
    version = Version([1, 2, 3, 4])  # type: ignore[arg-type]
    assert version.segments == (1, 2, 3, 4)


@pytest.mark.parametrize(
    "segments, tag",
    [
        ((1, 2, 3), ""),
        ((1, 2, 3, 4, 5), ""),
        ((1, -2, 3, 4), ""),
        ((1, "2", 3, 4), ""),
        ((1, 2, 3, 4), 5),
    ],
)
def test_rejects_malformed_records(segments: tuple, tag: object) -> None:
    with pytest.raises(InvalidVersion):
        Version(segments, tag)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", "000001000000000000000000"),
        ("1.0", "000001000000000000000000"),
        ("1.2", "000001000002000000000000"),
        ("1.2.3", "000001000002000003000000"),
        ("1.2.3.4", "000001000002000003000004"),
        ("1beta", "000001000000000000000000-beta"),
        ("1-beta", "000001000000000000000000-beta"),
    ],
)
def test_to_unique(raw: str, expected: str) -> None:
    assert parse(raw).to_unique(6) == expected


def test_to_unique_custom_width() -> None:
    assert parse("12.3").to_unique(2) == "12030000"


def test_to_unique_rejects_wide_segments() -> None:
    with pytest.raises(SegmentTooLarge, match="Version segment is 7 digits, however max digits is set to 6."):
        parse("1234567.0").to_unique(6)
    with pytest.raises(SegmentTooLarge, match="is 2 digits"):
        parse("10").to_unique(1)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (".1", "0.1.0"),
        ("1", "1.0.0"),
        ("1.2", "1.2.0"),
        ("1.2.3", "1.2.3"),
        ("1.2.3.4", "1.2.3"),
        ("1beta", "1.0.0-beta"),
        ("1.2beta", "1.2.0-beta"),
    ],
)
def test_to_semver(raw: str, expected: str) -> None:
    assert parse(raw).to_semver() == expected


@pytest.mark.parametrize(
    "raw, count, expected",
    [
        ("1", 1, "1"),
        ("1", 3, "1.0.0"),
        ("1", 4, "1.0.0.0"),
        ("1", 5, "1.0.0.0"),
        ("1", 0, "1"),
        ("1", -3, "1"),
        ("1.2", 3, "1.2.0"),
        ("1.2.3.4", 3, "1.2.3"),
        ("1.2.3.4-rc", 2, "1.2"),
    ],
)
def test_normalize(raw: str, count: int, expected: str) -> None:
    assert parse(raw).normalize(count) == expected


def test_string_forms() -> None:
    assert str(parse("1.2.3")) == "1.2.3.0"
    assert str(parse("v1.2-beta2")) == "1.2.0.0-beta2"
    assert parse("1.2.3").to_list() == [1, 2, 3, 0]


def test_to_dict() -> None:
    assert parse("v1.2-beta2").to_dict() == {
        "original": "v1.2-beta2",
        "segments": [1, 2, 0, 0],
        "major": 1,
        "minor": 2,
        "patch": 0,
        "build": 0,
        "tag": "beta2",
    }
    assert Version((0, 0, 0, 0)).to_dict()["original"] is None


def test_native_ordering() -> None:
    assert parse("1.2.3-beta") < parse("1.2.3")
    assert parse("2.4") > parse("2.4alpha")
    assert parse("1.10") >= parse("1.9")
    assert parse("1.0") <= parse("1")
    assert sorted([parse("2"), parse("1-rc"), parse("1")]) == [parse("1-rc"), parse("1"), parse("2")]


@pytest.mark.parametrize("segments", [5, None, "1234", {1, 2, 3, 4}])
def test_rejects_non_sequence_segments(segments: object) -> None:
    with pytest.raises(InvalidVersion, match="must be a sequence"):
        Version(segments=segments)  # type: ignore[arg-type]
