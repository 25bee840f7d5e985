import pytest

import pitchlattice as pl
from pitchlattice import core
from pitchlattice.lattice.coords import Interval, Pitch


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("C4", "3M", "E4"),
        ("3M", "C4", "E4"),
        ("C2", "m3", "Eb2"),
        ("6m", "C", "Ab"),
        ("D", "-2M", "C"),
        ("C", "C", None),
        ("3M", "5P", None),
        ("blah", "3M", None),
    ],
)
def test_transpose(first, second, expected):
    assert core.transpose(first, second) == expected


def test_transpose_composition_in_text():
    twice = core.transpose(core.transpose("C4", "3M"), "3M")
    assert twice == core.transpose("C4", core.add("3M", "3M")) == "G#4"


def test_transpose_accepts_coordinates():
    assert core.transpose(Pitch(0, 4), Interval(4, -2)) == "E4"


def test_transposer_is_single_argument():
    up_a_third = core.transposer("3M")
    assert [up_a_third(n) for n in ["C", "D", "E"]] == ["E", "F#", "G#"]
    from_c = core.transposer("C4")
    assert [from_c(i) for i in ["1P", "5P", "8P"]] == ["C4", "G4", "C5"]
    assert core.transposer("blah")("C") is None


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("C2", "C3", "8P"),
        ("C3", "A2", "-3m"),
        ("G", "B", "3M"),
        ("C4", "x", None),
    ],
)
def test_interval(start, end, expected):
    assert core.interval(start, end) == expected


def test_interval_from():
    measure = core.interval_from("C4")
    assert [measure(n) for n in ["C4", "E4", "G3"]] == ["1P", "3M", "-4P"]
    assert core.interval_from("blah")("C4") is None


def test_add_subtract():
    assert core.add("3m", "5P") == "7m"
    assert core.subtract("5P", "2M") == "4P"
    assert core.add("3m", "x") is None
    assert core.subtract("x", "3m") is None


def test_semitone_helpers():
    assert core.semitones("-10m") == -15
    assert core.semitones("nope") is None
    assert core.distance_in_semitones("C3", "A2") == -3
    assert core.distance_in_semitones("C3", "nope") is None


def test_fifths_helpers():
    assert core.fifths("C", "D") == 2
    assert core.fifths("C", "nope") is None
    assert core.transpose_fifths("G4", 1) == "D"
    assert core.transpose_fifths("F", -1) == "Bb"


def test_naming_helpers():
    assert core.note_name("cx4") == "C##4"
    assert core.note_name("blah") is None
    assert core.pitch_class("Db5") == "Db"
    assert core.enharmonics("C") == ["B#", "C", "Dbb"]
    assert core.enharmonics("blah") == []
    assert core.simplify_enharmonic("C##") == "D"
    assert core.simplify_enharmonic("Fb4") == "E4"


def test_interval_helpers():
    assert core.simplify("9M") == "2M"
    assert core.simplify("-10m") == "-3m"
    assert core.invert("3M") == "6m"
    assert core.invert("4P") == "5P"
    assert core.invert("x") is None


def test_package_exports():
    assert pl.transpose("C4", "3M") == "E4"
    assert pl.parse_pitch("Cb4") == Pitch(-7, 8)
    assert pl.detect(["F#", "A", "C", "D"]) == ["D7/F#"]
    assert pl.chroma("C E G B").binary == "100010010001"
    assert pl.__version__ == "0.1.0"


def test_foreign_input_type_raises():
    with pytest.raises(TypeError):
        core.note_name(42)
