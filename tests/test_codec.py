import pytest

from pitchlattice.config import STEP_LETTERS, STEP_SEMITONES
from pitchlattice.errors import MalformedNotation
from pitchlattice.lattice.coords import Interval, Pitch
from pitchlattice.notation.cache import ParseCache
from pitchlattice.notation.codec import (
    NotationCodec,
    accidentals_to_alteration,
    alteration_to_accidentals,
    decode_interval,
    decode_pitch,
    format_coordinate,
    format_interval,
    format_pitch,
    parse_interval,
    parse_pitch,
)
from pitchlattice.notation.inputs import Parsed, Raw


@pytest.fixture
def codec():
    return NotationCodec(ParseCache())


# ── Accidentals ──────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text, alteration",
    [("", 0), ("#", 1), ("###", 3), ("b", -1), ("bbbb", -4), ("x", 2), ("xx", 4)],
)
def test_accidentals(text, alteration):
    assert accidentals_to_alteration(text) == alteration


def test_alteration_to_accidentals():
    assert alteration_to_accidentals(2) == "##"
    assert alteration_to_accidentals(-3) == "bbb"
    assert alteration_to_accidentals(0) == ""


# ── Pitches ──────────────────────────────────────────────────────────
def test_parse_pitch_values():
    assert parse_pitch("C4") == Pitch(0, 4)
    assert parse_pitch("Cb4") == Pitch(-7, 8)
    assert parse_pitch("C") == Pitch(0)
    assert parse_pitch("f#") == Pitch(6)


@pytest.mark.parametrize(
    "text, canonical",
    [
        ("Db5", "Db5"),
        ("c", "C"),
        ("f#-1", "F#-1"),
        ("Cx3", "C##3"),
        ("bbb", "Bbb"),
        ("e##", "E##"),
    ],
)
def test_pitch_canonical_form(codec, text, canonical):
    assert codec.canonical_pitch(text) == canonical


@pytest.mark.parametrize(
    "text", ["blah", "Cmaj7", "", "H4", "C10", "C#b", "4C", "C4\n", "Eb\n", "C\u0664"]
)
def test_invalid_pitch_is_none(text):
    assert parse_pitch(text) is None


def test_pitch_round_trip_over_representable_range():
    for step, letter in enumerate(STEP_LETTERS):
        for alt in range(-4, 5):
            for octave in range(-9, 10):
                text = letter + alteration_to_accidentals(alt) + str(octave)
                pitch = decode_pitch(text)
                assert pitch is not None
                assert format_pitch(pitch) == text
                assert pitch.octave == octave
                assert pitch.height == STEP_SEMITONES[step] + alt + 12 * octave
                assert decode_pitch(format_pitch(pitch)) == pitch


def test_pitch_class_round_trip():
    for fifths in range(-35, 36):
        assert decode_pitch(format_pitch(Pitch(fifths))) == Pitch(fifths)


def test_every_pitch_formats_and_reparses():
    for fifths in range(-30, 31):
        for octaves in range(-20, 21):
            pitch = Pitch(fifths, octaves)
            if not -9 <= pitch.octave <= 9 or abs(pitch.alteration) > 4:
                continue
            assert decode_pitch(format_pitch(pitch)) == pitch


# ── Intervals ────────────────────────────────────────────────────────
def test_parse_interval_values():
    assert parse_interval("10m") == Interval(-3, 3, 1)
    assert parse_interval("m10") == Interval(-3, 3, 1)
    assert parse_interval("3M") == Interval(4, -2)
    assert parse_interval("-3M") == Interval(4, -2, -1)
    assert parse_interval("1P") == Interval(0, 0)
    assert parse_interval("8P") == Interval(0, 1)


@pytest.mark.parametrize(
    "tonal, standard",
    [
        ("3M", "M3"),
        ("-9m", "m-9"),
        ("5P", "P5"),
        ("4AA", "AA4"),
        ("7d", "d7"),
        ("+2M", "M+2"),
    ],
)
def test_interval_surface_orders_agree(tonal, standard):
    assert parse_interval(tonal) == parse_interval(standard)
    assert parse_interval(tonal) is not None


@pytest.mark.parametrize(
    "shorthand, named",
    [("3b", "3m"), ("5#", "5A"), ("4#", "4A"), ("7bb", "7d"), ("5b", "5d"), ("2##", "2AA")],
)
def test_accidental_quality_shorthand(shorthand, named):
    assert parse_interval(shorthand) == parse_interval(named)


@pytest.mark.parametrize(
    "text",
    ["blah", "3P", "5M", "4m", "0P", "-0M", "3", "M", "3ddddd", "#3", "3M\n", "P5\n", "\u0663M"],
)
def test_invalid_interval_is_none(text):
    assert parse_interval(text) is None


@pytest.mark.parametrize(
    "text, canonical",
    [("M-3", "-3M"), ("+5P", "5P"), ("3b", "3m"), ("P8", "8P"), ("AA4", "4AA")],
)
def test_interval_canonical_form(codec, text, canonical):
    assert codec.canonical_interval(text) == canonical


def test_interval_round_trip_over_representable_range():
    qualities = {
        "P": ["dddd", "ddd", "dd", "d", "P", "A", "AA", "AAA", "AAAA"],
        "M": ["dddd", "ddd", "dd", "d", "m", "M", "A", "AA", "AAA", "AAAA"],
    }
    for number in range(1, 22):
        kind = "PMMPPMM"[(number - 1) % 7]
        for quality in qualities[kind]:
            for sign in ("", "-"):
                text = f"{sign}{number}{quality}"
                interval = decode_interval(text)
                assert interval is not None, text
                assert format_interval(interval) == text
                assert interval.number == number


def test_interval_semitones():
    assert parse_interval("3M").semitones == 4
    assert parse_interval("-10m").semitones == -15
    assert parse_interval("4A").semitones == 6
    assert parse_interval("15P").semitones == 24


# ── Tagged inputs and cache ──────────────────────────────────────────
def test_codec_passes_coordinates_through(codec):
    p = Pitch(0, 4)
    i = Interval(4, -2)
    assert codec.pitch(p) is p
    assert codec.pitch(Parsed(p)) is p
    assert codec.pitch(Raw("C4")) == p
    assert codec.interval(i) is i
    assert codec.pitch(i) is None
    assert codec.interval(p) is None


def test_codec_coordinate_resolves_either_kind(codec):
    assert codec.coordinate("Eb") == Pitch(-3)
    assert codec.coordinate("3m") == Interval(-3, 2)
    assert codec.coordinate("nope") is None


def test_codec_rejects_foreign_types(codec):
    with pytest.raises(TypeError):
        codec.pitch(60)
    with pytest.raises(TypeError):
        codec.interval(None)


def test_codec_pitches_skips_foreign_types(codec):
    assert codec.pitches(["C", None, 5, "blah", parse_interval("3M"), "E4"]) == [
        Pitch(0),
        Pitch(4, 2),
    ]


def test_require_helpers_raise(codec):
    assert codec.require_pitch("A4") == Pitch(3, 3)
    with pytest.raises(MalformedNotation) as excinfo:
        codec.require_pitch("Cmaj7")
    assert excinfo.value.kind == "pitch"
    with pytest.raises(ValueError):
        codec.require_interval("3P")


def test_repeated_parse_hits_cache():
    cache = ParseCache()
    codec = NotationCodec(cache)
    first = codec.parse_pitch("Ab3")
    second = codec.parse_pitch("Ab3")
    assert first == second
    info = cache.info()
    assert info.hits == 1
    assert info.misses == 1
    assert info.currsize == 1


def test_invalid_results_are_cached_too():
    cache = ParseCache()
    codec = NotationCodec(cache)
    assert codec.parse_interval("blah") is None
    assert codec.parse_interval("blah") is None
    assert cache.info().hits == 1


def test_pitch_and_interval_keys_do_not_collide():
    codec = NotationCodec()
    assert codec.parse_pitch("A4") == Pitch(3, 3)
    assert codec.parse_interval("A4") == Interval(6, -3)


def test_format_coordinate():
    assert format_coordinate(Pitch(-3, 6)) == "Eb4"
    assert format_coordinate(Interval(-3, 3, -1)) == "-10m"


def test_oversized_qualities_format_but_do_not_parse():
    augmented = Interval.from_parts(0, 5, 0, 1)
    diminished = Interval.from_parts(4, -5, 0, 1)
    assert format_interval(augmented) == "1AAAAA"
    assert format_interval(diminished) == "5ddddd"
    assert parse_interval("1AAAAA") is None
    assert parse_interval("5ddddd") is None
