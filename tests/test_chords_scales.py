import pytest

from pitchlattice.theory.chords import chord, chord_names, chord_notes, tokenize_chord
from pitchlattice.theory.scales import scale, scale_names, scale_notes, tokenize_scale


# ── Chords ───────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "name, expected",
    [
        ("Bb7", ("Bb", "7")),
        ("Cmaj7", ("C", "maj7")),
        ("F#m7b5", ("F#", "m7b5")),
        ("C", ("C", "")),
        ("maj7", ("", "maj7")),
        ("aug", ("", "aug")),
        ("dim7", ("", "dim7")),
        ("1P 3M 5P", ("", "1P 3M 5P")),
    ],
)
def test_tokenize_chord(name, expected):
    assert tokenize_chord(name) == expected


def test_chord_intervals_without_tonic():
    assert chord("maj7") == ["1P", "3M", "5P", "7M"]
    assert chord("Maj7") == ["1P", "3M", "5P", "7M"]


def test_chord_with_tonic():
    assert chord("maj7", "C2") == ["C2", "E2", "G2", "B2"]
    assert chord("m7b5", "F#") == ["F#", "A", "C", "E"]
    assert chord("7", "Bb3") == ["Bb3", "D4", "F4", "Ab4"]


def test_chord_from_full_name():
    assert chord("Cmaj7") == ["C", "E", "G", "B"]
    assert chord("Eb") == ["Eb", "G", "Bb"]
    assert chord("Am") == ["A", "C", "E"]


def test_chord_literal_interval_fallback():
    assert chord("1P 3M 5P 7m 9m", "C") == ["C", "E", "G", "Bb", "Db"]
    assert chord("1P 3m 5d") == ["1P", "3m", "5d"]


def test_unknown_chord_is_empty():
    assert chord("Cfoo") == []
    assert chord("maj7", "blah") == []


def test_chord_notes():
    assert chord_notes("G7") == ["G", "B", "D", "F"]
    assert chord_notes("Dbmaj9") == ["Db", "F", "Ab", "C", "Eb"]
    assert chord_notes("maj7") == []


def test_chord_names():
    names = chord_names()
    assert "maj7" in names and "M7" not in names
    assert "M7" in chord_names(aliases=True)


# ── Scales ───────────────────────────────────────────────────────────
def test_tokenize_scale():
    assert tokenize_scale("C4 major") == ("C4", "major")
    assert tokenize_scale("Eb harmonic minor") == ("Eb", "harmonic minor")
    assert tokenize_scale("harmonic minor") == ("", "harmonic minor")
    assert tokenize_scale("dorian") == ("", "dorian")


def test_scale_intervals_and_notes():
    assert scale("dorian") == ["1P", "2M", "3m", "4P", "5P", "6M", "7m"]
    assert scale("A minor") == ["A", "B", "C", "D", "E", "F", "G"]
    assert scale("major", "Bb3") == ["Bb3", "C4", "D4", "Eb4", "F4", "G4", "A4"]
    assert scale("D dorian") == ["D", "E", "F", "G", "A", "B", "C"]


def test_scale_notes():
    assert scale_notes("C major pentatonic") == ["C", "D", "E", "G", "A"]
    assert scale_notes("F# harmonic minor") == ["F#", "G#", "A", "B", "C#", "D", "E#"]
    assert scale_notes("lydian") == []
    assert scale_notes("C nonsense") == []


def test_scale_names():
    assert "major" in scale_names()
    assert "ionian" not in scale_names()
    assert "ionian" in scale_names(aliases=True)
