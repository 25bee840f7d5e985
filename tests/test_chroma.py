import numpy as np
import pytest

from pitchlattice.notation.codec import parse_pitch
from pitchlattice.theory.chroma import Chroma, chroma, relative_chroma


def test_chroma_of_maj7():
    c = chroma(["C4", "E", "G", "B"])
    assert c.binary == "100010010001"
    assert c.decimal == 2193
    assert c.pitch_classes == (0, 4, 7, 11)
    assert len(c) == 4


def test_chroma_ignores_order_octave_and_duplicates():
    assert chroma("C E G") == chroma(["G2", "e5", "C", "C3", "B#"])


def test_chroma_skips_unparseable_notes():
    assert chroma("c e g blah").binary == "100010010000"
    assert chroma(["nope", "nah"]).is_empty
    assert chroma([]).is_empty


def test_chroma_skips_entries_of_other_types():
    assert chroma(["C", None, "E", 7, "G"]).binary == "100010010000"
    assert chroma([None, 4]).is_empty


def test_chroma_accepts_pitches():
    assert chroma([parse_pitch("D4"), "F#"]) == Chroma.from_pitch_classes([2, 6])


def test_binary_and_decimal_round_trip():
    for mask in (0, 1, 2193, 4095, 0b101010101010):
        c = Chroma(mask)
        assert Chroma.from_binary(c.binary) == c
        assert Chroma.from_decimal(c.decimal) == c


@pytest.mark.parametrize("bad", ["10001", "1000100100012", "10001001000x"])
def test_from_binary_rejects_malformed(bad):
    with pytest.raises(ValueError):
        Chroma.from_binary(bad)


def test_mask_out_of_range():
    with pytest.raises(ValueError):
        Chroma(1 << 12)


def test_vector():
    v = chroma("C E G").vector
    assert v.dtype == np.bool_
    np.testing.assert_array_equal(np.flatnonzero(v), [0, 4, 7])


def test_rotate_and_modes():
    c_major = chroma("C E G")
    assert c_major.rotate(4).pitch_classes == (0, 3, 8)
    assert [m.pitch_classes for m in c_major.modes()] == [(0, 4, 7), (0, 3, 8), (0, 5, 9)]


def test_subset_superset():
    triad = chroma("C E G")
    seventh = chroma("C E G B")
    assert triad.is_subset_of(seventh)
    assert seventh.is_superset_of(triad)
    assert not seventh.is_subset_of(triad)


def test_membership_and_iteration():
    c = chroma("D F A")
    assert 2 in c
    assert 14 in c
    assert 3 not in c
    assert list(c) == [2, 5, 9]
    assert str(c) == c.binary


def test_relative_chroma():
    notes = [parse_pitch(n) for n in ("F#", "A", "C", "D")]
    assert relative_chroma(parse_pitch("D"), notes).pitch_classes == (0, 4, 7, 10)
