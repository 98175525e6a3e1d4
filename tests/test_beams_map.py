from asrdecode.beam import CtcBeam
from asrdecode.beams_map import BeamPtrMap, BeamsMapWrapper


def _beam(sequence, score):
    beam = CtcBeam(sequence)
    beam.score = score
    return beam


def test_ptr_map_finds_added_beam():
    beams = BeamPtrMap()
    beam = CtcBeam("ab")
    beams.add_beam(beam)
    assert beams.find_beam("ab") is beam
    assert beams.find_beam("zz") is None


def test_ptr_map_keeps_first_and_collects_duplicate():
    beams = BeamPtrMap()
    first, duplicate = CtcBeam("ab"), CtcBeam("ab")
    beams.add_beam(first)
    beams.add_beam(duplicate)
    assert beams.find_beam("ab") is first
    assert len(beams) == 1
    discarded = beams.clean_garbage()
    assert len(discarded) == 1 and discarded[0] is duplicate
    assert beams.clean_garbage() == []


def test_ptr_map_same_object_twice_is_not_garbage():
    beams = BeamPtrMap()
    beam = CtcBeam("ab")
    beams.add_beam(beam)
    beams.add_beam(beam)
    assert beams.clean_garbage() == []
    assert len(beams) == 1


def test_ptr_map_clear_and_iterate():
    beams = BeamPtrMap()
    a, b = CtcBeam("a"), CtcBeam("b")
    beams.add_beam(a)
    beams.add_beam(b)
    items = dict(beams)
    assert items == {"a": a, "b": b}
    assert items["a"] is a
    beams.clear()
    assert beams.find_beam("a") is None
    assert list(beams) == []


def test_wrapper_default_width():
    assert BeamsMapWrapper().beams_width == 10
    assert BeamsMapWrapper(3).beams_width == 3


def test_wrapper_empty_has_no_min_max():
    wrapper = BeamsMapWrapper()
    assert wrapper.is_empty()
    assert wrapper.get_min() is None
    assert wrapper.get_max() is None


def test_wrapper_tracks_min_and_max():
    wrapper = BeamsMapWrapper()
    scores = [-4.0, -1.0, -2.5]
    for sequence, score in zip("abc", scores):
        wrapper.update_beams_map(_beam(sequence, score))
    assert len(wrapper) == 3
    assert wrapper.get_min() == min(scores)
    assert wrapper.get_max() == max(scores)


def test_wrapper_merges_same_sequence():
    wrapper = BeamsMapWrapper()
    wrapper.update_beams_map(_beam("ab", 1.0))
    wrapper.update_beams_map(_beam("ab", 2.0))
    assert len(wrapper) == 1
    assert wrapper.beams["ab"].score == 3.0
    assert wrapper.get_max() == 3.0


def test_wrapper_stores_a_copy():
    wrapper = BeamsMapWrapper()
    original = _beam("ab", -1.0)
    wrapper.update_beams_map(original)
    original.score = 5.0
    original.extend_sequence("c")
    stored = wrapper.beams["ab"]
    assert stored is not original
    assert stored.score == -1.0
    assert stored.text() == "ab"


def test_scale_maps_onto_bounds_and_clears_scores():
    wrapper = BeamsMapWrapper()
    wrapper.update_beams_map(_beam("a", -8.0))
    wrapper.update_beams_map(_beam("b", -2.0))
    wrapper.scale_beams_score(0, 5)
    beams = wrapper.beams
    assert beams["a"].score == 0
    assert beams["b"].score == 5
    assert wrapper.get_min() is None


def test_scale_without_scores_is_a_no_op():
    wrapper = BeamsMapWrapper()
    wrapper.scale_beams_score(0, 5)
    assert wrapper.is_empty()
    assert len(wrapper) == 0


def test_clear_beams_map():
    wrapper = BeamsMapWrapper()
    wrapper.update_beams_map(_beam("a", -1.0))
    wrapper.clear_beams_map()
    assert wrapper.is_empty()
    assert wrapper.get_max() is None
    assert wrapper.beams == {}