import pytest

import reconstructors.base as base_module
from reconstructors import (
    EmptyInputError,
    InvalidMergeGeometryError,
    MergeStep,
    NoOverlapError,
)
from reconstructors.brute_force import BruteForceReconstructor
from reconstructors.priority import FragmentPair, PriorityReconstructor, _entry

STRATEGIES = [BruteForceReconstructor, PriorityReconstructor]

ALPHABET_FRAGMENTS = ["abcdefgh", "fghijklm", "klmnopqr", "pqrstuvwxyz", "mnop"]


@pytest.fixture(params=STRATEGIES, ids=lambda cls: cls.__name__)
def reconstructor(request):
    return request.param()


def test_three_fragments_merge_greedily(reconstructor):
    result = reconstructor.reconstruct(["abcd", "cdef", "efgh"])
    assert result.text == "abcdefgh"
    assert result.steps == [
        MergeStep(a_id=0, b_id=1, new_id=3, overlap=2),
        MergeStep(a_id=2, b_id=3, new_id=4, overlap=2),
    ]
    assert result.strategy == reconstructor.name()


def test_contained_fragment_merges_first(reconstructor):
    result = reconstructor.reconstruct(ALPHABET_FRAGMENTS)
    assert result.text == "abcdefghijklmnopqrstuvwxyz"
    assert result.merge_count == len(ALPHABET_FRAGMENTS) - 1
    assert result.steps[0] == MergeStep(a_id=2, b_id=4, new_id=5, overlap=4)


def test_peking_duck(reconstructor):
    result = reconstructor.reconstruct(["greatpeking", "pekingduckfordinner", "duck"])
    assert result.text == "greatpekingduckfordinner"
    assert result.merge_count == 2


def test_single_fragment_needs_no_merge(reconstructor):
    result = reconstructor.reconstruct(["lonely"])
    assert result.text == "lonely"
    assert result.steps == []


def test_empty_input_fails(reconstructor):
    with pytest.raises(EmptyInputError):
        reconstructor.reconstruct([])


def test_disjoint_fragments_fail(reconstructor):
    with pytest.raises(NoOverlapError):
        reconstructor.reconstruct(["abc", "xyz"])


def test_on_and_on_fails_after_merging_the_ons(reconstructor):
    with pytest.raises(NoOverlapError):
        reconstructor.reconstruct(["on", "and", "on"])


def test_partner_losing_its_overlap_fails(reconstructor):
    # "dz" only touches "abcd"; once that becomes "abcdef" nothing overlaps
    with pytest.raises(NoOverlapError):
        reconstructor.reconstruct(["abcd", "cdef", "dz"])


def test_invalid_geometry_is_reported(reconstructor, monkeypatch):
    monkeypatch.setattr(base_module, "merge_fragments", lambda a, b: None)
    with pytest.raises(InvalidMergeGeometryError):
        reconstructor.reconstruct(["abcd", "cdef"])


@pytest.mark.parametrize(
    "fragments",
    [
        ["abcd", "cdef", "efgh"],
        ["efgh", "abcd", "cdef"],
        ALPHABET_FRAGMENTS,
        ["greatpeking", "pekingduckfordinner", "duck", "nner"],
        ["all is well ", "ell that en", "hat ends well"],
    ],
)
def test_strategies_agree(fragments):
    brute = BruteForceReconstructor().reconstruct(fragments)
    prio = PriorityReconstructor().reconstruct(fragments)
    assert brute.text == prio.text
    assert brute.merge_count == prio.merge_count == len(fragments) - 1


def test_fragment_pair_orders_ids():
    pair = FragmentPair.of(3, 9, 4)
    assert (pair.a_id, pair.b_id) == (4, 9)
    assert pair.contains(9) and pair.contains(4)
    assert pair.other(4) == 9


def test_purge_drops_stale_pairs_and_collects_partners():
    heap = [_entry(FragmentPair.of(*p)) for p in [(5, 0, 1), (3, 1, 2), (2, 2, 3), (1, 0, 3)]]
    kept, partners = PriorityReconstructor._purge(heap, (0, 1))
    assert [e[3] for e in kept] == [FragmentPair(2, 2, 3)]
    assert partners == {2, 3}


def test_priority_ties_prefer_smaller_ids():
    # both pairs overlap by 2; (0, 1) must be merged before (1, 2)
    result = PriorityReconstructor().reconstruct(["abcd", "cdef", "efgh"])
    assert (result.steps[0].a_id, result.steps[0].b_id) == (0, 1)
