# tests/test_seeding.py
from itertools import islice

from teamdraw.domain.allocation import allocate, serpentine_indices, seed_top_participants
from teamdraw.domain.grouping import AllocationOptions

from conftest import SequenceRandom, make_participants

# -------------------------------
# Serpentine index sequence
# -------------------------------

def test_serpentine_four_groups():
    # direction flips on reaching an end, so ends are not repeated
    assert list(islice(serpentine_indices(4), 10)) == [0, 1, 2, 3, 2, 1, 0, 1, 2, 3]


def test_serpentine_two_groups_alternates():
    assert list(islice(serpentine_indices(2), 6)) == [0, 1, 0, 1, 0, 1]


def test_serpentine_three_groups():
    assert list(islice(serpentine_indices(3), 7)) == [0, 1, 2, 1, 0, 1, 2]


def test_serpentine_single_group():
    assert list(islice(serpentine_indices(1), 4)) == [0, 0, 0, 0]

# -------------------------------
# Seeding
# -------------------------------

def test_seed_spreads_top_participants():
    top = make_participants([10, 9, 8, 7, 6, 5, 4, 3])
    groups = [[] for _ in range(4)]
    seed_top_participants(groups, top)
    assert [[p.score for p in g] for g in groups] == [[10, 4], [9, 5, 3], [8, 6], [7]]


def test_seed_sizes_after_first_sweep_and_full_seed():
    for count in range(2, 9):
        # first sweep: one each
        groups = [[] for _ in range(count)]
        seed_top_participants(groups, make_participants([5] * count))
        assert [len(g) for g in groups] == [1] * count

        # full seed of 2 * count: sizes stay within two of each other
        groups = [[] for _ in range(count)]
        seed_top_participants(groups, make_participants([5] * (2 * count)))
        sizes = [len(g) for g in groups]
        assert sum(sizes) == 2 * count
        assert max(sizes) - min(sizes) <= 2


def test_allocate_keeps_seed_sizes_when_nothing_is_left():
    people = make_participants([10, 9, 8, 7, 6, 5, 4, 3])
    result = allocate(people, 4, 2, AllocationOptions(rng=SequenceRandom([0.0])))
    assert [len(g.members) for g in result.groups] == [2, 3, 2, 1]
    assert result.group_scores == [14, 15, 14, 9]


def test_seed_fewer_participants_than_slots():
    top = make_participants([10, 9])
    groups = [[] for _ in range(3)]
    seed_top_participants(groups, top)
    assert [len(g) for g in groups] == [1, 1, 0]
