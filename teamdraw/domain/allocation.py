# teamdraw/domain/allocation.py
"""
Pure allocation logic for Team Draw.

This module contains only pure functions operating on participants and plain
lists of groups. The service layer handles configuration and logging and calls
these functions with parsed participants.

Functions included:
- stratified_sort
- shuffle_participants
- serpentine_indices
- seed_top_participants
- group_scores
- greedy_fill
- optimize_balance
- balance_statistics
- allocate

No I/O. Randomness comes from an injected RandomSource.
"""
from typing import Iterator, List, Optional, Sequence
import logging
import random
from statistics import fmean, pstdev

from teamdraw.domain.errors import InsufficientParticipants
from teamdraw.domain.grouping import (
    AllocationOptions,
    RandomSource,
    MAX_ATTEMPTS,
    BALANCE_TOLERANCE,
)
from teamdraw.domain.models import (
    AllocationResult,
    BalanceStats,
    Group,
    Participant,
)

logger = logging.getLogger(__name__)


def stratified_sort(participants: Sequence[Participant]) -> List[Participant]:
    """
    Order participants by category label, then by descending score.

    Example:
    >>> people = [Participant(name="b", score=5, category="B"),
    ...           Participant(name="a", score=9, category="A")]
    >>> [p.name for p in stratified_sort(people)]
    ['a', 'b']
    """
    return sorted(participants, key=lambda p: (p.category.value, -p.score))


def shuffle_participants(participants: Sequence[Participant], rng: RandomSource) -> List[Participant]:
    """
    Fisher-Yates shuffle driven by rng.random(). Returns a new list.
    """
    shuffled = list(participants)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def serpentine_indices(group_count: int) -> Iterator[int]:
    """
    Endless back-and-forth sequence of group indices.
    Direction flips as soon as an end index is reached, so end points are
    not repeated: 4 groups give 0,1,2,3,2,1,0,1,...
    """
    if group_count == 1:
        while True:
            yield 0

    index = 0
    direction = 1
    while True:
        yield index
        index += direction
        if index >= group_count - 1 or index <= 0:
            direction = -direction


def seed_top_participants(groups: List[List[Participant]], top: Sequence[Participant]) -> None:
    """Spread the strongest participants across groups in serpentine order."""
    for participant, index in zip(top, serpentine_indices(len(groups))):
        groups[index].append(participant)


def group_scores(groups: Sequence[Sequence[Participant]]) -> List[int]:
    return [sum(p.score for p in group) for group in groups]


def greedy_fill(groups: List[List[Participant]], participants: Sequence[Participant], rng: RandomSource) -> None:
    """
    Put each participant into the group with the lowest total.
    Ties between lowest groups are broken at random.
    """
    for participant in participants:
        scores = group_scores(groups)
        lowest = min(scores)
        candidates = [i for i, s in enumerate(scores) if s == lowest]
        target = candidates[int(rng.random() * len(candidates))]
        groups[target].append(participant)


def optimize_balance(
    groups: List[List[Participant]],
    max_attempts: int = MAX_ATTEMPTS,
    tolerance: int = BALANCE_TOLERANCE,
) -> int:
    """
    Swap members between the strongest and the weakest group until the
    spread (max - min) is within tolerance, no swap helps, or max_attempts
    runs out. Each round applies the swap with the largest score difference
    that is still smaller than the spread, so the spread never grows.

    Returns the number of swaps applied.
    """
    swaps = 0
    for attempt in range(max_attempts):
        scores = group_scores(groups)
        high = max(scores)
        low = min(scores)
        spread = high - low
        if spread <= tolerance:
            break

        high_idx = scores.index(high)
        low_idx = scores.index(low)

        best_swap = None
        best_diff = 0
        for i, strong in enumerate(groups[high_idx]):
            for j, weak in enumerate(groups[low_idx]):
                diff = strong.score - weak.score
                if 0 < diff < spread and diff > best_diff:
                    best_diff = diff
                    best_swap = (i, j)

        if best_swap is None:
            logger.debug("no improving swap left after %d attempts (spread %d)", attempt, spread)
            break

        i, j = best_swap
        groups[high_idx][i], groups[low_idx][j] = groups[low_idx][j], groups[high_idx][i]
        swaps += 1

    return swaps


def balance_statistics(scores: Sequence[int]) -> BalanceStats:
    """
    Average, max, min, difference and population standard deviation of
    per-group totals.

    Example:
    >>> balance_statistics([10, 10, 10, 10])
    BalanceStats(average=10.0, max=10, min=10, difference=0, standard_deviation=0.0)
    """
    high = max(scores)
    low = min(scores)
    return BalanceStats(
        average=fmean(scores),
        max=high,
        min=low,
        difference=high - low,
        standard_deviation=pstdev(scores),
    )


def allocate(
    participants: Sequence[Participant],
    group_count: int,
    group_size: int,
    options: Optional[AllocationOptions] = None,
) -> AllocationResult:
    """
    Partition participants into group_count groups with balanced totals.

    Only the total headcount is checked against group_count * group_size;
    final group sizes are best effort and may differ.
    Raises InsufficientParticipants when the headcount is too small.
    """
    if group_count < 1:
        raise ValueError("group_count must be at least 1")
    if len(participants) < group_count * group_size:
        raise InsufficientParticipants(len(participants), group_count, group_size)

    options = options or AllocationOptions()
    rng = options.rng or random.Random(options.random_seed)

    ordered = stratified_sort(participants)
    cut = group_count * options.top_per_group
    top, rest = ordered[:cut], ordered[cut:]

    groups: List[List[Participant]] = [[] for _ in range(group_count)]
    seed_top_participants(groups, top)
    greedy_fill(groups, shuffle_participants(rest, rng), rng)
    swaps = optimize_balance(groups, options.max_attempts, options.balance_tolerance)

    scores = group_scores(groups)
    return AllocationResult(
        groups=[Group(index=i, members=members) for i, members in enumerate(groups)],
        group_scores=scores,
        statistics=balance_statistics(scores),
        refinement_swaps=swaps,
    )
