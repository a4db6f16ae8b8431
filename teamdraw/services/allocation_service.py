from typing import Any, Dict, Iterable, List, Optional
import logging
import re

from teamdraw.config.settings import settings
from teamdraw.domain import allocation as domain
from teamdraw.domain.errors import InsufficientParticipants
from teamdraw.domain.grouping import AllocationOptions, RandomSource
from teamdraw.domain.models import AllocationResult, Category, Participant

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def options_from_settings(random_seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> AllocationOptions:
    return AllocationOptions(
        max_attempts=settings.MAX_ATTEMPTS,
        balance_tolerance=settings.BALANCE_TOLERANCE,
        top_per_group=settings.TOP_PER_GROUP,
        random_seed=random_seed,
        rng=rng,
    )


def _parse_score(value: Any) -> Optional[int]:
    # leading integer, so "7.5" and "7 pts" read as 7
    if value is None:
        return None
    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _parse_category(value: Any) -> Optional[Category]:
    if value is None or value == "":
        return Category.A
    try:
        return Category(value)
    except ValueError:
        return None


class AllocationService:
    def __init__(self, options: AllocationOptions = None):
        self.options = options or options_from_settings()

    def build_participants(self, records: Iterable[Dict[str, Any]]) -> List[Participant]:
        """
        Turn raw input records into participants.
        Records without a name, with a missing, zero or non-numeric score,
        or with an unknown category are skipped. A missing category reads
        as A. Every participant gets a fresh id.
        """
        participants = []
        skipped = 0
        for record in records:
            name = (record.get("name") or "").strip()
            score = _parse_score(record.get("score"))
            category = _parse_category(record.get("category"))
            if not name or not score or category is None:
                skipped += 1
                continue
            participants.append(Participant(name=name, score=score, category=category))
        if skipped:
            logger.info(f"Skipped {skipped} incomplete participant records")
        return participants

    def allocate(
        self,
        participants: List[Participant],
        group_count: int = None,
        group_size: int = None,
    ) -> AllocationResult:
        if group_count is None:
            group_count = settings.GROUP_COUNT_DEFAULT
        if group_size is None:
            group_size = settings.GROUP_SIZE_DEFAULT
        try:
            result = domain.allocate(participants, group_count, group_size, self.options)
        except InsufficientParticipants as e:
            logger.warning(str(e))
            raise

        stats = result.statistics
        logger.info(
            f"Allocated {len(participants)} participants into {group_count} groups "
            f"(spread {stats.difference}, std dev {stats.standard_deviation:.2f}, "
            f"{result.refinement_swaps} swaps)"
        )
        return result

    def allocate_records(
        self,
        records: Iterable[Dict[str, Any]],
        group_count: int = None,
        group_size: int = None,
    ) -> AllocationResult:
        return self.allocate(self.build_participants(records), group_count, group_size)
