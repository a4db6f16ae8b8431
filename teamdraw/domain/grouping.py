# teamdraw/domain/grouping.py

from typing import Optional, Protocol
from dataclasses import dataclass


class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1), e.g. random.Random."""

    def random(self) -> float:
        ...


MAX_ATTEMPTS = 100
BALANCE_TOLERANCE = 2
TOP_PER_GROUP = 2


@dataclass
class AllocationOptions:
    max_attempts: int = MAX_ATTEMPTS
    balance_tolerance: int = BALANCE_TOLERANCE
    top_per_group: int = TOP_PER_GROUP
    random_seed: Optional[int] = None
    # an injected source wins over random_seed
    rng: Optional[RandomSource] = None
