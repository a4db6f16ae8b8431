# teamdraw/simulation/simulate.py
"""
Simulation script: creates X fake participants with random scores and
categories, draws balanced groups and prints the share summary.

Uses the service layer directly (no HTTP calls).
"""

import logging
import random
from faker import Faker

from teamdraw.config.settings import settings
from teamdraw.services.allocation_service import AllocationService
from teamdraw.services.share_service import render_summary

fake = Faker()
NUM_PARTICIPANTS = 22
GROUP_COUNT = 4
GROUP_SIZE = 5


def fake_records(count: int):
    return [
        {
            "name": fake.first_name(),
            "score": random.randint(1, 10),
            "category": random.choice(["A", "B"]),
        }
        for _ in range(count)
    ]


def run_simulation():
    service = AllocationService()
    result = service.allocate_records(fake_records(NUM_PARTICIPANTS), GROUP_COUNT, GROUP_SIZE)
    print(render_summary(result))
    print(f"Refinement swaps: {result.refinement_swaps}")
    return result


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_simulation()
