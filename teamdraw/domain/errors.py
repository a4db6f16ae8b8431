class AllocationError(Exception):
    """Base class for failures raised by the allocator."""


class InsufficientParticipants(AllocationError):
    def __init__(self, available: int, group_count: int, group_size: int):
        self.available = available
        self.group_count = group_count
        self.group_size = group_size
        self.required = group_count * group_size
        super().__init__(
            f"Not enough participants to build {group_count} groups of {group_size}: "
            f"need {self.required}, got {available}"
        )
