import itertools
from uuid import UUID


class FakeClock:
    """Manually advanced epoch-seconds clock."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def sequential_ids(start: int = 1):
    counter = itertools.count(start)
    return lambda: UUID(int=next(counter))
