"""Controllable time source for expiry tests."""


class FakeClock:
    """Callable clock that only moves when told to.

    Example:
        >>> clock = FakeClock()
        >>> store = TTLStore(60, 10, clock=clock)
        >>> clock.advance(61)
    """

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
