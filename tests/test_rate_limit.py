"""Tests for the fixed-window rate limiter."""

from kvcore_toolkit.server.rate_limit import FixedWindowLimiter, RateLimitPolicy


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_limiter(max_requests=3, window_ms=60000):
    clock = FakeClock()
    limiter = FixedWindowLimiter(
        RateLimitPolicy(window_ms=window_ms, max_requests=max_requests), clock=clock
    )
    return limiter, clock


def test_allows_up_to_limit():
    limiter, _ = make_limiter(max_requests=3)

    results = [limiter.hit("1.2.3.4") for _ in range(3)]

    assert all(r.allowed for r in results)
    assert [r.remaining for r in results] == [2, 1, 0]
    assert results[0].limit == 3
    assert results[0].reset_seconds == 60


def test_rejects_over_limit():
    limiter, _ = make_limiter(max_requests=2)
    limiter.hit("1.2.3.4")
    limiter.hit("1.2.3.4")

    result = limiter.hit("1.2.3.4")

    assert not result.allowed
    assert result.remaining == 0


def test_window_resets():
    limiter, clock = make_limiter(max_requests=1, window_ms=1000)
    limiter.hit("1.2.3.4")
    assert not limiter.hit("1.2.3.4").allowed

    clock.advance(1.0)

    result = limiter.hit("1.2.3.4")
    assert result.allowed
    assert result.remaining == 0


def test_reset_seconds_counts_down():
    limiter, clock = make_limiter(window_ms=60000)
    limiter.hit("1.2.3.4")

    clock.advance(15)

    assert limiter.hit("1.2.3.4").reset_seconds == 45


def test_clients_counted_separately():
    limiter, _ = make_limiter(max_requests=1)

    assert limiter.hit("1.1.1.1").allowed
    assert limiter.hit("2.2.2.2").allowed
    assert not limiter.hit("1.1.1.1").allowed


def test_reset_forgets_clients():
    limiter, _ = make_limiter(max_requests=1)
    limiter.hit("1.1.1.1")

    limiter.reset()

    assert limiter.hit("1.1.1.1").allowed
