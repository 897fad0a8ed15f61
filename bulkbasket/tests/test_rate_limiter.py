import unittest
from bulkbasket.infra.rate_limiter import InMemoryRateLimitStore, RateLimitEntry, RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRateLimiter(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.store = InMemoryRateLimitStore()
        self.limiter = RateLimiter(self.store, max_requests=3, window_seconds=60, clock=self.clock)

    def test_allows_up_to_max(self):
        self.assertEqual([self.limiter.is_allowed("u1") for _ in range(4)], [True, True, True, False])
        self.assertEqual(self.limiter.remaining_requests("u1"), 0)
        self.assertEqual(self.limiter.reset_time("u1"), 1060.0)

    def test_window_resets(self):
        for _ in range(3):
            self.limiter.is_allowed("u1")
        self.clock.now += 61
        self.assertTrue(self.limiter.is_allowed("u1"))
        self.assertEqual(self.limiter.remaining_requests("u1"), 2)
        self.assertEqual(self.limiter.reset_time("u1"), 1121.0)

    def test_unknown_key(self):
        self.assertEqual(self.limiter.remaining_requests("nobody"), 3)
        self.assertEqual(self.limiter.reset_time("nobody"), 1060.0)

    def test_keys_are_independent(self):
        for _ in range(3):
            self.limiter.is_allowed("u1")
        self.assertTrue(self.limiter.is_allowed("u2"))
        self.assertFalse(self.limiter.is_allowed("u1"))

    def test_cleanup_drops_expired(self):
        self.limiter.is_allowed("old")
        self.clock.now += 30
        self.limiter.is_allowed("new")
        self.clock.now += 31
        self.assertEqual(self.limiter.cleanup(), 1)
        self.assertIsNone(self.store.get("old"))
        self.assertIsNotNone(self.store.get("new"))
        self.assertEqual(len(self.store), 1)

    def test_limiters_do_not_share_state(self):
        other = RateLimiter(InMemoryRateLimitStore(), max_requests=3, window_seconds=60, clock=self.clock)
        for _ in range(3):
            self.limiter.is_allowed("u1")
        self.assertTrue(other.is_allowed("u1"))

    def test_expired_keys_swept_on_request(self):
        for i in range(50):
            self.limiter.is_allowed(f"old-{i}")
        self.clock.now += 10000
        for i in range(50):
            self.limiter.is_allowed(f"new-{i}")
        self.assertEqual(len(self.store), 50)
        self.assertIsNone(self.store.get("old-0"))

    def test_sweep_runs_at_most_once_per_window(self):
        self.limiter.is_allowed("a")
        self.clock.now = 1061
        self.limiter.is_allowed("b")
        self.assertIsNone(self.store.get("a"))
        self.store.set("stale", RateLimitEntry(1, 1000.0))
        self.clock.now = 1100
        self.limiter.is_allowed("c")
        self.assertIsNotNone(self.store.get("stale"))
        self.clock.now = 1121
        self.limiter.is_allowed("d")
        self.assertIsNone(self.store.get("stale"))
