import unittest

from netstat_monitor import CounterSnapshot, calculate_rate, compute_rates, safe_delta


def _snapshot(rx_bytes: int, captured_at: float, **kwargs) -> CounterSnapshot:
    return CounterSnapshot(interface="eth0", rx_bytes=rx_bytes, captured_at=captured_at, **kwargs)


class SafeDeltaTest(unittest.TestCase):
    def test_increasing_counter(self) -> None:
        for current, previous in [(0, 0), (10, 3), (2**40, 2**39), (2**64 - 1, 0)]:
            self.assertEqual(safe_delta(current, previous), current - previous)

    def test_single_32_bit_wrap(self) -> None:
        self.assertEqual(safe_delta(10, 4294967290), 16)
        self.assertEqual(safe_delta(0, 2**32 - 1), 1)

    def test_wrap_policy_matches_unsigned_64_bit_arithmetic(self) -> None:
        # A decreasing counter above 2**32 underflows like uint64 would.
        self.assertEqual(safe_delta(5, 2**33), (2**32 - 2**33 + 5) % 2**64)


class CalculateRateTest(unittest.TestCase):
    def test_non_positive_elapsed_yields_zero(self) -> None:
        for elapsed in (0.0, -1.0, -0.001):
            self.assertEqual(calculate_rate(2048, elapsed), 0.0)

    def test_rate_is_delta_over_elapsed(self) -> None:
        self.assertEqual(calculate_rate(2048, 2.0), 1024.0)
        self.assertAlmostEqual(calculate_rate(1, 3.0), 1 / 3)


class ComputeRatesTest(unittest.TestCase):
    def test_unavailable_without_valid_previous(self) -> None:
        current = _snapshot(1000, 5.0)
        self.assertIsNone(compute_rates(None, current))
        self.assertIsNone(compute_rates(CounterSnapshot.empty("eth0"), current))

    def test_two_ticks_two_seconds_apart(self) -> None:
        previous = _snapshot(1000, 10.0, rx_packets=5, tx_bytes=100, tx_packets=1)
        current = _snapshot(3048, 12.0, rx_packets=9, tx_bytes=100, tx_packets=3)

        rates = compute_rates(previous, current)

        self.assertIsNotNone(rates)
        self.assertEqual(rates.elapsed, 2.0)
        self.assertEqual(rates.rx_bytes_delta, 2048)
        self.assertEqual(rates.rx_bytes_rate, 1024.0)
        self.assertEqual(rates.rx_packets_delta, 4)
        self.assertEqual(rates.rx_packets_rate, 2.0)
        self.assertEqual(rates.tx_bytes_delta, 0)
        self.assertEqual(rates.tx_bytes_rate, 0.0)
        self.assertEqual(rates.tx_packets_rate, 1.0)

    def test_same_instant_gives_zero_rates_but_real_deltas(self) -> None:
        rates = compute_rates(_snapshot(1, 3.0), _snapshot(11, 3.0))
        self.assertEqual(rates.rx_bytes_delta, 10)
        self.assertEqual(rates.rx_bytes_rate, 0.0)


if __name__ == "__main__":  # pragma: no cover - convenience
    unittest.main()
