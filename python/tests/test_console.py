from __future__ import annotations

import io
import socket
from datetime import datetime
from types import SimpleNamespace

import netstat_monitor.interfaces as interfaces
from netstat_monitor.console import ConsoleRenderer
from netstat_monitor.counter_snapshot import CounterSnapshot
from netstat_monitor.counter_source import ReadResult, ReadStatus
from netstat_monitor.interfaces import describe_interfaces
from netstat_monitor.monitor import MonitorOptions, MonitorSummary
from netstat_monitor.rates import compute_rates
from netstat_monitor.summary_statistics import RateSummary, SummaryStatistics
from netstat_monitor.utils import format_bytes, format_rate


def _renderer():
    out, err = io.StringIO(), io.StringIO()
    renderer = ConsoleRenderer(out, err, now=lambda: datetime(2025, 1, 2, 3, 4, 5))
    return renderer, out, err


def test_format_bytes():
    assert format_bytes(0) == "0 B"
    assert format_bytes(1023) == "1023 B"
    assert format_bytes(1024) == "1.0 KB"
    assert format_bytes(5 * 1024 * 1024) == "5.0 MB"
    assert format_bytes(3 * 1024**5) == "3072.0 TB"


def test_format_rate():
    assert format_rate(0.0) == "0 B/s"
    assert format_rate(0.99) == "0 B/s"
    assert format_rate(512.4) == "512 B/s"
    assert format_rate(1024.0) == "1.0 KB/s"
    assert format_rate(2 * 1024**4) == "2048.0 GB/s"


def test_sample_row_shows_unavailable_then_rates():
    renderer, out, _ = _renderer()
    previous = CounterSnapshot(interface="eth0", rx_bytes=1000, rx_packets=10, captured_at=1.0)
    current = CounterSnapshot(interface="eth0", rx_bytes=3048, rx_packets=14, captured_at=3.0)

    renderer.on_sample(previous, None)
    renderer.on_sample(current, compute_rates(previous, current))

    first, second = out.getvalue().splitlines()
    assert first.startswith("2025-01-02 03:04:05 eth0")
    assert first.split()[5] == "-"
    assert "1.0 KB/s" in second
    assert second.split()[8] == "2"


def test_header_and_failure_streams():
    renderer, out, err = _renderer()
    renderer.on_header()
    renderer.on_read_failure(ReadResult(ReadStatus.NOT_FOUND, "eth0"))

    assert "Timestamp" in out.getvalue()
    assert "ΔRx(p/s)" in out.getvalue()
    assert "Warning: Failed to read stats for eth0" in err.getvalue()
    assert "Warning" not in out.getvalue()


def test_start_banner_without_bound():
    renderer, out, _ = _renderer()
    renderer.on_start(MonitorOptions(interface="ppp0", interval=1))
    assert out.getvalue().splitlines()[0] == "Monitoring interface: ppp0 (interval: 1 seconds)"


def test_stop_summary():
    renderer, out, _ = _renderer()
    summary = MonitorSummary(
        interface="eth0",
        iterations=4,
        samples=3,
        failures=1,
        stopped_by_signal=True,
        rx_bytes_total=4096,
        rx_rate=RateSummary(2, 1024.0, 2048.0),
        tx_rate=RateSummary(2, 0.0, 0.0),
    )
    renderer.on_stop(summary)

    lines = out.getvalue().splitlines()
    assert lines[:3] == ["", "Monitoring stopped by signal", "Total iterations: 4"]
    assert "Failed reads: 1" in lines
    assert "Rx: 4.0 KB total, avg 1.0 KB/s, peak 2.0 KB/s" in lines


def test_summary_statistics():
    stats = SummaryStatistics()
    assert stats.summary() == RateSummary(0, 0.0, 0.0)
    for value in (1.0, 5.0, 3.0):
        stats.add_value(value)
    assert stats.count == 3
    assert stats.mean == 3.0
    assert stats.peak == 5.0


def test_describe_interfaces_with_psutil(monkeypatch):
    psutil_stub = SimpleNamespace(
        net_if_addrs=lambda: {
            "eth0": [
                SimpleNamespace(family=socket.AF_INET, address="192.168.1.10"),
                SimpleNamespace(family=17, address="11:22:33:44:55:66"),
            ],
            "lo": [SimpleNamespace(family=socket.AF_INET, address="127.0.0.1")],
        }
    )
    monkeypatch.setattr(interfaces, "psutil", psutil_stub)

    infos = {info.name: info for info in describe_interfaces(["lo", "eth0", "tun9"])}

    assert infos["eth0"].addresses == ("192.168.1.10",)
    assert not infos["eth0"].is_loopback
    assert infos["eth0"].describe() == "eth0 (192.168.1.10)"
    assert infos["lo"].is_loopback
    assert infos["lo"].describe() == "lo (127.0.0.1, loopback)"
    assert infos["tun9"].describe() == "tun9"
