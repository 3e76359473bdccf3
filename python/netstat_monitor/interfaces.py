"""Host-side interface details used to annotate the not-found diagnostic."""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterfaceInfo:
    """A counter-source label plus whatever the host reports about it."""

    name: str
    addresses: Sequence[str] = ()
    is_loopback: bool = False

    def describe(self) -> str:
        details: List[str] = list(self.addresses)
        if self.is_loopback:
            details.append("loopback")
        if not details:
            return self.name
        return f"{self.name} ({', '.join(details)})"


def describe_interfaces(names: Iterable[str]) -> List[InterfaceInfo]:
    """Attach IP addresses from ``psutil.net_if_addrs()`` to each label in *names*."""
    try:
        host_addrs: Dict[str, list] = psutil.net_if_addrs()
    except (OSError, RuntimeError):  # pragma: no cover - platform dependent
        logger.debug("psutil.net_if_addrs() failed", exc_info=True)
        host_addrs = {}

    infos: List[InterfaceInfo] = []
    for name in names:
        addresses = [
            entry.address
            for entry in host_addrs.get(name, [])
            if getattr(entry, "family", None) in _ip_families() and getattr(entry, "address", "")
        ]
        infos.append(
            InterfaceInfo(
                name=name,
                addresses=tuple(addresses),
                is_loopback=_is_loopback(name, addresses),
            )
        )
    return infos


def _ip_families() -> tuple[int, ...]:
    fams = [socket.AF_INET]
    if hasattr(socket, "AF_INET6"):
        fams.append(socket.AF_INET6)
    return tuple(fams)


def _is_loopback(name: str, addresses: Sequence[str]) -> bool:
    if any(addr.startswith("127.") or addr == "::1" for addr in addresses):
        return True
    return name == "lo" or name.lower().startswith("loopback")


__all__ = ["InterfaceInfo", "describe_interfaces"]
