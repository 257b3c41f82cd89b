"""Discovery of network interfaces and binding sockets to one of them."""

from __future__ import annotations

import errno
import socket
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

_SYSFS_NET = Path("/sys/class/net")
_IFF_UP = 0x1
_IFF_LOOPBACK = 0x8

# IP_RECVIF values on platforms that use it in place of SO_BINDTODEVICE.
_IP_RECVIF = {
    "darwin": 20,
    "freebsd": 20,
    "netbsd": 20,
    "openbsd": 30,
}
_SO_BINDTODEVICE_LINUX = 25


@dataclass(frozen=True)
class Interface:
    """A network interface as seen by the host."""

    index: int
    name: str
    mtu: int = 0
    hardware_addr: bytes = b""
    loopback: bool = False
    up: bool = False


InterfaceGetter = Callable[[], Iterable[Interface]]
InterfaceMatcher = Callable[[Interface], bool]


def _read_sysfs(path: Path) -> Optional[str]:
    try:
        return path.read_text().strip()
    except OSError:
        return None


def _parse_hwaddr(text: Optional[str]) -> bytes:
    if not text:
        return b""
    try:
        return bytes.fromhex(text.replace(":", ""))
    except ValueError:
        return b""


def system_interfaces() -> list[Interface]:
    """List the interfaces of this host."""
    result = []
    for index, name in socket.if_nameindex():
        base = _SYSFS_NET / name
        flags_text = _read_sysfs(base / "flags")
        if flags_text is not None:
            flags = int(flags_text, 16)
            loopback = bool(flags & _IFF_LOOPBACK)
            up = bool(flags & _IFF_UP)
        else:
            loopback = name.startswith("lo")
            up = False
        mtu_text = _read_sysfs(base / "mtu")
        result.append(
            Interface(
                index=index,
                name=name,
                mtu=int(mtu_text) if mtu_text and mtu_text.isdigit() else 0,
                hardware_addr=_parse_hwaddr(_read_sysfs(base / "address")),
                loopback=loopback,
                up=up,
            )
        )
    return result


def get_interfaces_func(
    matcher: InterfaceMatcher, getter: InterfaceGetter = system_interfaces
) -> list[Interface]:
    """Return the interfaces for which matcher returns true."""
    return [iface for iface in getter() if matcher(iface)]


def get_loopback_interfaces(getter: InterfaceGetter = system_interfaces) -> list[Interface]:
    """Return the loopback interfaces."""
    return get_interfaces_func(lambda iface: iface.loopback, getter)


def get_non_loopback_interfaces(getter: InterfaceGetter = system_interfaces) -> list[Interface]:
    """Return the interfaces that are not loopback."""
    return get_interfaces_func(lambda iface: not iface.loopback, getter)


def bind_to_interface(sock: socket.socket, ifname: str) -> None:
    """Restrict a socket to one interface.

    Uses SO_BINDTODEVICE on Linux and IP_RECVIF on the BSDs and macOS.
    Raises OSError when the interface is unknown, permission is missing,
    or the platform has no such facility.
    """
    if sys.platform.startswith("linux"):
        option = getattr(socket, "SO_BINDTODEVICE", _SO_BINDTODEVICE_LINUX)
        sock.setsockopt(socket.SOL_SOCKET, option, ifname.encode() + b"\x00")
        return
    platform = next((p for p in _IP_RECVIF if sys.platform.startswith(p)), None)
    if platform is None:
        raise OSError(errno.ENOPROTOOPT, f"cannot bind to an interface on {sys.platform}")
    index = socket.if_nametoindex(ifname)
    sock.setsockopt(socket.IPPROTO_IP, _IP_RECVIF[platform], index)