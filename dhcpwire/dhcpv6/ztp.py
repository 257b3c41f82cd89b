"""Zero-touch provisioning helpers.

Extracts circuit identifiers from relay options and vendor identification
from vendor class and vendor-specific information options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from dhcpwire.dhcpv6.basic import OptInterfaceID, OptRemoteID
from dhcpwire.dhcpv6.options import Option, Options
from dhcpwire.dhcpv6.types import OptionCode
from dhcpwire.dhcpv6.vendor import OptVendorClass, OptVendorOpts

# Arista port and VLAN, e.g. "Ethernet13:2001".
_ARISTA_PORT_VLAN = re.compile(r"Ethernet(?P<port>[0-9]+):(?P<vlan>[0-9]+)")
# Arista slot, module and port, e.g. "Ethernet1/3/4".
_ARISTA_SLOT_MODULE_PORT = re.compile(
    r"Ethernet(?P<slot>[0-9]+)/(?P<module>[0-9]+)/(?P<port>[0-9]+)"
)
_CIRCUIT_PATTERNS = (_ARISTA_PORT_VLAN, _ARISTA_SLOT_MODULE_PORT)


class ZTPError(ValueError):
    """Raised when provisioning data cannot be extracted from options."""


@dataclass
class CircuitID:
    """A network vendor's interface designation."""

    slot: str = ""
    module: str = ""
    port: str = ""
    sub_port: str = ""
    vlan: str = ""

    def format_circuit_id(self) -> str:
        """The comma-separated form sent in boot file URLs."""
        return ",".join((self.slot, self.module, self.port, self.sub_port, self.vlan))


@dataclass
class VendorData:
    """Vendor name, model and serial number of a device."""

    vendor_name: str = ""
    model: str = ""
    serial: str = ""


def _as_text(data: bytes) -> str:
    return bytes(data).decode("utf-8", "surrogateescape")


def match_circuit_id(circuit_info: str) -> CircuitID:
    """Parse a circuit identifier string; raise ZTPError if no pattern matches."""
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_info)
        if match is None:
            continue
        groups = match.groupdict()
        return CircuitID(
            slot=groups.get("slot") or "",
            module=groups.get("module") or "",
            port=groups.get("port") or "",
            sub_port=groups.get("subport") or "",
            vlan=groups.get("vlan") or "",
        )
    raise ZTPError(f"no circuitId regex matches for {circuit_info}")


def _as_options(options: Iterable[Option]) -> Options:
    return options if isinstance(options, Options) else Options(options)


def parse_remote_id(options: Iterable[Option]) -> CircuitID:
    """Find a circuit ID in the options of the innermost relay message.

    The Remote ID option is tried first, then the Interface ID option.
    """
    opts = _as_options(options)
    remote = opts.get_one(OptionCode.REMOTE_ID)
    if isinstance(remote, OptRemoteID):
        try:
            return match_circuit_id(_as_text(remote.remote_id))
        except ZTPError:
            pass
    interface = opts.get_one(OptionCode.INTERFACE_ID)
    if isinstance(interface, OptInterfaceID):
        try:
            return match_circuit_id(_as_text(interface.id))
        except ZTPError:
            pass
    raise ZTPError("failed to parse RemoteID and InterfaceID option data")


def _vendor_strings(vendor_class: Optional[Option], vendor_opts: Optional[Option]) -> list[str]:
    if vendor_opts is not None:
        if not isinstance(vendor_opts, OptVendorOpts):
            raise ZTPError("malformed vendor option")
        return [_as_text(opt.to_bytes()) for opt in vendor_opts.vendor_opts]
    if not isinstance(vendor_class, OptVendorClass):
        raise ZTPError("malformed vendor option")
    return [_as_text(chunk) for chunk in vendor_class.data]


def parse_vendor_data(options: Iterable[Option]) -> VendorData:
    """Extract vendor, model and serial from options 16 and 17.

    When both are present, the Vendor-specific Information option wins.
    """
    opts = _as_options(options)
    vendor_class = opts.get_one(OptionCode.VENDOR_CLASS)
    vendor_opts = opts.get_one(OptionCode.VENDOR_OPTS)
    if vendor_class is None and vendor_opts is None:
        raise ZTPError("no vendor options or vendor class found")

    for text in _vendor_strings(vendor_class, vendor_opts):
        # Arista;DCS-0000;00.00;ZZZ00000000
        if text.startswith("Arista;"):
            parts = text.split(";")
            if len(parts) < 4:
                raise ZTPError("malformed vendor option")
            return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[3])
        # ZPESystems:NSC:000000000
        if text.startswith("ZPESystems:"):
            parts = text.split(":")
            if len(parts) < 3:
                raise ZTPError("malformed vendor option")
            return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[2])
    raise ZTPError("failed to parse vendor option data")