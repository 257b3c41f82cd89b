"""Small DHCPv6 options.

Covers Information Refresh Time, Interface ID, Remote ID, the Option Request
option and the Network Interface Identifier option.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import ClassVar, Iterable

from dhcpwire.dhcpv6.ia import _format_duration, decode_duration, encode_duration
from dhcpwire.dhcpv6.options import Option, _format_bytes, _Reader, register_option
from dhcpwire.dhcpv6.types import OptionCode
from dhcpwire.iana import _pseudo_member


@register_option(OptionCode.INFORMATION_REFRESH_TIME)
@dataclass
class OptInformationRefreshTime(Option):
    """The Information Refresh Time option (RFC 8415 section 21.23)."""

    code: ClassVar[OptionCode] = OptionCode.INFORMATION_REFRESH_TIME

    information_refresh_time: timedelta = timedelta(0)

    def to_bytes(self) -> bytes:
        return encode_duration(self.information_refresh_time)

    @classmethod
    def parse(cls, data: bytes) -> "OptInformationRefreshTime":
        reader = _Reader(data)
        irt = decode_duration(reader.read(4))
        reader.finish()
        return cls(irt)

    def __str__(self) -> str:
        return f"InformationRefreshTime: {_format_duration(self.information_refresh_time)}"


@register_option(OptionCode.INTERFACE_ID)
@dataclass
class OptInterfaceID(Option):
    """The Interface ID option (RFC 3315 section 22.18)."""

    code: ClassVar[OptionCode] = OptionCode.INTERFACE_ID

    id: bytes = b""

    def __post_init__(self) -> None:
        self.id = bytes(self.id)

    def to_bytes(self) -> bytes:
        return self.id

    @classmethod
    def parse(cls, data: bytes) -> "OptInterfaceID":
        return cls(bytes(data))

    def __str__(self) -> str:
        return f"InterfaceID: {_format_bytes(self.id)}"


@register_option(OptionCode.REMOTE_ID)
@dataclass
class OptRemoteID(Option):
    """The Remote ID option (RFC 4649)."""

    code: ClassVar[OptionCode] = OptionCode.REMOTE_ID

    enterprise_number: int = 0
    remote_id: bytes = b""

    def __post_init__(self) -> None:
        self.remote_id = bytes(self.remote_id)

    def to_bytes(self) -> bytes:
        return struct.pack(">I", self.enterprise_number) + self.remote_id

    @classmethod
    def parse(cls, data: bytes) -> "OptRemoteID":
        reader = _Reader(data)
        enterprise_number = reader.u32()
        remote_id = reader.rest()
        reader.finish()
        return cls(enterprise_number, remote_id)

    def __str__(self) -> str:
        return (
            f"RemoteID: EnterpriseNumber {self.enterprise_number} "
            f"RemoteID {_format_bytes(self.remote_id)}"
        )


class OptionCodes(list):
    """An ordered collection of option codes."""

    def __init__(self, codes: Iterable[int] = ()) -> None:
        super().__init__(OptionCode(c) for c in codes)

    def add(self, code: int) -> None:
        """Append a code unless it is already present."""
        option_code = OptionCode(code)
        if option_code not in self:
            self.append(option_code)

    def to_bytes(self) -> bytes:
        """Serialize as a sequence of big-endian 16-bit codes."""
        return b"".join(struct.pack(">H", int(c)) for c in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "OptionCodes":
        """Parse 16-bit codes, dropping duplicates."""
        result = cls()
        reader = _Reader(data)
        while reader.has(2):
            result.add(reader.u16())
        reader.finish()
        return result

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self)


@register_option(OptionCode.ORO)
@dataclass
class OptRequestedOption(Option):
    """The Option Request option (RFC 3315 section 22.7)."""

    code: ClassVar[OptionCode] = OptionCode.ORO

    option_codes: OptionCodes = field(default_factory=OptionCodes)

    def __post_init__(self) -> None:
        if not isinstance(self.option_codes, OptionCodes):
            self.option_codes = OptionCodes(self.option_codes)

    def to_bytes(self) -> bytes:
        return self.option_codes.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptRequestedOption":
        return cls(OptionCodes.from_bytes(data))

    def __str__(self) -> str:
        return f"RequestedOptions: {self.option_codes}"


class NetworkInterfaceType(IntEnum):
    """Network interface type (RFC 4578 section 2.2)."""

    LANDESK_NOPXE = 0
    PXE_GEN_I = 1
    PXE_GEN_II = 2
    UNDI_NOEFI = 3
    UNDI_EFI_GEN_I = 4
    UNDI_EFI_GEN_II = 5

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 8)

    def __str__(self) -> str:
        name = _NII_NAMES.get(int(self))
        return name if name is not None else f"NetworkInterfaceType({int(self)}, unknown)"


_NII_NAMES = {
    NetworkInterfaceType.LANDESK_NOPXE: "LANDesk service agent boot ROMs. No PXE",
    NetworkInterfaceType.PXE_GEN_I: "First gen. PXE boot ROMs",
    NetworkInterfaceType.PXE_GEN_II: "Second gen. PXE boot ROMs",
    NetworkInterfaceType.UNDI_NOEFI: "UNDI 32/64 bit. UEFI drivers, no UEFI runtime",
    NetworkInterfaceType.UNDI_EFI_GEN_I: "UNDI 32/64 bit. UEFI runtime 1st gen",
    NetworkInterfaceType.UNDI_EFI_GEN_II: "UNDI 32/64 bit. UEFI runtime 2nd gen",
}


@register_option(OptionCode.NII)
@dataclass
class OptNetworkInterfaceID(Option):
    """The Network Interface Identifier option (RFC 4578 section 2.2, RFC 5970 section 3.4)."""

    code: ClassVar[OptionCode] = OptionCode.NII

    typ: NetworkInterfaceType = NetworkInterfaceType.LANDESK_NOPXE
    major: int = 0
    minor: int = 0

    def __post_init__(self) -> None:
        self.typ = NetworkInterfaceType(self.typ)

    def __setattr__(self, name, value) -> None:
        if name == "typ":
            value = NetworkInterfaceType(value)
        super().__setattr__(name, value)

    def to_bytes(self) -> bytes:
        return bytes([int(self.typ), self.major, self.minor])

    @classmethod
    def parse(cls, data: bytes) -> "OptNetworkInterfaceID":
        reader = _Reader(data)
        typ = reader.u8()
        major = reader.u8()
        minor = reader.u8()
        reader.finish()
        return cls(NetworkInterfaceType(typ), major, minor)

    def __str__(self) -> str:
        return f"NetworkInterfaceID: {self.typ} (Revision {self.major}.{self.minor})"