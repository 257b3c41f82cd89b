"""Constants assigned by IANA for DHCP: architectures, enterprises, hardware types, status codes."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Iterable, Optional, TypeVar

_E = TypeVar("_E", bound=IntEnum)


def _pseudo_member(cls: type[_E], value: object, bits: Optional[int]) -> Optional[_E]:
    """Build a nameless member for a value that has no assigned name."""
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    if bits is not None and not 0 <= value < (1 << bits):
        return None
    member = int.__new__(cls, value)
    member._name_ = f"{cls.__name__.upper()}_{value}"
    member._value_ = value
    return member


class Arch(IntEnum):
    """Client system architecture type (RFC 4578 section 2.1, RFC 5970)."""

    INTEL_X86PC = 0
    NEC_PC98 = 1
    EFI_ITANIUM = 2
    DEC_ALPHA = 3
    ARC_X86 = 4
    INTEL_LEAN_CLIENT = 5
    EFI_IA32 = 6
    EFI_X86_64 = 7
    EFI_XSCALE = 8
    EFI_BC = 9
    EFI_ARM32 = 10
    EFI_ARM64 = 11
    PPC_OPEN_FIRMWARE = 12
    PPC_EPAPR = 13
    PPC_OPAL = 14
    EFI_X86_HTTP = 15
    EFI_X86_64_HTTP = 16
    EFI_BC_HTTP = 17
    EFI_ARM32_HTTP = 18
    EFI_ARM64_HTTP = 19
    INTEL_X86PC_HTTP = 20
    UBOOT_ARM32 = 21
    UBOOT_ARM64 = 22
    UBOOT_ARM32_HTTP = 23
    UBOOT_ARM64_HTTP = 24
    EFI_RISCV32 = 25
    EFI_RISCV32_HTTP = 26
    EFI_RISCV64 = 27
    EFI_RISCV64_HTTP = 28
    EFI_RISCV128 = 29
    EFI_RISCV128_HTTP = 30
    S390_BASIC = 31
    S390_EXTENDED = 32
    EFI_MIPS32 = 33
    EFI_MIPS64 = 34
    EFI_SUNWAY32 = 35
    EFI_SUNWAY64 = 36

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 16)

    def __str__(self) -> str:
        return _ARCH_NAMES.get(int(self), "unknown")


_ARCH_NAMES = {
    Arch.INTEL_X86PC: "Intel x86PC",
    Arch.NEC_PC98: "NEC/PC98",
    Arch.EFI_ITANIUM: "EFI Itanium",
    Arch.DEC_ALPHA: "DEC Alpha",
    Arch.ARC_X86: "Arc x86",
    Arch.INTEL_LEAN_CLIENT: "Intel Lean Client",
    Arch.EFI_IA32: "EFI IA32",
    Arch.EFI_XSCALE: "EFI Xscale",
    Arch.EFI_X86_64: "EFI x86-64",
    Arch.EFI_BC: "EFI BC",
    Arch.EFI_ARM32: "EFI ARM32",
    Arch.EFI_ARM64: "EFI ARM64",
    Arch.PPC_OPEN_FIRMWARE: "PowerPC Open Firmware",
    Arch.PPC_EPAPR: "PowerPC ePAPR",
    Arch.PPC_OPAL: "POWER OPAL v3",
    Arch.EFI_X86_HTTP: "EFI x86 boot from HTTP",
    Arch.EFI_X86_64_HTTP: "EFI x86-64 boot from HTTP",
    Arch.EFI_BC_HTTP: "EFI BC boot from HTTP",
    Arch.EFI_ARM32_HTTP: "EFI ARM32 boot from HTTP",
    Arch.EFI_ARM64_HTTP: "EFI ARM64 boot from HTTP",
    Arch.INTEL_X86PC_HTTP: "Intel x86PC boot from HTTP",
    Arch.UBOOT_ARM32: "U-Boot ARM32",
    Arch.UBOOT_ARM64: "U-Boot ARM64",
    Arch.UBOOT_ARM32_HTTP: "U-boot ARM32 boot from HTTP",
    Arch.UBOOT_ARM64_HTTP: "U-Boot ARM64 boot from HTTP",
    Arch.EFI_RISCV32: "EFI RISC-V 32-bit",
    Arch.EFI_RISCV32_HTTP: "EFI RISC-V 32-bit boot from HTTP",
    Arch.EFI_RISCV64: "EFI RISC-V 64-bit",
    Arch.EFI_RISCV64_HTTP: "EFI RISC-V 64-bit boot from HTTP",
    Arch.EFI_RISCV128: "EFI RISC-V 128-bit",
    Arch.EFI_RISCV128_HTTP: "EFI RISC-V 128-bit boot from HTTP",
    Arch.S390_BASIC: "s390 Basic",
    Arch.S390_EXTENDED: "s390 Extended",
    Arch.EFI_MIPS32: "EFI MIPS32",
    Arch.EFI_MIPS64: "EFI MIPS64",
    Arch.EFI_SUNWAY32: "EFI Sunway 32-bit",
    Arch.EFI_SUNWAY64: "EFI Sunway 64-bit",
}


class Archs(list):
    """A list of architecture types, as carried by the Client System Architecture option."""

    def __init__(self, archs: Iterable[int] = ()) -> None:
        super().__init__(Arch(a) for a in archs)

    def to_bytes(self) -> bytes:
        """Serialize as a sequence of big-endian 16-bit values."""
        return b"".join(struct.pack(">H", arch) for arch in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Archs":
        """Parse a list of architecture types (RFC 4578, RFC 5970)."""
        if not data:
            raise ValueError("must have at least one archtype if option is present")
        if len(data) % 2:
            raise ValueError(f"archtype list has {len(data)} bytes, expected an even number")
        return cls(value for (value,) in struct.iter_unpack(">H", data))

    def __str__(self) -> str:
        return ", ".join(str(arch) for arch in self)


class EntID(IntEnum):
    """Enterprise number as assigned by IANA."""

    CISCO_SYSTEMS = 9

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, None)

    def __str__(self) -> str:
        return _ENTID_NAMES.get(int(self), "Unknown")


_ENTID_NAMES = {
    EntID.CISCO_SYSTEMS: "Cisco Systems",
}


class HWType(IntEnum):
    """Hardware type as per RFC 2132 and the IANA registry."""

    ETHERNET = 1
    EXPERIMENTAL_ETHERNET = 2
    AMATEUR_RADIO_AX25 = 3
    PROTEON_TOKEN_RING = 4
    CHAOS = 5
    IEEE802 = 6
    ARCNET = 7
    HYPERCHANNEL = 8
    LANSTAR = 9
    AUTONET = 10
    LOCAL_TALK = 11
    LOCAL_NET = 12
    ULTRA_LINK = 13
    SMDS = 14
    FRAME_RELAY = 15
    ATM = 16
    HDLC = 17
    FIBRE_CHANNEL = 18
    ATM2 = 19
    SERIAL_LINE = 20
    ATM3 = 21
    MIL_STD_188_220 = 22
    METRICOM = 23
    IEEE1394 = 24
    MAPOS = 25
    TWINAXIAL = 26
    EUI64 = 27
    HIPARP = 28
    ISO7816 = 29
    ARPSEC = 30
    IPSEC = 31
    INFINIBAND = 32
    CAI = 33
    WIEGAND_INTERFACE = 34
    PURE_IP = 35

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 16)

    def __str__(self) -> str:
        return _HWTYPE_NAMES.get(int(self), "unknown")


_HWTYPE_NAMES = {
    HWType.ETHERNET: "Ethernet",
    HWType.EXPERIMENTAL_ETHERNET: "Experimental Ethernet",
    HWType.AMATEUR_RADIO_AX25: "Amateur Radio AX.25",
    HWType.PROTEON_TOKEN_RING: "Proteon ProNET Token Ring",
    HWType.CHAOS: "Chaos",
    HWType.IEEE802: "IEEE 802",
    HWType.ARCNET: "ARCNET",
    HWType.HYPERCHANNEL: "Hyperchannel",
    HWType.LANSTAR: "Lanstar",
    HWType.AUTONET: "Autonet Short Address",
    HWType.LOCAL_TALK: "LocalTalk",
    HWType.LOCAL_NET: "LocalNet",
    HWType.ULTRA_LINK: "Ultra link",
    HWType.SMDS: "SMDS",
    HWType.FRAME_RELAY: "Frame Relay",
    HWType.ATM: "ATM",
    HWType.HDLC: "HDLC",
    HWType.FIBRE_CHANNEL: "Fibre Channel",
    HWType.ATM2: "ATM 2",
    HWType.SERIAL_LINE: "Serial Line",
    HWType.ATM3: "ATM 3",
    HWType.MIL_STD_188_220: "MIL-STD-188-220",
    HWType.METRICOM: "Metricom",
    HWType.IEEE1394: "IEEE 1394.1995",
    HWType.MAPOS: "MAPOS",
    HWType.TWINAXIAL: "Twinaxial",
    HWType.EUI64: "EUI-64",
    HWType.HIPARP: "HIPARP",
    HWType.ISO7816: "IP and ARP over ISO 7816-3",
    HWType.ARPSEC: "ARPSec",
    HWType.IPSEC: "IPsec tunnel",
    HWType.INFINIBAND: "Infiniband",
    HWType.CAI: "CAI, TIA-102 Project 125 Common Air Interface",
    HWType.WIEGAND_INTERFACE: "Wiegand Interface",
    HWType.PURE_IP: "Pure IP",
}


class StatusCode(IntEnum):
    """DHCPv6 status code as registered by IANA."""

    # RFC 3315
    SUCCESS = 0
    UNSPEC_FAIL = 1
    NO_ADDRS_AVAIL = 2
    NO_BINDING = 3
    NOT_ON_LINK = 4
    USE_MULTICAST = 5
    NO_PREFIX_AVAIL = 6
    # RFC 5007
    UNKNOWN_QUERY_TYPE = 7
    MALFORMED_QUERY = 8
    NOT_CONFIGURED = 9
    NOT_ALLOWED = 10
    # RFC 5460
    QUERY_TERMINATED = 11
    # RFC 7653
    DATA_MISSING = 12
    CATCH_UP_COMPLETE = 13
    NOT_SUPPORTED = 14
    TLS_CONNECTION_REFUSED = 15
    # RFC 8156
    ADDRESS_IN_USE = 16
    CONFIGURATION_CONFLICT = 17
    MISSING_BINDING_INFORMATION = 18
    OUTDATED_BINDING_INFORMATION = 19
    SERVER_SHUTTING_DOWN = 20
    DNS_UPDATE_NOT_SUPPORTED = 21
    EXCESSIVE_TIME_SKEW = 22

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 16)

    def __str__(self) -> str:
        return _STATUS_NAMES.get(int(self), "Unknown")


_STATUS_NAMES = {
    StatusCode.SUCCESS: "Success",
    StatusCode.UNSPEC_FAIL: "UnspecFail",
    StatusCode.NO_ADDRS_AVAIL: "NoAddrsAvail",
    StatusCode.NO_BINDING: "NoBinding",
    StatusCode.NOT_ON_LINK: "NotOnLink",
    StatusCode.USE_MULTICAST: "UseMulticast",
    StatusCode.NO_PREFIX_AVAIL: "NoPrefixAvail",
    StatusCode.UNKNOWN_QUERY_TYPE: "UnknownQueryType",
    StatusCode.MALFORMED_QUERY: "MalformedQuery",
    StatusCode.NOT_CONFIGURED: "NotConfigured",
    StatusCode.NOT_ALLOWED: "NotAllowed",
    StatusCode.QUERY_TERMINATED: "QueryTerminated",
    StatusCode.DATA_MISSING: "DataMissing",
    StatusCode.CATCH_UP_COMPLETE: "CatchUpComplete",
    StatusCode.NOT_SUPPORTED: "NotSupported",
    StatusCode.TLS_CONNECTION_REFUSED: "TLSConnectionRefused",
    StatusCode.ADDRESS_IN_USE: "AddressInUse",
    StatusCode.CONFIGURATION_CONFLICT: "ConfigurationConflict",
    StatusCode.MISSING_BINDING_INFORMATION: "MissingBindingInformation",
    StatusCode.OUTDATED_BINDING_INFORMATION: "OutdatedBindingInformation",
    StatusCode.SERVER_SHUTTING_DOWN: "ServerShuttingDown",
    StatusCode.DNS_UPDATE_NOT_SUPPORTED: "DNSUpdateNotSupported",
    StatusCode.EXCESSIVE_TIME_SKEW: "ExcessiveTimeSkew",
}