import pytest

from dhcpwire.iana import Arch, Archs, EntID, HWType, StatusCode


@pytest.mark.parametrize(
    "arch, name",
    [
        (Arch.EFI_X86_64, "EFI x86-64"),
        (Arch.INTEL_X86PC, "Intel x86PC"),
        (Arch.EFI_ARM64_HTTP, "EFI ARM64 boot from HTTP"),
        (Arch.EFI_SUNWAY64, "EFI Sunway 64-bit"),
    ],
)
def test_arch_names(arch, name):
    assert str(arch) == name


def test_arch_from_value_returns_member():
    assert Arch(7) is Arch.EFI_X86_64


def test_unknown_arch_keeps_value():
    arch = Arch(0xFFFF)
    assert arch == 0xFFFF
    assert str(arch) == "unknown"


def test_arch_out_of_range_rejected():
    with pytest.raises(ValueError):
        Arch(0x10000)


def test_archs_round_trip():
    archs = Archs([Arch.EFI_X86_64, Arch.EFI_ARM64, Arch(500)])
    parsed = Archs.from_bytes(archs.to_bytes())
    assert parsed == archs
    assert len(archs.to_bytes()) == 2 * len(archs)


def test_archs_wire_format():
    assert Archs([Arch.INTEL_X86PC, Arch.EFI_X86_64]).to_bytes() == b"\x00\x00\x00\x07"


def test_archs_contains():
    archs = Archs.from_bytes(b"\x00\x09")
    assert Arch.EFI_BC in archs
    assert Arch.EFI_IA32 not in archs


def test_archs_str():
    assert str(Archs([Arch.INTEL_X86PC, Arch.EFI_X86_64])) == "Intel x86PC, EFI x86-64"


def test_archs_from_empty_bytes_fails():
    with pytest.raises(ValueError):
        Archs.from_bytes(b"")


def test_archs_from_odd_length_fails():
    with pytest.raises(ValueError):
        Archs.from_bytes(b"\x00\x07\x00")


def test_entid_names():
    assert str(EntID.CISCO_SYSTEMS) == "Cisco Systems"
    assert str(EntID(12345)) == "Unknown"


def test_hwtype_names():
    assert HWType(1) is HWType.ETHERNET
    assert str(HWType.ETHERNET) == "Ethernet"
    assert str(HWType.INFINIBAND) == "Infiniband"
    assert str(HWType(0)) == "unknown"


def test_status_code_names():
    assert StatusCode(5) is StatusCode.USE_MULTICAST
    assert str(StatusCode.USE_MULTICAST) == "UseMulticast"
    assert str(StatusCode.EXCESSIVE_TIME_SKEW) == "ExcessiveTimeSkew"
    assert str(StatusCode(999)) == "Unknown"


def test_status_code_out_of_range_rejected():
    with pytest.raises(ValueError):
        StatusCode(-1)