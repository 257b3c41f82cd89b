import ipaddress
from datetime import timedelta

import pytest

from dhcpwire.dhcpv6.ia import (
    IdentityOptions,
    OptIANA,
    OptIAPrefix,
    OptIATA,
    OptStatusCode,
    PrefixOptions,
    decode_duration,
    encode_duration,
)
from dhcpwire.dhcpv6.options import OptionGeneric, Options, ParseError, parse_option
from dhcpwire.dhcpv6.types import OptionCode
from dhcpwire.iana import StatusCode


def elapsed_10ms():
    return OptionGeneric(OptionCode.ELAPSED_TIME, b"\x00\x01")


def iaaddr():
    return OptionGeneric(OptionCode.IA_ADDR, bytes(15) + b"\x01" + bytes(8))


IA_OPTIONS = bytes(
    [0, 5, 0, 0x18, 0x24, 1, 0xDB, 0, 0x30, 0x10, 0xC0, 0x8F, 0xFA, 0xCE, 0, 0, 0,
     0x44, 0, 0, 0, 0, 0xB2, 0x7A, 0, 0, 0xC0, 0x8A]
)
IANA_DATA = bytes([1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 2]) + IA_OPTIONS
IATA_DATA = bytes([1, 0, 0, 0]) + IA_OPTIONS


# Durations

def test_duration_round_trip():
    assert decode_duration(encode_duration(timedelta(seconds=12345))) == timedelta(seconds=12345)


def test_duration_rounds_to_seconds():
    assert decode_duration(encode_duration(timedelta(milliseconds=1500))) == timedelta(seconds=2)
    assert decode_duration(encode_duration(timedelta(milliseconds=10))) == timedelta(0)


def test_decode_duration_wrong_length():
    with pytest.raises(ParseError):
        decode_duration(b"\x00\x01")


# IA Prefix

def test_opt_iaprefix_parse():
    buf = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF, 0x00, 0x11, 36] + [0] * 15 + [1])
    opt = OptIAPrefix.parse(buf)
    want = OptIAPrefix(
        preferred_lifetime=timedelta(seconds=0xAABBCCDD),
        valid_lifetime=timedelta(seconds=0xEEFF0011),
        prefix=ipaddress.IPv6Interface(("::1", 36)),
        options=PrefixOptions(),
    )
    assert opt == want


def test_opt_iaprefix_to_bytes():
    buf = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF, 0x00, 0x11, 36] + [0] * 16
                + [0, 8, 0, 2, 0x00, 0x01])
    opt = OptIAPrefix(
        preferred_lifetime=timedelta(seconds=0xAABBCCDD),
        valid_lifetime=timedelta(seconds=0xEEFF0011),
        prefix=ipaddress.IPv6Interface(("::", 36)),
        options=PrefixOptions([elapsed_10ms()]),
    )
    assert opt.to_bytes() == buf


def test_opt_iaprefix_to_bytes_default():
    assert OptIAPrefix().to_bytes() == bytes(25)


def test_opt_iaprefix_parse_too_short():
    buf = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF, 0x00, 0x11, 36] + [0] * 7)
    with pytest.raises(ParseError):
        OptIAPrefix.parse(buf)


def test_opt_iaprefix_string():
    buf = bytes([0, 0, 0, 60, 0, 0, 0, 50, 36, 0x20, 0x01, 0x0D, 0xB8] + [0] * 12)
    s = str(OptIAPrefix.parse(buf))
    assert "Prefix=2001:db8::/36" in s
    assert "PreferredLifetime=1m" in s
    assert "ValidLifetime=50s" in s


def test_opt_iaprefix_round_trip_with_status():
    opt = OptIAPrefix(
        preferred_lifetime=timedelta(seconds=60),
        valid_lifetime=timedelta(seconds=120),
        prefix=ipaddress.IPv6Interface(("2001:db8::", 48)),
        options=PrefixOptions([OptStatusCode(StatusCode.NO_PREFIX_AVAIL, "none")]),
    )
    parsed = parse_option(OptionCode.IA_PREFIX, opt.to_bytes())
    assert parsed == opt
    assert parsed.options.status() == OptStatusCode(StatusCode.NO_PREFIX_AVAIL, "none")


def test_prefix_options_status_missing():
    assert PrefixOptions([elapsed_10ms()]).status() is None


# IA_NA

def test_opt_iana_parse():
    opt = OptIANA.parse(IANA_DATA)
    assert opt.code == OptionCode.IANA
    assert opt.t1 == timedelta(seconds=1)
    assert opt.one_address() if False else opt.options.one_address().code == OptionCode.IA_ADDR


def test_opt_iana_parse_invalid_length():
    with pytest.raises(ParseError):
        OptIANA.parse(bytes([1, 0, 0, 0, 0, 0, 0, 1]))


def test_opt_iana_parse_invalid_options():
    with pytest.raises(ParseError):
        OptIANA.parse(IANA_DATA[:-4])


def test_opt_iana_get_one_address():
    addr = iaaddr()
    opt = OptIANA(options=IdentityOptions([OptStatusCode(), addr]))
    assert opt.options.one_address() is addr


def test_opt_iana_add_option():
    opt = OptIANA()
    opt.options.add(elapsed_10ms())
    assert len(opt.options) == 1
    assert opt.options[0].code == OptionCode.ELAPSED_TIME


def test_opt_iana_get_one_missing():
    opt = OptIANA(options=IdentityOptions([OptStatusCode(), iaaddr()]))
    assert opt.options.get_one(OptionCode.DNS_RECURSIVE_NAME_SERVER) is None


def test_opt_iana_delete_option():
    sc = OptStatusCode()
    addr = iaaddr()
    first = OptIANA(options=IdentityOptions([sc, addr, addr]))
    first.options.delete(OptionCode.IA_ADDR)
    assert first.options == Options([sc])
    second = OptIANA(options=IdentityOptions([addr, sc, addr]))
    second.options.delete(OptionCode.IA_ADDR)
    assert second.options == Options([sc])


def test_opt_iana_to_bytes():
    opt = OptIANA(
        ia_id=bytes([1, 2, 3, 4]),
        t1=timedelta(seconds=12345),
        t2=timedelta(seconds=54321),
        options=IdentityOptions([elapsed_10ms()]),
    )
    expected = bytes([1, 2, 3, 4, 0, 0, 0x30, 0x39, 0, 0, 0xD4, 0x31, 0, 8, 0, 2, 0x00, 0x01])
    assert opt.to_bytes() == expected


def test_opt_iana_string():
    s = str(OptIANA.parse(IANA_DATA))
    assert "IAID=[1 0 0 0]" in s
    assert "t1=1s, t2=2s" in s
    assert "options={" in s


def test_opt_iana_status_and_addresses():
    sc = OptStatusCode(StatusCode.NO_ADDRS_AVAIL, "none left")
    opts = IdentityOptions([sc, iaaddr(), iaaddr()])
    assert opts.status() is sc
    assert len(opts.addresses()) == 2
    assert IdentityOptions().one_address() is None
    assert IdentityOptions().status() is None


def test_opt_iana_bad_iaid_length():
    with pytest.raises(ValueError):
        OptIANA(ia_id=b"\x01\x02")


# IA_TA

def test_opt_iata_parse():
    opt = OptIATA.parse(IATA_DATA)
    assert opt.code == OptionCode.IATA
    assert opt.ia_id == bytes([1, 0, 0, 0])


def test_opt_iata_parse_invalid_length():
    with pytest.raises(ParseError):
        OptIATA.parse(bytes([1, 0, 0]))


def test_opt_iata_parse_invalid_options():
    with pytest.raises(ParseError):
        OptIATA.parse(IATA_DATA[:-4])


def test_opt_iata_get_one_address():
    addr = iaaddr()
    opt = OptIATA(options=IdentityOptions([OptStatusCode(), addr]))
    assert opt.options.one_address() is addr


def test_opt_iata_add_option():
    opt = OptIATA()
    opt.options.add(elapsed_10ms())
    assert len(opt.options) == 1
    assert opt.options[0].code == OptionCode.ELAPSED_TIME


def test_opt_iata_get_one_missing():
    opt = OptIATA(options=IdentityOptions([OptStatusCode(), iaaddr()]))
    assert opt.options.get_one(OptionCode.DNS_RECURSIVE_NAME_SERVER) is None


def test_opt_iata_delete_option():
    sc = OptStatusCode()
    addr = iaaddr()
    first = OptIATA(options=IdentityOptions([sc, addr, addr]))
    first.options.delete(OptionCode.IA_ADDR)
    assert first.options == Options([sc])
    second = OptIATA(options=IdentityOptions([addr, sc, addr]))
    second.options.delete(OptionCode.IA_ADDR)
    assert second.options == Options([sc])


def test_opt_iata_to_bytes():
    opt = OptIATA(ia_id=bytes([1, 2, 3, 4]), options=IdentityOptions([elapsed_10ms()]))
    assert opt.to_bytes() == bytes([1, 2, 3, 4, 0, 8, 0, 2, 0x00, 0x01])


def test_opt_iata_string():
    s = str(OptIATA.parse(IATA_DATA))
    assert "IAID=[1 0 0 0]" in s
    assert "options={" in s


def test_iata_round_trip_through_parse_option():
    opt = OptIATA(ia_id=b"abcd", options=IdentityOptions([OptStatusCode(StatusCode.SUCCESS, "ok")]))
    assert parse_option(OptionCode.IATA, opt.to_bytes()) == opt


# Status code

STATUS_DATA = bytes([0, 5]) + b"use multicast"


def test_parse_opt_status_code():
    opt = OptStatusCode.parse(STATUS_DATA)
    assert opt.status_code == StatusCode.USE_MULTICAST
    assert opt.status_message == "use multicast"


def test_opt_status_code_to_bytes():
    opt = OptStatusCode(StatusCode.SUCCESS, "success")
    assert opt.to_bytes() == bytes([0, 0]) + b"success"


def test_opt_status_code_too_short():
    with pytest.raises(ParseError):
        OptStatusCode.parse(bytes([0]))


def test_opt_status_code_string():
    opt = OptStatusCode.parse(STATUS_DATA)
    assert "Code: UseMulticast (5); Message: use multicast" in str(opt)


def test_status_code_dispatched_by_parse_option():
    opt = parse_option(OptionCode.STATUS_CODE, STATUS_DATA)
    assert opt == OptStatusCode(StatusCode.USE_MULTICAST, "use multicast")