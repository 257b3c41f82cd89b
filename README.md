# dhcpwire

Building blocks for working with DHCPv6 options on the wire. It has no
dependencies outside the standard library.

## Modules

- `dhcpwire.iana`: IANA registries as `IntEnum`s (`Arch`, `EntID`, `HWType`,
  `StatusCode`). Unassigned values are accepted and print as `unknown`
  (or `Unknown`). `Archs` is a list of architectures with `to_bytes()` and
  `Archs.from_bytes()` for the client architecture option format.
- `dhcpwire.rfc1035label`: `Labels` encodes and decodes RFC 1035 domain name
  lists, following compression pointers (nested pointers are rejected).
  A parsed object returns its original bytes from `to_bytes()` as long as
  `labels` is unchanged. Errors raise `LabelError`.
- `dhcpwire.interfaces`: `system_interfaces()` lists the host's interfaces
  (using `socket.if_nameindex()` and, where present, `/sys/class/net`);
  `get_loopback_interfaces()` and `get_non_loopback_interfaces()` filter them,
  and `get_interfaces_func()` filters with any predicate. Each takes an
  optional getter so another source of `Interface` records can be used.
  `bind_to_interface(sock, ifname)` uses `SO_BINDTODEVICE` on Linux and
  `IP_RECVIF` on macOS and the BSDs.
- `dhcpwire.dhcpv6.types`: `TransactionID`, `MessageType` and `OptionCode`,
  whose `str()` gives the registered names.
- `dhcpwire.dhcpv6.options`: the `Option` base class, `OptionGeneric` for raw
  values, `Options` (a list with `get`, `get_one`, `add`, `delete`, `update`,
  `to_bytes` and `Options.from_bytes`), `parse_option` and the
  `register_option` decorator. Errors raise `ParseError`.
- `dhcpwire.dhcpv6.ia`: `OptIANA`, `OptIATA`, `OptIAPrefix`, `OptStatusCode`,
  `IdentityOptions`, `PrefixOptions`, and `encode_duration` /
  `decode_duration` for 32-bit second lifetimes.
- `dhcpwire.dhcpv6.basic`: `OptInformationRefreshTime`, `OptInterfaceID`,
  `OptRemoteID`, `OptRequestedOption` (with `OptionCodes`) and
  `OptNetworkInterfaceID` (with `NetworkInterfaceType`).
- `dhcpwire.dhcpv6.vendor`: `OptUserClass`, `OptVendorClass` and
  `OptVendorOpts`; vendor sub-options are kept as `OptionGeneric`.
- `dhcpwire.dhcpv6.ztp`: `match_circuit_id`, `parse_remote_id` and
  `parse_vendor_data` pull circuit IDs (Arista interface names) and vendor
  data (Arista, ZPE Systems) out of options. Errors raise `ZTPError`.

Option classes register themselves with `parse_option` when their module is
imported. Until then, `parse_option` and `Options.from_bytes` return an
`OptionGeneric` for their codes.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Parse and re-encode a list of options:

```python
import dhcpwire.dhcpv6.ia  # registers the Status Code option
from dhcpwire.dhcpv6.options import Options

opts = Options.from_bytes(bytes([0, 13, 0, 2, 0, 0]))
print(opts.get_one(13))  # StatusCode: Code: Success (0); Message:
assert opts.to_bytes() == bytes([0, 13, 0, 2, 0, 0])
```

Decode RFC 1035 labels:

```python
from dhcpwire.rfc1035label import Labels

labels = Labels.from_bytes(b"\x07example\x03com\x00")
print(labels.labels)  # ['example.com']
```

Look up zero-touch provisioning vendor data:

```python
from dhcpwire.dhcpv6.options import Options
from dhcpwire.dhcpv6.vendor import OptVendorClass
from dhcpwire.dhcpv6.ztp import parse_vendor_data

opts = Options()
opts.add(OptVendorClass(enterprise_number=0, data=[b"Arista;DCS-0000;01.00;EXAMPLE0000"]))
print(parse_vendor_data(opts))
# VendorData(vendor_name='Arista', model='DCS-0000', serial='EXAMPLE0000')
```

## What it does not do

This package works on options only. It has no DHCPv6 message or relay
message codec, no client, no server and no command-line tool, and it does not
configure interfaces, addresses, routes or resolvers. `parse_remote_id` and
`parse_vendor_data` take the options of a message (for `parse_remote_id`,
those of the innermost relay message) rather than a whole packet.