"""DHCPv6 option codecs, IANA registries, RFC 1035 labels and network interface helpers."""

__version__ = "0.1.0"