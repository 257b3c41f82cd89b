"""DHCPv6 message types, option codes, option codecs and zero-touch provisioning helpers."""