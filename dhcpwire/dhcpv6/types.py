"""DHCPv6 transaction IDs, message types and option codes (RFC 3315, RFC 8415)."""

from __future__ import annotations

from enum import IntEnum

from dhcpwire.iana import _pseudo_member

TRANSACTION_ID_LENGTH = 3


class TransactionID(bytes):
    """A three-byte DHCPv6 transaction ID (RFC 3315 section 6)."""

    def __new__(cls, value: bytes = b"\x00" * TRANSACTION_ID_LENGTH) -> "TransactionID":
        data = bytes(value)
        if len(data) != TRANSACTION_ID_LENGTH:
            raise ValueError(
                f"transaction ID must be {TRANSACTION_ID_LENGTH} bytes, got {len(data)}"
            )
        return super().__new__(cls, data)

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"TransactionID({bytes(self)!r})"


class MessageType(IntEnum):
    """The kind of a DHCPv6 message (RFC 3315 section 5.3)."""

    # Used internally, not part of the RFC.
    NONE = 0
    SOLICIT = 1
    ADVERTISE = 2
    REQUEST = 3
    CONFIRM = 4
    RENEW = 5
    REBIND = 6
    REPLY = 7
    RELEASE = 8
    DECLINE = 9
    RECONFIGURE = 10
    INFORMATION_REQUEST = 11
    RELAY_FORWARD = 12
    RELAY_REPLY = 13
    LEASE_QUERY = 14
    LEASE_QUERY_REPLY = 15
    LEASE_QUERY_DONE = 16
    LEASE_QUERY_DATA = 17
    DHCPV4_QUERY = 20
    DHCPV4_RESPONSE = 21

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 8)

    def __str__(self) -> str:
        name = _MESSAGE_TYPE_NAMES.get(int(self))
        return name if name is not None else f"unknown ({int(self)})"


_MESSAGE_TYPE_NAMES = {
    MessageType.SOLICIT: "SOLICIT",
    MessageType.ADVERTISE: "ADVERTISE",
    MessageType.REQUEST: "REQUEST",
    MessageType.CONFIRM: "CONFIRM",
    MessageType.RENEW: "RENEW",
    MessageType.REBIND: "REBIND",
    MessageType.REPLY: "REPLY",
    MessageType.RELEASE: "RELEASE",
    MessageType.DECLINE: "DECLINE",
    MessageType.RECONFIGURE: "RECONFIGURE",
    MessageType.INFORMATION_REQUEST: "INFORMATION-REQUEST",
    MessageType.RELAY_FORWARD: "RELAY-FORW",
    MessageType.RELAY_REPLY: "RELAY-REPL",
    MessageType.LEASE_QUERY: "LEASEQUERY",
    MessageType.LEASE_QUERY_REPLY: "LEASEQUERY-REPLY",
    MessageType.LEASE_QUERY_DONE: "LEASEQUERY-DONE",
    MessageType.LEASE_QUERY_DATA: "LEASEQUERY-DATA",
    MessageType.DHCPV4_QUERY: "DHCPv4-QUERY",
    MessageType.DHCPV4_RESPONSE: "DHCPv4-RESPONSE",
}


class OptionCode(IntEnum):
    """The 16-bit code of a DHCPv6 option."""

    CLIENT_ID = 1
    SERVER_ID = 2
    IANA = 3
    IATA = 4
    IA_ADDR = 5
    ORO = 6
    PREFERENCE = 7
    ELAPSED_TIME = 8
    RELAY_MSG = 9
    AUTH = 11
    UNICAST = 12
    STATUS_CODE = 13
    RAPID_COMMIT = 14
    USER_CLASS = 15
    VENDOR_CLASS = 16
    VENDOR_OPTS = 17
    INTERFACE_ID = 18
    RECONF_MESSAGE = 19
    RECONF_ACCEPT = 20
    SIP_SERVERS_DOMAIN_NAME_LIST = 21
    SIP_SERVERS_IPV6_ADDRESS_LIST = 22
    DNS_RECURSIVE_NAME_SERVER = 23
    DOMAIN_SEARCH_LIST = 24
    IAPD = 25
    IA_PREFIX = 26
    NIS_SERVERS = 27
    NISP_SERVERS = 28
    NIS_DOMAIN_NAME = 29
    NISP_DOMAIN_NAME = 30
    SNTP_SERVER_LIST = 31
    INFORMATION_REFRESH_TIME = 32
    BCMCS_CONTROLLER_DOMAIN_NAME_LIST = 33
    BCMCS_CONTROLLER_IPV6_ADDRESS_LIST = 34
    GEO_CONF_CIVIC = 36
    REMOTE_ID = 37
    RELAY_AGENT_SUBSCRIBER_ID = 38
    FQDN = 39
    PANA_AUTHENTICATION_AGENT = 40
    NEW_POSIX_TIMEZONE = 41
    NEW_TZDB_TIMEZONE = 42
    ECHO_REQUEST = 43
    LQ_QUERY = 44
    CLIENT_DATA = 45
    CLT_TIME = 46
    LQ_RELAY_DATA = 47
    LQ_CLIENT_LINK = 48
    MIPV6_HOME_NETWORK_ID_FQDN = 49
    MIPV6_VISITED_HOME_NETWORK_INFORMATION = 50
    LOST_SERVER = 51
    CAPWAP_ACCESS_CONTROLLER_ADDRESSES = 52
    RELAY_ID = 53
    IPV6_ADDRESS_MOS = 54
    IPV6_FQDN_MOS = 55
    NTP_SERVER = 56
    V6_ACCESS_DOMAIN = 57
    SIP_UA_CS_LIST = 58
    BOOTFILE_URL = 59
    BOOTFILE_PARAM = 60
    CLIENT_ARCH_TYPE = 61
    NII = 62
    GEOLOCATION = 63
    AFTR_NAME = 64
    ERP_LOCAL_DOMAIN_NAME = 65
    RSOO = 66
    PD_EXCLUDE = 67
    VIRTUAL_SUBNET_SELECTION = 68
    MIPV6_IDENTIFIED_HOME_NETWORK_INFORMATION = 69
    MIPV6_UNRESTRICTED_HOME_NETWORK_INFORMATION = 70
    MIPV6_HOME_NETWORK_PREFIX = 71
    MIPV6_HOME_AGENT_ADDRESS = 72
    MIPV6_HOME_AGENT_FQDN = 73
    RDNSS_SELECTION = 74
    KRB_PRINCIPAL_NAME = 75
    KRB_REALM_NAME = 76
    KRB_DEFAULT_REALM_NAME = 77
    KRB_KDC = 78
    CLIENT_LINK_LAYER_ADDR = 79
    LINK_ADDRESS = 80
    RADIUS = 81
    SOL_MAX_RT = 82
    INF_MAX_RT = 83
    ADDR_SEL = 84
    ADDR_SEL_TABLE = 85
    V6_PCP_SERVER = 86
    DHCPV4_MSG = 87
    DHCP4O_DHCP6_SERVER = 88
    S46_RULE = 89
    S46_BR = 90
    S46_DMR = 91
    S46_V4V6_BIND = 92
    S46_PORT_PARAMS = 93
    S46_CONT_MAPE = 94
    S46_CONT_MAPT = 95
    S46_CONT_LW = 96
    OPTION_4RD = 97
    OPTION_4RD_MAP_RULE = 98
    OPTION_4RD_NON_MAP_RULE = 99
    LQ_BASE_TIME = 100
    LQ_START_TIME = 101
    LQ_END_TIME = 102
    CAPTIVE_PORTAL = 103
    MPL_PARAMETERS = 104
    ANI_ACCESS_TECH_TYPE = 105
    ANI_NETWORK_NAME = 106
    ANI_ACCESS_POINT_NAME = 107
    ANI_ACCESS_POINT_BSSID = 108
    ANI_OPERATOR_ID = 109
    ANI_OPERATOR_REALM = 110
    S46_PRIORITY = 111
    MUD_URL_V6 = 112
    V6_PREFIX64 = 113
    FAILOVER_BINDING_STATUS = 114
    FAILOVER_CONNECT_FLAGS = 115
    FAILOVER_DNS_REMOVAL_INFO = 116
    FAILOVER_DNS_HOST_NAME = 117
    FAILOVER_DNS_ZONE_NAME = 118
    FAILOVER_DNS_FLAGS = 119
    FAILOVER_EXPIRATION_TIME = 120
    FAILOVER_MAX_UNACKED_BNDUPD = 121
    FAILOVER_MCLT = 122
    FAILOVER_PARTNER_LIFETIME = 123
    FAILOVER_PARTNER_LIFETIME_SENT = 124
    FAILOVER_PARTNER_DOWN_TIME = 125
    FAILOVER_PARTNER_RAW_CLT_TIME = 126
    FAILOVER_PROTOCOL_VERSION = 127
    FAILOVER_KEEPALIVE_TIME = 128
    FAILOVER_RECONFIGURE_DATA = 129
    FAILOVER_RELATIONSHIP_NAME = 130
    FAILOVER_SERVER_FLAGS = 131
    FAILOVER_SERVER_STATE = 132
    FAILOVER_START_TIME_OF_STATE = 133
    FAILOVER_STATE_EXPIRATION_TIME = 134
    RELAY_PORT = 135
    V6_SZTP_REDIRECT = 136
    S46_BIND_IPV6_PREFIX = 137
    IPV6_ADDRESS_ANDSF = 143

    @classmethod
    def _missing_(cls, value):
        return _pseudo_member(cls, value, 16)

    def __str__(self) -> str:
        name = _OPTION_CODE_NAMES.get(int(self))
        return name if name is not None else f"unknown ({int(self)})"


_OPTION_CODE_NAMES = {
    OptionCode.CLIENT_ID: "Client Identifier",
    OptionCode.SERVER_ID: "Server Identifier",
    OptionCode.IANA: "IA_NA",
    OptionCode.IATA: "IA_TA",
    OptionCode.IA_ADDR: "IA IP Address",
    OptionCode.ORO: "Requested Options",
    OptionCode.PREFERENCE: "Preference",
    OptionCode.ELAPSED_TIME: "Elapsed Time",
    OptionCode.RELAY_MSG: "Relay Message",
    OptionCode.AUTH: "Auth",
    OptionCode.UNICAST: "Unicast",
    OptionCode.STATUS_CODE: "Status Code",
    OptionCode.RAPID_COMMIT: "Rapid Commit",
    OptionCode.USER_CLASS: "User Class",
    OptionCode.VENDOR_CLASS: "Vendor Class",
    OptionCode.VENDOR_OPTS: "Vendor Options",
    OptionCode.INTERFACE_ID: "Interface ID",
    OptionCode.RECONF_MESSAGE: "Reconfig Message",
    OptionCode.RECONF_ACCEPT: "Reconfig Accept",
    OptionCode.SIP_SERVERS_DOMAIN_NAME_LIST: "SIP Servers Domain Name List",
    OptionCode.SIP_SERVERS_IPV6_ADDRESS_LIST: "SIP Servers IPv6 Address List",
    OptionCode.DNS_RECURSIVE_NAME_SERVER: "DNS Recursive Name Server",
    OptionCode.DOMAIN_SEARCH_LIST: "Domain Search List",
    OptionCode.IAPD: "IA_PD",
    OptionCode.IA_PREFIX: "IA Prefix",
    OptionCode.NIS_SERVERS: "NIS Servers",
    OptionCode.NISP_SERVERS: "NISP Servers",
    OptionCode.NIS_DOMAIN_NAME: "NIS Domain Name",
    OptionCode.NISP_DOMAIN_NAME: "NISP Domain Name",
    OptionCode.SNTP_SERVER_LIST: "SNTP Server List",
    OptionCode.INFORMATION_REFRESH_TIME: "Information Refresh Time",
    OptionCode.BCMCS_CONTROLLER_DOMAIN_NAME_LIST: "BCMCS Controller Domain Name List",
    OptionCode.BCMCS_CONTROLLER_IPV6_ADDRESS_LIST: "BCMCS Controller IPv6 Address List",
    OptionCode.GEO_CONF_CIVIC: "Geoconf",
    OptionCode.REMOTE_ID: "Remote ID",
    OptionCode.RELAY_AGENT_SUBSCRIBER_ID: "Relay-Agent Subscriber ID",
    OptionCode.FQDN: "FQDN",
    OptionCode.PANA_AUTHENTICATION_AGENT: "PANA Authentication Agent",
    OptionCode.NEW_POSIX_TIMEZONE: "New POSIX Timezone",
    OptionCode.NEW_TZDB_TIMEZONE: "New TZDB Timezone",
    OptionCode.ECHO_REQUEST: "Echo Request",
    OptionCode.LQ_QUERY: "OPTION_LQ_QUERY",
    OptionCode.CLIENT_DATA: "OPTION_CLIENT_DATA",
    OptionCode.CLT_TIME: "OPTION_CLT_TIME",
    OptionCode.LQ_RELAY_DATA: "OPTION_LQ_RELAY_DATA",
    OptionCode.LQ_CLIENT_LINK: "OPTION_LQ_CLIENT_LINK",
    OptionCode.MIPV6_HOME_NETWORK_ID_FQDN: "MIPv6 Home Network ID FQDN",
    OptionCode.MIPV6_VISITED_HOME_NETWORK_INFORMATION: "MIPv6 Visited Home Network Information",
    OptionCode.LOST_SERVER: "LoST Server",
    OptionCode.CAPWAP_ACCESS_CONTROLLER_ADDRESSES: "CAPWAP Access Controller Addresses",
    OptionCode.RELAY_ID: "RELAY_ID",
    OptionCode.IPV6_ADDRESS_MOS: "OPTION-IPv6_Address-MoS",
    OptionCode.IPV6_FQDN_MOS: "OPTION-IPv6-FQDN-MoS",
    OptionCode.NTP_SERVER: "NTP Server",
    OptionCode.V6_ACCESS_DOMAIN: "OPTION_V6_ACCESS_DOMAIN",
    OptionCode.SIP_UA_CS_LIST: "OPTION_SIP_UA_CS_LIST",
    OptionCode.BOOTFILE_URL: "Boot File URL",
    OptionCode.BOOTFILE_PARAM: "Boot File Parameters",
    OptionCode.CLIENT_ARCH_TYPE: "Client Architecture",
    OptionCode.NII: "Network Interface ID",
    OptionCode.GEOLOCATION: "OPTION_GEOLOCATION",
    OptionCode.AFTR_NAME: "OPTION_AFTR_NAME",
    OptionCode.ERP_LOCAL_DOMAIN_NAME: "OPTION_ERP_LOCAL_DOMAIN_NAME",
    OptionCode.RSOO: "OPTION_RSOO",
    OptionCode.PD_EXCLUDE: "OPTION_PD_EXCLUDE",
    OptionCode.VIRTUAL_SUBNET_SELECTION: "Virtual Subnet Selection",
    OptionCode.MIPV6_IDENTIFIED_HOME_NETWORK_INFORMATION: "MIPv6 Identified Home Network Information",
    OptionCode.MIPV6_UNRESTRICTED_HOME_NETWORK_INFORMATION: "MIPv6 Unrestricted Home Network Information",
    OptionCode.MIPV6_HOME_NETWORK_PREFIX: "MIPv6 Home Network Prefix",
    OptionCode.MIPV6_HOME_AGENT_ADDRESS: "MIPv6 Home Agent Address",
    OptionCode.MIPV6_HOME_AGENT_FQDN: "MIPv6 Home Agent FQDN",
    OptionCode.RDNSS_SELECTION: "RDNSS Selection",
    OptionCode.KRB_PRINCIPAL_NAME: "Kerberos Principal Name",
    OptionCode.KRB_REALM_NAME: "Kerberos Realm Name",
    OptionCode.KRB_DEFAULT_REALM_NAME: "Kerberos Default Realm Name",
    OptionCode.KRB_KDC: "Kerberos KDC",
    OptionCode.CLIENT_LINK_LAYER_ADDR: "Client Link-Layer Address",
    OptionCode.LINK_ADDRESS: "Link Address",
    OptionCode.RADIUS: "OPTION_RADIUS",
    OptionCode.SOL_MAX_RT: "Max Solicit Timeout Value",
    OptionCode.INF_MAX_RT: "Max Information-Request Timeout Value",
    OptionCode.ADDR_SEL: "Address Selection",
    OptionCode.ADDR_SEL_TABLE: "Address Selection Policy Table",
    OptionCode.V6_PCP_SERVER: "Port Control Protocol Server",
    OptionCode.DHCPV4_MSG: "Encapsulated DHCPv4 Message",
    OptionCode.DHCP4O_DHCP6_SERVER: "DHCPv4-over-DHCPv6 Server",
    OptionCode.S46_RULE: "Softwire46 Rule",
    OptionCode.S46_BR: "Softwire46 Border Relay",
    OptionCode.S46_DMR: "Softwire46 Default Mapping Rule",
    OptionCode.S46_V4V6_BIND: "Softwire46 IPv4/IPv6 Address Binding",
    OptionCode.S46_PORT_PARAMS: "Softwire46 Port Parameters",
    OptionCode.S46_CONT_MAPE: "Softwire46 MAP-E Container",
    OptionCode.S46_CONT_MAPT: "Softwire46 MAP-T Container",
    OptionCode.S46_CONT_LW: "Softwire46 Lightweight 4over6 Container",
    OptionCode.OPTION_4RD: "IPv4 Residual Deployment",
    OptionCode.OPTION_4RD_MAP_RULE: "IPv4 Residual Deployment Mapping Rule",
    OptionCode.OPTION_4RD_NON_MAP_RULE: "IPv4 Residual Deployment Non-Mapping Rule",
    OptionCode.LQ_BASE_TIME: "Leasequery Server Base time",
    OptionCode.LQ_START_TIME: "Leasequery Server Query Start Time",
    OptionCode.LQ_END_TIME: "Leasequery Server Query End Time",
    OptionCode.CAPTIVE_PORTAL: "Captive Portal URI",
    OptionCode.MPL_PARAMETERS: "MPL Parameters",
    OptionCode.ANI_ACCESS_TECH_TYPE: "Access-Network-Information Access-Technology-Type",
    OptionCode.ANI_NETWORK_NAME: "Access-Network-Information Network-Name",
    OptionCode.ANI_ACCESS_POINT_NAME: "Access-Network-Information Access-Point-Name",
    OptionCode.ANI_ACCESS_POINT_BSSID: "Access-Network-Information Access-Point-BSSID",
    OptionCode.ANI_OPERATOR_ID: "Access-Network-Information Operator-Identifier",
    OptionCode.ANI_OPERATOR_REALM: "Access-Network-Information Operator-Realm",
    OptionCode.S46_PRIORITY: "Softwire46 Priority",
    OptionCode.MUD_URL_V6: "Manufacturer Usage Description URL",
    OptionCode.V6_PREFIX64: "OPTION_V6_PREFIX64",
    OptionCode.FAILOVER_BINDING_STATUS: "Failover Binding Status",
    OptionCode.FAILOVER_CONNECT_FLAGS: "Failover Connection Flags",
    OptionCode.FAILOVER_DNS_REMOVAL_INFO: "Failover DNS Removal Info",
    OptionCode.FAILOVER_DNS_HOST_NAME: "Failover DNS Removal Host Name",
    OptionCode.FAILOVER_DNS_ZONE_NAME: "Failover DNS Removal Zone Name",
    OptionCode.FAILOVER_DNS_FLAGS: "Failover DNS Removal Flags",
    OptionCode.FAILOVER_EXPIRATION_TIME: "Failover Maximum Expiration Time",
    OptionCode.FAILOVER_MAX_UNACKED_BNDUPD: "Failover Maximum Unacked BNDUPD Messages",
    OptionCode.FAILOVER_MCLT: "Failover Maximum Client Lead Time",
    OptionCode.FAILOVER_PARTNER_LIFETIME: "Failover Partner Lifetime",
    OptionCode.FAILOVER_PARTNER_LIFETIME_SENT: "Failover Received Partner Lifetime",
    OptionCode.FAILOVER_PARTNER_DOWN_TIME: "Failover Last Partner Down Time",
    OptionCode.FAILOVER_PARTNER_RAW_CLT_TIME: "Failover Last Client Time",
    OptionCode.FAILOVER_PROTOCOL_VERSION: "Failover Protocol Version",
    OptionCode.FAILOVER_KEEPALIVE_TIME: "Failover Keepalive Time",
    OptionCode.FAILOVER_RECONFIGURE_DATA: "Failover Reconfigure Data",
    OptionCode.FAILOVER_RELATIONSHIP_NAME: "Failover Relationship Name",
    OptionCode.FAILOVER_SERVER_FLAGS: "Failover Server Flags",
    OptionCode.FAILOVER_SERVER_STATE: "Failover Server State",
    OptionCode.FAILOVER_START_TIME_OF_STATE: "Failover State Start Time",
    OptionCode.FAILOVER_STATE_EXPIRATION_TIME: "Failover State Expiration Time",
    OptionCode.RELAY_PORT: "Relay Source Port",
    OptionCode.V6_SZTP_REDIRECT: "IPv6 Secure Zerotouch Provisioning Redirect",
    OptionCode.S46_BIND_IPV6_PREFIX: "Softwire46 Source Binding Prefix Hint",
    OptionCode.IPV6_ADDRESS_ANDSF: "IPv6 Access Network Discovery and Selection Function Address",
}