"""EOS interface type codes, display names, and bit layout constants.

An EOS internal interface ID is a 32-bit number split into a 7-bit type
and a 25-bit port number:

     31       25 24                          0
    +----------+-----------------------------+
    |   type   |        port number          |
    +----------+-----------------------------+

Display names are the strings EOS itself prints (``Arnet::IntfId``) and are
reproduced verbatim, spelling and capitalization included.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum


# Only the low 32 bits of an ID carry meaning
INTF_ID_MASK = 0xFFFFFFFF

# Type code lives in bits 25-31
TYPE_SHIFT = 25

# Port number lives in bits 0-24
RAW_PORT_MASK = 0x1FFFFFF

# Display name for type codes missing from the table
UNKNOWN_TYPE_NAME = "UNKNOWN"


class IntfType(IntEnum):
    """Interface type codes (top 7 bits of an interface ID)."""

    ETHERNET = 0x00
    VLAN = 0x01
    MGMT = 0x02
    LOOPBACK = 0x03
    NULL = 0x04
    INTERNAL = 0x05
    CPU = 0x06
    PORT_CHANNEL = 0x07
    PEER_ETHERNET = 0x08
    PEER_PORT_CHANNEL = 0x09
    TEST = 0x0A
    SWITCH = 0x0B
    L2_QUERIER_LINK = 0x0C
    MLAG = 0x0D  # "mlag"
    TUNNEL = 0x0F
    MLAG_INTF = 0x10  # "Mlag"
    DEFAULT_TEST_PORT = 0x15
    DEFAULT_ETH_MGMT_PORT = 0x16
    DEFAULT_ETH_SWITCHED_PORT = 0x17
    DEFAULT_ETH_INTERNAL_PORT = 0x18
    HOST = 0x19
    DEFAULT_ETH_DATA_LINK_PORT = 0x22
    VXLAN = 0x38
    GRE = 0x39
    DYNAMIC_TUNNEL = 0x3A
    PSEUDOWIRE = 0x3B
    TUNNEL_TAP = 0x3C
    FABRIC = 0x48
    REGISTER = 0x4F
    OPENFLOW_ROUTER = 0x5A
    T2_RECIRC = 0x63
    FWD = 0x66

    @property
    def display_name(self) -> str:
        return _TYPE_NAMES[self]


_TYPE_NAMES: dict[int, str] = {
    IntfType.ETHERNET: "Ethernet",
    IntfType.VLAN: "Vlan",
    IntfType.MGMT: "Mangement",
    IntfType.LOOPBACK: "Loopback",
    IntfType.NULL: "Null",
    IntfType.INTERNAL: "Internal",
    IntfType.CPU: "Cpu",
    IntfType.PORT_CHANNEL: "Port-Channel",
    IntfType.PEER_ETHERNET: "PeerEthernet",
    IntfType.PEER_PORT_CHANNEL: "PeerPort-Channel",
    IntfType.TEST: "Test",
    IntfType.SWITCH: "Switch",
    IntfType.L2_QUERIER_LINK: "l2QuerierLink",
    IntfType.MLAG: "mlag",
    IntfType.TUNNEL: "Tunnel",
    IntfType.MLAG_INTF: "Mlag",
    IntfType.DEFAULT_TEST_PORT: "DefaultTestPort",
    IntfType.DEFAULT_ETH_MGMT_PORT: "DefaultEthManagementPort",
    IntfType.DEFAULT_ETH_SWITCHED_PORT: "DefaultEthSwitchedPort",
    IntfType.DEFAULT_ETH_INTERNAL_PORT: "DefaultEthInternalPort",
    IntfType.HOST: "host",
    IntfType.DEFAULT_ETH_DATA_LINK_PORT: "DefaultEthDataLinkPort",
    IntfType.VXLAN: "Vxlan",
    IntfType.GRE: "Gre",
    IntfType.DYNAMIC_TUNNEL: "DynamicTunnel",
    IntfType.PSEUDOWIRE: "Pseudowire",
    IntfType.TUNNEL_TAP: "tunnelTap",
    IntfType.FABRIC: "Fabric",
    IntfType.REGISTER: "Register",
    IntfType.OPENFLOW_ROUTER: "OpenFlowRouter",
    IntfType.T2_RECIRC: "T2Recirc",
    IntfType.FWD: "fwd",
}


def type_name(code: int) -> str:
    """Return the EOS display name for a type code, or ``"UNKNOWN"``."""
    return _TYPE_NAMES.get(code, UNKNOWN_TYPE_NAME)


def is_known_type(code: int) -> bool:
    return code in _TYPE_NAMES


def iter_type_names() -> Iterator[tuple[int, str]]:
    """Yield ``(code, display_name)`` for every known type, ordered by code."""
    for code in sorted(_TYPE_NAMES):
        yield int(code), _TYPE_NAMES[code]
