"""Decode EOS interface IDs into interface names.

The port number's sub-field layout depends on the interface type. Each
type maps to a PortLayout listing its fields (mask + shift) and how the
fields are rendered after the type name.

Example: 0x000C0202 is type 0x00 (Ethernet) with port number 0xC0202,
which splits into slot 3, module 1, port 2 and renders as Ethernet3/1/2.

Types without a layout render the whole port number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from eosintf.models import DecodedIntf, PortFieldValue
from eosintf.types import (
    INTF_ID_MASK,
    RAW_PORT_MASK,
    TYPE_SHIFT,
    IntfType,
    is_known_type,
    type_name,
)


class PortStyle(Enum):
    """How decoded port fields are turned into the name suffix."""

    JOIN = "join"  # non-zero fields joined with "/"
    LITERAL = "literal"  # single field printed as-is, zero included
    DOTTED = "dotted"  # single field printed as "<n>.0"
    NONE = "none"  # no suffix


@dataclass(frozen=True)
class PortField:
    """A named bitfield within the 25-bit port number."""

    name: str
    mask: int
    shift: int = 0

    def extract(self, raw: int) -> int:
        return (raw & self.mask) >> self.shift


@dataclass(frozen=True)
class PortLayout:
    """Field layout and rendering style for one group of interface types."""

    fields: tuple[PortField, ...] = ()
    style: PortStyle = PortStyle.JOIN


_SLOT_MODULE_PORT = PortLayout((
    PortField("slot", 0x1FC0000, 18),  # bits 18-24
    PortField("module", 0x3FE00, 9),  # bits 9-17
    PortField("port", 0x1FF),  # bits 0-8
))

_SLOT_PORT = PortLayout((
    PortField("slot", 0x3FE00, 9),  # bits 9-17
    PortField("port", 0x1FF),  # bits 0-8
))

_TEST_SLOT_PORT = PortLayout((
    PortField("slot", 0xFFF000, 12),  # bits 12-23
    PortField("port", 0xFFF),  # bits 0-11
))


def _number(mask: int) -> PortLayout:
    return PortLayout((PortField("number", mask),))


_NO_PORT = PortLayout(style=PortStyle.NONE)

_FALLBACK = _number(RAW_PORT_MASK)

_PORT_LAYOUTS: dict[int, PortLayout] = {
    IntfType.ETHERNET: _SLOT_MODULE_PORT,
    IntfType.PEER_ETHERNET: _SLOT_MODULE_PORT,
    # TODO: Fabric and T2Recirc layouts are unknown, needs sample IDs from a chassis
    IntfType.FABRIC: _NO_PORT,
    IntfType.T2_RECIRC: _NO_PORT,
    IntfType.MGMT: _SLOT_PORT,
    IntfType.INTERNAL: _SLOT_PORT,
    IntfType.TEST: _TEST_SLOT_PORT,
    IntfType.FWD: PortLayout((PortField("number", 0x1),), PortStyle.LITERAL),
    IntfType.DEFAULT_ETH_SWITCHED_PORT: _number(0xFF),
    IntfType.MLAG: _number(0x1FF),
    IntfType.VLAN: _number(0xFFF),
    IntfType.LOOPBACK: _number(0xFFF),
    IntfType.NULL: _number(0xFFF),
    IntfType.TUNNEL: _number(0xFFF),
    IntfType.HOST: _number(0xFFF),
    IntfType.REGISTER: _number(0xFFF),
    IntfType.PORT_CHANNEL: _number(0x1FFF),
    IntfType.PEER_PORT_CHANNEL: _number(0x1FFF),
    IntfType.MLAG_INTF: _number(0xFFFF),
    IntfType.VXLAN: _number(0xFFFF),
    IntfType.GRE: _number(0xFFFF),
    IntfType.DYNAMIC_TUNNEL: PortLayout((PortField("number", RAW_PORT_MASK),), PortStyle.DOTTED),
    IntfType.CPU: _NO_PORT,
    IntfType.SWITCH: _NO_PORT,
    IntfType.L2_QUERIER_LINK: _NO_PORT,
    IntfType.DEFAULT_TEST_PORT: _NO_PORT,
    IntfType.DEFAULT_ETH_MGMT_PORT: _NO_PORT,
    IntfType.DEFAULT_ETH_INTERNAL_PORT: _NO_PORT,
    IntfType.DEFAULT_ETH_DATA_LINK_PORT: _NO_PORT,
    IntfType.OPENFLOW_ROUTER: _NO_PORT,
}


def get_port_layout(code: int) -> PortLayout:
    """Return the port layout for a type code, falling back to the raw number."""
    return _PORT_LAYOUTS.get(code, _FALLBACK)


def type_code(intf_id: int) -> int:
    """Top 7 bits of the ID, treating it as unsigned 32-bit."""
    return (intf_id & INTF_ID_MASK) >> TYPE_SHIFT


def raw_port(intf_id: int) -> int:
    """Bottom 25 bits of the ID."""
    return intf_id & RAW_PORT_MASK


def port_fields(intf_id: int) -> tuple[int, ...]:
    """Decode the port number into its sub-fields (0 to 3 values)."""
    layout = get_port_layout(type_code(intf_id))
    n = raw_port(intf_id)
    return tuple(f.extract(n) for f in layout.fields)


def _join_nonzero(values: tuple[int, ...]) -> str:
    return "/".join(str(v) for v in values if v != 0)


def port_suffix(intf_id: int) -> str:
    """Render the port part of the interface name."""
    layout = get_port_layout(type_code(intf_id))
    values = port_fields(intf_id)

    if layout.style is PortStyle.NONE:
        return ""
    if layout.style is PortStyle.LITERAL:
        return str(values[0])
    if layout.style is PortStyle.DOTTED:
        return f"{values[0]}.0"
    return _join_nonzero(values)


def decode(intf_id: int) -> str:
    """Decode an interface ID into its EOS name, e.g. ``Ethernet3/1/2``.

    Never raises: unknown types render as ``UNKNOWN`` plus the raw port
    number, and only the low 32 bits of ``intf_id`` are considered.
    """
    return type_name(type_code(intf_id)) + port_suffix(intf_id)


def describe(intf_id: int) -> DecodedIntf:
    """Decode an interface ID into a structured model."""
    code = type_code(intf_id)
    layout = get_port_layout(code)
    n = raw_port(intf_id)
    return DecodedIntf(
        intf_id=intf_id & INTF_ID_MASK,
        type_code=code,
        type_name=type_name(code),
        known_type=is_known_type(code),
        raw_port=n,
        fields=[PortFieldValue(name=f.name, value=f.extract(n)) for f in layout.fields],
        name=decode(intf_id),
    )


@dataclass(frozen=True)
class IntfId:
    """An EOS internal interface ID.

    Wraps the integer masked to 32 bits, so signed and unsigned
    representations of the same ID compare equal.
    """

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value & INTF_ID_MASK)

    @property
    def type_code(self) -> int:
        return type_code(self.value)

    @property
    def type(self) -> IntfType | None:
        """The interface type, or None if the code is not a known type."""
        code = self.type_code
        return IntfType(code) if is_known_type(code) else None

    @property
    def type_name(self) -> str:
        return type_name(self.type_code)

    @property
    def raw_port(self) -> int:
        return raw_port(self.value)

    @property
    def port_fields(self) -> tuple[int, ...]:
        return port_fields(self.value)

    @property
    def port(self) -> str:
        return port_suffix(self.value)

    def describe(self) -> DecodedIntf:
        return describe(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return decode(self.value)
