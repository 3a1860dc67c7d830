"""Unit tests for interface ID decoding."""

from __future__ import annotations

import pytest

from eosintf.decode import (
    IntfId,
    PortStyle,
    decode,
    describe,
    get_port_layout,
    port_fields,
    port_suffix,
    raw_port,
    type_code,
)
from eosintf.types import IntfType


class TestBitSplit:
    """Test type_code() and raw_port() extraction."""

    def test_type_code_top_seven_bits(self):
        assert type_code(0x000C0202) == 0x00
        assert type_code(0x02000064) == 0x01
        assert type_code(0xCC000001) == 0x66
        assert type_code(0xFFFFFFFF) == 0x7F

    def test_raw_port_bottom_25_bits(self):
        assert raw_port(0x000C0202) == 0xC0202
        assert raw_port(0xFFFFFFFF) == 0x1FFFFFF
        assert raw_port(0x02000000) == 0

    def test_signed_representation(self):
        # 0xCC000001 as a signed 32-bit value
        assert type_code(-872415231) == 0x66
        assert type_code(-1) == 0x7F
        assert raw_port(-1) == 0x1FFFFFF

    def test_bits_above_32_ignored(self):
        assert type_code(0x1_000C0202) == 0x00
        assert raw_port(0x1_000C0202) == 0xC0202


class TestDecodeEthernet:
    """Test slot/module/port decoding for Ethernet-style IDs."""

    def test_slot_module_port(self, ethernet_intf_id):
        assert decode(ethernet_intf_id) == "Ethernet3/1/2"

    def test_all_bits_set(self):
        assert decode(0x01FFFFFF) == "Ethernet127/511/511"

    def test_port_only(self):
        assert decode(0x00000001) == "Ethernet1"

    def test_zero_slot_has_no_leading_separator(self):
        assert decode(0x00000202) == "Ethernet1/2"

    def test_zero_module_has_no_double_separator(self):
        assert decode(0x000C0002) == "Ethernet3/2"

    def test_all_zero_fields(self):
        assert decode(0x00000000) == "Ethernet"

    def test_peer_ethernet(self):
        assert decode(0x10080005) == "PeerEthernet2/5"

    def test_port_fields(self, ethernet_intf_id):
        assert port_fields(ethernet_intf_id) == (3, 1, 2)
        assert port_fields(0x00000001) == (0, 0, 1)


class TestDecodeSlotPort:
    """Test two-field layouts."""

    def test_management(self):
        assert decode(0x04000203) == "Mangement1/3"
        assert decode(0x04000001) == "Mangement1"

    def test_internal_zero_port(self):
        assert decode(0x0A000400) == "Internal2"

    def test_test_port(self):
        assert decode(0x14003007) == "Test3/7"
        assert port_fields(0x14003007) == (3, 7)


class TestDecodeSingleNumber:
    """Test single-field layouts and their masks."""

    @pytest.mark.parametrize(
        "intf_id, expected",
        [
            (0x02000064, "Vlan100"),
            (0x02001064, "Vlan100"),  # bit 12 outside the Vlan mask
            (0x06000000, "Loopback"),
            (0x06000001, "Loopback1"),
            (0x08000000, "Null"),
            (0x0E00000A, "Port-Channel10"),
            (0x0E002001, "Port-Channel1"),  # bit 13 outside the mask
            (0x12000003, "PeerPort-Channel3"),
            (0x1A000005, "mlag5"),
            (0x1A000205, "mlag5"),  # bit 9 outside the mask
            (0x1E000002, "Tunnel2"),
            (0x20012345, "Mlag9029"),
            (0x2E000101, "DefaultEthSwitchedPort1"),
            (0x32000003, "host3"),
            (0x70000001, "Vxlan1"),
            (0x72000010, "Gre16"),
            (0x9E000001, "Register1"),
        ],
    )
    def test_decode(self, intf_id, expected):
        assert decode(intf_id) == expected


class TestDecodeNoPort:
    """Test types that never carry a port suffix."""

    @pytest.mark.parametrize(
        "intf_id, expected",
        [
            (0x0C000123, "Cpu"),
            (0x16000001, "Switch"),
            (0x18000001, "l2QuerierLink"),
            (0x2A000001, "DefaultTestPort"),
            (0x2C000001, "DefaultEthManagementPort"),
            (0x30000001, "DefaultEthInternalPort"),
            (0x44000001, "DefaultEthDataLinkPort"),
            (0xB4000001, "OpenFlowRouter"),
        ],
    )
    def test_decode(self, intf_id, expected):
        assert decode(intf_id) == expected
        assert port_fields(intf_id) == ()

    def test_fabric_suffix_always_empty(self):
        assert decode(0x90000005) == "Fabric"
        assert decode(0x91FFFFFF) == "Fabric"
        assert port_suffix(0x90000005) == ""

    def test_t2recirc_suffix_always_empty(self):
        assert decode(0xC6000001) == "T2Recirc"
        assert decode(0xC7FFFFFF) == "T2Recirc"


class TestDecodeSpecialRendering:
    """Test fwd and DynamicTunnel, which bypass the zero-suppressing join."""

    def test_fwd_zero_is_rendered(self):
        assert decode(0xCC000000) == "fwd0"
        assert port_suffix(0xCC000000) == "0"

    def test_fwd_only_bit_zero_used(self):
        assert decode(0xCC000001) == "fwd1"
        assert decode(0xCC000002) == "fwd0"

    def test_dynamic_tunnel(self):
        assert decode(0x74000007) == "DynamicTunnel7.0"
        assert decode(0x74000000) == "DynamicTunnel0.0"
        assert decode(0x75FFFFFF) == "DynamicTunnel33554431.0"

    def test_layout_styles(self):
        assert get_port_layout(IntfType.FWD).style is PortStyle.LITERAL
        assert get_port_layout(IntfType.DYNAMIC_TUNNEL).style is PortStyle.DOTTED
        assert get_port_layout(IntfType.CPU).style is PortStyle.NONE


class TestDecodeFallback:
    """Test types without a layout and unknown type codes."""

    def test_known_type_without_layout(self):
        assert decode(0x76000042) == "Pseudowire66"
        assert decode(0x78000001) == "tunnelTap1"
        assert decode(0x76000000) == "Pseudowire"

    def test_unknown_type(self):
        assert decode(0x1C000005) == "UNKNOWN5"
        assert decode(0x1C000000) == "UNKNOWN"
        assert decode(0xFFFFFFFF) == "UNKNOWN33554431"

    def test_negative_input(self):
        assert decode(-1) == "UNKNOWN33554431"
        assert decode(-872415231) == "fwd1"

    @pytest.mark.parametrize("code", range(0x80))
    def test_never_fails(self, code):
        for port in (0, 1, 0x1FFFFFF):
            result = decode((code << 25) | port)
            assert isinstance(result, str)
            assert result


class TestDescribe:
    """Test describe() structured output."""

    def test_ethernet(self, ethernet_intf_id):
        d = describe(ethernet_intf_id)
        assert d.intf_id == 0x000C0202
        assert d.intf_id_hex == "0x000c0202"
        assert d.type_code == 0
        assert d.type_name == "Ethernet"
        assert d.known_type is True
        assert d.raw_port == 0xC0202
        assert [(f.name, f.value) for f in d.fields] == [("slot", 3), ("module", 1), ("port", 2)]
        assert d.name == "Ethernet3/1/2"

    def test_unknown_type(self):
        d = describe(-1)
        assert d.intf_id == 0xFFFFFFFF
        assert d.type_code == 0x7F
        assert d.known_type is False
        assert d.type_name == "UNKNOWN"
        assert [f.name for f in d.fields] == ["number"]

    def test_no_port_fields(self):
        d = describe(0x0C000123)
        assert d.fields == []
        assert d.name == "Cpu"

    def test_model_dump(self):
        dumped = describe(0x02000064).model_dump()
        assert dumped["name"] == "Vlan100"
        assert dumped["fields"] == [{"name": "number", "value": 100}]


class TestIntfId:
    """Test the IntfId value wrapper."""

    def test_str(self, ethernet_intf_id):
        assert str(IntfId(ethernet_intf_id)) == "Ethernet3/1/2"

    def test_masks_to_32_bits(self):
        assert IntfId(-1).value == 0xFFFFFFFF
        assert IntfId(-1) == IntfId(0xFFFFFFFF)
        assert int(IntfId(0x1_000C0202)) == 0x000C0202

    def test_properties(self):
        intf = IntfId(0x1A000005)
        assert intf.type is IntfType.MLAG
        assert intf.type_code == 0x0D
        assert intf.type_name == "mlag"
        assert intf.raw_port == 5
        assert intf.port_fields == (5,)
        assert intf.port == "5"

    def test_unknown_type_is_none(self):
        intf = IntfId(0x1C000005)
        assert intf.type is None
        assert intf.type_name == "UNKNOWN"

    def test_immutable(self):
        intf = IntfId(1)
        with pytest.raises(AttributeError):
            intf.value = 2

    def test_hashable(self):
        assert len({IntfId(1), IntfId(1), IntfId(2)}) == 2

    def test_describe(self):
        assert IntfId(0xCC000000).describe().name == "fwd0"
