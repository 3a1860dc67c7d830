"""Decode Arista EOS internal interface IDs into interface names."""

from eosintf.decode import (
    IntfId,
    decode,
    describe,
    port_fields,
    port_suffix,
    raw_port,
    type_code,
)
from eosintf.exceptions import EosIntfError, InvalidIntfIdError
from eosintf.models import DecodedIntf, PortFieldValue
from eosintf.parse import parse_intf_id
from eosintf.types import UNKNOWN_TYPE_NAME, IntfType, iter_type_names, type_name

__version__ = "0.1.0"

__all__ = [
    "UNKNOWN_TYPE_NAME",
    "DecodedIntf",
    "EosIntfError",
    "IntfId",
    "IntfType",
    "InvalidIntfIdError",
    "PortFieldValue",
    "decode",
    "describe",
    "iter_type_names",
    "parse_intf_id",
    "port_fields",
    "port_suffix",
    "raw_port",
    "type_code",
    "type_name",
]
