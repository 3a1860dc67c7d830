"""Decoded interface ID models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PortFieldValue(BaseModel):
    """One decoded sub-field of the port number."""
    model_config = {"frozen": True}

    name: str = Field(description="Field name: slot, module, port or number")
    value: int = Field(ge=0, description="Decoded field value")


class DecodedIntf(BaseModel):
    """Structured decode of an EOS interface ID."""
    model_config = {"frozen": True}

    intf_id: int = Field(ge=0, le=0xFFFFFFFF, description="Interface ID masked to 32 bits")
    type_code: int = Field(ge=0, le=0x7F, description="Top 7 bits of the ID")
    type_name: str = Field(description="EOS display name, UNKNOWN for unlisted codes")
    known_type: bool = Field(default=True, description="Whether the type code is in the name table")
    raw_port: int = Field(ge=0, le=0x1FFFFFF, description="Bottom 25 bits of the ID")
    fields: list[PortFieldValue] = Field(default_factory=list)
    name: str = Field(description="Rendered interface name")

    @property
    def intf_id_hex(self) -> str:
        return f"0x{self.intf_id:08x}"
