"""
Pydantic models for the structure recovered from an IOS-style configuration.
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigLine(BaseModel):
    """A single trimmed configuration line with its 1-indexed position."""
    model_config = ConfigDict(frozen=True)

    number: int
    text: str

    @property
    def location(self) -> str:
        return f"Line {self.number}"


class InterfaceStatus(str, enum.Enum):
    """Administrative state of an interface block."""
    ACTIVE = "active"
    SHUTDOWN = "shutdown"
    UNKNOWN = "unknown"


class Interface(BaseModel):
    """An `interface <name>` block."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    ip_address: Optional[str] = Field(default=None, alias="ipAddress")
    status: InterfaceStatus = InterfaceStatus.UNKNOWN
    acl: Optional[str] = None
    line_number: int = Field(alias="lineNumber")


class VTYLine(BaseModel):
    """A `line vty <range>` block governing remote management sessions."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range: str
    password: Optional[str] = None
    transport: List[str] = Field(default_factory=list)
    access_class: Optional[str] = Field(default=None, alias="accessClass")
    line_number: int = Field(alias="lineNumber")


class ConfigSummary(BaseModel):
    """Counts of the entities recovered by the parser."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_interfaces: int = Field(default=0, alias="totalInterfaces")
    total_vty_lines: int = Field(default=0, alias="totalVTYLines")
    total_acls: int = Field(default=0, alias="totalACLs")


class ParsedConfig(BaseModel):
    """Structured view of one configuration document."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    interfaces: List[Interface] = Field(default_factory=list)
    vty_lines: List[VTYLine] = Field(default_factory=list, alias="vtyLines")
    acls: List[str] = Field(default_factory=list)

    @property
    def summary(self) -> ConfigSummary:
        return ConfigSummary(
            total_interfaces=len(self.interfaces),
            total_vty_lines=len(self.vty_lines),
            total_acls=len(self.acls),
        )
