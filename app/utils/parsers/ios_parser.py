"""
Cisco IOS style configuration parser.

Recovers interface blocks, VTY line blocks and ACL lines from a raw
configuration dump in a single forward pass. Only a handful of prefixes are
recognized; everything else is ignored.
"""
import enum
import logging
from typing import Any, Dict, List

from app.utils.parsers.config_models import (
    ConfigLine,
    Interface,
    InterfaceStatus,
    ParsedConfig,
    VTYLine,
)

logger = logging.getLogger(__name__)

BLOCK_TERMINATOR = "!"


class ParseState(str, enum.Enum):
    """Which kind of block the parser is currently inside."""
    NONE = "none"
    IN_INTERFACE = "in_interface"
    IN_VTY = "in_vty"


def split_config_lines(config_content: str) -> List[ConfigLine]:
    """Split raw configuration text into trimmed, 1-indexed lines."""
    return [
        ConfigLine(number=index, text=raw.strip())
        for index, raw in enumerate((config_content or "").split("\n"), start=1)
    ]


def _token(parts: List[str], index: int) -> str:
    return parts[index] if len(parts) > index else ""


class IOSConfigParser:
    """Parser for Cisco IOS style configuration text."""

    def __init__(self, config_content: str):
        """
        Initialize parser with config content.

        Args:
            config_content: The configuration file content as string
        """
        self.config_content = config_content or ""
        self.lines = split_config_lines(self.config_content)

    def parse(self) -> ParsedConfig:
        """
        Build the structured configuration model.

        A block opened by `interface ...` or `line vty ...` stays open until
        a `!` line, the next block header, or the end of input.

        Returns:
            ParsedConfig with interfaces, VTY lines and ACL lines in file order
        """
        interfaces: List[Interface] = []
        vty_lines: List[VTYLine] = []
        acls: List[str] = []

        state = ParseState.NONE
        block: Dict[str, Any] = {}

        for line in self.lines:
            text = line.text

            if text == BLOCK_TERMINATOR:
                self._close_block(state, block, interfaces, vty_lines)
                state, block = ParseState.NONE, {}
                continue

            if text.startswith("interface "):
                self._close_block(state, block, interfaces, vty_lines)
                state = ParseState.IN_INTERFACE
                block = {
                    "name": text[len("interface "):].strip(),
                    "line_number": line.number,
                }
            elif text.startswith("line vty"):
                self._close_block(state, block, interfaces, vty_lines)
                state = ParseState.IN_VTY
                block = {
                    "range": text[len("line vty"):].strip(),
                    "line_number": line.number,
                }
            elif state is ParseState.IN_INTERFACE:
                self._apply_interface_directive(block, text)
            elif state is ParseState.IN_VTY:
                self._apply_vty_directive(block, text)

            if text.startswith("access-list ") or text.startswith("ip access-list"):
                acls.append(text)

        self._close_block(state, block, interfaces, vty_lines)

        parsed = ParsedConfig(interfaces=interfaces, vty_lines=vty_lines, acls=acls)
        logger.debug(
            f"Parsed {len(self.lines)} lines: interfaces={len(interfaces)}, "
            f"vty_lines={len(vty_lines)}, acls={len(acls)}"
        )
        return parsed

    @staticmethod
    def _apply_interface_directive(block: Dict[str, Any], text: str) -> None:
        if text.startswith("ip address"):
            block["ip_address"] = _token(text.split(), 2)
        elif text == "no shutdown":
            block["status"] = InterfaceStatus.ACTIVE
        elif text == "shutdown":
            block["status"] = InterfaceStatus.SHUTDOWN
        elif "ip access-group" in text:
            # ip access-group <acl> in|out
            block["acl"] = _token(text.split(), 2)

    @staticmethod
    def _apply_vty_directive(block: Dict[str, Any], text: str) -> None:
        if text == "password" or text.startswith("password "):
            block["password"] = text[len("password"):].strip()
        elif "transport input" in text:
            block["transport"] = text.split("transport input", 1)[1].split()
        elif "access-class" in text:
            # access-class <acl> in
            block["access_class"] = _token(text.split(), 1)

    @staticmethod
    def _close_block(
        state: ParseState,
        block: Dict[str, Any],
        interfaces: List[Interface],
        vty_lines: List[VTYLine],
    ) -> None:
        if state is ParseState.IN_INTERFACE:
            interfaces.append(Interface(**block))
        elif state is ParseState.IN_VTY:
            vty_lines.append(VTYLine(**block))


def parse_config(config_content: str) -> ParsedConfig:
    """Parse configuration text into a ParsedConfig."""
    return IOSConfigParser(config_content).parse()
