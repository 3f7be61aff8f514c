"""Wake-on-LAN (WOL) implementation — MAC parsing, magic packet, UDP broadcast."""

from __future__ import annotations

import logging
import re
import socket

logger = logging.getLogger(__name__)

DEFAULT_BROADCAST = "255.255.255.255"
DEFAULT_PORT = 9
MAC_LENGTH = 6
MAGIC_PACKET_SIZE = 6 + MAC_LENGTH * 16  # 102 bytes

# Six hex pairs, one separator style throughout (backreference)
_MAC_RE = re.compile(r"[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}")


class WolError(Exception):
    """Base class for Wake-on-LAN failures."""


class ParseError(WolError, ValueError):
    """Malformed MAC address text — caller error."""


class NetworkError(WolError, ConnectionError):
    """The magic packet could not be handed to the local network stack."""


def parse_mac(text: str) -> bytes:
    """
    Parse a textual MAC address into 6 raw octets.

    Args:
        text: MAC address as "AA:BB:CC:DD:EE:FF" or "aa-bb-cc-dd-ee-ff"

    Raises:
        ParseError: wrong group count, non-hex group, or mixed separators
    """
    if not isinstance(text, str) or _MAC_RE.fullmatch(text) is None:
        raise ParseError(f"Invalid MAC address: {text!r}")
    return bytes.fromhex(text.replace(text[2], ""))


def format_mac(octets: bytes, sep: str = ":") -> str:
    """Format 6 octets as upper-case hex pairs."""
    if len(octets) != MAC_LENGTH:
        raise ParseError(f"MAC address must be {MAC_LENGTH} bytes, got {len(octets)}")
    return sep.join(f"{b:02X}" for b in octets)


def normalize_mac(text: str) -> str:
    """Return the canonical "AA:BB:CC:DD:EE:FF" form of a MAC string."""
    return format_mac(parse_mac(text))


def build_magic_packet(octets: bytes) -> bytes:
    """Magic packet: 6x 0xFF + 16x MAC address."""
    if len(octets) != MAC_LENGTH:
        raise ParseError(f"MAC address must be {MAC_LENGTH} bytes, got {len(octets)}")
    return b"\xff" * 6 + bytes(octets) * 16


def send_wol(
    mac_address: str,
    broadcast: str = DEFAULT_BROADCAST,
    port: int = DEFAULT_PORT,
) -> bytes:
    """
    Send a Wake-on-LAN magic packet.

    Fire-and-forget: success means the datagram was handed to the local
    stack, not that the target woke up.

    Args:
        mac_address: MAC address in format "AA:BB:CC:DD:EE:FF" or "AA-BB-CC-DD-EE-FF"
        broadcast: Broadcast address (default: 255.255.255.255)
        port: UDP port (default: 9)

    Returns:
        The 102-byte packet that was sent.

    Raises:
        ParseError: malformed MAC address (no socket is opened)
        NetworkError: socket could not be opened or the send failed
    """
    packet = build_magic_packet(parse_mac(mac_address))

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sent = sock.sendto(packet, (broadcast, port))
    except OSError as e:
        logger.warning("WoL send to %s via %s:%s failed: %s", mac_address, broadcast, port, e)
        raise NetworkError(f"Failed to send WoL packet: {e}") from e

    if sent != len(packet):
        raise NetworkError(f"Short write: {sent} of {len(packet)} bytes sent")

    logger.info("WoL magic packet sent to %s via %s:%s", mac_address, broadcast, port)
    return packet
