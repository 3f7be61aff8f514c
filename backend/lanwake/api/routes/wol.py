"""Wake-on-LAN routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from lanwake.config import settings
from lanwake.schemas.wol import WolResponse
from lanwake.utils.wol import (
    NetworkError,
    ParseError,
    build_magic_packet,
    format_mac,
    parse_mac,
    send_wol,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def wake(mac: str) -> WolResponse:
    """Send a magic packet to ``mac``, mapping WoL errors to HTTP errors."""
    broadcast, port = settings.wol_broadcast, settings.wol_port

    try:
        octets = parse_mac(mac)
        mac = format_mac(octets)
        if settings.dry_run:
            build_magic_packet(octets)
            logger.info("[DRY RUN] WoL packet (not sent): %s", mac)
        else:
            send_wol(mac, broadcast=broadcast, port=port)
    except ParseError as e:
        raise HTTPException(400, str(e))
    except NetworkError as e:
        raise HTTPException(500, str(e))

    return WolResponse(mac=mac, broadcast=broadcast, port=port, dry_run=settings.dry_run)


@router.post("/{mac}", response_model=WolResponse)
async def wake_on_lan(mac: str):
    """Broadcast a Wake-on-LAN magic packet for the given MAC address."""
    return wake(mac)
