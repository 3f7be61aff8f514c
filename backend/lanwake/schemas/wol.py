"""Wake-on-LAN schemas."""

from pydantic import BaseModel


class WolResponse(BaseModel):
    """Result of a WoL send — the packet left this host, nothing more."""
    status: str = "WOL packet sent"
    mac: str
    broadcast: str
    port: int
    dry_run: bool = False
