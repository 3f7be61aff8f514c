"""Computer registry schemas."""

from pydantic import BaseModel, Field, field_validator

from lanwake.utils.wol import normalize_mac


class ComputerCreate(BaseModel):
    """Register a computer."""
    name: str = Field(min_length=1, max_length=200)
    mac: str

    @field_validator("mac")
    @classmethod
    def validate_mac(cls, value: str) -> str:
        # ParseError is a ValueError, so pydantic reports it as a 422
        return normalize_mac(value)


class ComputerOut(BaseModel):
    """A registered computer."""
    id: int
    name: str
    mac: str


class StatusResponse(BaseModel):
    status: str
