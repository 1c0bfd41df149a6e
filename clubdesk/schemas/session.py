"""Rental session schemas.

Duration and Cost arrive in several shapes; see DurationValue and CostValue
in clubdesk.schemas.base for what each accepts. A numeric Cost string is
converted to a number during validation.
"""

from pydantic import Field, StrictInt

from clubdesk.schemas.base import (
    CostValue,
    DateString,
    DurationValue,
    Record,
    checked,
    omit_fields,
    partial_model,
    positive,
    required_str,
)

PcRef = checked(StrictInt, (positive, "PC ID must be positive"))
ClientPhone = required_str("Client phone is required")


class SessionPC(Record):
    """PC embedded in a session record (read-only)."""

    pc_id: int = Field(..., description="PC ID")
    cpu: str = Field(..., description="Processor model")
    ram: int = Field(..., description="RAM, GB")
    videocard: str = Field(..., description="Video card model")
    hard_disc: str = Field(..., description="Storage")
    usb_amout: int = Field(..., description="Number of USB ports")
    os: str = Field(..., description="Operating system")
    buy_date: str = Field(..., description="Purchase date")


class Session(Record):
    """Session as returned by the backend. session_id is assigned by the server."""

    session_id: int = Field(..., description="Session ID")
    pc_id: PcRef = Field(..., description="Rented PC")
    client_phone: ClientPhone = Field(..., description="Client identifier")
    Time: DateString = Field(..., description="Start time")
    Duration: DurationValue = Field(..., description="Rental duration")
    Cost: CostValue = Field(..., description="Rental cost")
    pc: SessionPC | None = Field(None, description="Rented PC details")


SessionCreate = omit_fields(Session, "session_id", "pc", name="SessionCreate")
SessionUpdate = partial_model(SessionCreate, name="SessionUpdate")
