"""PC schemas."""

from pydantic import Field, StrictInt

from clubdesk.schemas.base import (
    DateString,
    DurationValue,
    RawCost,
    Record,
    checked,
    non_negative,
    omit_fields,
    partial_model,
    positive,
    required_str,
)

Cpu = required_str("CPU is required")
Videocard = required_str("Videocard is required")
HardDisc = required_str("Hard disc is required")
Os = required_str("OS is required")
Ram = checked(StrictInt, (positive, "RAM must be a positive integer"))
UsbAmount = checked(StrictInt, (non_negative, "USB amount must be non-negative"))


class PCSessionSummary(Record):
    """Session as embedded in a PC record (read-only)."""

    session_id: int = Field(..., description="Session ID")
    Time: str = Field(..., description="Start time")
    Duration: DurationValue = Field(..., description="Rental duration")
    Cost: RawCost = Field(..., description="Cost as reported by the backend")
    client_phone: str = Field(..., description="Client identifier")


class PC(Record):
    """PC as returned by the backend. pc_id is assigned by the server."""

    pc_id: int = Field(..., description="PC ID")
    cpu: Cpu = Field(..., description="Processor model")
    ram: Ram = Field(..., description="RAM, GB")
    videocard: Videocard = Field(..., description="Video card model")
    hard_disc: HardDisc = Field(..., description="Storage")
    usb_amout: UsbAmount = Field(..., description="Number of USB ports")
    os: Os = Field(..., description="Operating system")
    buy_date: DateString = Field(..., description="Purchase date")
    sessions: list[PCSessionSummary] | None = Field(None, description="Sessions on this PC")


PCCreate = omit_fields(PC, "pc_id", "sessions", name="PCCreate")
PCUpdate = partial_model(PCCreate, name="PCUpdate")
