"""Client schemas.

The phone number is the client's identifier. It is entered once, on
creation, and cannot be changed through an update.
"""

from pydantic import Field

from clubdesk.schemas.base import (
    DateString,
    DurationValue,
    RawCost,
    Record,
    checked,
    matches,
    min_length,
    omit_fields,
    partial_model,
)

PHONE_PATTERN = r"[\d\s\-+()]+"

Phone = checked(
    str,
    (min_length(1), "Phone is required"),
    (matches(PHONE_PATTERN), "Phone must contain only numbers and valid characters"),
)

FullName = checked(
    str,
    (min_length(1), "Full name is required"),
    (min_length(2), "Name must be at least 2 characters"),
)


class ClientSessionSummary(Record):
    """Session as embedded in a client record (read-only)."""

    session_id: int = Field(..., description="Session ID")
    Time: str = Field(..., description="Start time")
    Duration: DurationValue = Field(..., description="Rental duration")
    Cost: RawCost = Field(..., description="Cost as reported by the backend")
    pc_id: int = Field(..., description="Rented PC")


class Client(Record):
    """Client as returned by the backend."""

    phone: Phone = Field(..., description="Phone number, the client identifier")
    full_name: FullName = Field(..., description="Full name")
    birth: DateString = Field(..., description="Birth date")
    sessions: list[ClientSessionSummary] | None = Field(None, description="Sessions of this client")


ClientCreate = omit_fields(Client, "sessions", name="ClientCreate")
ClientUpdate = partial_model(omit_fields(ClientCreate, "phone"), name="ClientUpdate")
