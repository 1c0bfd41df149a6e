"""Entity schemas: full (read), Create and Update variants per entity."""

from typing import NamedTuple

from clubdesk.schemas.base import (
    CostParts,
    CostValue,
    DurationParts,
    DurationValue,
    Record,
    omit_fields,
    partial_model,
)
from clubdesk.schemas.client import Client, ClientCreate, ClientSessionSummary, ClientUpdate
from clubdesk.schemas.pc import PC, PCCreate, PCSessionSummary, PCUpdate
from clubdesk.schemas.session import Session, SessionCreate, SessionPC, SessionUpdate


class EntitySchemas(NamedTuple):
    """Schema set of one entity."""

    full: type[Record]
    create: type[Record]
    update: type[Record]
    id_field: str


ENTITY_SCHEMAS: dict[str, EntitySchemas] = {
    "client": EntitySchemas(Client, ClientCreate, ClientUpdate, "phone"),
    "pc": EntitySchemas(PC, PCCreate, PCUpdate, "pc_id"),
    "session": EntitySchemas(Session, SessionCreate, SessionUpdate, "session_id"),
}

__all__ = [
    "ENTITY_SCHEMAS",
    "PC",
    "Client",
    "ClientCreate",
    "ClientSessionSummary",
    "ClientUpdate",
    "CostParts",
    "CostValue",
    "DurationParts",
    "DurationValue",
    "EntitySchemas",
    "PCCreate",
    "PCSessionSummary",
    "PCUpdate",
    "Record",
    "Session",
    "SessionCreate",
    "SessionPC",
    "SessionUpdate",
    "omit_fields",
    "partial_model",
]
