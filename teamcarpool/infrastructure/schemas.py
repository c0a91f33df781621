"""
Record schemas. Pydantic only in infrastructure layer.
Collaborator records are camelCase (needsChildSeat, availableSeatsTotal...); snake_case is accepted too.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PlayerSchema(RecordSchema):
    id: str
    name: str = ""
    team_name: str = ""
    grade: str = ""
    needs_child_seat: bool = False
    group_ids: list[str] = Field(default_factory=list)


class DriverSchema(RecordSchema):
    id: str
    name: str = ""
    has_license: bool = True
    max_seats_total: int = Field(default=4, ge=0)
    max_child_seats: int = Field(default=0, ge=0)
    notes: str = ""


class EligibilitySchema(RecordSchema):
    driver_id: str
    player_id: str
    allowed: bool = True
    preference: Literal["none", "prefer", "always"] = "none"


class EventSchema(RecordSchema):
    id: str
    name: str = ""
    date_time: str = ""
    location_name: str = ""
    location_address: str = ""
    notes: str = ""


class AttendanceSchema(RecordSchema):
    event_id: str
    player_id: str
    is_going: bool = False
    needs_ride: bool = False


class EventDriverSchema(RecordSchema):
    event_id: str
    driver_id: str
    is_driving: bool = False
    direction: Literal["to", "from", "both"] = "both"
    available_seats_total: int | None = Field(default=None, ge=0)  # None -> máximo global del conductor
    available_child_seats: int | None = Field(default=None, ge=0)
    notes: str = ""


class AssignmentSchema(RecordSchema):
    id: str
    event_id: str
    driver_id: str  # "unassigned" si no tiene conductor
    player_id: str
    direction: Literal["to", "from", "both"] = "both"
