"""Roadmap Schemas — Pydantic request/response models with field-level validation.

Invariants:
    - Create and update share one body model per entity (PUT is a full replacement:
      omitted optional fields are written as NULL)
    - name is required and non-blank on every entity; displaySequence on areas and phases
    - Integer fields fit a PostgreSQL INTEGER column (0..INT4_MAX)
    - pct_weight / pct_complete within [0, 100]; finish never before start
    - Wire names follow the store: displaySequence, initialDuration, durationUnit

Design Decisions:
    - Aliases over camelCase attributes: Python side stays snake_case, clients keep
      the column casing they already send (populate_by_name accepts both)
    - Response models use serialization_alias so from_attributes reads ORM attribute
      names while the JSON keeps the store's casing
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# PostgreSQL INTEGER upper bound
INT4_MAX = 2_147_483_647


class _BodyBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class _ScheduleFields(BaseModel):
    """Planned/forecast dates and progress shared by phases and tasks."""
    planned_start: date | None = None
    planned_finish: date | None = None
    fore_act_start: date | None = None
    fore_act_finish: date | None = None
    pct_weight: float | None = Field(None, ge=0, le=100)
    pct_complete: float | None = Field(None, ge=0, le=100)

    @model_validator(mode="after")
    def finish_not_before_start(self):
        for start, finish in (
            ("planned_start", "planned_finish"),
            ("fore_act_start", "fore_act_finish"),
        ):
            s, f = getattr(self, start), getattr(self, finish)
            if s is not None and f is not None and f < s:
                raise ValueError(f"{finish} must not be before {start}")
        return self


# --- Requests -----------------------------------------------------------------

class TemplateIn(_BodyBase):
    """Roadmap template create/replace body."""


class AreaIn(_BodyBase):
    """Template area create/replace body."""
    display_sequence: int = Field(alias="displaySequence", ge=0, le=INT4_MAX)


class PhaseIn(_BodyBase, _ScheduleFields):
    """Template phase create/replace body."""
    display_sequence: int = Field(alias="displaySequence", ge=0, le=INT4_MAX)
    initial_duration: int | None = Field(
        None, alias="initialDuration", ge=0, le=INT4_MAX,
    )
    duration_unit: str | None = Field(None, alias="durationUnit", max_length=20)
    state: str | None = Field(None, max_length=50)


class TaskIn(_BodyBase, _ScheduleFields):
    """Template task create/replace body."""
    optional_flag: bool = False
    state: str | None = Field(None, max_length=50)
    status: str | None = Field(None, max_length=50)
    area_id: str | None = None
    phase_id: str | None = None


# --- Responses ----------------------------------------------------------------

class _RowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    cuid: str
    created_at: datetime
    modified_at: datetime
    name: str
    description: str | None = None


class TemplateOut(_RowOut):
    """Roadmap template row."""


class AreaOut(_RowOut):
    """Template area row."""
    parent_key: str
    display_sequence: int = Field(serialization_alias="displaySequence")


class _ScheduleOut(BaseModel):
    planned_start: date | None = None
    planned_finish: date | None = None
    fore_act_start: date | None = None
    fore_act_finish: date | None = None
    pct_weight: float | None = None
    pct_complete: float | None = None


class PhaseOut(_RowOut, _ScheduleOut):
    """Template phase row."""
    parent_key: str
    display_sequence: int = Field(serialization_alias="displaySequence")
    initial_duration: int | None = Field(None, serialization_alias="initialDuration")
    duration_unit: str | None = Field(None, serialization_alias="durationUnit")
    state: str | None = None


class TaskOut(_RowOut, _ScheduleOut):
    """Template task row."""
    parent_key: str
    optional_flag: bool
    state: str | None = None
    status: str | None = None
    area_id: str | None = None
    phase_id: str | None = None


class MessageOut(BaseModel):
    """Confirmation body for deletes."""
    message: str
