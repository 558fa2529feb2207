"""Raw departure wire record."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

# 9999-12-30T23:59:59.999Z; one day below datetime.max so any zone offset still fits
MAX_EPOCH_MILLIS = 253402214399999


class RawDeparture(BaseModel):
    """A single element of the MVG departure endpoint's JSON array.

    Wire names are camelCase (``plannedDepartureTime``); attributes are
    snake_case. Unknown fields are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    planned_departure_time: int = Field(
        ge=0, le=MAX_EPOCH_MILLIS, description="Planned departure, epoch milliseconds"
    )
    realtime_departure_time: int = Field(
        ge=0, le=MAX_EPOCH_MILLIS, description="Realtime departure, epoch milliseconds"
    )
    realtime: bool
    delay_in_minutes: int = 0
    cancelled: bool
    label: str
    destination: str

    # Accepted but not used for ordering. Absent or odd-shaped values become None.
    transport_type: str | None = None
    platform: int | None = None
    occupancy: str | None = None
    messages: list[str] | None = None
    diva_id: str | None = None
    network: str | None = None
    train_type: str | None = None
    sev: bool | None = None
    banner_hash: str | None = None
    stop_point_global_id: str | None = None

    @field_validator("delay_in_minutes", mode="before")
    @classmethod
    def default_null_delay(cls, v: Any) -> Any:
        """Treat an explicit null delay like a missing one."""
        return 0 if v is None else v

    @field_validator(
        "transport_type",
        "platform",
        "occupancy",
        "messages",
        "diva_id",
        "network",
        "train_type",
        "sev",
        "banner_hash",
        "stop_point_global_id",
        mode="wrap",
    )
    @classmethod
    def tolerate_unexpected_shape(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        """Drop an optional field instead of rejecting the whole record."""
        try:
            return handler(v)
        except ValidationError:
            return None
