"""Pydantic models for the HTTP API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from laundry_tracker.domain.machines import Machine, MachinePatch, MachineStatus


class ApiModel(BaseModel):
    """Base model using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionRequest(ApiModel):
    """Body carrying only a session id."""

    session_id: str | None = None


class UpdateRequest(ApiModel):
    """Body for a partial machine update."""

    session_id: str | None = None
    data: MachinePatch | None = None


class RemoveBackgroundRequest(ApiModel):
    """Body carrying an encoded image data URL."""

    image: str | None = None


class MachineView(ApiModel):
    """Machine state as exposed to clients."""

    id: int
    status: MachineStatus
    occupant_id: str | None
    image_url: str | None
    result_url: str | None
    start_time: int | None

    @classmethod
    def from_machine(cls, machine: Machine) -> "MachineView":
        return cls(
            id=machine.id,
            status=machine.status,
            occupant_id=machine.occupant_id,
            image_url=machine.image_url,
            result_url=machine.result_url,
            start_time=machine.start_time,
        )


class StatusResponse(ApiModel):
    machines: list[MachineView]


class SuccessResponse(ApiModel):
    success: bool = True


class ClaimResponse(SuccessResponse):
    machine_id: int


class MachineResponse(SuccessResponse):
    machine: MachineView


class ImageResponse(SuccessResponse):
    image: str


class ErrorResponse(ApiModel):
    success: bool = False
    error: str
