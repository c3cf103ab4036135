"""Domain models for laundry machines."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MachineStatus(StrEnum):
    """Lifecycle label of a machine."""

    IDLE = "idle"
    OCCUPIED = "occupied"
    WASHING = "washing"
    DONE = "done"


# Successors reachable through a patch. idle <-> occupied only moves via claim/leave.
ALLOWED_TRANSITIONS: dict[MachineStatus, frozenset[MachineStatus]] = {
    MachineStatus.IDLE: frozenset(),
    MachineStatus.OCCUPIED: frozenset({MachineStatus.WASHING}),
    MachineStatus.WASHING: frozenset({MachineStatus.DONE}),
    MachineStatus.DONE: frozenset(),
}


def can_transition(current: MachineStatus, target: MachineStatus) -> bool:
    """Return true when a patch may move a machine from current to target."""
    return target == current or target in ALLOWED_TRANSITIONS[current]


@dataclass
class Machine:
    """One washer/dryer slot and the occupancy currently bound to it."""

    id: int
    status: MachineStatus = MachineStatus.IDLE
    occupant_id: str | None = None
    image_url: str | None = None
    result_url: str | None = None
    start_time: int | None = None

    @property
    def is_available(self) -> bool:
        return self.status == MachineStatus.IDLE and self.occupant_id is None

    def release(self) -> None:
        """Reset the machine to the unoccupied baseline."""
        self.status = MachineStatus.IDLE
        self.occupant_id = None
        self.image_url = None
        self.result_url = None
        self.start_time = None


class MachinePatch(BaseModel):
    """Partial update for the occupancy metadata of a machine.

    Only fields present in the input are applied, so an explicit ``null``
    clears a field while an omitted key leaves it untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    status: MachineStatus | None = None
    image_url: str | None = None
    result_url: str | None = None
    start_time: int | None = None

    def changes(self) -> dict[str, object]:
        """Return the fields supplied by the caller."""
        values = {name: getattr(self, name) for name in self.model_fields_set}
        if values.get("status") is None:
            values.pop("status", None)
        return values
