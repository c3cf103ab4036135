"""In-memory occupancy store for the laundry machines."""

import logging
import threading
from dataclasses import replace

from laundry_tracker.domain.errors import (
    InvalidTransitionError,
    MachineNotFoundError,
    MachinesFullError,
    SessionNotBoundError,
)
from laundry_tracker.domain.machines import (
    Machine,
    MachinePatch,
    MachineStatus,
    can_transition,
)

logger = logging.getLogger(__name__)

DEFAULT_MACHINE_COUNT = 3


class OccupancyStore:
    """Source of truth for which session holds which machine.

    Each operation runs under a single lock, so a check-then-set sequence such
    as ``claim`` is atomic even when handlers run on worker threads. Callers
    receive snapshots; state only changes through the store's operations.
    """

    def __init__(
        self,
        machine_count: int = DEFAULT_MACHINE_COUNT,
        strict_transitions: bool = True,
    ) -> None:
        if machine_count < 1:
            raise ValueError("machine_count must be positive")
        self._machines = [Machine(id=index) for index in range(1, machine_count + 1)]
        self._strict_transitions = strict_transitions
        self._lock = threading.Lock()

    def list_all(self) -> list[Machine]:
        """Return every machine in id order."""
        with self._lock:
            return [replace(machine) for machine in self._machines]

    def get(self, machine_id: int) -> Machine:
        """Return a machine by id."""
        with self._lock:
            for machine in self._machines:
                if machine.id == machine_id:
                    return replace(machine)
        raise MachineNotFoundError("Machine not found")

    def find_by_session(self, session_id: str) -> Machine | None:
        """Return the machine bound to a session, if any."""
        with self._lock:
            machine = self._bound_machine(session_id)
            return replace(machine) if machine else None

    def claim(self, session_id: str) -> int:
        """Bind the session to a machine and return the machine id.

        A session that already holds a machine gets the same id back.
        """
        with self._lock:
            existing = self._bound_machine(session_id)
            if existing:
                return existing.id
            for machine in self._machines:
                if machine.is_available:
                    machine.occupant_id = session_id
                    machine.status = MachineStatus.OCCUPIED
                    logger.info("Machine %s claimed by %s", machine.id, session_id)
                    return machine.id
        logger.warning("All machines occupied, rejected %s", session_id)
        raise MachinesFullError("All machines occupied")

    def update(self, session_id: str, patch: MachinePatch) -> Machine:
        """Merge the supplied fields into the machine bound to the session."""
        changes = patch.changes()
        with self._lock:
            machine = self._bound_machine(session_id)
            if machine is None:
                raise SessionNotBoundError("Machine not found for session")
            target = changes.get("status")
            if (
                self._strict_transitions
                and target is not None
                and not can_transition(machine.status, target)
            ):
                raise InvalidTransitionError(
                    f"Cannot change status from {machine.status} to {target}"
                )
            for name, value in changes.items():
                setattr(machine, name, value)
            if target is not None:
                logger.info(
                    "Machine %s is %s for %s", machine.id, machine.status, session_id
                )
            return replace(machine)

    def leave(self, session_id: str) -> None:
        """Release the machine bound to the session; no-op when none is."""
        with self._lock:
            machine = self._bound_machine(session_id)
            if machine is None:
                return
            machine.release()
        logger.info("Machine %s released by %s", machine.id, session_id)

    def _bound_machine(self, session_id: str) -> Machine | None:
        for machine in self._machines:
            if machine.occupant_id == session_id:
                return machine
        return None
