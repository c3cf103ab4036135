"""Laundry machine occupancy endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from laundry_tracker.api.models import (
    ClaimResponse,
    MachineResponse,
    MachineView,
    SessionRequest,
    StatusResponse,
    SuccessResponse,
    UpdateRequest,
)
from laundry_tracker.domain.errors import SessionNotBoundError, ValidationError

if TYPE_CHECKING:
    from laundry_tracker.containers import AppContainer

router = APIRouter(prefix="/api/laundry", tags=["laundry"])


@router.get("/status")
async def machine_status(request: Request) -> StatusResponse:
    """Return the state of every machine."""
    container: AppContainer = request.app.state.container
    machines = container.occupancy_store.list_all()
    return StatusResponse(machines=[MachineView.from_machine(m) for m in machines])


@router.get("/machines/{machine_id}")
async def machine_detail(machine_id: int, request: Request) -> MachineResponse:
    """Return a single machine."""
    container: AppContainer = request.app.state.container
    machine = container.occupancy_store.get(machine_id)
    return MachineResponse(machine=MachineView.from_machine(machine))


@router.get("/sessions/{session_id}")
async def session_machine(session_id: str, request: Request) -> MachineResponse:
    """Return the machine held by a session, so a reloaded page can resume."""
    container: AppContainer = request.app.state.container
    machine = container.occupancy_store.find_by_session(session_id)
    if machine is None:
        raise SessionNotBoundError("Machine not found for session")
    return MachineResponse(machine=MachineView.from_machine(machine))


@router.post("/claim")
async def claim_machine(payload: SessionRequest, request: Request) -> ClaimResponse:
    """Bind the session to the first idle machine."""
    if not payload.session_id:
        raise ValidationError("Session ID required")
    container: AppContainer = request.app.state.container
    machine_id = container.occupancy_store.claim(payload.session_id)
    return ClaimResponse(machine_id=machine_id)


@router.post("/update")
async def update_machine(payload: UpdateRequest, request: Request) -> MachineResponse:
    """Apply a partial update to the machine held by the session."""
    if not payload.session_id or payload.data is None:
        raise ValidationError("Missing parameters")
    container: AppContainer = request.app.state.container
    machine = container.occupancy_store.update(payload.session_id, payload.data)
    return MachineResponse(machine=MachineView.from_machine(machine))


@router.post("/leave")
async def leave_machine(payload: SessionRequest, request: Request) -> SuccessResponse:
    """Release whatever machine the session holds."""
    if payload.session_id:
        container: AppContainer = request.app.state.container
        container.occupancy_store.leave(payload.session_id)
    return SuccessResponse()
