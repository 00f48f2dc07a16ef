from fastapi import APIRouter, Depends

from studious.api.dependencies import get_connection_manager, get_timer
from studious.models.timer import TimerDuration, TimerState
from studious.services.connection_manager import ConnectionManager
from studious.services.timer import CountdownTimer

router = APIRouter(prefix="/timer", tags=["timer"])


async def _publish(timer: CountdownTimer, manager: ConnectionManager) -> TimerState:
    state = timer.state()
    await manager.broadcast({"type": "timer_state", "payload": state.model_dump()})
    return state


@router.get("", response_model=TimerState)
async def get_timer_state(timer: CountdownTimer = Depends(get_timer)):
    return timer.state()


@router.put("", response_model=TimerState)
async def set_timer_duration(
    duration: TimerDuration,
    timer: CountdownTimer = Depends(get_timer),
    manager: ConnectionManager = Depends(get_connection_manager),
):
    """Set hours/minutes/seconds; the remaining time follows the new duration"""
    timer.set_duration(duration.hours, duration.minutes, duration.seconds)
    return await _publish(timer, manager)


@router.post("/start", response_model=TimerState)
async def start_timer(
    timer: CountdownTimer = Depends(get_timer),
    manager: ConnectionManager = Depends(get_connection_manager),
):
    timer.start()
    return await _publish(timer, manager)


@router.post("/pause", response_model=TimerState)
async def pause_timer(
    timer: CountdownTimer = Depends(get_timer),
    manager: ConnectionManager = Depends(get_connection_manager),
):
    timer.pause()
    return await _publish(timer, manager)


@router.post("/toggle", response_model=TimerState)
async def toggle_timer(
    timer: CountdownTimer = Depends(get_timer),
    manager: ConnectionManager = Depends(get_connection_manager),
):
    timer.toggle()
    return await _publish(timer, manager)


@router.post("/reset", response_model=TimerState)
async def reset_timer(
    timer: CountdownTimer = Depends(get_timer),
    manager: ConnectionManager = Depends(get_connection_manager),
):
    timer.reset()
    return await _publish(timer, manager)
