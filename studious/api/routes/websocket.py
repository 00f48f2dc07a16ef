from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError
import json
import logging

from studious.api.dependencies import get_ws_manager, get_ws_timer
from studious.models.timer import TimerDuration
from studious.services.connection_manager import ConnectionManager
from studious.services.timer import CountdownTimer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.websocket("/ws/timer")
async def timer_websocket(
    websocket: WebSocket,
    timer: CountdownTimer = Depends(get_ws_timer),
    manager: ConnectionManager = Depends(get_ws_manager),
):
    """
    Live timer channel: the current state is pushed on connect and after
    every tick or control message.
    """
    await websocket.accept()
    manager.connect(websocket)
    await manager.send_personal_message(_state_message(timer), websocket)

    try:
        async for message_data in websocket.iter_text():
            try:
                message = json.loads(message_data)
                if not isinstance(message, dict):
                    logger.error(f"Timer message is not an object: {message_data[:100]}")
                    await manager.send_personal_message(
                        {"type": "error", "payload": {"message": "Message must be a JSON object"}}, websocket
                    )
                    continue

                message_type = message.get("type")
                payload = message.get("payload") or {}
                if not isinstance(payload, dict):
                    logger.error(f"Timer payload is not an object for type={message_type}")
                    await manager.send_personal_message(
                        {"type": "error", "payload": {"message": "Invalid timer payload"}}, websocket
                    )
                    continue

                logger.debug(f"Received timer message type={message_type}")

                if message_type == "start":
                    timer.start()
                elif message_type == "pause":
                    timer.pause()
                elif message_type == "toggle":
                    timer.toggle()
                elif message_type == "reset":
                    timer.reset()
                elif message_type == "set":
                    duration = TimerDuration(**payload)
                    timer.set_duration(duration.hours, duration.minutes, duration.seconds)
                elif message_type == "get_state":
                    await manager.send_personal_message(_state_message(timer), websocket)
                    continue
                else:
                    logger.warning(f"Unknown message type: {message_type}")
                    await manager.send_personal_message(
                        {"type": "error", "payload": {"message": f"Unknown message type: {message_type}"}},
                        websocket,
                    )
                    continue

                await manager.broadcast(_state_message(timer))

            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON: {e}")
                await manager.send_personal_message(
                    {"type": "error", "payload": {"message": "Invalid JSON"}}, websocket
                )
            except (ValidationError, TypeError) as e:
                logger.error(f"Invalid timer payload: {e}")
                await manager.send_personal_message(
                    {"type": "error", "payload": {"message": "Invalid timer payload"}}, websocket
                )

    except WebSocketDisconnect:
        logger.info("Timer WebSocket disconnected")
    except Exception as e:
        logger.error(f"Timer WebSocket error: {e}")
    finally:
        manager.disconnect(websocket)


def _state_message(timer: CountdownTimer) -> dict:
    return {"type": "timer_state", "payload": timer.state().model_dump()}
