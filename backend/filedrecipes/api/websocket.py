import asyncio
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from ..core.repository import RecipeRepository
from .dependencies import get_repository
from .recipes import status_of

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket, repository: RecipeRepository = Depends(get_repository)):
    """
    Pushes a `recipes_changed` message for every change notification of the
    repository. The first message is the current status.
    """
    loop = asyncio.get_running_loop()
    changes: asyncio.Queue = asyncio.Queue()

    def on_change(repo: RecipeRepository) -> None:
        # Repository listeners run on whichever thread mutated it
        loop.call_soon_threadsafe(changes.put_nowait, status_of(repo))

    repository.subscribe(on_change)
    try:
        await ws.accept()
        log.info("WebSocket client subscribed to recipe changes")
        await ws.send_json({"type": "recipes_status", **status_of(repository).model_dump()})

        async def pump_changes():
            while True:
                status = await changes.get()
                await ws.send_json({"type": "recipes_changed", **status.model_dump()})

        async def wait_for_disconnect():
            # Incoming messages are ignored; receive raises on disconnect
            while True:
                await ws.receive_text()

        tasks = [asyncio.create_task(pump_changes()), asyncio.create_task(wait_for_disconnect())]
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        for task in done:
            task.result()
    except WebSocketDisconnect:
        log.info("WebSocket client disconnected")
    finally:
        repository.unsubscribe(on_change)
