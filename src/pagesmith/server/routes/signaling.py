"""WebRTC offer/answer relay over the in-memory SignalingRooms"""

import json
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from pagesmith.server.deps import get_rooms
from pagesmith.server.errors import guarded
from pagesmith.signaling import SignalingRooms


router = APIRouter(prefix="/.netlify/functions", tags=["signaling"])


def _is_name(value) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


@router.api_route("/signaling", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
@guarded
async def signaling(request: Request, room: Optional[str] = None, rooms: SignalingRooms = Depends(get_rooms)):
    if not room:
        return PlainTextResponse("Missing room parameter", status_code=400)

    if request.method == "GET":
        signals = rooms.get(room)
        if signals is None:
            return PlainTextResponse("Room not found", status_code=404)
        return JSONResponse(signals)

    if request.method == "POST":
        try:
            data = json.loads(await request.body())
        except ValueError:
            return PlainTextResponse("Invalid JSON body", status_code=400)
        if not isinstance(data, dict) or not all(data.get(k) for k in ("room", "type", "sdp")):
            return PlainTextResponse("Missing required fields", status_code=400)
        if not all(_is_name(data[k]) for k in ("room", "type")):
            return PlainTextResponse("Invalid room or type", status_code=400)
        # room ids arrive as strings in the query, so numeric ids are stored the same way
        room_id, signal_type = str(data["room"]), str(data["type"])
        rooms.put(room_id, signal_type, data["sdp"])
        return PlainTextResponse(f"{signal_type} stored for room {room_id}")

    return PlainTextResponse("Unsupported operation", status_code=400)
