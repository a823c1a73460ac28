"""FastAPI web service for parsing and composing geo URIs.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

HTTP clients ``POST /parse`` a URI and get the location back as JSON, or
``POST /compose`` a location and get the URI text back. ``GET /like``
runs the cheap scheme check only.

WebSocket clients connect to ``ws://<host>:8000/ws`` and send one geo URI
per text frame; each frame is answered with one JSON message, either
``type="location"`` or ``type="error"``.
"""

import asyncio
import logging

from fastapi import FastAPI, HTTPException, Query, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, Field

from geouri import (
    ComposerPolicy,
    GeoUri,
    GeoUriError,
    ParsePolicy,
    compose,
    like_geo_uri,
    parse_geo_uri,
)
from server.formatters import format_error, format_location, format_result_message

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 30.0


class ParseRequest(BaseModel):
    uri: str
    lowercase_label_text: bool = True


class ComposeRequest(BaseModel):
    latitude: float
    longitude: float
    altitude: float | None = None
    crs: str = "wgs84"
    uncertainty: float | None = Field(default=None, ge=0)
    parameters: dict[str, str] = Field(default_factory=dict)
    suppress_default_crs: bool = True
    percent_encode_values: bool = False


app = FastAPI(title="geouri")


@app.post("/parse")
def parse_endpoint(request: ParseRequest) -> dict:
    """Parse a geo URI into its location fields.

    Raises:
        HTTPException: 422 with the error code, message and position if the
            text is not a valid geo URI.
    """
    policy = ParsePolicy(lowercase_label_text=request.lowercase_label_text)
    result = parse_geo_uri(request.uri, policy)
    if result.uri is None:
        logger.info("Rejected geo URI %r: %s", request.uri, result.error)
        raise HTTPException(status_code=422, detail=format_error(result))
    return format_location(result.uri)


@app.get("/like")
def like_endpoint(uri: str = Query(...)) -> dict:
    return {"like_geo_uri": like_geo_uri(uri)}


@app.post("/compose")
def compose_endpoint(request: ComposeRequest) -> dict:
    """Compose a geo URI from location fields.

    Raises:
        HTTPException: 422 if a number cannot be written as a geo URI
            literal (NaN or infinity).
    """
    uri = GeoUri(
        latitude=request.latitude,
        longitude=request.longitude,
        altitude=request.altitude,
        crs=request.crs,
        uncertainty=request.uncertainty,
        parameters=dict(request.parameters),
    )
    policy = ComposerPolicy(
        suppress_default_crs=request.suppress_default_crs,
        percent_encode_values=request.percent_encode_values,
    )
    try:
        return {"uri": compose(uri, policy)}
    except GeoUriError as error:
        logger.info("Cannot compose geo URI: %s", error)
        raise HTTPException(
            status_code=422,
            detail={"error": error.code.name, "message": error.code.message},
        ) from error


async def _answer_messages_until_disconnect(websocket: WebSocket) -> None:
    try:
        while True:
            text = await asyncio.wait_for(
                websocket.receive_text(), timeout=_TIMEOUT_SECONDS
            )
            await websocket.send_text(format_result_message(parse_geo_uri(text)))
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Parse each geo URI a connected WebSocket client sends.

    The connection closes with code 1001 - and the client should reconnect -
    if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    await _answer_messages_until_disconnect(websocket)
