"""JSON formatting utilities for geo URI payloads."""

import json
from typing import Any

from geouri import GeoUri, ParseResult

__all__ = ["format_error", "format_location", "format_result_message"]


def format_location(uri: GeoUri) -> dict[str, Any]:
    """Convert a parsed location into a JSON-compatible dictionary."""
    return {
        "latitude": uri.latitude,
        "longitude": uri.longitude,
        "altitude": uri.altitude,
        "crs": uri.crs,
        "uncertainty": uri.uncertainty,
        "parameters": dict(uri.parameters),
    }


def format_error(result: ParseResult) -> dict[str, Any]:
    """Describe a failed parse as a JSON-compatible dictionary."""
    error = result.error
    return {
        "error": error.name if error is not None else None,
        "message": error.message if error is not None else None,
        "position": result.error_position,
    }


def format_result_message(result: ParseResult) -> str:
    """Serialize a parse result into a JSON string for WebSocket transmission."""
    if result.uri is not None:
        return json.dumps({"type": "location", **format_location(result.uri)})
    return json.dumps({"type": "error", **format_error(result)})
