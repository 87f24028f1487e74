"""
Shared dependencies for API handlers.

Clients post either JSON (API consumers) or HTML forms (the landing
page), so request bodies are read by ``read_body`` rather than being
declared as a single pydantic body parameter.
"""

from typing import Any, Dict

from fastapi import Request

from ..core.config import Settings
from ..core.errors import validation_error

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def read_body(request: Request) -> Dict[str, Any]:
    """Return the request body as a flat dict.

    JSON objects are returned as is; form fields are returned as
    strings (file uploads are ignored).  Any other content type, or an
    empty body, yields an empty dict.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json" or content_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = await request.json()
        except ValueError as e:
            raise validation_error("Request body is not valid JSON") from e
        if not isinstance(data, dict):
            raise validation_error("Request body must be a JSON object")
        return data
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
