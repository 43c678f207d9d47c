from __future__ import annotations

from typing import Any

from courses.dto import ApiResponse


def render_envelope(result: ApiResponse, serializer_class=None) -> dict[str, Any]:
    """Shape a service result as ``{success, message, data}``.

    `data` is passed through `serializer_class` when both are present.
    """
    data = result.data
    if data is not None and serializer_class is not None:
        data = serializer_class(data).data
    return {"success": result.success, "message": result.message, "data": data}


def error_envelope(message: str, data: Any = None) -> dict[str, Any]:
    return render_envelope(ApiResponse(False, message, data))
