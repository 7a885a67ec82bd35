"""Success envelope shared by every v1 route: ``{success: true, data, pagination?}``."""

from __future__ import annotations

from typing import Any, Dict, Optional


def success(data: Any, pagination: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "data": data}
    if pagination is not None:
        body["pagination"] = pagination
    return body
