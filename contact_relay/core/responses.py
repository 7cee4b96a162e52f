from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional


def envelope(error: Optional[str] = None) -> Dict[str, Any]:
    """`{"success": true}` or `{"success": false, "error": ...}`"""
    if error is None:
        return {"success": True}
    return {"success": False, "error": error}


def error_response(status_code: int, error: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(error), headers=headers)
