from typing import Dict, List, Optional

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def resolve_allowed_origin(origin: Optional[str], allowed_origins: List[str]) -> Optional[str]:
    """
    Decide which origin, if any, is echoed back in Access-Control-Allow-Origin.

    A "*" entry echoes any origin. Otherwise the origin must appear verbatim
    in the allow-list.
    """
    if not origin or not allowed_origins:
        return None
    if "*" in allowed_origins:
        return origin
    return origin if origin in allowed_origins else None


def build_cors_headers(origin: Optional[str]) -> Dict[str, str]:
    headers = {
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers
