from pydantic import BaseModel
from typing import Any, Optional
import json

from contact_relay.core.errors import ParseError
from contact_relay.core.messages import DEFAULT_LOCALE, get_message


class ContactSubmission(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    subject: str = ""
    budget: str = ""
    deadline: str = ""
    message: str = ""
    turnstileToken: str = ""  # Turnstile response token from the widget


def _as_text(value: Any, strip: bool = True) -> str:
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    return text.strip() if strip else text


def parse_body(body: bytes) -> Any:
    """Decode a raw request body as JSON, raising ParseError on malformed input."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON: {str(e)}") from e


def sanitize_payload(raw: Any, locale: str = DEFAULT_LOCALE) -> ContactSubmission:
    """
    Turn a decoded JSON body into a fully populated ContactSubmission.

    Every field gets a string value. `subject` falls back to the localized
    default label, and neither `subject` nor `budget` is trimmed.

    Raises:
        ParseError: if the body is not a JSON object
    """
    if not isinstance(raw, dict):
        raise ParseError(f"Expected a JSON object, got {type(raw).__name__}")

    subject: Optional[Any] = raw.get("subject")

    return ContactSubmission(
        name=_as_text(raw.get("name")),
        email=_as_text(raw.get("email")),
        phone=_as_text(raw.get("phone")),
        subject=get_message("default_subject", locale) if subject is None else _as_text(subject, strip=False),
        budget=_as_text(raw.get("budget"), strip=False),
        deadline=_as_text(raw.get("deadline")),
        message=_as_text(raw.get("message")),
        turnstileToken=_as_text(raw.get("turnstileToken")),
    )
