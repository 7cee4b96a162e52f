"""
Field rules for contact submissions.

Rules are checked in a fixed order and only the first failure is reported.
"""

import re
from typing import Callable, List, Optional, Tuple

from contact_relay.core.messages import DEFAULT_LOCALE, get_message
from contact_relay.models.contact import ContactSubmission

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


# (predicate that must hold, message key reported when it does not)
RULES: List[Tuple[Callable[[ContactSubmission], bool], str]] = [
    (lambda s: len(s.name) >= MIN_NAME_LENGTH, "name_invalid"),
    (lambda s: bool(s.email) and is_valid_email(s.email), "email_invalid"),
    (lambda s: bool(s.subject), "subject_missing"),
    (lambda s: len(s.message) >= MIN_MESSAGE_LENGTH, "message_too_short"),
    (lambda s: bool(s.turnstileToken), "token_missing"),
]


def validate_submission(submission: ContactSubmission, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    """Return the localized message of the first violated rule, or None."""
    for predicate, message_key in RULES:
        if not predicate(submission):
            return get_message(message_key, locale)
    return None
