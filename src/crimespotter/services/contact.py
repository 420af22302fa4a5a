"""Contact form validation and sanitisation."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any

from ..errors import BadRequest
from ..models.domain import ContactSubmission

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_ANGLE_BRACKETS = re.compile(r"[<>]")

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
SUBJECT_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 5000

SUCCESS_MESSAGE = "Thank you for your message. We will respond within 24-48 hours."


def _clean(value: Any, max_length: int) -> str:
    return _ANGLE_BRACKETS.sub("", str(value)[:max_length])


def sanitize_contact(name: Any, email: Any, subject: Any, message: Any) -> ContactSubmission:
    """Validate the form fields and return a trimmed, tag-free submission.

    Raises ``BadRequest`` when a field is missing or the email is malformed.
    """
    if not name or not email or not subject or not message:
        raise BadRequest("All fields are required")
    if not EMAIL_PATTERN.match(str(email)):
        raise BadRequest("Invalid email address")

    return ContactSubmission(
        name=_clean(name, NAME_MAX_LENGTH),
        email=str(email)[:EMAIL_MAX_LENGTH],
        subject=_clean(subject, SUBJECT_MAX_LENGTH),
        message=_clean(message, MESSAGE_MAX_LENGTH),
    )


def submit_contact(name: Any, email: Any, subject: Any, message: Any) -> str:
    """Accept a contact form submission. Mail delivery is not wired up; it is only logged."""
    submission = sanitize_contact(name, email, subject, message)
    logger.info(
        "Contact form submission at %s from %s <%s>: %s",
        datetime.now(timezone.utc).isoformat(),
        submission.name,
        submission.email,
        submission.subject,
    )
    return SUCCESS_MESSAGE
