"""Contact form endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from ...errors import InternalError, ServiceError
from ...schemas.crimes import ErrorResponse
from ...schemas.site import ContactRequest, ContactResponse
from ...services.contact import submit_contact

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


@router.post(
    "/contact",
    response_model=ContactResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def contact(payload: ContactRequest) -> ContactResponse:
    try:
        message = submit_contact(payload.name, payload.email, payload.subject, payload.message)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Contact form error: %s", exc)
        raise InternalError("Failed to send message. Please try again later.", details=str(exc)) from exc
    return ContactResponse(message=message)
