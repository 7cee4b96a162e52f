"""
Contact form endpoint.

POST /api/contact runs parse -> sanitize -> validate -> verify -> send. Each
failure is raised as an HTTPException and rendered as the JSON envelope by the
app's exception handler.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import Any, Dict
import httpx
import logging

from contact_relay.core.config import Settings
from contact_relay.core.errors import DeliveryError, ParseError
from contact_relay.core.mailer import ResendMailer
from contact_relay.core.messages import BOT_VERIFICATION_FAILED, INVALID_PAYLOAD, get_message
from contact_relay.core.responses import envelope
from contact_relay.core.turnstile import TurnstileVerifier
from contact_relay.core.validation import validate_submission
from contact_relay.models.contact import parse_body, sanitize_payload

router = APIRouter()
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_verifier(request: Request) -> TurnstileVerifier:
    return request.app.state.verifier


def get_mailer(request: Request) -> ResendMailer:
    return request.app.state.mailer


@router.post("/contact")
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    verifier: TurnstileVerifier = Depends(get_verifier),
    mailer: ResendMailer = Depends(get_mailer),
) -> Dict[str, Any]:
    try:
        raw = parse_body(await request.body())
        submission = sanitize_payload(raw, settings.locale)
    except ParseError as e:
        logger.warning(f"Rejected contact payload: {str(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PAYLOAD)

    validation_error = validate_submission(submission, settings.locale)
    if validation_error:
        raise HTTPException(status_code=422, detail=validation_error)

    remote_ip = request.headers.get("CF-Connecting-IP")
    if not await verifier.verify(submission.turnstileToken, remote_ip):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=BOT_VERIFICATION_FAILED)

    try:
        await mailer.send(submission)
    except (DeliveryError, httpx.HTTPError) as e:
        logger.error(f"❌ Resend delivery failure: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=get_message("delivery_failed", settings.locale),
        )

    return envelope()
