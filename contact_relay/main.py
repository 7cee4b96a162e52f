#run it with uvicorn contact_relay.main:app --reload
from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import httpx
import logging
from dotenv import load_dotenv

from contact_relay.api.api_router import api_router
from contact_relay.core.config import Settings, get_settings
from contact_relay.core.cors import ALLOWED_METHODS, build_cors_headers, resolve_allowed_origin
from contact_relay.core.mailer import ResendMailer
from contact_relay.core.messages import INTERNAL_ERROR, METHOD_NOT_ALLOWED, NOT_FOUND
from contact_relay.core.responses import error_response
from contact_relay.core.turnstile import TurnstileVerifier

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the contact relay application.

    Args:
        settings: Configuration for this app instance, read from the environment if omitted
        transport: httpx transport shared by the Turnstile and Resend clients (tests pass a MockTransport)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Contact Relay",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.verifier = TurnstileVerifier(
        settings.turnstile_secret,
        verify_url=settings.turnstile_verify_url,
        transport=transport,
    )
    app.state.mailer = ResendMailer(settings, transport=transport)

    # CORS is resolved per request against ALLOWED_ORIGINS; preflight answers on any path
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        origin = resolve_allowed_origin(request.headers.get("Origin"), settings.allowed_origin_list)
        cors_headers = build_cors_headers(origin)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {str(e)}", exc_info=e)
            return error_response(500, INTERNAL_ERROR, headers=cors_headers)

        response.headers.update(cors_headers)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return error_response(404, NOT_FOUND)
        if exc.status_code == 405:
            return error_response(405, METHOD_NOT_ALLOWED, headers={"Allow": ALLOWED_METHODS})
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    app.include_router(api_router)

    return app


app = create_app()
