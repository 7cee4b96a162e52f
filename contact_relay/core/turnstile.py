"""
Cloudflare Turnstile verification.

The verifier fails closed: a non-success response from siteverify, an
unreadable body or a missing `success` flag all count as "not human".
A missing secret is a deployment error and raises ConfigError instead.
"""

import httpx
import logging
from typing import Optional

from contact_relay.core.config import TURNSTILE_VERIFY_URL
from contact_relay.core.errors import ConfigError

logger = logging.getLogger(__name__)


class TurnstileVerifier:
    def __init__(
        self,
        secret: str,
        verify_url: str = TURNSTILE_VERIFY_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secret = secret
        self.verify_url = verify_url
        self.transport = transport

    async def verify(self, token: str, remote_ip: Optional[str] = None) -> bool:
        """
        Ask siteverify whether `token` was issued to a human.

        Args:
            token: Turnstile response token submitted with the form
            remote_ip: Visitor IP, forwarded as `remoteip` when known

        Returns:
            bool: True only if siteverify answered `success: true`
        """
        if not self.secret:
            raise ConfigError("TURNSTILE_SECRET is not configured")

        form = {"secret": self.secret, "response": token}
        if remote_ip:
            form["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.verify_url, data=form)
        except httpx.HTTPError as e:
            logger.error(f"❌ Turnstile verification request failed: {str(e)}")
            return False

        if not response.is_success:
            logger.error(f"❌ Turnstile verification failed with status {response.status_code}")
            return False

        try:
            result = response.json()
        except ValueError:
            logger.error("❌ Turnstile verification returned a non-JSON body")
            return False

        passed = isinstance(result, dict) and bool(result.get("success"))
        if not passed:
            logger.warning(f"Turnstile rejected token: {result}")
        return passed
