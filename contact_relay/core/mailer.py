"""
Delivery of contact submissions through the Resend email API.

One email per submission, sent to every address in TO_EMAIL with the
submitter set as reply-to. Bodies are rendered twice: a plain-text summary and
an HTML table. User input in the HTML body is escaped for &, < and > only, since
every value lands in element text.
"""

import html
import httpx
import logging
from typing import Dict, List, Optional

from contact_relay.core.config import Settings
from contact_relay.core.errors import ConfigError, DeliveryError
from contact_relay.core.messages import get_messages
from contact_relay.models.contact import ContactSubmission

logger = logging.getLogger(__name__)

DEFAULT_SITE_NAME = "WANYA"
DEFAULT_SITE_TITLE = "WANYA Contact"


def escape_html(value: str) -> str:
    return html.escape(value, quote=False)


def parse_recipients(value: str) -> List[str]:
    """Split a comma separated address list, dropping blank entries."""
    recipients = [entry.strip() for entry in value.split(",") if entry.strip()]
    if not recipients:
        raise ConfigError("TO_EMAIL is not configured")
    return recipients


def build_subject(submission: ContactSubmission, site_name: Optional[str] = None) -> str:
    return f"[{DEFAULT_SITE_NAME if site_name is None else site_name}] {submission.subject} from {submission.name}"


def build_text_body(submission: ContactSubmission) -> str:
    return "\n".join([
        f"Name: {submission.name}",
        f"Email: {submission.email}",
        f"Phone: {submission.phone or '-'}",
        f"Subject: {submission.subject}",
        f"Budget: {submission.budget or '-'}",
        f"Deadline: {submission.deadline or '-'}",
        "",
        "Message:",
        submission.message,
    ])


def _row(label: str, value: str) -> str:
    return (
        f'<tr><th align="left" style="padding:4px 8px;">{label}</th>'
        f'<td style="padding:4px 8px;">{escape_html(value)}</td></tr>'
    )


def build_html_body(submission: ContactSubmission, site_name: Optional[str] = None, locale: str = "ja") -> str:
    labels = get_messages(locale)
    rows = "\n            ".join([
        _row(labels["label_name"], submission.name),
        _row(labels["label_email"], submission.email),
        _row(labels["label_phone"], submission.phone or "-"),
        _row(labels["label_subject"], submission.subject),
        _row(labels["label_budget"], submission.budget or "-"),
        _row(labels["label_deadline"], submission.deadline or "-"),
    ])
    return f"""<!doctype html>
<html lang="{labels['html_lang']}">
  <body style="font-family:Segoe UI,Helvetica,Arial,sans-serif;background:#f6f6f7;padding:16px;">
    <table cellpadding="0" cellspacing="0" style="width:100%;max-width:600px;margin:auto;background:#ffffff;border-radius:8px;border:1px solid #e0e0e0;">
      <tr>
        <td style="padding:16px 24px;border-bottom:1px solid #f0f0f0;">
          <strong>{escape_html(DEFAULT_SITE_TITLE if site_name is None else site_name)}</strong>
          <div style="color:#666;font-size:14px;margin-top:4px;">{labels['html_intro']}</div>
        </td>
      </tr>
      <tr>
        <td>
          <table style="width:100%;font-size:14px;">
            {rows}
          </table>
          <div style="padding:16px 24px;border-top:1px solid #f0f0f0;">
            <div style="font-weight:600;margin-bottom:8px;">{labels['label_message']}</div>
            <div style="white-space:pre-wrap;line-height:1.6;color:#333;">{escape_html(submission.message)}</div>
          </div>
        </td>
      </tr>
    </table>
  </body>
</html>"""


class ResendMailer:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def build_email(self, submission: ContactSubmission) -> Dict[str, object]:
        """Assemble the Resend request body for one submission."""
        settings = self.settings
        return {
            "from": settings.from_email,
            "to": parse_recipients(settings.to_email),
            "reply_to": submission.email,
            "subject": build_subject(submission, settings.site_name),
            "text": build_text_body(submission),
            "html": build_html_body(submission, settings.site_name, settings.locale),
        }

    async def send(self, submission: ContactSubmission) -> None:
        """
        Send the submission as one email.

        Raises:
            ConfigError: if TO_EMAIL holds no address
            DeliveryError: if Resend answers with a non-success status
        """
        if self.settings.resend_disabled:
            logger.info("⏭️ Resend delivery skipped (RESEND_DISABLED=true)")
            return

        email = self.build_email(submission)
        headers = {
            "Authorization": f"Bearer {self.settings.resend_api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(self.settings.resend_api_url, json=email, headers=headers)

        if not response.is_success:
            raise DeliveryError(response.status_code, response.text)

        logger.info(f"✅ Contact email sent to {len(email['to'])} recipient(s)")
