"""
SmsService Module

This module sends contact form notifications by SMS through Twilio, with the
message text rendered from a Jinja2 template.
"""

import logging
import os
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader
from twilio.base.exceptions import TwilioRestException
from twilio.rest import Client as TwilioClient

from kitchen_site.core.config import settings
from kitchen_site.core.exceptions import SmsDeliveryError
from kitchen_site.models.contact import SubmissionPayload
from kitchen_site.utils.constants import BUSINESS_PHONE, SMS_MAX_LENGTH
from kitchen_site.utils.helper_functions import mask_phone, to_e164

logger = logging.getLogger(__name__)

# Plain text templates, so no autoescaping
template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


class SmsService:
    """SMS sender backed by the Twilio Messages API."""

    def __init__(self):
        self._client: Optional[TwilioClient] = None

    @property
    def client(self) -> TwilioClient:
        """Lazy-loaded Twilio client."""
        if self._client is None:
            if not settings.TWILIO_ACCOUNT_SID or not settings.TWILIO_AUTH_TOKEN:
                raise ValueError("Twilio credentials not configured")
            self._client = TwilioClient(
                settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN
            )
        return self._client

    def is_configured(self) -> bool:
        """Check if Twilio is configured."""
        return bool(
            settings.TWILIO_ACCOUNT_SID
            and settings.TWILIO_AUTH_TOKEN
            and settings.TWILIO_PHONE_NUMBER
        )

    @property
    def recipient(self) -> str:
        return to_e164(settings.SMS_RECIPIENT or BUSINESS_PHONE)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a text template and clip it to the SMS length limit."""
        template = jinja_env.get_template(template_name)
        return template.render(**context).strip()[:SMS_MAX_LENGTH]

    def send_contact_notification(self, payload: SubmissionPayload) -> str:
        """
        Text the business about a new contact form inquiry.

        Args:
            payload: The submission forwarded by the contact form

        Returns:
            The Twilio message SID

        Raises:
            SmsDeliveryError: If Twilio rejects the message or cannot be reached
        """
        body = self.render_template(
            "sms/contact_notification.txt", payload.model_dump(mode="json")
        )

        try:
            message = self.client.messages.create(
                body=body,
                from_=settings.TWILIO_PHONE_NUMBER,
                to=self.recipient,
            )
        except TwilioRestException as e:
            logger.error(f"Twilio rejected SMS (code {e.code}): {str(e)}")
            raise SmsDeliveryError(str(e)) from e
        except Exception as e:
            logger.error(f"Error sending SMS: {str(e)}")
            raise SmsDeliveryError(str(e)) from e

        logger.info(f"SMS sent to {mask_phone(self.recipient)}, sid {message.sid}")
        return message.sid


sms_service = SmsService()
