"""
EmailJSService Module

This module sends contact form payloads through the EmailJS REST API.
"""

import logging
from typing import Optional

import httpx

from kitchen_site.core.config import settings
from kitchen_site.core.exceptions import EmailDispatchError
from kitchen_site.models.contact import SubmissionPayload
from kitchen_site.utils.helper_functions import remove_null_values

logger = logging.getLogger(__name__)


class EmailJSService:
    """Client for the EmailJS "send" endpoint.

    The public key is bound once at construction; every send uses the same
    service and template.
    """

    def __init__(
        self,
        public_key: str,
        service_id: str,
        template_id: str,
        private_key: Optional[str] = None,
        api_url: str = "https://api.emailjs.com/api/v1.0/email/send",
    ):
        if not public_key or not service_id or not template_id:
            raise ValueError("EmailJS public key, service ID and template ID are required")
        self.public_key = public_key
        self.service_id = service_id
        self.template_id = template_id
        self.private_key = private_key
        self.api_url = api_url

    @classmethod
    def from_settings(cls) -> "EmailJSService":
        return cls(
            public_key=settings.EMAILJS_PUBLIC_KEY,
            service_id=settings.EMAILJS_SERVICE_ID,
            template_id=settings.EMAILJS_TEMPLATE_ID,
            private_key=settings.EMAILJS_PRIVATE_KEY,
            api_url=settings.EMAILJS_API_URL,
        )

    def build_request_body(self, payload: SubmissionPayload) -> dict:
        return remove_null_values(
            {
                "service_id": self.service_id,
                "template_id": self.template_id,
                "user_id": self.public_key,
                "accessToken": self.private_key,
                "template_params": payload.model_dump(mode="json"),
            }
        )

    async def send(self, payload: SubmissionPayload) -> None:
        """
        Send one contact email.

        Args:
            payload: Submission payload used as the template parameters

        Raises:
            EmailDispatchError: If EmailJS is unreachable or rejects the request
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=self.build_request_body(payload),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.error(f"EmailJS request failed: {str(e)}")
            raise EmailDispatchError(f"EmailJS request failed: {str(e)}") from e

        if response.status_code != 200:
            logger.error(f"EmailJS rejected the email: {response.status_code} - {response.text}")
            raise EmailDispatchError(
                f"EmailJS responded with {response.status_code}: {response.text}"
            )

        logger.info(f"Contact email sent for {payload.from_email}")


emailjs_service = EmailJSService.from_settings()
