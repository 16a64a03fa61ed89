import logging

import httpx

from kitchen_site.core.exceptions import NotificationDeliveryError
from kitchen_site.models.contact import SubmissionPayload

logger = logging.getLogger(__name__)


class ContactNotificationClient:
    """Posts a submission payload to the site's own SMS notification route."""

    def __init__(self, base_url: str, path: str = "/api/contact"):
        self.url = f"{base_url.rstrip('/')}{path}"

    async def send(self, payload: SubmissionPayload) -> None:
        """Forward the payload as JSON.

        Raises:
            NotificationDeliveryError: On network failure or any non-success status
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.url, json=payload.model_dump(mode="json"))
        except httpx.HTTPError as e:
            logger.error(f"SMS notification request to {self.url} failed: {str(e)}")
            raise NotificationDeliveryError(f"Failed to send SMS: {str(e)}") from e

        if not response.is_success:
            logger.error(f"SMS notification endpoint returned {response.status_code} - {response.text}")
            raise NotificationDeliveryError(f"Failed to send SMS: status {response.status_code}")
