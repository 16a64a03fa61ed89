"""Contact notification endpoint for the Rakshan Kitchen website.

The contact page posts each submission here after the email has gone out;
this route texts the business about the new inquiry.
"""

import logging
from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from kitchen_site.core.exceptions import SmsDeliveryError
from kitchen_site.models.contact import SmsNotificationResponse, SubmissionPayload
from kitchen_site.services.sms_service import sms_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/contact",
    response_model=SmsNotificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Send contact SMS",
    description="Send an SMS to the business about a contact form submission. No authentication required.",
)
async def send_contact_sms(payload: SubmissionPayload) -> SmsNotificationResponse:
    """
    Text the business about a contact form submission.

    Args:
        payload: The submission payload, same shape as the EmailJS template params

    Returns:
        Confirmation with the Twilio message SID

    Raises:
        HTTPException: 503 if SMS is not configured, 502 if Twilio fails
    """
    if not sms_service.is_configured():
        logger.error("Twilio is not configured, cannot send contact SMS")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="SMS notifications are not configured",
        )

    logger.info(f"Sending contact SMS for submission from {payload.from_email}")

    try:
        message_sid = await run_in_threadpool(sms_service.send_contact_notification, payload)
    except SmsDeliveryError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to send SMS",
        ) from e

    return SmsNotificationResponse(success=True, message_sid=message_sid)
