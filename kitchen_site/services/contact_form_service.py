"""Contact form controller.

Holds the state of one visitor's contact form and runs the two step
submission: the EmailJS email first, then the site's SMS notification route.
"""

import logging
from typing import Mapping, Optional, Set

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from kitchen_site.core.exceptions import (
    ContactFormValidationError,
    SubmissionInProgressError,
)
from kitchen_site.models.contact import (
    ContactFormRequest,
    SubmissionDraft,
    SubmissionPayload,
    SubmissionStatus,
    SubmissionStatusType,
)
from kitchen_site.services.emailjs_service import EmailJSService
from kitchen_site.services.notification_client import ContactNotificationClient
from kitchen_site.utils.constants import (
    BUSINESS_EMAIL,
    BUSINESS_PHONE,
    SUBMISSION_ERROR_MESSAGE,
    SUBMISSION_SUCCESS_MESSAGE,
    UNSPECIFIED_SERVICE_LABEL,
    get_service_label,
    service_interest_message,
)
from kitchen_site.utils.slack import send_slack_alert

logger = logging.getLogger(__name__)

FIELD_ERROR_MESSAGES = {
    "name": "Please enter your name",
    "email": "Please enter a valid email address",
    "phone": "Please enter a valid 10-digit phone number",
    "service": "Please select a service",
}


class InFlightSubmissions:
    """Payloads currently being delivered, shared by every form on the site.

    A double click posts the same payload twice; the second post is turned
    away while the first is still sending. Entries only live for the
    duration of one submit.
    """

    def __init__(self):
        self._keys: Set[str] = set()

    @staticmethod
    def _key(payload: SubmissionPayload) -> str:
        return payload.model_dump_json()

    def claim(self, payload: SubmissionPayload) -> bool:
        key = self._key(payload)
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def release(self, payload: SubmissionPayload) -> None:
        self._keys.discard(self._key(payload))

    def __len__(self) -> int:
        return len(self._keys)


in_flight_submissions = InFlightSubmissions()


class ContactFormController:
    """State and submit logic for a single contact form.

    Attributes:
        draft: Values currently in the form
        status: Feedback from the last submit attempt
        is_submitting: True while a submission is in flight; the submit
            button is disabled for as long as this is set
    """

    def __init__(
        self,
        email_client: EmailJSService,
        notification_client: ContactNotificationClient,
        draft: Optional[SubmissionDraft] = None,
        in_flight: Optional[InFlightSubmissions] = None,
    ):
        self.email_client = email_client
        self.notification_client = notification_client
        self.draft = draft or SubmissionDraft()
        self.in_flight = in_flight if in_flight is not None else InFlightSubmissions()
        self.status = SubmissionStatus()
        self.is_submitting = False
        self._prefilled = False
        # Payload already emailed by a submit whose SMS step then failed
        self._emailed_payload: Optional[SubmissionPayload] = None

    def apply_prefill(self, query_params: Mapping[str, str]) -> bool:
        """Select the service named by the ``service`` query parameter.

        Runs once per controller. Identifiers missing from the catalog are
        ignored.

        Returns:
            True if the form was pre-filled
        """
        if self._prefilled:
            return False
        self._prefilled = True

        service = query_params.get("service")
        if not service or not get_service_label(service):
            return False

        self.select_service(service)
        return True

    def select_service(self, identifier: str) -> None:
        """Change the selected service.

        A catalog service replaces the message with a sentence naming it,
        even if the visitor already typed something.
        """
        self.draft.selected_service = identifier
        message = service_interest_message(identifier)
        if message:
            self.draft.message = message

    def update_message(self, text: str) -> None:
        self.draft.message = text

    def reset(self) -> None:
        self.draft = SubmissionDraft()
        self._emailed_payload = None

    def validate(self) -> ContactFormRequest:
        """Check the draft before anything is sent.

        Raises:
            ContactFormValidationError: With one message per invalid field
        """
        try:
            return ContactFormRequest(
                name=self.draft.name,
                email=self.draft.email,
                phone=self.draft.phone,
                service=self.draft.selected_service,
                message=self.draft.message,
            )
        except ValidationError as e:
            errors = {}
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "form"
                errors.setdefault(field, FIELD_ERROR_MESSAGES.get(field, error["msg"]))
            raise ContactFormValidationError(errors) from e

    def build_payload(self, name: str, email: str, phone: str) -> SubmissionPayload:
        return SubmissionPayload(
            from_name=name,
            from_email=email,
            phone_number=phone,
            service=get_service_label(self.draft.selected_service) or UNSPECIFIED_SERVICE_LABEL,
            message=self.draft.message,
            to_email=BUSINESS_EMAIL,
            to_phone=BUSINESS_PHONE,
        )

    async def submit(self, name: str, email: str, phone: str) -> SubmissionStatus:
        """
        Submit the form.

        Args:
            name: Visitor name from the form
            email: Visitor email from the form
            phone: Visitor phone from the form

        Returns:
            The resulting status, succeeded or failed

        Raises:
            SubmissionInProgressError: If this form, or an identical
                submission from another request, is already in flight
            ContactFormValidationError: If a field is invalid; nothing is sent
        """
        if self.is_submitting:
            raise SubmissionInProgressError("A submission is already in progress")

        self.draft.name, self.draft.email, self.draft.phone = name, email, phone
        form = self.validate()
        payload = self.build_payload(form.name, str(form.email), form.phone)

        if not self.in_flight.claim(payload):
            logger.warning(f"Duplicate submission from {payload.from_email} ignored while the first is in flight")
            raise SubmissionInProgressError("An identical submission is already in progress")

        self.is_submitting = True
        self.status = SubmissionStatus(type=SubmissionStatusType.PENDING)
        try:
            if self._emailed_payload == payload:
                logger.info(f"Email for {payload.from_email} already sent, retrying SMS only")
            else:
                await self.email_client.send(payload)
                self._emailed_payload = payload

            await self.notification_client.send(payload)
        except Exception as e:
            logger.exception(f"Error sending message from {email}: {str(e)}")
            await run_in_threadpool(
                send_slack_alert,
                f"{type(e).__name__}: {str(e)}",
                title="Contact form submission failed",
            )
            self.status = SubmissionStatus(
                type=SubmissionStatusType.FAILED, message=SUBMISSION_ERROR_MESSAGE
            )
        else:
            logger.info(f"Contact form submitted by {payload.from_email}")
            self.status = SubmissionStatus(
                type=SubmissionStatusType.SUCCEEDED, message=SUBMISSION_SUCCESS_MESSAGE
            )
            self.reset()
        finally:
            self.in_flight.release(payload)
            self.is_submitting = False

        return self.status
