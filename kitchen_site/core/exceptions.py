"""Exceptions raised while collecting and forwarding contact form submissions."""

from typing import Dict


class ContactFormValidationError(Exception):
    """The submitted form failed validation; nothing was sent.

    Attributes:
        errors: Mapping of form field name to a user-facing message
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(f"Invalid contact form fields: {', '.join(sorted(errors))}")


class SubmissionInProgressError(Exception):
    """A submission is already in flight for this form."""


class TransportError(Exception):
    """An outbound delivery call failed."""


class EmailDispatchError(TransportError):
    """The EmailJS call failed or was rejected."""


class NotificationDeliveryError(TransportError):
    """The SMS notification endpoint was unreachable or returned a non-success status."""


class SmsDeliveryError(Exception):
    """Twilio refused or failed to send the SMS."""
