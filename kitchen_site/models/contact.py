"""Contact form models for the Rakshan Kitchen website.

This module contains the Pydantic models for contact form functionality.
"""

from enum import Enum
from typing import Optional
from typing_extensions import Annotated
from pydantic import BaseModel, EmailStr, Field, field_validator

from kitchen_site.utils.constants import is_known_service


class ContactFormRequest(BaseModel):
    """Validated contact form input.

    Attributes:
        name: Full name of the visitor
        email: Email address for the reply
        phone: 10 digit phone number
        service: Catalog identifier of the service the visitor is interested in
        message: Optional free text
    """
    name: Annotated[str, Field(..., min_length=1, description="Full name of the visitor")]
    email: Annotated[EmailStr, Field(..., description="Email address for the reply")]
    phone: Annotated[str, Field(..., pattern=r"^[0-9]{10}$", description="Exactly 10 digits")]
    service: Annotated[str, Field(..., description="Catalog identifier of the selected service")]
    message: Annotated[str, Field("", description="Optional message")]

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_surrounding_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("service")
    @classmethod
    def service_must_be_in_catalog(cls, value: str) -> str:
        if not is_known_service(value):
            raise ValueError("Please select a service")
        return value


class SubmissionPayload(BaseModel):
    """Record sent to both delivery channels (EmailJS and the SMS endpoint).

    Field names match the EmailJS template variables.
    """
    from_name: Annotated[str, Field(..., min_length=1, description="Visitor name")]
    from_email: Annotated[EmailStr, Field(..., description="Visitor email")]
    phone_number: Annotated[str, Field(..., pattern=r"^[0-9]{10}$", description="Visitor phone")]
    service: Annotated[str, Field(..., description="Display label of the selected service")]
    message: Annotated[str, Field("", description="Visitor message")]
    to_email: Annotated[str, Field(..., description="Business inbox receiving the inquiry")]
    to_phone: Annotated[str, Field(..., description="Business phone receiving the inquiry")]


class SubmissionStatusType(str, Enum):
    NEUTRAL = "neutral"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionStatus(BaseModel):
    """Feedback shown to the visitor after a submit attempt."""
    type: SubmissionStatusType = SubmissionStatusType.NEUTRAL
    message: str = ""


class SubmissionDraft(BaseModel):
    """Form state held while the page is open."""
    name: str = ""
    email: str = ""
    phone: str = ""
    selected_service: str = ""
    message: str = ""


class SmsNotificationResponse(BaseModel):
    """Response model for the SMS notification endpoint.

    Attributes:
        success: Whether the SMS was accepted by Twilio
        message_sid: Twilio message SID
    """
    success: bool = Field(..., description="Whether the SMS was accepted by Twilio")
    message_sid: Optional[str] = Field(None, description="Twilio message SID")
