"""Server-rendered pages of the Rakshan Kitchen website."""

import datetime
import logging
import os
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from kitchen_site.core.config import settings
from kitchen_site.core.exceptions import ContactFormValidationError, SubmissionInProgressError
from kitchen_site.models.contact import SubmissionStatus, SubmissionStatusType
from kitchen_site.services.contact_form_service import ContactFormController, in_flight_submissions
from kitchen_site.services.emailjs_service import emailjs_service
from kitchen_site.services.notification_client import ContactNotificationClient
from kitchen_site.utils import constants

logger = logging.getLogger(__name__)

router = APIRouter()

template_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates")
templates = Jinja2Templates(directory=template_dir)


def get_contact_form_controller() -> ContactFormController:
    """Build a form controller whose SMS step posts back to this site.

    The SMS route is reached through the configured SITE_URL, never through
    the Host header of the incoming request.
    """
    return ContactFormController(
        email_client=emailjs_service,
        notification_client=ContactNotificationClient(settings.SITE_URL),
        in_flight=in_flight_submissions,
    )


def _page_context(extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    context = {
        "business_name": constants.BUSINESS_NAME,
        "business_tagline": constants.BUSINESS_TAGLINE,
        "business_email": constants.BUSINESS_EMAIL,
        "business_phone": constants.BUSINESS_PHONE,
        "business_address": constants.BUSINESS_ADDRESS,
        "business_maps_url": constants.BUSINESS_MAPS_URL,
        "business_facebook_url": constants.BUSINESS_FACEBOOK_URL,
        "business_hours": constants.BUSINESS_HOURS,
        "services": constants.SERVICE_CATALOG,
        "current_year": datetime.datetime.now().year,
    }
    context.update(extra or {})
    return context


def _render_contact_page(
    request: Request,
    controller: ContactFormController,
    errors: Optional[Dict[str, str]] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "contact.html",
        _page_context(
            {
                "draft": controller.draft,
                "submit_status": controller.status,
                "is_submitting": controller.is_submitting,
                "errors": errors or {},
            }
        ),
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home_page(request: Request):
    return templates.TemplateResponse(request, "index.html", _page_context())


@router.get("/contact", response_class=HTMLResponse, include_in_schema=False)
async def contact_page(
    request: Request,
    controller: ContactFormController = Depends(get_contact_form_controller),
):
    """Render the contact form, pre-filled from the ``service`` query parameter."""
    controller.apply_prefill(request.query_params)
    return _render_contact_page(request, controller)


@router.post("/contact", response_class=HTMLResponse, include_in_schema=False)
async def submit_contact_page(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    service: str = Form(""),
    message: str = Form(""),
    controller: ContactFormController = Depends(get_contact_form_controller),
):
    """
    Handle a contact form post.

    The page is rendered again with the outcome. Invalid input comes back
    with a 422 and the field errors; a failed delivery keeps the values the
    visitor entered; a successful one clears the form. A repeat of a post
    that is still being delivered gets a 409 and sends nothing.
    """
    controller.draft.selected_service = service
    controller.update_message(message)

    try:
        await controller.submit(name=name, email=email, phone=phone)
    except ContactFormValidationError as e:
        logger.info(f"Rejected contact form with invalid fields: {', '.join(sorted(e.errors))}")
        return _render_contact_page(
            request,
            controller,
            errors=e.errors,
            status_code=422,
        )
    except SubmissionInProgressError:
        controller.status = SubmissionStatus(
            type=SubmissionStatusType.PENDING,
            message=constants.SUBMISSION_IN_PROGRESS_MESSAGE,
        )
        return _render_contact_page(request, controller, status_code=409)

    return _render_contact_page(request, controller)
