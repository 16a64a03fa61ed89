# Business contact details shown in the footer and used as inquiry destinations
BUSINESS_NAME = "RAKSHAN KITCHEN"
BUSINESS_TAGLINE = "Crafting luxury kitchen spaces with precision and passion since 1999."
BUSINESS_EMAIL = "rakshankitchenlimited@gmail.com"
BUSINESS_PHONE = "+91 9310123565"
BUSINESS_ADDRESS = "Sector 7, Rohini, Delhi, 110085"
BUSINESS_MAPS_URL = "https://maps.google.com/?q=RAKSHAN+KITCHEN+AND+LIGHT,+Sector+7,+Rohini,+Delhi,+110085"
BUSINESS_FACEBOOK_URL = "https://www.facebook.com/rakshankitchen"
BUSINESS_HOURS = [
    "Monday - Saturday",
    "10:00 AM - 8:00 PM",
    "Sunday: Closed",
]

# Contact form copy
UNSPECIFIED_SERVICE_LABEL = "Not specified"
SERVICE_INTEREST_TEMPLATE = "I'm interested in your {label} service. Please provide more information."
SUBMISSION_SUCCESS_MESSAGE = "Thank you for your message! We will get back to you soon."
SUBMISSION_ERROR_MESSAGE = (
    "There was an error sending your message. Please try again or contact us directly."
)
SUBMISSION_IN_PROGRESS_MESSAGE = "Your message is already being sent. Please wait a moment."

# Twilio rejects message bodies longer than this
SMS_MAX_LENGTH = 1600


class ServiceIdentifier:
    CUSTOM_DESIGN = "custom-design"
    RENOVATION = "renovation"
    MODULAR = "modular"
    MATERIAL = "material"


SERVICE_CATALOG = (
    (ServiceIdentifier.CUSTOM_DESIGN, "Custom Kitchen Design"),
    (ServiceIdentifier.RENOVATION, "Kitchen Renovation"),
    (ServiceIdentifier.MODULAR, "Modular Solutions"),
    (ServiceIdentifier.MATERIAL, "Material Selection"),
)


def get_service_label(identifier: str) -> str:
    """Return the display label for a catalog identifier, or "" when unknown."""
    for value, label in SERVICE_CATALOG:
        if value == identifier:
            return label
    return ""


def is_known_service(identifier: str) -> bool:
    return bool(get_service_label(identifier))


def service_interest_message(identifier: str) -> str:
    """Build the templated message naming the given service.

    Returns "" when the identifier is not in the catalog.
    """
    label = get_service_label(identifier)
    if not label:
        return ""
    return SERVICE_INTEREST_TEMPLATE.format(label=label)
