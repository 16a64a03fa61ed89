"""Configuration settings for the Rakshan Kitchen website.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_STR: Path prefix of the JSON API
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        SITE_URL: Base URL the contact form uses to reach its own SMS route
        EMAILJS_PUBLIC_KEY: EmailJS public key (the "user_id" of the REST API)
        EMAILJS_SERVICE_ID: EmailJS service used for contact emails
        EMAILJS_TEMPLATE_ID: EmailJS template used for contact emails
    """
    def __init__(self):
        self.API_STR = "/api"
        self.PROJECT_NAME = "Rakshan Kitchen"
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Origin of this site; the contact form posts its SMS step here
        self.SITE_URL = os.getenv("SITE_URL", "http://127.0.0.1:8000").rstrip("/")

        # EmailJS Settings
        self.EMAILJS_PUBLIC_KEY = self._require("EMAILJS_PUBLIC_KEY")
        self.EMAILJS_SERVICE_ID = self._require("EMAILJS_SERVICE_ID")
        self.EMAILJS_TEMPLATE_ID = self._require("EMAILJS_TEMPLATE_ID")
        self.EMAILJS_PRIVATE_KEY = os.getenv("EMAILJS_PRIVATE_KEY")
        self.EMAILJS_API_URL = os.getenv(
            "EMAILJS_API_URL", "https://api.emailjs.com/api/v1.0/email/send"
        )

        # Twilio Settings
        self.TWILIO_ACCOUNT_SID = os.getenv("TWILIO_ACCOUNT_SID")
        self.TWILIO_AUTH_TOKEN = os.getenv("TWILIO_AUTH_TOKEN")
        self.TWILIO_PHONE_NUMBER = os.getenv("TWILIO_PHONE_NUMBER")
        self.SMS_RECIPIENT = os.getenv("SMS_RECIPIENT")

        # Slack Settings
        self.SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
        self.SLACK_ALERT_CHANNEL = os.getenv("SLACK_ALERT_CHANNEL", "#rakshan-site-alerts")

    @staticmethod
    def _require(name: str) -> str:
        value = os.getenv(name, "").strip()
        if not value:
            raise ValueError(f"{name} environment variable is not set")
        return value


settings = Settings()
