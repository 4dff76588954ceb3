"""Configuration settings for the Mero Tech contact API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_STR: API path prefix
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        CORS_ORIGINS: Origins allowed to call the API
        CONTACT_RECORDERS: Recorders that receive accepted submissions
    """
    def __init__(self):
        self.API_STR = "/api"
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Mero Tech API")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Contact form settings
        self.CONTACT_RECORDERS = [
            name.strip().lower()
            for name in os.getenv("CONTACT_RECORDERS", "log").split(",")
            if name.strip()
        ]
        self.CONTACT_NOTIFY_EMAIL = os.getenv("CONTACT_NOTIFY_EMAIL")

        # Contact form client settings
        self.CONTACT_API_URL = os.getenv("CONTACT_API_URL", "http://localhost:8000")
        self.CONTACT_CLIENT_TIMEOUT = float(os.getenv("CONTACT_CLIENT_TIMEOUT", 10))

        # AWS SETTINGS
        self.AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
        self.AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
        self.AWS_REGION = os.getenv("AWS_REGION", "us-east-1")

        # Slack Settings
        self.SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
        self.SLACK_CONTACT_CHANNEL = os.getenv("SLACK_CONTACT_CHANNEL", "#contact-form")

        # Email Settings
        self.EMAIL_SENDER = os.environ.get("EMAIL_SENDER", "hello@merotech.co.zw")
        self.EMAIL_SENDER_NAME = os.environ.get("EMAIL_SENDER_NAME", "Mero Tech")


settings = Settings()
