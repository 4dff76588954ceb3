"""
MailService Module

This module provides email sending capabilities with template rendering using Jinja2.
"""

import boto3
import os
from jinja2 import Environment, FileSystemLoader, select_autoescape
from botocore.exceptions import BotoCoreError, ClientError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from app.core.config import settings
from typing import Dict, Any, List
import datetime

import logging

logger = logging.getLogger(__name__)

# Set up Jinja2 environment with proper auto-escaping and template inheritance
template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(['html', 'xml']),
    enable_async=True
)


class MailService:
    """Mail service with template rendering capabilities."""

    def __init__(self):
        self._ses_client = None

    @property
    def ses_client(self):
        if self._ses_client is None:
            self._ses_client = boto3.client(
                "ses",
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_REGION,
            )
        return self._ses_client

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Asynchronously render a Jinja template with the given context.

        Args:
            template_name: The name of the template file to render
            context: Dictionary of variables to pass to the template

        Returns:
            The rendered template as a string
        """
        try:
            template = jinja_env.get_template(template_name)
            return await template.render_async(**context)
        except Exception as e:
            logger.error(f"Error rendering template {template_name}: {str(e)}")
            raise ValueError(f"Error rendering template: {str(e)}") from e

    async def send_email(
        self,
        recipients: List[str],
        subject: str,
        template_name: str,
        context: Dict[str, Any],
        reply_to: str = None,
    ) -> Dict[str, Any]:
        """
        Send an email using a Jinja template.

        Args:
            recipients: Email addresses of the recipients
            subject: Email subject line
            template_name: Name of the HTML template to use
            context: Dictionary of variables to pass to the template
            reply_to: Optional Reply-To address

        Returns:
            Dictionary containing the status and response from SES
        """
        try:
            context_with_year = {**context, "current_year": datetime.datetime.now().year}
            html_content = await self.render_template(template_name, context_with_year)

            response = self.send_mail(
                sender=settings.EMAIL_SENDER,
                sender_name=settings.EMAIL_SENDER_NAME,
                recipients=recipients,
                title=subject,
                body=html_content,
                reply_to=reply_to,
            )

            if response["status"]:
                logger.info(f"Email sent successfully to {', '.join(recipients)}")
            return response

        except ValueError as e:
            return {
                "status": False,
                "message": f"Failed to send email: {str(e)}",
                "message_id": "undefined",
            }

    def create_email_multipart_message(
        self,
        sender: str,
        sender_name: str,
        recipients: list,
        title: str,
        body: str,
        reply_to: str = None,
    ) -> MIMEMultipart:
        """
        Creates a MIME multipart email message with an HTML body.

        Args:
            sender (str): The sender's email address.
            sender_name (str): Display name of the sender.
            recipients (list): List of primary recipient email addresses.
            title (str): Subject of the email.
            body (str): HTML version of the email body.
            reply_to (str, optional): Address replies should go to.

        Returns:
            MIMEMultipart: The constructed email message ready to be sent.
        """
        message = MIMEMultipart("mixed")
        message["Subject"] = title

        # if sender_name is provided, the format will be 'Sender Name <email@example.com>'
        if sender_name is None:
            message["From"] = f"{sender}"
        else:
            message["From"] = f"{sender_name} <{sender}>"

        message["To"] = ", ".join(recipients)
        if reply_to:
            message["Reply-To"] = reply_to

        message.attach(MIMEText(body, "html"))
        return message

    def send_mail(
        self,
        sender: str,
        sender_name: str,
        recipients: list,
        title: str,
        body: str,
        reply_to: str = None,
    ) -> dict:
        """
        Sends an email using AWS SES.

        Returns:
            dict: A dictionary containing the status, message, SES message ID, and raw SES response.
                  If an error occurs, the message ID will be "undefined".
        """
        try:
            msg = self.create_email_multipart_message(
                sender, sender_name, recipients, title, body, reply_to
            )

            logger.info("Sending Email to SES")
            ses_response = self.ses_client.send_raw_email(
                Source=sender,
                Destinations=list(recipients),
                RawMessage={"Data": msg.as_string()},
            )

        except ClientError as e:
            logger.error(f"Failed to send mail with error: {str(e)}")
            return {
                "status": False,
                "message": e.response["Error"]["Message"],
                "message_id": "undefined",
                "response": e.response,
            }
        except BotoCoreError as e:
            logger.error(f"Failed to send mail with error: {str(e)}")
            return {
                "status": False,
                "message": str(e),
                "message_id": "undefined",
            }
        else:
            return {
                "status": True,
                "message": "Email Successfully Sent.",
                "message_id": ses_response["MessageId"],
                "response": ses_response,
            }


mail_service = MailService()
