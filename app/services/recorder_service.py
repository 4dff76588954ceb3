"""Recorders that receive accepted contact form submissions.

A recorder is the sink a sanitized submission is handed to once it has been
accepted: a log line, an email to the team, a Slack post. Every recorder
raises ``RecordingError`` when it cannot do its job so the request is not
reported as a success.

Recorders that persist submissions must use parameterized queries; the text
they receive is stripped of markup but not escaped for SQL.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from slack_sdk.errors import SlackApiError

from app.core.config import settings
from app.core.exceptions import RecordingError
from app.models.contact import ContactRecord
from app.services.mail_service import mail_service
from app.utils.slack import send_slack_message

logger = logging.getLogger(__name__)


class ContactRecorder(ABC):
    """Sink for accepted contact form submissions."""

    name: str = ""

    @abstractmethod
    async def record(self, record: ContactRecord) -> None:
        """Store or forward one submission.

        Raises:
            RecordingError: If the submission could not be recorded
        """


class LoggingRecorder(ContactRecorder):
    """Writes each submission to the application log."""

    name = "log"

    async def record(self, record: ContactRecord) -> None:
        logger.info(
            "Contact form submission: %s",
            {
                "reference_id": record.reference_id,
                "timestamp": record.submitted_at.isoformat(),
                "data": record.submission.model_dump(by_alias=True),
            },
        )


class MailRecorder(ContactRecorder):
    """Emails each submission to the team inbox through SES."""

    name = "mail"

    def __init__(self, recipient: str = None):
        self.recipient = recipient or settings.CONTACT_NOTIFY_EMAIL or settings.EMAIL_SENDER

    async def record(self, record: ContactRecord) -> None:
        submission = record.submission
        response = await mail_service.send_email(
            recipients=[self.recipient],
            subject=f"[Contact Form] {submission.project_type} inquiry from {submission.name}",
            template_name="contact_form_notification.html",
            context={
                "reference_id": record.reference_id,
                "submission_time": record.submitted_at.strftime("%B %d, %Y at %I:%M %p UTC"),
                "name": submission.name,
                "email": submission.email,
                "company": submission.company,
                "project_type": submission.project_type,
                "message": submission.message,
            },
            reply_to=submission.email,
        )
        if not response.get("status"):
            logger.error(
                f"Failed to email contact submission {record.reference_id}: {response.get('message')}"
            )
            raise RecordingError()


class SlackRecorder(ContactRecorder):
    """Posts a summary of each submission to a Slack channel."""

    name = "slack"

    def __init__(self, channel: str = None):
        self.channel = channel or settings.SLACK_CONTACT_CHANNEL

    async def record(self, record: ContactRecord) -> None:
        submission = record.submission
        text = (
            f"*From:* {submission.name} <{submission.email}>\n"
            f"*Company:* {submission.company}\n"
            f"*Project type:* {submission.project_type}\n"
            f"*Reference:* {record.reference_id}\n\n"
            f"{submission.message}"
        )
        try:
            # slack_sdk's WebClient is blocking
            await asyncio.to_thread(
                send_slack_message, text, title="New contact form inquiry", channel=self.channel
            )
        except SlackApiError as e:
            logger.error(
                f"Failed to post contact submission {record.reference_id} to Slack: {e.response['error']}"
            )
            raise RecordingError() from e


RECORDERS = {
    LoggingRecorder.name: LoggingRecorder,
    MailRecorder.name: MailRecorder,
    SlackRecorder.name: SlackRecorder,
}


def build_recorders(names: Iterable[str]) -> List[ContactRecorder]:
    """Instantiate recorders from their configured names.

    Raises:
        ValueError: If a name does not match a known recorder
    """
    recorders = []
    for name in names:
        try:
            recorders.append(RECORDERS[name]())
        except KeyError:
            raise ValueError(
                f"Unknown contact recorder '{name}', expected one of: {', '.join(RECORDERS)}"
            ) from None
    return recorders
