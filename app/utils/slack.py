from slack_sdk import WebClient
from app.core.config import settings

import logging

logger = logging.getLogger(__name__)

def send_slack_message(message, title=None, channel=None):
    """Post a message to Slack with optional title.

    Raises:
        SlackApiError: If Slack rejects the message
    """
    client = WebClient(token=settings.SLACK_BOT_TOKEN)

    formatted_message = f"*{title}*\n{message}" if title else message

    client.chat_postMessage(
        channel=channel or settings.SLACK_CONTACT_CHANNEL,
        text=formatted_message,
        mrkdwn=True
    )
    logger.info(f"Slack message sent: {title or message[:40]}")
