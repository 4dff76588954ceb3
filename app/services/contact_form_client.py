"""Contact form client.

Holds the state of one contact form and drives ``POST /api/contact`` over
httpx. The form moves through ``idle -> submitting -> success | error``;
editing a field after a submission returns it to ``idle``.
"""

import logging
from enum import Enum
from typing import Dict, Optional

import httpx
from pydantic import BaseModel, Field

from app.core.config import settings
from app.models.contact import InvalidContactForm, WIRE_NAMES
from app.services.contact_service import validate_contact_form

logger = logging.getLogger(__name__)

FIELD_NAMES = tuple(WIRE_NAMES.values())

SUCCESS_MESSAGE = "Thank you for your message! We'll get back to you soon."
ERROR_FALLBACK_MESSAGE = "Something went wrong. Please try again."
TRANSPORT_ERROR_MESSAGE = "Unable to submit form. Please try again."


def empty_values() -> Dict[str, str]:
    return {field: "" for field in FIELD_NAMES}


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class ContactFormState(BaseModel):
    """Snapshot of a contact form.

    Attributes:
        status: Where the form is in its submit cycle
        message: Banner text for the success or error status
        values: Current field values keyed by wire field name
        errors: First validation message of each failing field
    """
    status: FormStatus = FormStatus.IDLE
    message: Optional[str] = None
    values: Dict[str, str] = Field(default_factory=empty_values)
    errors: Dict[str, str] = Field(default_factory=dict)


class ContactForm:
    """One contact form and its submission cycle."""

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: Root URL of the API; defaults to ``CONTACT_API_URL``
            timeout: Seconds before a submission is treated as failed
            client: Optional preconfigured client, used instead of a new one per submit
        """
        self.base_url = base_url or settings.CONTACT_API_URL
        self.timeout = timeout if timeout is not None else settings.CONTACT_CLIENT_TIMEOUT
        self._client = client
        self.state = ContactFormState()

    @property
    def status(self) -> FormStatus:
        return self.state.status

    def set_field(self, name: str, value: str) -> None:
        """Update one field, clearing only that field's error."""
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown contact form field: {name}")

        self.state.values[name] = value
        self.state.errors.pop(name, None)

        if self.state.status in (FormStatus.SUCCESS, FormStatus.ERROR):
            self.state.status = FormStatus.IDLE
            self.state.message = None

    def validate(self) -> bool:
        """Check the current values against the contact form schema."""
        result = validate_contact_form(self.state.values)
        if isinstance(result, InvalidContactForm):
            self.state.errors = {
                field: messages[0] for field, messages in result.field_errors.items()
            }
            return False

        self.state.errors = {}
        return True

    async def submit(self) -> ContactFormState:
        """Validate locally and send the form.

        A submit while another is in flight is ignored. Locally invalid
        values never reach the server.

        Returns:
            The form state after the attempt
        """
        if self.state.status == FormStatus.SUBMITTING:
            return self.state

        if not self.validate():
            self.state.status = FormStatus.IDLE
            self.state.message = None
            return self.state

        self.state.status = FormStatus.SUBMITTING
        self.state.message = None

        try:
            response = await self._post(dict(self.state.values))
        except httpx.HTTPError as e:
            logger.warning(f"Contact form submission failed: {type(e).__name__}: {str(e)}")
            self.state.status = FormStatus.ERROR
            self.state.message = TRANSPORT_ERROR_MESSAGE
            return self.state

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code == httpx.codes.OK and data.get("success"):
            self.state = ContactFormState(status=FormStatus.SUCCESS, message=SUCCESS_MESSAGE)
        else:
            self.state.status = FormStatus.ERROR
            self.state.message = data.get("error") or ERROR_FALLBACK_MESSAGE

        return self.state

    async def _post(self, payload: Dict[str, str]) -> httpx.Response:
        url = f"{settings.API_STR}/contact"
        if self._client is not None:
            return await self._client.post(url, json=payload, timeout=self.timeout)

        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
            return await client.post(url, json=payload)
