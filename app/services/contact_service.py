"""Contact form pipeline: schema check, sanitization and recording."""

import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import RecordingError
from app.models.contact import (
    WIRE_NAMES,
    ContactFormRequest,
    ContactRecord,
    InvalidContactForm,
    ValidContactForm,
    ValidationResult,
)
from app.services.recorder_service import ContactRecorder, build_recorders
from app.utils.sanitize import sanitize_submission

logger = logging.getLogger(__name__)


def validate_contact_form(data: Any) -> ValidationResult:
    """Apply the contact form schema to untyped input.

    Every field is checked, so the result lists an error for each failing
    field rather than the first one found. Input that is not a mapping is
    checked as an empty record.

    Args:
        data: Decoded request body or form values

    Returns:
        ValidContactForm with the parsed submission, or InvalidContactForm
        with messages keyed by wire field name
    """
    if not isinstance(data, Mapping):
        data = {}

    try:
        submission = ContactFormRequest.model_validate(dict(data))
    except ValidationError as e:
        field_errors = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            field = WIRE_NAMES.get(field, field)
            field_errors.setdefault(field, []).append(error["msg"])
        return InvalidContactForm(field_errors=field_errors)

    return ValidContactForm(submission=submission)


class ContactService:
    """Accepts validated contact form submissions and hands them to recorders."""

    def __init__(self, recorders: Optional[List[ContactRecorder]] = None):
        self._recorders = recorders

    @property
    def recorders(self) -> List[ContactRecorder]:
        if self._recorders is None:
            self._recorders = build_recorders(settings.CONTACT_RECORDERS)
        return self._recorders

    def validate(self, data: Any) -> ValidationResult:
        return validate_contact_form(data)

    async def submit(self, submission: ContactFormRequest) -> ContactRecord:
        """Sanitize a validated submission and record it.

        Args:
            submission: Output of a successful schema check

        Returns:
            The record every recorder received

        Raises:
            RecordingError: If any recorder fails
        """
        record = ContactRecord(
            reference_id=f"REF-{uuid.uuid4().hex[:8].upper()}",
            submitted_at=datetime.now(timezone.utc),
            submission=sanitize_submission(submission),
        )

        for recorder in self.recorders:
            try:
                await recorder.record(record)
            except RecordingError:
                raise
            except Exception as e:
                logger.error(
                    f"Recorder '{recorder.name}' failed for {record.reference_id}: {str(e)}"
                )
                raise RecordingError() from e

        logger.info(f"Contact form submission recorded - Reference: {record.reference_id}")
        return record


contact_service = ContactService()
