"""Contact form endpoints for the Mero Tech API.

This module contains FastAPI routes for handling contact form submissions.
"""

import logging
from typing import List

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import SubmissionParseError
from app.models.contact import ContactErrorResponse, ContactFormResponse, InvalidContactForm
from app.services.contact_service import contact_service
from app.utils.constants import PROJECT_TYPES, SUCCESS_MESSAGE, VALIDATION_FAILED

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ContactFormResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit contact form",
    description="Validate, sanitize and record a contact form message. No authentication required.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ContactErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ContactErrorResponse},
    },
)
async def submit_contact_form(http_request: Request) -> ContactFormResponse:
    """
    Submit a contact form message.

    This endpoint:
    - Re-validates every field, whatever the client already checked
    - Returns per-field messages when validation fails
    - Strips markup from accepted fields and lower-cases the email
    - Hands the sanitized submission to the configured recorders

    Args:
        http_request: FastAPI request object; the body is parsed here so a
            malformed body is reported as a server error, not a 422

    Returns:
        Confirmation response with success status

    Raises:
        SubmissionParseError: If the body is not valid JSON
        RecordingError: If a recorder fails
    """
    try:
        payload = await http_request.json()
    except ValueError as e:
        logger.error(f"Contact form API error: malformed request body: {str(e)}")
        raise SubmissionParseError() from e

    result = contact_service.validate(payload)

    if isinstance(result, InvalidContactForm):
        logger.info(f"Contact form rejected, invalid fields: {', '.join(result.field_errors)}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ContactErrorResponse(
                error=VALIDATION_FAILED, details=result.field_errors
            ).model_dump(),
        )

    await contact_service.submit(result.submission)

    return ContactFormResponse(success=True, message=SUCCESS_MESSAGE)


@router.get(
    "/project-types",
    response_model=List[str],
    status_code=status.HTTP_200_OK,
    summary="List project types",
    description="Project types offered by the contact form.",
)
async def list_project_types() -> List[str]:
    return PROJECT_TYPES
