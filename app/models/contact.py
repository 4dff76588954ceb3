"""Contact form models for the Mero Tech API.

This module contains the Pydantic models for contact form functionality:
the validation schema shared by the API and the form client, the result of
applying it, and the sanitized record handed to recorders.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from typing_extensions import Annotated
from pydantic import BaseModel, EmailStr, Field, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
COMPANY_MIN_LENGTH = 2
COMPANY_MAX_LENGTH = 100
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

email_adapter = TypeAdapter(EmailStr)

FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "company": "Company name",
    "project_type": "Project type",
    "message": "Message",
}

# attribute name -> name used in request bodies and error details
WIRE_NAMES = {
    "name": "name",
    "email": "email",
    "company": "company",
    "project_type": "projectType",
    "message": "message",
}


def _check_length(value: str, label: str, min_length: int, max_length: int) -> str:
    length = len(value.strip())
    if length < min_length:
        raise PydanticCustomError(
            "too_short", f"{label} must be at least {min_length} characters"
        )
    if length > max_length:
        raise PydanticCustomError(
            "too_long", f"{label} must be at most {max_length} characters"
        )
    return value


class ContactFormRequest(BaseModel):
    """Request model for contact form submissions.

    A missing field is validated as an empty string, so it reports the same
    message as a blank one.

    Attributes:
        name: Full name of the person getting in touch
        email: Email address for the reply
        company: Company the person represents
        project_type: Kind of project the inquiry is about (``projectType`` on the wire)
        message: The inquiry itself
    """
    name: Annotated[str, Field("", description="Full name of the person getting in touch")]
    email: Annotated[str, Field("", description="Email address for the reply")]
    company: Annotated[str, Field("", description="Company the person represents")]
    project_type: Annotated[
        str,
        Field("", alias="projectType", description="Kind of project the inquiry is about"),
    ]
    message: Annotated[str, Field("", description="The inquiry itself")]

    model_config = ConfigDict(populate_by_name=True, frozen=True, validate_default=True)

    @field_validator("*", mode="before")
    @classmethod
    def require_text(cls, value: Any, info) -> Any:
        if not isinstance(value, str):
            label = FIELD_LABELS[info.field_name]
            raise PydanticCustomError("string_type", f"{label} must be text")
        return value

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _check_length(value, "Name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        email = value.strip()
        # EmailStr also accepts "Name <addr>" forms
        if not email or any(char.isspace() or char in "<>" for char in email):
            raise PydanticCustomError("email", "Please enter a valid email address")
        try:
            email_adapter.validate_python(email)
        except ValidationError:
            raise PydanticCustomError("email", "Please enter a valid email address") from None
        return value

    @field_validator("company")
    @classmethod
    def validate_company(cls, value: str) -> str:
        return _check_length(value, "Company name", COMPANY_MIN_LENGTH, COMPANY_MAX_LENGTH)

    @field_validator("project_type")
    @classmethod
    def validate_project_type(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("missing_project_type", "Please select a project type")
        return value

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        return _check_length(value, "Message", MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH)


class ValidContactForm(BaseModel):
    """Outcome of a schema check that accepted the input."""
    submission: ContactFormRequest

    model_config = ConfigDict(frozen=True)


class InvalidContactForm(BaseModel):
    """Outcome of a schema check that rejected the input.

    Attributes:
        field_errors: Messages keyed by wire field name; only failing fields appear
    """
    field_errors: Dict[str, List[str]]

    model_config = ConfigDict(frozen=True)


ValidationResult = Union[ValidContactForm, InvalidContactForm]


class SanitizedContactSubmission(BaseModel):
    """A validated submission with markup stripped and the email normalized."""
    name: str
    email: str
    company: str
    project_type: Annotated[str, Field(..., alias="projectType")]
    message: str

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ContactRecord(BaseModel):
    """What recorders receive for each accepted submission.

    Attributes:
        reference_id: Server generated id for tracking the inquiry
        submitted_at: UTC time the server accepted the submission
        submission: The sanitized form data
    """
    reference_id: str
    submitted_at: datetime
    submission: SanitizedContactSubmission

    model_config = ConfigDict(frozen=True)


class ContactFormResponse(BaseModel):
    """Response model for accepted contact form submissions."""
    success: bool = Field(True, description="Whether the contact form was submitted successfully")
    message: str = Field(..., description="Confirmation message for the user")


class ContactErrorResponse(BaseModel):
    """Response model for rejected or failed contact form submissions.

    Attributes:
        success: Always false
        error: Short description of what went wrong
        details: Per-field validation messages, present only on validation failures
    """
    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Short description of what went wrong")
    details: Optional[Dict[str, List[str]]] = Field(
        None, description="Validation messages keyed by field name"
    )
