import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from app.main import app
from app.services.contact_form_client import (
    ERROR_FALLBACK_MESSAGE,
    SUCCESS_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    ContactForm,
    FormStatus,
)
from app.tests.constants.contact import ContactTestConstants


def fill(form, values=None):
    for field, value in (values or ContactTestConstants.VALID_SUBMISSION.value).items():
        form.set_field(field, value)
    return form


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def asgi_client():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client


class TestContactFormEditing:

    def test_new_form_is_idle_and_empty(self):
        form = ContactForm()

        assert form.status == FormStatus.IDLE
        assert set(form.state.values.values()) == {""}
        assert form.state.errors == {}

    def test_set_unknown_field(self):
        form = ContactForm()

        with pytest.raises(ValueError, match="Unknown contact form field: phone"):
            form.set_field("phone", "555-0100")

    def test_validate_reports_first_message_per_field(self):
        form = fill(ContactForm(), ContactTestConstants.SHORT_FIELDS_SUBMISSION.value)

        assert form.validate() is False
        assert form.state.errors == {
            "name": "Name must be at least 2 characters",
            "message": "Message must be at least 10 characters",
        }

    def test_editing_clears_only_that_fields_error(self):
        form = fill(ContactForm(), ContactTestConstants.SHORT_FIELDS_SUBMISSION.value)
        form.validate()

        form.set_field("name", "Jo")

        assert form.state.errors == {"message": "Message must be at least 10 characters"}

    def test_validate_clears_errors_when_valid(self):
        form = ContactForm()
        form.validate()
        fill(form)

        assert form.validate() is True
        assert form.state.errors == {}


class TestContactFormSubmit:

    @pytest.mark.asyncio
    async def test_locally_invalid_form_is_not_sent(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=ContactTestConstants.SUCCESS_RESPONSE.value)

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client))
            form.set_field("email", "invalid-email")

            state = await form.submit()

            assert state.status == FormStatus.IDLE
            assert state.errors == {"email": ContactTestConstants.INVALID_EMAIL_MESSAGE.value}
            assert requests == []

    @pytest.mark.asyncio
    async def test_successful_submit_resets_fields(self, asgi_client, mock_contact_recorder):
        form = fill(ContactForm(client=asgi_client))

        state = await form.submit()

        assert state.status == FormStatus.SUCCESS
        assert state.message == SUCCESS_MESSAGE
        assert set(state.values.values()) == {""}
        mock_contact_recorder.record.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_server_error_preserves_fields(self, asgi_client, mock_contact_recorder):
        mock_contact_recorder.record.side_effect = RuntimeError("sink unavailable")
        form = fill(ContactForm(client=asgi_client))

        state = await form.submit()

        assert state.status == FormStatus.ERROR
        assert state.message == ContactTestConstants.SERVER_ERROR_RESPONSE.value["error"]
        assert state.values == ContactTestConstants.VALID_SUBMISSION.value

    @pytest.mark.asyncio
    async def test_server_validation_error_message_shown(self):
        def handler(request):
            return httpx.Response(
                400,
                json={"success": False, "error": "Validation failed", "details": {"name": ["x"]}},
            )

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client))

            state = await form.submit()

            assert state.status == FormStatus.ERROR
            assert state.message == "Validation failed"
            assert state.values["name"] == "John Doe"

    @pytest.mark.asyncio
    async def test_error_without_body_uses_fallback_message(self):
        async with mock_client(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
            form = fill(ContactForm(client=client))

            state = await form.submit()

            assert state.status == FormStatus.ERROR
            assert state.message == ERROR_FALLBACK_MESSAGE

    @pytest.mark.asyncio
    async def test_ok_status_without_success_flag_is_an_error(self):
        async with mock_client(lambda request: httpx.Response(200, json={"success": False})) as client:
            form = fill(ContactForm(client=client))

            state = await form.submit()

            assert state.status == FormStatus.ERROR
            assert state.message == ERROR_FALLBACK_MESSAGE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")],
    )
    async def test_transport_failure(self, error):
        def handler(request):
            raise error

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client))

            state = await form.submit()

            assert state.status == FormStatus.ERROR
            assert state.message == TRANSPORT_ERROR_MESSAGE
            assert state.values == ContactTestConstants.VALID_SUBMISSION.value

    @pytest.mark.asyncio
    async def test_request_carries_form_values(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=ContactTestConstants.SUCCESS_RESPONSE.value)

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client, timeout=2.5))

            await form.submit()

            assert len(requests) == 1
            assert requests[0].method == "POST"
            assert requests[0].url.path == "/api/contact"
            assert requests[0].extensions["timeout"]["read"] == 2.5
            assert json.loads(requests[0].content) == ContactTestConstants.VALID_SUBMISSION.value

    @pytest.mark.asyncio
    async def test_submit_ignored_while_submitting(self):
        requests = []
        form = None

        async def handler(request):
            requests.append(request)
            assert form.status == FormStatus.SUBMITTING
            await asyncio.sleep(0)
            return httpx.Response(200, json=ContactTestConstants.SUCCESS_RESPONSE.value)

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client))

            await asyncio.gather(form.submit(), form.submit())

            assert len(requests) == 1
            assert form.status == FormStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_editing_after_error_returns_to_idle(self):
        async with mock_client(lambda request: httpx.Response(500)) as client:
            form = fill(ContactForm(client=client))
            await form.submit()
            assert form.status == FormStatus.ERROR

            form.set_field("message", "Trying again with a longer message.")

            assert form.status == FormStatus.IDLE
            assert form.state.message is None
            assert form.state.values["name"] == "John Doe"

    @pytest.mark.asyncio
    async def test_invalid_submit_after_success_returns_to_idle(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=ContactTestConstants.SUCCESS_RESPONSE.value)

        async with mock_client(handler) as client:
            form = fill(ContactForm(client=client))
            await form.submit()
            assert form.status == FormStatus.SUCCESS

            state = await form.submit()

            assert state.status == FormStatus.IDLE
            assert state.message is None
            assert set(state.errors) == set(ContactTestConstants.FIELD_NAMES.value)
            assert len(requests) == 1
