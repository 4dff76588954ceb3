import html

import nh3
import pytest
from app.models.contact import ContactFormRequest
from app.utils.sanitize import sanitize_email, sanitize_submission, sanitize_text


class TestSanitizeText:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("  Acme Corp  ", "Acme Corp"),
            ("Hello <script>alert('xss')</script>world", "Hello world"),
            ("<b>Acme</b> Corp", "Acme Corp"),
            ("<style>body { display: none }</style>Plain text", "Plain text"),
            ('<a href="javascript:alert(1)">click</a> here', "click here"),
            ("Before <!-- hidden --> after", "Before  after"),
            ("&lt;script&gt;alert(1)&lt;/script&gt;kept", "kept"),
        ],
    )
    def test_markup_removed(self, value, expected):
        assert sanitize_text(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "I need help building a web application for my business.",
            "'; DROP TABLE users; --",
            "Budget: 5 < 10 and 10 > 5",
            "Tom & Jerry Ltd",
            "Line one\nLine two",
        ],
    )
    def test_plain_text_preserved(self, value):
        assert sanitize_text(value) == value

    @pytest.mark.parametrize(
        "value",
        [
            "<script>alert(1)</script>Hi <b>there</b>",
            "&amp;lt;b&amp;gt;bold&amp;lt;/b&amp;gt;",
            "  spaced  ",
            "5 < 10",
            "&" + "amp;" * 12 + "lt;b&gt;x",
        ],
    )
    def test_sanitizing_twice_is_a_no_op(self, value):
        once = sanitize_text(value)

        assert sanitize_text(once) == once
        assert "<b>" not in once
        assert "<script>" not in once

    def test_deeply_nested_entities_fully_decoded(self):
        assert sanitize_text("&" + "amp;" * 12 + "lt;b&gt;x") == "x"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("<b>Budget</b> a < b> c", "Budget a < b> c"),
            ("Use &amp; for ampersand", "Use & for ampersand"),
        ],
    )
    def test_output_is_plain_text_without_markup(self, value, expected):
        result = sanitize_text(value)

        assert result == expected
        assert html.unescape(nh3.clean(result, tags=set())) == result


class TestSanitizeEmail:

    def test_email_trimmed_and_lower_cased(self):
        assert sanitize_email("  John.Doe@Example.COM ") == "john.doe@example.com"

    def test_sanitized_email_unchanged_on_second_pass(self):
        once = sanitize_email(" Someone@Example.org")

        assert sanitize_email(once) == once


class TestSanitizeSubmission:

    def test_every_field_sanitized(self):
        submission = ContactFormRequest(
            name=" <i>John</i> Doe ",
            email=" JOHN@example.com",
            company="Acme <script>steal()</script>Corp",
            projectType=" <b>Web Applications</b> ",
            message="<p>I need help building a web application.</p>",
        )

        sanitized = sanitize_submission(submission)

        assert sanitized.name == "John Doe"
        assert sanitized.email == "john@example.com"
        assert sanitized.company == "Acme Corp"
        assert sanitized.project_type == "Web Applications"
        assert sanitized.message == "I need help building a web application."
        assert sanitized.model_dump(by_alias=True)["projectType"] == "Web Applications"
