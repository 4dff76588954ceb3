"""Markup stripping for contact form text.

Text is run through nh3 with no allowed tags, so every element is removed and
the bodies of ``<script>``/``<style>`` are dropped. nh3 returns HTML, which is
unescaped back to plain text; passes repeat until the value stops changing so
entity-encoded markup cannot survive as a tag.

The result is plain text, not HTML. Entities the user typed are decoded
(``&amp;`` becomes ``&``) and a stray ``<`` or ``>`` that does not form a tag
is kept as typed, so ``"5 < 10"`` reads the same after sanitizing. What
remains is never markup nh3 would strip. Anything rendering it into HTML must
escape it, as the Jinja2 notification template does.

SQL-looking text is left alone. Recorders that persist submissions must use
parameterized queries.
"""

import html

import nh3

from app.models.contact import ContactFormRequest, SanitizedContactSubmission

CONTENT_STRIPPED_TAGS = {"script", "style"}


def sanitize_text(value: str) -> str:
    """Trim a value and strip any HTML markup from it."""
    cleaned = value.strip()
    # each pass that changes the value removes markup or decodes an entity level
    while True:
        stripped = html.unescape(
            nh3.clean(cleaned, tags=set(), clean_content_tags=CONTENT_STRIPPED_TAGS)
        ).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def sanitize_email(value: str) -> str:
    return sanitize_text(value).lower()


def sanitize_submission(submission: ContactFormRequest) -> SanitizedContactSubmission:
    """Build the sanitized copy of a validated submission."""
    return SanitizedContactSubmission(
        name=sanitize_text(submission.name),
        email=sanitize_email(submission.email),
        company=sanitize_text(submission.company),
        project_type=sanitize_text(submission.project_type),
        message=sanitize_text(submission.message),
    )
