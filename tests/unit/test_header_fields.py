"""Unit tests for identity header extraction."""

import pytest

from folio.contexts.intake.header_fields import extract_fields
from folio.contexts.intake.patterns import (
    is_body_boundary,
    is_valid_email,
    is_valid_linkedin,
    is_valid_location,
    is_valid_phone,
)
from folio.contexts.rendering.samples import SAMPLE_RESUME_TEXT


class TestValidators:
    """Independent contact-line validators."""

    @pytest.mark.unit
    def test_email(self):
        assert is_valid_email("john.doe@example.com")
        assert not is_valid_email("john.doe at example.com")
        assert not is_valid_email("john@example")

    @pytest.mark.unit
    @pytest.mark.parametrize("phone", ["+1 (555) 123-4567", "415.555.0100", "(415) 555-0100"])
    def test_phone(self, phone):
        assert is_valid_phone(phone)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["555-0100", "2013 - 2017", "+1 (555) 123"])
    def test_phone_needs_ten_digits(self, text):
        assert not is_valid_phone(text)

    @pytest.mark.unit
    def test_linkedin(self):
        assert is_valid_linkedin("linkedin.com/in/johndoe")
        assert is_valid_linkedin("https://www.LinkedIn.com/in/johndoe")
        assert not is_valid_linkedin("github.com/johndoe")

    @pytest.mark.unit
    def test_location(self):
        assert is_valid_location("San Francisco, CA")
        assert is_valid_location("Winston-Salem")
        assert not is_valid_location("NY")
        assert not is_valid_location("94103 San Francisco")
        assert not is_valid_location("john@example.com")

    @pytest.mark.unit
    def test_body_boundary(self):
        assert is_body_boundary("Summary:")
        assert is_body_boundary("• Built things")
        assert is_body_boundary("- Built things")
        assert not is_body_boundary("San Francisco, CA")
        assert not is_body_boundary("   ")


class TestExtractFields:
    """extract_fields() on complete and partial headers."""

    @pytest.mark.unit
    def test_sample_resume(self):
        fields = extract_fields(SAMPLE_RESUME_TEXT)

        assert fields.headline == "Senior Software Engineer"
        assert fields.name == "John Doe"
        assert fields.email == "john.doe@example.com"
        assert fields.phone == "+1 (555) 123-4567"
        assert fields.location == "San Francisco, CA"
        assert fields.linkedin == ""
        assert fields.body_start == 6
        assert fields.body.startswith("Summary:\nExperienced software engineer")

    @pytest.mark.unit
    def test_contact_line_order(self):
        fields = extract_fields(SAMPLE_RESUME_TEXT)
        assert fields.contact_line_parts() == [
            "San Francisco, CA",
            "+1 (555) 123-4567",
            "john.doe@example.com",
        ]

    @pytest.mark.unit
    def test_contact_lines_in_any_order(self):
        text = "Engineer\nJane Roe\nBerlin, Germany\nlinkedin.com/in/janeroe\njane@roe.dev\nSummary:\nHi"
        fields = extract_fields(text)

        assert fields.location == "Berlin, Germany"
        assert fields.linkedin == "linkedin.com/in/janeroe"
        assert fields.email == "jane@roe.dev"
        assert fields.body == "Summary:\nHi"

    @pytest.mark.unit
    def test_first_match_wins(self):
        text = "Engineer\nJane Roe\nfirst@roe.dev\nsecond@roe.dev\nSummary:"
        assert extract_fields(text).email == "first@roe.dev"

    @pytest.mark.unit
    def test_bullet_line_starts_body(self):
        text = "Engineer\nJane Roe\njane@roe.dev\n• Shipped the thing"
        fields = extract_fields(text)

        assert fields.body_start == 3
        assert fields.body == "• Shipped the thing"

    @pytest.mark.unit
    def test_leading_blank_lines_ignored(self):
        text = "\n\n  Engineer  \n\nJane Roe\njane@roe.dev\n\n\nSummary:\nHi"
        fields = extract_fields(text)

        assert fields.headline == "Engineer"
        assert fields.name == "Jane Roe"
        assert fields.body == "Summary:\nHi"

    @pytest.mark.unit
    def test_missing_fields_are_empty(self):
        fields = extract_fields("Engineer\nJane Roe\nSummary:\nHi")

        assert fields.email == ""
        assert fields.phone == ""
        assert fields.location == ""
        assert fields.linkedin == ""
        assert fields.contact_line_parts() == []

    @pytest.mark.unit
    def test_no_body_boundary(self):
        fields = extract_fields("Engineer\nJane Roe\njane@roe.dev")

        assert fields.email == "jane@roe.dev"
        assert fields.body_start == 3
        assert fields.body == ""

    @pytest.mark.unit
    def test_empty_input(self):
        fields = extract_fields("")

        assert fields.headline == ""
        assert fields.name == ""
        assert fields.body == ""

    @pytest.mark.unit
    def test_boundary_beyond_lookahead_found_by_fallback(self):
        """A section header after the lookahead window still starts the body."""
        filler = "\n".join(f"Line number {word}" for word in "abcdefghijklmnopqrst")
        text = f"Engineer\nJane Roe\n{filler}\nExperience:\nDid things"
        fields = extract_fields(text)

        assert fields.body == "Experience:\nDid things"
