"""
Editor validation rules, error flattening and envelope invariants.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.schemas.category import CategoryView, EditorCategory, ResultEnvelope
from blog.validation import (
    NAME_LENGTH_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    SLUG_REQUIRED_MESSAGE,
    extract_error_messages,
    validate_editor,
)


class TestValidateEditor:

    def test_valid_editor_has_no_failures(self):
        assert validate_editor(EditorCategory(name="Tech", slug="tech")) == []

    @pytest.mark.parametrize("name", ["abc", "a" * 40])
    def test_name_length_bounds_are_inclusive(self, name):
        assert validate_editor(EditorCategory(name=name, slug="s")) == []

    @pytest.mark.parametrize("name", ["ab", "a" * 41])
    def test_name_outside_bounds(self, name):
        failures = validate_editor(EditorCategory(name=name, slug="s"))
        assert extract_error_messages(failures) == [NAME_LENGTH_MESSAGE]

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_reports_required_only(self, name):
        failures = validate_editor(EditorCategory(name=name, slug="s"))
        assert extract_error_messages(failures) == [NAME_REQUIRED_MESSAGE]

    @pytest.mark.parametrize("slug", [None, "", "  "])
    def test_blank_slug(self, slug):
        failures = validate_editor(EditorCategory(name="Tech", slug=slug))
        assert extract_error_messages(failures) == [SLUG_REQUIRED_MESSAGE]

    def test_failures_are_ordered_by_field(self):
        failures = validate_editor(EditorCategory(name="a"))
        assert [failure["loc"] for failure in failures] == [("body", "name"), ("body", "slug")]


class TestExtractErrorMessages:

    def test_flattens_pydantic_errors(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            EditorCategory(name=123, slug=["x"])

        messages = extract_error_messages(exc_info.value.errors())

        assert len(messages) == 2
        assert all(isinstance(message, str) and message for message in messages)

    def test_keeps_duplicates_and_order(self):
        failures = [{"msg": "b"}, {"msg": "a"}, {"msg": "b"}]
        assert extract_error_messages(failures) == ["b", "a", "b"]

    def test_empty(self):
        assert extract_error_messages([]) == []


class TestResultEnvelope:

    def test_success_serializes_data_and_empty_errors(self):
        envelope = ResultEnvelope[CategoryView].success(CategoryView(id=1, name="Tech", slug="tech"))
        assert envelope.model_dump(mode="json") == {
            "data": {"id": 1, "name": "Tech", "slug": "tech"},
            "errors": [],
        }
        assert envelope.succeeded

    def test_failure_from_single_message(self):
        envelope = ResultEnvelope.failure("Contéudo não encontrado")
        assert envelope.model_dump(mode="json") == {
            "data": None,
            "errors": ["Contéudo não encontrado"],
        }
        assert not envelope.succeeded

    def test_failure_needs_an_error(self):
        with pytest.raises(ValueError):
            ResultEnvelope.failure([])

    def test_data_and_errors_are_exclusive(self):
        with pytest.raises(PydanticValidationError):
            ResultEnvelope[int](data=1, errors=["boom"])

    def test_empty_list_is_a_success(self):
        envelope = ResultEnvelope[list].success([])
        assert envelope.data == []
        assert envelope.succeeded
