"""Testes para validação de campos obrigatórios."""

from __future__ import annotations

import pytest

from api.validators.whatsapp import find_missing_fields, validate_required_fields
from app.protocols.models import (
    OutboundFileRequest,
    OutboundImageRequest,
    OutboundTextRequest,
)
from utils.errors import MissingParameterError


class TestFindMissingFields:
    """Testes para find_missing_fields."""

    def test_complete_text_request(self) -> None:
        request = OutboundTextRequest(number="573001234567", message="Hola")
        assert find_missing_fields(request) == []

    def test_missing_number(self) -> None:
        request = OutboundTextRequest(message="Hola")
        assert find_missing_fields(request) == ["number"]

    def test_empty_string_counts_as_missing(self) -> None:
        request = OutboundTextRequest(number="", message="")
        assert find_missing_fields(request) == ["number", "message"]

    def test_whitespace_is_accepted(self) -> None:
        request = OutboundTextRequest(number=" ", message="  ")
        assert find_missing_fields(request) == []

    def test_image_caption_is_optional(self) -> None:
        request = OutboundImageRequest(number="1", imageUrl="https://x.test/a.png")
        assert find_missing_fields(request) == []

    def test_image_url_only_read_from_camel_case_key(self) -> None:
        request = OutboundImageRequest.model_validate(
            {"number": "1", "image_url": "https://x.test/a.png"}
        )
        assert request.image_url is None
        assert find_missing_fields(request) == ["image_url"]

    def test_file_requires_filename_and_base64(self) -> None:
        request = OutboundFileRequest(number="1")
        assert find_missing_fields(request) == ["filename", "base64"]


class TestValidateRequiredFields:
    """Testes para validate_required_fields."""

    def test_valid_request_passes(self) -> None:
        validate_required_fields(
            OutboundFileRequest(number="1", filename="a.pdf", base64="JVBERi0=")
        )

    def test_missing_fields_raise(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            validate_required_fields(OutboundImageRequest(caption="solo caption"))
        assert exc_info.value.missing == ["number", "image_url"]
