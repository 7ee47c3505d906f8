# SPDX-License-Identifier: AGPL-3.0-only

import pytest
from marshmallow import ValidationError

from validators import (
    AnalyzeRequestSchema,
    AskRequestSchema,
    AudioRequestSchema,
    BenchmarkRequestSchema,
    ComplianceRequestSchema,
    ExplainRequestSchema,
    TranslateRequestSchema,
    first_error,
)


def load_error(schema, payload):
    with pytest.raises(ValidationError) as exc:
        schema.load(payload)
    return first_error(exc.value)


class TestRequiredMessages:
    @pytest.mark.parametrize("schema,payload,message", [
        (AnalyzeRequestSchema(), {}, "Text or document is required"),
        (AnalyzeRequestSchema(), {"text": "   "}, "Text or document is required"),
        (AnalyzeRequestSchema(), {"text": None}, "Text or document is required"),
        (ExplainRequestSchema(), {}, "No text provided"),
        (AskRequestSchema(), {"question": "Why?"}, "Question and document text are required"),
        (AskRequestSchema(), {"documentText": "doc"}, "Question and document text are required"),
        (ComplianceRequestSchema(), {}, "Document text is required for compliance check"),
        (BenchmarkRequestSchema(), {"documentText": ""}, "Document text is required for benchmarking"),
        (TranslateRequestSchema(), {}, "Text is required"),
        (AudioRequestSchema(), {"languageCode": "hi"}, "Text is required for audio generation"),
    ])
    def test_missing_field(self, schema, payload, message):
        assert load_error(schema, payload) == message

    def test_non_string_text(self):
        assert load_error(AnalyzeRequestSchema(), {"text": 42}) == "Text or document is required"


class TestDefaults:
    def test_analyze(self):
        data = AnalyzeRequestSchema().load({"text": "Lease", "extra": "ignored"})
        assert data == {"text": "Lease", "analysis_type": "general"}

    def test_analyze_type_must_be_known(self):
        assert "Must be one of" in load_error(AnalyzeRequestSchema(), {"text": "x", "analysisType": "poetry"})

    def test_ask_maps_camel_case(self):
        data = AskRequestSchema().load({"question": "Can I sublet?", "documentText": "Lease"})
        assert data == {"question": "Can I sublet?", "document_text": "Lease"}

    def test_compliance(self):
        data = ComplianceRequestSchema().load({"documentText": "doc"})
        assert data["jurisdiction"] == "US"
        assert "document_type" not in data

    def test_benchmark(self):
        data = BenchmarkRequestSchema().load({"documentText": "doc", "documentType": "nda"})
        assert data["industry"] == "general"
        assert data["document_type"] == "nda"

    def test_translate(self):
        data = TranslateRequestSchema().load({"text": "Hi"})
        assert data["target_language"] == "hi"
        assert data["source_language"] == "en"

    def test_audio(self):
        assert AudioRequestSchema().load({"text": "Hi"})["language_code"] == "en-US"


def test_first_error_on_nested_messages():
    err = ValidationError({"field": {"0": ["Bad item"]}})
    assert first_error(err) == "Bad item"
