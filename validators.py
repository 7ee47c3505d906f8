# SPDX-License-Identifier: AGPL-3.0-only

"""
Input validation schemas using Marshmallow for API endpoints.
"""
from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate

ANALYSIS_TYPES = ['general', 'legal', 'contract', 'compliance']


def not_blank(message):
    """Validator rejecting empty and whitespace-only strings."""
    def _validate(value):
        if not value or not value.strip():
            raise ValidationError(message)
    return _validate


def required_text(message, **kwargs):
    """A required, non-blank string field that reports `message` for every failure."""
    return fields.Str(
        required=True,
        validate=not_blank(message),
        error_messages={'required': message, 'null': message, 'invalid': message},
        **kwargs
    )


def first_error(err: ValidationError) -> str:
    """Flatten a marshmallow error into the single message the API returns."""
    messages = err.messages
    while isinstance(messages, dict):
        if not messages:
            return 'Invalid request'
        messages = next(iter(messages.values()))
    if isinstance(messages, list):
        return str(messages[0]) if messages else 'Invalid request'
    return str(messages)


class BaseRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class AnalyzeRequestSchema(BaseRequestSchema):
    """Validation schema for text analysis requests."""
    text = required_text('Text or document is required')
    analysis_type = fields.Str(
        data_key='analysisType',
        required=False,
        allow_none=True,
        validate=validate.OneOf(ANALYSIS_TYPES),
        load_default='general',
        error_messages={'invalid': 'analysisType must be a string'}
    )
    document_type = fields.Str(
        data_key='documentType',
        required=False,
        allow_none=True,
        validate=validate.Length(max=50),
    )


class AnalyzeUploadSchema(BaseRequestSchema):
    """Form fields accepted alongside an uploaded document."""
    analysis_type = fields.Str(
        data_key='analysisType',
        required=False,
        allow_none=True,
        validate=validate.OneOf(ANALYSIS_TYPES),
        load_default='general'
    )
    document_type = fields.Str(
        data_key='documentType',
        required=False,
        allow_none=True,
        validate=validate.Length(max=50),
    )


class ExplainRequestSchema(BaseRequestSchema):
    """Validation schema for clause explanation requests."""
    text = required_text('No text provided')


class AskRequestSchema(BaseRequestSchema):
    """Validation schema for document Q&A requests."""
    question = fields.Str(
        required=True,
        validate=[not_blank('Question and document text are required'),
                  validate.Length(max=2000, error='Question must be at most 2000 characters')],
        error_messages={
            'required': 'Question and document text are required',
            'null': 'Question and document text are required',
            'invalid': 'Question must be a string'
        }
    )
    document_text = required_text('Question and document text are required', data_key='documentText')


class ComplianceRequestSchema(BaseRequestSchema):
    """Validation schema for compliance check requests."""
    document_text = required_text('Document text is required for compliance check', data_key='documentText')
    document_type = fields.Str(data_key='documentType', required=False, allow_none=True,
                               validate=validate.Length(max=50))
    jurisdiction = fields.Str(
        required=False,
        validate=validate.Length(min=1, max=100),
        load_default='US',
        error_messages={'invalid': 'Jurisdiction must be a string'}
    )


class BenchmarkRequestSchema(BaseRequestSchema):
    """Validation schema for benchmarking requests."""
    document_text = required_text('Document text is required for benchmarking', data_key='documentText')
    document_type = fields.Str(data_key='documentType', required=False, allow_none=True,
                               validate=validate.Length(max=50))
    industry = fields.Str(
        required=False,
        validate=validate.Length(min=1, max=100),
        load_default='general',
        error_messages={'invalid': 'Industry must be a string'}
    )


class TranslateRequestSchema(BaseRequestSchema):
    """Validation schema for translation requests."""
    text = required_text('Text is required')
    target_language = fields.Str(data_key='targetLanguage', required=False, load_default='hi',
                                 validate=validate.Length(min=1, max=10))
    source_language = fields.Str(data_key='sourceLanguage', required=False, load_default='en',
                                 validate=validate.Length(min=1, max=10))


class AudioRequestSchema(BaseRequestSchema):
    """Validation schema for text-to-speech requests."""
    text = required_text('Text is required for audio generation')
    language_code = fields.Str(data_key='languageCode', required=False, load_default='en-US',
                               validate=validate.Length(min=1, max=10))
