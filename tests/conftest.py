# SPDX-License-Identifier: AGPL-3.0-only

"""
Pytest configuration and fixtures.

This module provides shared fixtures and configuration for all tests.
"""

import json

import pytest
import requests
from unittest.mock import Mock

from app import create_app
from common.llm_client import LLMClient
from extraction.config import AppConfig
from extraction.domain_service import DomainService
from extraction.text_service import TextExtractionService


def make_response(json_data=None, status_code=200):
    """Build a fake requests.Response for a mocked session."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.json.return_value = json_data
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=resp
        )
    else:
        resp.raise_for_status.return_value = None
    return resp


def gemini_reply(text):
    """Wrap reply text the way generateContent returns it."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}]}


@pytest.fixture
def config():
    """Config with no credential: every AI call degrades to demo data."""
    return AppConfig(_env_file=None, ai_service="gemini", gemini_api_key=None, translation_enabled=False)


@pytest.fixture
def live_config():
    """Config with a (fake) Gemini credential."""
    return AppConfig(_env_file=None, ai_service="gemini", gemini_api_key="test-key", translation_enabled=True)


@pytest.fixture
def fake_session():
    """Requests session whose post() the test programs."""
    return Mock(spec=requests.Session)


@pytest.fixture
def live_client(live_config, fake_session):
    """LLM client wired to the fake session."""
    return LLMClient(live_config, session=fake_session)


@pytest.fixture
def reply_with(fake_session):
    """Make the next model call reply with the given text or JSON object."""
    def _reply(payload):
        text = payload if isinstance(payload, str) else json.dumps(payload)
        fake_session.post.return_value = make_response(gemini_reply(text))
    return _reply


@pytest.fixture
def mock_ocr_service():
    """Mock OCR service."""
    mock_service = Mock()
    mock_service.extract_text_from_image.return_value = "Tenant shall pay rent to the landlord."
    mock_service.extract_text_from_pdf.return_value = ["Scanned lease page one", "Scanned page two"]
    return mock_service


@pytest.fixture
def domain_service():
    """Domain service instance."""
    return DomainService()


@pytest.fixture
def text_service(mock_ocr_service):
    return TextExtractionService(ocr_service=mock_ocr_service)


@pytest.fixture
def app(config, mock_ocr_service):
    """Flask app in demo mode (no credential)."""
    flask_app = create_app(config, ocr_service=mock_ocr_service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_app(live_config, live_client, mock_ocr_service):
    """Flask app whose model calls go to the fake session."""
    flask_app = create_app(live_config, llm_client=live_client, ocr_service=mock_ocr_service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def live_http(live_app):
    return live_app.test_client()


@pytest.fixture
def lease_text():
    return """
    RESIDENTIAL LEASE AGREEMENT

    This Lease is made between John Smith ("Landlord") and Jane Doe ("Tenant").
    The Landlord agrees to rent the premises at 12 Elm Street to the Tenant.
    Monthly rent of $1,500 is due on the 1st. A security deposit of $1,500 is required.
    No pets are allowed without written permission.
    """


@pytest.fixture
def nda_text():
    return """
    MUTUAL NON-DISCLOSURE AGREEMENT

    The Disclosing Party may share Confidential Information with the Receiving Party.
    The Receiving Party shall not disclose any trade secret to third parties.
    """


@pytest.fixture
def analysis_reply():
    """A well-formed analyze reply."""
    return {
        "documentType": "lease_agreement",
        "summary": "A one-year residential lease.",
        "keyTerms": [{"term": "Security deposit", "explanation": "Money held by the landlord",
                      "importance": "You get it back if you leave the unit in good condition"}],
        "yourRights": ["Quiet enjoyment"],
        "yourObligations": ["Pay rent by the 1st"],
        "riskAssessment": {
            "overallRiskScore": 4,
            "riskFactors": [{"risk": "Late fees", "severity": "medium", "explanation": "$50 after 5 days"}],
        },
        "redFlags": ["No grace period"],
        "recommendations": [{"action": "Automate rent", "priority": "high", "reason": "Avoid late fees"}],
        "nextSteps": ["Photograph the unit"],
        "whenToSeekHelp": "If the landlord withholds the deposit.",
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Add markers based on module names
    for item in items:
        if "test_app" in item.nodeid or "integration" in item.name:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
