"""
LexLink – legal document analysis API

Endpoints (served at / and under /api)
─────────
POST /analyze     → document analysis (file upload or {text, analysisType})
POST /explain     → plain-English clause explanation
POST /ask         → question answering over a document
POST /compliance  → jurisdiction compliance check
POST /benchmark   → industry benchmarking
POST /translate   → translation (client-delegated unless enabled)
POST /audio       → browser speech-synthesis instructions
GET  /languages   → supported language catalogue
GET  /health      → {"status": "OK"}
"""

# SPDX-License-Identifier: AGPL-3.0-only

# ── imports ──────────────────────────────────────────────────────
import logging
from datetime import datetime, timezone

from dotenv import load_dotenv
from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS                 # every origin, every route
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from analysis.service import AnalysisService
from common.errors import FileTooLargeError, LexLinkError, UnsupportedMediaError
from common.llm_client import LLMClient
from extraction.config import AppConfig
from extraction.domain_service import DomainService
from extraction.models import MimeType, PromptTask, UploadedDocument
from extraction.ocr_service import OCRService
from extraction.text_service import TextExtractionService
from language.service import TranslationService, language_catalogue, speech_payload
from validators import (
    AnalyzeRequestSchema,
    AnalyzeUploadSchema,
    AskRequestSchema,
    AudioRequestSchema,
    BenchmarkRequestSchema,
    ComplianceRequestSchema,
    ExplainRequestSchema,
    TranslateRequestSchema,
    first_error,
)

logger = logging.getLogger(__name__)

# Multipart framing on top of the file itself
UPLOAD_OVERHEAD_BYTES = 1024 * 1024

DEGRADED_NOTES = {
    "no-credential": "Demo mode: no AI service credential is configured, so this is a sample result "
                     "rather than an AI-generated analysis.",
}
DEFAULT_DEGRADED_NOTE = ("The AI service could not produce a result for this request, so this is a "
                         "sample result rather than an AI-generated analysis.")

COMPLIANCE_DISCLAIMER = "This analysis is for informational purposes only and does not constitute legal advice"
BENCHMARK_DISCLAIMER = ("Benchmarking analysis is for informational purposes and should be supplemented "
                        "with professional legal review")

bp = Blueprint("lexlink", __name__)


# ── helpers ──────────────────────────────────────────────────────
def _services() -> dict:
    return current_app.extensions["lexlink"]


def _json_body() -> dict:
    """JSON body if there is one, else form fields; never raises on bad JSON."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()
    return payload if isinstance(payload, dict) else {}


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _envelope(outcome, **extra):
    """Result fields plus the success/demoMode/timestamp markers."""
    body = outcome.result.to_dict()
    body.update(extra)
    body["success"] = True
    body["demoMode"] = outcome.degraded
    body["timestamp"] = _timestamp()
    if outcome.degraded:
        body["note"] = DEGRADED_NOTES.get(outcome.reason, DEFAULT_DEGRADED_NOTE)
        body["degradedReason"] = outcome.reason
    return jsonify(body), 200


def _read_upload(upload, max_bytes: int) -> UploadedDocument:
    mime = MimeType.resolve(upload.mimetype, upload.filename)
    if mime is None:
        raise UnsupportedMediaError("Invalid file type. Only PDF, text, and image files are allowed.")
    data = upload.read()
    if len(data) > max_bytes:
        raise FileTooLargeError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")
    return UploadedDocument(raw_bytes=data, mime_type=mime, filename=upload.filename or "")


# ── ROUTES ───────────────────────────────────────────────────────
@bp.get("/health")
def health():
    """Used by the frontend (and uptime checks) to verify the API is alive."""
    return jsonify(status="OK", message="LexLink API is running", timestamp=_timestamp()), 200


@bp.post("/analyze")
def analyze():
    """Analyze an uploaded document or a block of pasted text."""
    services = _services()
    upload = request.files.get("document") or request.files.get("file")

    if upload is not None and upload.filename:
        document = _read_upload(upload, services["config"].max_upload_bytes)
        form = AnalyzeUploadSchema().load(request.form.to_dict())
        outcome = services["analysis"].analyze_upload(
            document,
            analysis_focus=form.get("analysis_type") or "general",
            document_type=form.get("document_type"),
        )
    else:
        body = AnalyzeRequestSchema().load(_json_body())
        outcome = services["analysis"].run(
            PromptTask.ANALYZE,
            body["text"],
            document_type=body.get("document_type"),
            analysis_focus=body.get("analysis_type") or "general",
        )

    return _envelope(outcome, documentLength=outcome.document_length)


@bp.post("/explain")
def explain():
    """Explain a single clause in plain English."""
    body = ExplainRequestSchema().load(_json_body())
    outcome = _services()["analysis"].run(PromptTask.EXPLAIN_CLAUSE, body["text"])
    return _envelope(outcome, originalText=body["text"])


@bp.post("/ask")
def ask():
    """Answer a question about a document."""
    body = AskRequestSchema().load(_json_body())
    outcome = _services()["analysis"].run(PromptTask.QA, body["document_text"], question=body["question"])
    return _envelope(outcome, question=body["question"])


@bp.post("/compliance")
def compliance():
    body = ComplianceRequestSchema().load(_json_body())
    outcome = _services()["analysis"].run(
        PromptTask.COMPLIANCE_CHECK,
        body["document_text"],
        document_type=body.get("document_type"),
        jurisdiction=body["jurisdiction"],
    )
    return _envelope(outcome, disclaimer=COMPLIANCE_DISCLAIMER)


@bp.post("/benchmark")
def benchmark():
    body = BenchmarkRequestSchema().load(_json_body())
    outcome = _services()["analysis"].run(
        PromptTask.BENCHMARK,
        body["document_text"],
        document_type=body.get("document_type"),
        industry=body["industry"],
    )
    return _envelope(outcome, disclaimer=BENCHMARK_DISCLAIMER)


@bp.post("/translate")
def translate():
    body = TranslateRequestSchema().load(_json_body())
    result = _services()["translation"].translate(
        body["text"], target_language=body["target_language"], source_language=body["source_language"]
    )
    return jsonify(success=True, timestamp=_timestamp(), **result), 200


@bp.post("/audio")
def audio():
    """Speech-synthesis instructions; audio is produced in the browser."""
    body = AudioRequestSchema().load(_json_body())
    payload = speech_payload(body["text"], body["language_code"])
    return jsonify(
        success=True,
        timestamp=_timestamp(),
        note="This endpoint provides Web Speech API integration for free text-to-speech functionality",
        **payload
    ), 200


@bp.get("/languages")
def languages():
    services = _services()
    catalogue = language_catalogue(
        ai_powered=services["llm"].available,
        translation_enabled=services["config"].translation_enabled,
    )
    return jsonify(success=True, timestamp=_timestamp(), **catalogue), 200


# ── error handlers ───────────────────────────────────────────────
def _register_error_handlers(app: Flask):
    @app.errorhandler(LexLinkError)
    def lexlink_error(e: LexLinkError):
        logger.info("Rejected request to %s: %s (%s)", request.path, e.message, e.reason)
        return jsonify(error=e.message, reason=e.reason), 400

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify(error=first_error(e)), 400

    @app.errorhandler(413)
    def file_too_large(e):
        max_mb = app.extensions["lexlink"]["config"].max_upload_bytes // (1024 * 1024)
        return jsonify(error=f"File too large. Maximum size is {max_mb}MB.", reason="file-too-large"), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify(error="Not found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(error="Method not allowed"), 405

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify(error=e.description or e.name), e.code

    @app.errorhandler(Exception)
    def internal_error(e: Exception):
        logger.exception("Unhandled error on %s", request.path)
        return jsonify(error="Internal server error", details=str(e)), 500


# ── app factory ──────────────────────────────────────────────────
def create_app(config: AppConfig = None, llm_client: LLMClient = None, ocr_service: OCRService = None) -> Flask:
    """
    Build the Flask app.

    Args:
        config: settings; read from the environment and .env when omitted
        llm_client: model client (tests inject one with a fake session)
        ocr_service: OCR engine; built from config when omitted
    """
    load_dotenv()
    config = config or AppConfig()

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes + UPLOAD_OVERHEAD_BYTES
    origins = config.get_cors_origins()
    CORS(app, origins=origins, send_wildcard=origins == "*")

    llm_client = llm_client or LLMClient(config)
    if ocr_service is None and config.ocr_enabled:
        ocr_service = OCRService(language=config.ocr_language)

    app.extensions["lexlink"] = {
        "config": config,
        "llm": llm_client,
        "analysis": AnalysisService(
            config,
            llm_client=llm_client,
            text_service=TextExtractionService(ocr_service=ocr_service),
            domain_service=DomainService(),
        ),
        "translation": TranslationService(config, llm_client=llm_client),
    }

    app.register_blueprint(bp)
    app.register_blueprint(bp, url_prefix="/api", name="api")
    _register_error_handlers(app)

    if not llm_client.available:
        logger.warning("AI service '%s' has no credential configured; responses will use demo data",
                       config.provider)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=3001)
