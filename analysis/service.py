# SPDX-License-Identifier: AGPL-3.0-only

"""
Analysis service orchestrator: coordinates the document analysis pipeline.

Received -> [Extracting] -> Classifying -> Prompting -> Invoking -> Normalizing
-> Success | Fallback -> Responded. Upstream and format failures are recovered
here by switching to the canned result for the task, so callers always get a
well-formed result model back. Extraction failures are not recovered.
"""
import logging
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from common.errors import FormatError, UpstreamError
from common.llm_client import LLMClient
from common.metrics import PipelineState, PipelineTrace
from extraction.domain_service import DomainService
from extraction.models import DocumentType, PromptTask, UploadedDocument
from extraction.text_service import TextExtractionService

from .fallback import fallback
from .normalizer import parse_llm_response
from .prompt_pack import SYSTEM_PROMPT, build_prompt
from .results import (
    AnalysisReport,
    BenchmarkReport,
    ClauseExplanation,
    ComplianceReport,
    QuestionAnswer,
    ResultModel,
)

logger = logging.getLogger(__name__)

TASK_RESULTS: Dict[PromptTask, Type[ResultModel]] = {
    PromptTask.ANALYZE: AnalysisReport,
    PromptTask.EXPLAIN_CLAUSE: ClauseExplanation,
    PromptTask.QA: QuestionAnswer,
    PromptTask.COMPLIANCE_CHECK: ComplianceReport,
    PromptTask.BENCHMARK: BenchmarkReport,
}


class AnalysisOutcome(BaseModel):
    """What one pipeline run produced."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    task: PromptTask
    result: ResultModel
    document_type: DocumentType
    document_length: int = 0
    degraded: bool = False
    reason: Optional[str] = None
    trace: PipelineTrace


class AnalysisService:
    """Service to analyze legal documents with a generative model."""

    def __init__(
        self,
        config,
        llm_client: Optional[LLMClient] = None,
        text_service: Optional[TextExtractionService] = None,
        domain_service: Optional[DomainService] = None,
    ):
        self.config = config
        self.llm_client = llm_client or LLMClient(config)
        self.text_service = text_service or TextExtractionService()
        self.domain_service = domain_service or DomainService()

    def analyze_upload(
        self,
        document: UploadedDocument,
        analysis_focus: str = "general",
        document_type: Union[DocumentType, str, None] = None,
    ) -> AnalysisOutcome:
        """
        Extract text from an uploaded file and analyze it.

        Raises:
            UnsupportedMediaError, ExtractionError: the upload yields no usable text
        """
        trace = PipelineTrace(PromptTask.ANALYZE.value)
        trace.advance(PipelineState.EXTRACTING)
        logger.info("Extracting text from %s (%s, %d bytes)",
                    document.filename or "upload", document.mime_type.value, document.size_bytes)
        extracted = self.text_service.extract_document(document)
        return self.run(
            PromptTask.ANALYZE,
            extracted.content,
            document_type=document_type,
            trace=trace,
            analysis_focus=analysis_focus,
        )

    def run(
        self,
        task: Union[PromptTask, str],
        text: str,
        document_type: Union[DocumentType, str, None] = None,
        trace: Optional[PipelineTrace] = None,
        **context: Any,
    ) -> AnalysisOutcome:
        """
        Run one task over already-extracted text.

        Args:
            task: Prompt task to run
            text: Document text (the clause itself for explain_clause)
            document_type: Caller-supplied type; classified from text when absent or unknown
            trace: Trace to continue (analyze_upload passes one already past Extracting)
            **context: analysis_focus, question, jurisdiction or industry

        Returns:
            AnalysisOutcome whose result always satisfies the task's result model
        """
        task = PromptTask(task)
        trace = trace or PipelineTrace(task.value)
        model_cls = TASK_RESULTS[task]

        trace.advance(PipelineState.CLASSIFYING)
        doc_type = self._resolve_type(document_type, text)

        trace.advance(PipelineState.PROMPTING)
        prompt = build_prompt(task, doc_type, text, limit=self.config.max_text_length, **context)

        result = self._invoke(task, model_cls, prompt, doc_type, context, trace)
        if result is None:
            payload = fallback(task, doc_type)
            self._stamp(task, payload, doc_type, context, overwrite=True)
            result = model_cls.model_validate(payload)
            logger.warning("Returning fallback %s result (%s)", task.value, trace.degraded_reason)

        trace.advance(PipelineState.RESPONDED)
        logger.info("%s finished in %.2fs via %s", task.value, trace.duration(), " -> ".join(trace.path))

        return AnalysisOutcome(
            task=task,
            result=result,
            document_type=doc_type,
            document_length=len(text or ""),
            degraded=trace.degraded,
            reason=trace.degraded_reason,
            trace=trace,
        )

    def _invoke(self, task, model_cls, prompt, doc_type, context, trace) -> Optional[ResultModel]:
        """Call the model and coerce its reply. Returns None after entering Fallback."""
        trace.advance(PipelineState.INVOKING)
        if self.llm_client.available:
            trace.record_call()
        try:
            raw = self.llm_client.invoke(prompt, SYSTEM_PROMPT)
        except UpstreamError as e:
            logger.warning("Model call failed (%s): %s", e.reason, e.message)
            trace.fall_back(e.reason)
            return None

        trace.advance(PipelineState.NORMALIZING)
        try:
            payload = parse_llm_response(raw)
            self._stamp(task, payload, doc_type, context, overwrite=False)
            result = model_cls.model_validate(payload)
        except FormatError as e:
            logger.warning("Unusable model reply (%s), %d chars", e.reason, len(e.raw))
            trace.fall_back(e.reason)
            return None
        except ValidationError as e:
            logger.warning("Model reply does not fit %s: %d errors", model_cls.__name__, e.error_count())
            trace.fall_back("schema-mismatch")
            return None

        trace.advance(PipelineState.SUCCESS)
        return result

    def _resolve_type(self, document_type, text: str) -> DocumentType:
        if isinstance(document_type, DocumentType):
            return document_type
        normalized = self.domain_service.normalize_domain(document_type)
        if normalized is not None:
            return normalized
        if document_type:
            logger.debug("Unknown document type %r, classifying instead", document_type)
        return self.domain_service.classify(text)

    @staticmethod
    def _stamp(task: PromptTask, payload: Dict[str, Any], doc_type: DocumentType,
               context: Dict[str, Any], overwrite: bool):
        """Fill request metadata into a result payload."""
        values: Dict[str, Any] = {}
        if task is PromptTask.ANALYZE:
            values["documentType"] = doc_type.value
        elif task is PromptTask.COMPLIANCE_CHECK:
            values["documentType"] = doc_type.value
            values["jurisdiction"] = context.get("jurisdiction", "US")
        elif task is PromptTask.BENCHMARK:
            values["documentType"] = doc_type.value
            values["industry"] = context.get("industry", "general")

        for key, value in values.items():
            if overwrite or not payload.get(key):
                payload[key] = value
