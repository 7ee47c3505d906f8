# SPDX-License-Identifier: AGPL-3.0-only

"""
Result models for every prompt task.

Each model lists the fields the caller may rely on. Unknown keys in a model
reply are dropped, missing keys take their defaults, and near-miss types are
coerced (a list where text was asked for is joined, a bare string where a list
was asked for is wrapped, scores are clamped to 1-10). Anything that still
does not fit raises a pydantic ValidationError, which the pipeline treats as a
malformed reply.
"""

import math
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _object_to_readable(obj: dict) -> str:
    return "; ".join(f"{k}: {v}" for k, v in obj.items() if v not in (None, "", [], {}))


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return _object_to_readable(value)
    if isinstance(value, (list, tuple)):
        return "; ".join(as_text(v) for v in value if v not in (None, ""))
    return str(value)


def as_text_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [as_text(v) for v in value if v not in (None, "")]
    text = as_text(value)
    return [text] if text else []


def as_score(value: Any) -> int:
    """Coerce 7, 7.5, "7", "7/10" and the like to an int clamped to 1-10."""
    if isinstance(value, bool):
        raise ValueError("score must be a number")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = re.search(r'-?\d+(?:\.\d+)?', str(value or ""))
        if not match:
            raise ValueError(f"score is not numeric: {value!r}")
        try:
            number = float(match.group(0))
        except OverflowError as e:
            raise ValueError(f"score is out of range: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"score is not finite: {value!r}")
    return max(1, min(10, int(round(number))))


def object_list(first_key: str):
    """Build a validator that wraps bare strings in {first_key: text}."""
    def _wrap(value: Any) -> list:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]
        items = []
        for item in value:
            if isinstance(item, dict):
                items.append(item)
            elif item not in (None, ""):
                items.append({first_key: as_text(item)})
        return items
    return _wrap


class ResultModel(BaseModel):
    """camelCase on the wire, snake_case in Python, extra keys ignored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ── analyze ──────────────────────────────────────────────────────

class KeyTerm(ResultModel):
    term: str = ""
    explanation: str = ""
    importance: str = ""

    _text = field_validator("term", "explanation", "importance", mode="before")(as_text)


class RiskFactor(ResultModel):
    risk: str = ""
    severity: str = "medium"
    explanation: str = ""

    _text = field_validator("risk", "severity", "explanation", mode="before")(as_text)


class RiskAssessment(ResultModel):
    overall_risk_score: int = 5
    risk_factors: List[RiskFactor] = Field(default_factory=list)

    _score = field_validator("overall_risk_score", mode="before")(as_score)
    _factors = field_validator("risk_factors", mode="before")(object_list("risk"))


class Recommendation(ResultModel):
    action: str = ""
    priority: str = "medium"
    reason: str = ""

    _text = field_validator("action", "priority", "reason", mode="before")(as_text)


class AnalysisReport(ResultModel):
    document_type: str = "general_legal"
    summary: str = ""
    key_terms: List[KeyTerm] = Field(default_factory=list)
    your_rights: List[str] = Field(default_factory=list)
    your_obligations: List[str] = Field(default_factory=list)
    risk_assessment: RiskAssessment = Field(default_factory=RiskAssessment)
    red_flags: List[str] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)
    when_to_seek_help: str = ""

    _text = field_validator("document_type", "summary", "when_to_seek_help", mode="before")(as_text)
    _lists = field_validator("your_rights", "your_obligations", "red_flags", "next_steps", mode="before")(as_text_list)
    _terms = field_validator("key_terms", mode="before")(object_list("term"))
    _recs = field_validator("recommendations", mode="before")(object_list("action"))


# ── explain_clause ───────────────────────────────────────────────

class ClauseExplanation(ResultModel):
    plain_english: str = ""
    implications: str = ""
    risks: str = ""
    benefits: str = ""
    red_flags: str = ""
    common_scenarios: str = ""

    _text = field_validator(
        "plain_english", "implications", "risks", "benefits", "red_flags", "common_scenarios", mode="before"
    )(as_text)


# ── qa ───────────────────────────────────────────────────────────

class QuestionAnswer(ResultModel):
    answer: str = ""
    explanation: str = ""
    relevant_clauses: str = ""
    additional_considerations: str = ""
    follow_up_questions: List[str] = Field(default_factory=list)

    _text = field_validator(
        "answer", "explanation", "relevant_clauses", "additional_considerations", mode="before"
    )(as_text)
    _lists = field_validator("follow_up_questions", mode="before")(as_text_list)


# ── compliance_check ─────────────────────────────────────────────

class ComplianceIssue(ResultModel):
    issue: str = ""
    severity: str = "medium"
    requirement: str = ""
    recommendation: str = ""
    consequence: str = ""

    _text = field_validator("issue", "severity", "requirement", "recommendation", "consequence", mode="before")(as_text)


class RequiredAction(ResultModel):
    action: str = ""
    priority: str = "medium"
    deadline: str = ""
    legal_basis: str = ""

    _text = field_validator("action", "priority", "deadline", "legal_basis", mode="before")(as_text)


class ComplianceReport(ResultModel):
    compliance_score: int = 5
    overall_status: str = "needs-review"
    jurisdiction: str = ""
    document_type: str = ""
    compliance_issues: List[ComplianceIssue] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    required_actions: List[RequiredAction] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)

    _score = field_validator("compliance_score", mode="before")(as_score)
    _text = field_validator("overall_status", "jurisdiction", "document_type", mode="before")(as_text)
    _lists = field_validator("strengths", "recommendations", "next_steps", mode="before")(as_text_list)
    _issues = field_validator("compliance_issues", mode="before")(object_list("issue"))
    _actions = field_validator("required_actions", mode="before")(object_list("action"))


# ── benchmark ────────────────────────────────────────────────────

class BenchmarkStrength(ResultModel):
    area: str = ""
    description: str = ""
    industry_comparison: str = ""

    _text = field_validator("area", "description", "industry_comparison", mode="before")(as_text)


class BenchmarkWeakness(ResultModel):
    area: str = ""
    description: str = ""
    industry_standard: str = ""
    improvement: str = ""

    _text = field_validator("area", "description", "industry_standard", "improvement", mode="before")(as_text)


class BenchmarkMetrics(ResultModel):
    clarity: int = 5
    completeness: int = 5
    enforceability: int = 5
    protection: int = 5
    fairness: int = 5

    _scores = field_validator(
        "clarity", "completeness", "enforceability", "protection", "fairness", mode="before"
    )(as_score)


class IndustryComparison(ResultModel):
    better_than: str = ""
    common_practices: List[str] = Field(default_factory=list)
    missing_elements: List[str] = Field(default_factory=list)

    _text = field_validator("better_than", mode="before")(as_text)
    _lists = field_validator("common_practices", "missing_elements", mode="before")(as_text_list)


class BenchmarkRecommendation(ResultModel):
    priority: str = "medium"
    improvement: str = ""
    justification: str = ""
    industry_trend: str = ""

    _text = field_validator("priority", "improvement", "justification", "industry_trend", mode="before")(as_text)


class BenchmarkReport(ResultModel):
    overall_score: int = 5
    industry_rating: str = "average"
    document_type: str = ""
    industry: str = ""
    strengths: List[BenchmarkStrength] = Field(default_factory=list)
    weaknesses: List[BenchmarkWeakness] = Field(default_factory=list)
    benchmark_metrics: BenchmarkMetrics = Field(default_factory=BenchmarkMetrics)
    industry_comparison: IndustryComparison = Field(default_factory=IndustryComparison)
    recommendations: List[BenchmarkRecommendation] = Field(default_factory=list)
    modernization: List[str] = Field(default_factory=list)

    _score = field_validator("overall_score", mode="before")(as_score)
    _text = field_validator("industry_rating", "document_type", "industry", mode="before")(as_text)
    _strengths = field_validator("strengths", mode="before")(object_list("area"))
    _weaknesses = field_validator("weaknesses", mode="before")(object_list("area"))
    _recs = field_validator("recommendations", mode="before")(object_list("improvement"))
    _lists = field_validator("modernization", mode="before")(as_text_list)
