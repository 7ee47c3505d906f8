# SPDX-License-Identifier: AGPL-3.0-only

"""
Task-specific prompt packs for legal document analysis.
"""
from typing import Dict, Optional

from extraction.models import DocumentType, PromptTask

MAX_PROMPT_TEXT = 30000

SYSTEM_PROMPT = "You are a legal document assistant. Reply with a single JSON object and nothing else."

# Focus guidance for /analyze, keyed by the caller's analysisType
ANALYSIS_FOCUS = {
    "general": "Give a balanced overview covering terms, rights, obligations and risks.",
    "legal": "Concentrate on key legal terms, obligations, rights and potential legal risks.",
    "contract": "Concentrate on contract terms, obligations, deadlines and termination conditions.",
    "compliance": "Concentrate on regulatory requirements and possible compliance gaps.",
}

ANALYZE_TEMPLATE = """As an expert legal analyst, analyze this {document_label} document and provide a comprehensive assessment in JSON format.

Document Type: {document_type}
Analysis Focus: {analysis_focus}
Document Content: {text}

Provide your analysis in this exact JSON structure:
{{
  "documentType": "{document_type}",
  "summary": "A clear 2-3 sentence summary in plain English",
  "keyTerms": [
    {{
      "term": "Legal term or concept",
      "explanation": "Simple explanation in everyday language",
      "importance": "Why this matters to the user"
    }}
  ],
  "yourRights": [
    "List of rights the user has"
  ],
  "yourObligations": [
    "List of things the user must do"
  ],
  "riskAssessment": {{
    "overallRiskScore": 1-10,
    "riskFactors": [
      {{
        "risk": "Description of specific risk",
        "severity": "low|medium|high",
        "explanation": "Why this is risky and potential consequences"
      }}
    ]
  }},
  "redFlags": [
    "Specific concerning clauses or terms that need attention"
  ],
  "recommendations": [
    {{
      "action": "Specific action to take",
      "priority": "high|medium|low",
      "reason": "Why this action is recommended"
    }}
  ],
  "nextSteps": [
    "Immediate actions the user should consider"
  ],
  "whenToSeekHelp": "Specific situations when legal consultation is recommended"
}}

Focus on practical implications and use language a non-lawyer can understand. Be specific about risks and actionable in recommendations."""

EXPLAIN_CLAUSE_TEMPLATE = """As a legal expert, explain this specific clause from a {document_label} in simple terms:

"{text}"

Provide a JSON response with:
{{
  "plainEnglish": "What this clause means in everyday language",
  "implications": "What this means for the user specifically",
  "risks": "Potential risks or downsides",
  "benefits": "Potential benefits or protections",
  "redFlags": "Any concerning aspects",
  "commonScenarios": "Real-world examples of when this might matter"
}}"""

QA_TEMPLATE = """Based on this {document_label}, answer the user's question in simple, practical terms:

Document: {text}

Question: {question}

Provide a JSON response with:
{{
  "answer": "Direct answer to the question",
  "explanation": "Detailed explanation with context",
  "relevantClauses": "Which parts of the document relate to this question",
  "additionalConsiderations": "Other things the user should know",
  "followUpQuestions": ["Suggested related questions they might want to ask"]
}}"""

COMPLIANCE_TEMPLATE = """As a legal compliance expert, analyze this {document_label} for compliance with {jurisdiction} laws and regulations.

Document Type: {document_type}
Jurisdiction: {jurisdiction}
Document Content: {text}

Provide a comprehensive compliance analysis in JSON format:
{{
  "complianceScore": 1-10,
  "overallStatus": "compliant|needs-review|non-compliant",
  "jurisdiction": "{jurisdiction}",
  "documentType": "{document_type}",
  "complianceIssues": [
    {{
      "issue": "Description of specific compliance issue",
      "severity": "low|medium|high|critical",
      "requirement": "Specific legal requirement not met",
      "recommendation": "How to fix this issue",
      "consequence": "Potential legal consequences"
    }}
  ],
  "strengths": [
    "Areas where the document meets compliance requirements"
  ],
  "requiredActions": [
    {{
      "action": "Specific action required",
      "priority": "immediate|high|medium|low",
      "deadline": "When this should be completed",
      "legalBasis": "The law or regulation requiring this"
    }}
  ],
  "recommendations": [
    "General recommendations for improving compliance"
  ],
  "nextSteps": [
    "Immediate steps to take"
  ]
}}"""

BENCHMARK_TEMPLATE = """As a legal benchmarking expert, analyze this {document_label} against industry standards and best practices for the {industry} industry.

Document Type: {document_type}
Industry: {industry}
Document Content: {text}

Provide a comprehensive benchmarking analysis in JSON format:
{{
  "overallScore": 1-10,
  "industryRating": "poor|below-average|average|above-average|excellent",
  "documentType": "{document_type}",
  "industry": "{industry}",
  "strengths": [
    {{
      "area": "Specific strength area",
      "description": "What this document does well",
      "industryComparison": "How this compares to industry standard"
    }}
  ],
  "weaknesses": [
    {{
      "area": "Area needing improvement",
      "description": "What could be better",
      "industryStandard": "What the industry standard practice is",
      "improvement": "How to improve this area"
    }}
  ],
  "benchmarkMetrics": {{
    "clarity": 1-10,
    "completeness": 1-10,
    "enforceability": 1-10,
    "protection": 1-10,
    "fairness": 1-10
  }},
  "industryComparison": {{
    "betterThan": "X% of similar documents",
    "commonPractices": ["Industry standard practices this document follows"],
    "missingElements": ["Standard elements not found in this document"]
  }},
  "recommendations": [
    {{
      "priority": "high|medium|low",
      "improvement": "Specific improvement recommendation",
      "justification": "Why this improvement is recommended",
      "industryTrend": "How this relates to industry trends"
    }}
  ],
  "modernization": [
    "Suggestions for updating document to current standards"
  ]
}}"""

TASK_PROMPTS: Dict[PromptTask, str] = {
    PromptTask.ANALYZE: ANALYZE_TEMPLATE,
    PromptTask.EXPLAIN_CLAUSE: EXPLAIN_CLAUSE_TEMPLATE,
    PromptTask.QA: QA_TEMPLATE,
    PromptTask.COMPLIANCE_CHECK: COMPLIANCE_TEMPLATE,
    PromptTask.BENCHMARK: BENCHMARK_TEMPLATE,
}


def truncate_text(text: str, limit: int = MAX_PROMPT_TEXT) -> str:
    """Hard cut at `limit` characters, no ellipsis."""
    return (text or "")[:limit]


def build_prompt(
    task: PromptTask,
    document_type: Optional[DocumentType],
    text: str,
    analysis_focus: str = "general",
    question: str = "",
    jurisdiction: str = "US",
    industry: str = "general",
    limit: int = MAX_PROMPT_TEXT,
) -> str:
    """
    Build the prompt for one task.

    Args:
        task: Which prompt template to use
        document_type: Classified or caller-supplied type (None means general_legal)
        text: Document text, or the clause itself for explain_clause
        analysis_focus: analysisType key or free-text focus for analyze
        question: User question for qa
        jurisdiction: Jurisdiction for compliance_check
        industry: Industry for benchmark
        limit: Maximum number of document characters embedded in the prompt
    """
    doc_type = document_type or DocumentType.GENERAL_LEGAL
    template = TASK_PROMPTS[PromptTask(task)]
    focus = ANALYSIS_FOCUS.get((analysis_focus or "general").lower(), analysis_focus)

    return template.format(
        document_label=doc_type.label,
        document_type=doc_type.value,
        text=truncate_text(text, limit),
        analysis_focus=focus,
        question=question,
        jurisdiction=jurisdiction,
        industry=industry,
    )
