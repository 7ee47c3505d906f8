# SPDX-License-Identifier: AGPL-3.0-only

import pytest

from analysis.prompt_pack import ANALYSIS_FOCUS, MAX_PROMPT_TEXT, TASK_PROMPTS, build_prompt, truncate_text
from extraction.models import DocumentType, PromptTask


class TestBuildPrompt:
    def test_every_task_has_a_template(self):
        assert set(TASK_PROMPTS) == set(PromptTask)

    def test_analyze_prompt(self):
        prompt = build_prompt(PromptTask.ANALYZE, DocumentType.LEASE_AGREEMENT, "Tenant pays rent.")
        assert "analyze this lease agreement document" in prompt
        assert "Tenant pays rent." in prompt
        assert '"documentType": "lease_agreement"' in prompt
        assert '"overallRiskScore": 1-10' in prompt
        assert '"severity": "low|medium|high"' in prompt
        assert ANALYSIS_FOCUS["general"] in prompt

    def test_analysis_focus(self):
        prompt = build_prompt(PromptTask.ANALYZE, DocumentType.NDA, "text", analysis_focus="compliance")
        assert ANALYSIS_FOCUS["compliance"] in prompt
        assert "non-disclosure agreement" in prompt

    def test_missing_document_type_is_general(self):
        prompt = build_prompt(PromptTask.ANALYZE, None, "text")
        assert '"documentType": "general_legal"' in prompt
        assert "legal document" in prompt

    def test_explain_clause_quotes_the_clause(self):
        clause = "Tenant shall vacate within 30 days of notice."
        prompt = build_prompt(PromptTask.EXPLAIN_CLAUSE, DocumentType.GENERAL_LEGAL, clause)
        assert f'"{clause}"' in prompt
        for key in ("plainEnglish", "implications", "risks", "benefits", "redFlags", "commonScenarios"):
            assert f'"{key}"' in prompt

    def test_qa_includes_question(self):
        prompt = build_prompt(PromptTask.QA, DocumentType.LOAN_AGREEMENT, "Loan text", question="Can I repay early?")
        assert "Question: Can I repay early?" in prompt
        assert "Document: Loan text" in prompt
        assert '"followUpQuestions"' in prompt

    def test_compliance_includes_jurisdiction(self):
        prompt = build_prompt(PromptTask.COMPLIANCE_CHECK, DocumentType.PRIVACY_POLICY, "text", jurisdiction="EU")
        assert "compliance with EU laws" in prompt
        assert '"jurisdiction": "EU"' in prompt
        assert '"overallStatus": "compliant|needs-review|non-compliant"' in prompt

    def test_benchmark_includes_industry(self):
        prompt = build_prompt(PromptTask.BENCHMARK, DocumentType.SERVICE_AGREEMENT, "text", industry="technology")
        assert "for the technology industry" in prompt
        assert '"industry": "technology"' in prompt
        assert '"benchmarkMetrics"' in prompt

    def test_task_accepts_string(self):
        assert build_prompt("qa", None, "doc", question="q") == build_prompt(PromptTask.QA, None, "doc", question="q")

    def test_braces_in_document_survive(self):
        prompt = build_prompt(PromptTask.ANALYZE, None, "Fee: {amount} {{x}}")
        assert "Fee: {amount} {{x}}" in prompt

    @pytest.mark.parametrize("task", list(PromptTask))
    def test_text_truncated_for_every_task(self, task):
        text = "a" * MAX_PROMPT_TEXT + "TAILMARKER"
        prompt = build_prompt(task, None, text, question="q")
        assert "a" * MAX_PROMPT_TEXT in prompt
        assert "TAILMARKER" not in prompt

    def test_truncate_text(self):
        assert truncate_text("abcdef", 3) == "abc"
        assert truncate_text(None) == ""
        assert len(truncate_text("x" * 40000)) == 30000
