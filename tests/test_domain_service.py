# SPDX-License-Identifier: AGPL-3.0-only

"""
Tests for domain service.

This module tests the DomainService class and its methods.
"""

import pytest

from extraction.domain_service import DomainService
from extraction.models import DocumentType


class TestDomainService:
    """Test DomainService class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.domain_service = DomainService()

    def test_classify_lease(self, lease_text):
        assert self.domain_service.classify(lease_text) is DocumentType.LEASE_AGREEMENT

    def test_classify_nda(self, nda_text):
        assert self.domain_service.classify(nda_text) is DocumentType.NDA

    def test_classify_is_case_insensitive(self):
        assert self.domain_service.classify("THE BORROWER SHALL REPAY THE LOAN") is DocumentType.LOAN_AGREEMENT

    def test_no_keywords_is_general(self):
        assert self.domain_service.classify("Minutes of the annual meeting.") is DocumentType.GENERAL_LEGAL
        assert self.domain_service.classify("") is DocumentType.GENERAL_LEGAL
        assert self.domain_service.classify(None) is DocumentType.GENERAL_LEGAL

    def test_tie_goes_to_first_declared(self):
        # one lease keyword, one loan keyword
        assert self.domain_service.classify("tenant borrower") is DocumentType.LEASE_AGREEMENT
        assert self.domain_service.classify("borrower tenant") is DocumentType.LEASE_AGREEMENT
        # one nda keyword, one privacy keyword
        assert self.domain_service.classify("cookies and trade secret") is DocumentType.NDA

    def test_highest_score_wins(self):
        text = "The tenant owes the lender money. The borrower repays the loan."
        assert self.domain_service.classify(text) is DocumentType.LOAN_AGREEMENT

    def test_classify_is_deterministic(self, lease_text):
        results = {self.domain_service.classify(lease_text) for _ in range(5)}
        assert len(results) == 1

    def test_scores(self, lease_text):
        scores = self.domain_service.scores(lease_text)
        assert set(scores) == set(DomainService.DOMAIN_KEYWORDS)
        assert scores[DocumentType.LEASE_AGREEMENT] >= 4
        assert scores[DocumentType.WILL_TESTAMENT] == 0

    @pytest.mark.parametrize("doc_type,keyword", [
        (doc_type, keyword)
        for doc_type, keywords in DomainService.DOMAIN_KEYWORDS.items()
        for keyword in keywords
    ])
    def test_single_category_keyword_classifies_to_that_category(self, doc_type, keyword):
        assert self.domain_service.classify(f"Section 4: {keyword}.") is doc_type

    def test_keyword_sets_are_disjoint(self):
        items = list(DomainService.DOMAIN_KEYWORDS.items())
        for doc_type, keywords in items:
            for other_type, other_keywords in items:
                if other_type is doc_type:
                    continue
                for keyword in keywords:
                    for other in other_keywords:
                        assert other not in keyword, f"{other!r} ({other_type}) inside {keyword!r} ({doc_type})"

    def test_normalize_domain(self):
        """Test document type normalization."""
        assert self.domain_service.normalize_domain("nda") is DocumentType.NDA
        assert self.domain_service.normalize_domain("Lease Agreement") is DocumentType.LEASE_AGREEMENT
        assert self.domain_service.normalize_domain("  power-of-attorney ") is DocumentType.POWER_OF_ATTORNEY
        assert self.domain_service.normalize_domain("general") is DocumentType.GENERAL_LEGAL
        assert self.domain_service.normalize_domain("legal document") is DocumentType.GENERAL_LEGAL

        # Unknown or empty values are left for the classifier
        assert self.domain_service.normalize_domain("invoice") is None
        assert self.domain_service.normalize_domain("") is None
        assert self.domain_service.normalize_domain(None) is None
        assert self.domain_service.normalize_domain("   ") is None

    def test_get_all_domains(self):
        domains = self.domain_service.get_all_domains()
        assert len(domains) == 10
        assert domains[0] == "lease_agreement"
        assert domains[-1] == "general_legal"
