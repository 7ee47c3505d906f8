# SPDX-License-Identifier: AGPL-3.0-only

"""
Domain service for document type detection.

This module classifies extracted text into one of the supported legal document
types with a keyword-count heuristic. The result only steers prompt wording and
fallback selection, so misclassification is tolerated.
"""

from typing import Dict, List, Optional, Tuple
from .models import DocumentType


class DomainService:
    """Service for classifying documents by keyword scoring."""

    # Keyword sets per document type, in tie-break order. Matching is a
    # case-insensitive substring test, so no keyword may contain a keyword
    # that belongs to a different type.
    DOMAIN_KEYWORDS: Dict[DocumentType, Tuple[str, ...]] = {
        DocumentType.LEASE_AGREEMENT: (
            "lease", "tenant", "landlord", "rental", "premises", "security deposit",
        ),
        DocumentType.EMPLOYMENT_CONTRACT: (
            "employment", "employee", "employer", "salary", "job title", "probationary period",
        ),
        DocumentType.NDA: (
            "non-disclosure", "nondisclosure", "confidential information",
            "disclosing party", "receiving party", "trade secret",
        ),
        DocumentType.SERVICE_AGREEMENT: (
            "service agreement", "services", "provider", "client", "statement of work", "deliverables",
        ),
        DocumentType.PURCHASE_AGREEMENT: (
            "purchase", "buyer", "seller", "sale of", "bill of sale", "closing date",
        ),
        DocumentType.LOAN_AGREEMENT: (
            "loan", "borrower", "lender", "credit", "interest rate", "repayment",
        ),
        DocumentType.POWER_OF_ATTORNEY: (
            "power of attorney", "attorney-in-fact", "principal", "agent", "durable",
        ),
        DocumentType.WILL_TESTAMENT: (
            "last will", "testament", "testator", "executor", "bequeath", "beneficiar",
        ),
        DocumentType.PRIVACY_POLICY: (
            "privacy policy", "personal data", "personal information", "cookies",
            "data protection", "opt out",
        ),
    }

    def scores(self, text: Optional[str]) -> Dict[DocumentType, int]:
        """
        Count keyword hits for every document type.

        Args:
            text: Extracted document text (None treated as empty)

        Returns:
            Mapping of document type to number of its keywords found in text
        """
        lowered = (text or "").lower()
        return {
            doc_type: sum(1 for keyword in keywords if keyword in lowered)
            for doc_type, keywords in self.DOMAIN_KEYWORDS.items()
        }

    def classify(self, text: Optional[str]) -> DocumentType:
        """
        Pick the document type with the most keyword hits.

        Ties go to the type declared first; no hits at all means general_legal.
        """
        best_type = DocumentType.GENERAL_LEGAL
        best_score = 0
        for doc_type, score in self.scores(text).items():
            if score > best_score:
                best_type, best_score = doc_type, score
        return best_type

    def normalize_domain(self, value: Optional[str]) -> Optional[DocumentType]:
        """
        Normalize a caller-supplied document type.

        Args:
            value: Raw type string such as "Lease Agreement" or "nda"

        Returns:
            Matching DocumentType, or None if the value is empty or unknown
        """
        d = (value or "").strip().lower().replace("-", "_").replace(" ", "_")
        if not d:
            return None
        if d in ("general", "general_contract", "legal_document"):
            return DocumentType.GENERAL_LEGAL
        try:
            return DocumentType(d)
        except ValueError:
            return None

    def get_all_domains(self) -> List[str]:
        """Get list of all supported document types."""
        return [doc_type.value for doc_type in DocumentType]
