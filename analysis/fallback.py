# SPDX-License-Identifier: AGPL-3.0-only

"""
Canned results used when the model cannot be called or its reply is unusable.

Every entry is fixed text, so the same (task, document type) pair always yields
the same object. Entries satisfy the shape of their task's result model.
"""
import copy
from typing import Any, Dict, List, Optional, Union

from extraction.models import DocumentType, PromptTask

DEFAULT_NEXT_STEPS = [
    "Read the whole document carefully before signing",
    "Write down any terms you do not understand",
    "Ask the other party to clarify or change unclear terms in writing",
    "Keep a signed copy for your records",
]


def _analysis(
    doc_type: DocumentType,
    summary: str,
    key_terms: List[Dict[str, str]],
    rights: List[str],
    obligations: List[str],
    score: int,
    risk_factors: List[Dict[str, str]],
    red_flags: List[str],
    recommendations: List[Dict[str, str]],
    when_to_seek_help: str,
    next_steps: Optional[List[str]] = None,
) -> Dict[str, Any]:
    return {
        "documentType": doc_type.value,
        "summary": summary,
        "keyTerms": key_terms,
        "yourRights": rights,
        "yourObligations": obligations,
        "riskAssessment": {"overallRiskScore": score, "riskFactors": risk_factors},
        "redFlags": red_flags,
        "recommendations": recommendations,
        "nextSteps": next_steps or DEFAULT_NEXT_STEPS,
        "whenToSeekHelp": when_to_seek_help,
    }


def _term(term: str, explanation: str, importance: str) -> Dict[str, str]:
    return {"term": term, "explanation": explanation, "importance": importance}


def _risk(risk: str, severity: str, explanation: str) -> Dict[str, str]:
    return {"risk": risk, "severity": severity, "explanation": explanation}


def _rec(action: str, priority: str, reason: str) -> Dict[str, str]:
    return {"action": action, "priority": priority, "reason": reason}


ANALYSIS_FALLBACKS: Dict[DocumentType, Dict[str, Any]] = {
    DocumentType.LEASE_AGREEMENT: _analysis(
        DocumentType.LEASE_AGREEMENT,
        "This is a residential lease agreement for a one-bedroom apartment with monthly rent of $1,500. "
        "The lease includes standard terms but has some strict policies around pets and late payments "
        "that tenants should be aware of.",
        [_term("Late Fees", "Extra charges applied when rent is paid after the due date",
               "These can add up quickly and affect your credit if unpaid")],
        [
            "Right to peaceful enjoyment of the property",
            "Right to have major repairs handled by the landlord",
            "Right to get your security deposit back if you meet lease terms",
        ],
        [
            "Pay rent on time ($1,500 monthly by the 1st)",
            "Provide 30 days notice before moving out",
            "Handle minor repairs under $100",
            "No pets without written permission",
        ],
        6,
        [
            _risk("Immediate lease termination for lease violations", "high",
                  "The landlord can terminate your lease with just 3 days notice for non-payment or violations, "
                  "which could leave you without housing quickly"),
            _risk("No pet policy strictly enforced", "medium",
                  "Unauthorized pets result in immediate termination, no warnings given"),
            _risk("High late fees", "medium",
                  "$50 late fee after just 5 days could add up to significant costs over time"),
        ],
        [
            "Very short 3-day notice for lease termination seems harsh",
            "No grace period for late payments - fees start immediately after 5 days",
            "Immediate termination for pets with no warning period",
        ],
        [
            _rec("Set up automatic rent payments", "high",
                 "Late fees start quickly and lease can be terminated for non-payment"),
            _rec("Document existing damages before moving in", "high",
                 "Protect your security deposit by having proof of pre-existing issues"),
            _rec("Get renter's insurance", "medium",
                 "Protect your belongings since landlord insurance won't cover your property"),
        ],
        "Consider consulting a tenant's rights lawyer if you're unclear about any terms, if the landlord "
        "tries to change terms after signing, or if you face eviction proceedings.",
        next_steps=[
            "Read the lease carefully before signing",
            "Take photos of the property condition",
            "Set up automatic rent payments",
            "Ask about any unclear terms before signing",
        ],
    ),
    DocumentType.EMPLOYMENT_CONTRACT: _analysis(
        DocumentType.EMPLOYMENT_CONTRACT,
        "This is an employment contract describing your role, pay and working conditions. It contains "
        "restrictions that continue after you leave the job, so the post-employment terms deserve attention.",
        [_term("Non-compete clause", "A promise not to work for competitors for a period after leaving",
               "It can limit where you can work next")],
        [
            "Right to the agreed salary and benefits",
            "Right to paid leave as described in the contract",
            "Right to written notice before termination, where stated",
        ],
        [
            "Perform the duties of your role during agreed working hours",
            "Keep company information confidential",
            "Give the required notice before resigning",
        ],
        5,
        [
            _risk("Broad non-compete restriction", "high",
                  "A wide restriction on future work can make changing jobs in your field difficult"),
            _risk("At-will termination", "medium",
                  "Your employment may be ended with little notice or reason"),
        ],
        [
            "Non-compete period or geography may be wider than necessary",
            "Intellectual property clause may cover work done on your own time",
        ],
        [
            _rec("Ask for the non-compete scope to be narrowed", "high",
                 "A narrower restriction protects your future job options"),
            _rec("Confirm bonus and overtime terms in writing", "medium",
                 "Verbal promises are hard to enforce later"),
        ],
        "Speak to an employment lawyer before signing if the contract restricts future work, or if you are "
        "dismissed and believe the contract terms were not followed.",
    ),
    DocumentType.NDA: _analysis(
        DocumentType.NDA,
        "This is a non-disclosure agreement that restricts how you may use and share confidential "
        "information received from the other party. The length of the obligation and the definition of "
        "confidential information are the key points to check.",
        [_term("Confidential Information", "The information you are not allowed to share or misuse",
               "A very broad definition can cover information you already knew")],
        [
            "Right to use information that is already public",
            "Right to disclose information when required by law",
        ],
        [
            "Keep the other party's confidential information secret",
            "Use the information only for the stated purpose",
            "Return or destroy confidential material when asked",
        ],
        4,
        [
            _risk("Open-ended confidentiality period", "medium",
                  "Obligations with no end date can apply for many years"),
            _risk("Broad definition of confidential information", "medium",
                  "You may breach the agreement by sharing information you thought was general knowledge"),
        ],
        ["Confidentiality obligations may have no time limit"],
        [
            _rec("Ask for a fixed confidentiality period", "medium",
                 "A clear end date limits your long-term exposure"),
            _rec("Make sure pre-existing knowledge is excluded", "medium",
                 "Prevents disputes about information you already had"),
        ],
        "Consult a lawyer if the agreement includes penalties, covers your future work, or if you are "
        "accused of breaching it.",
    ),
    DocumentType.SERVICE_AGREEMENT: _analysis(
        DocumentType.SERVICE_AGREEMENT,
        "This is a service agreement setting out what the provider will deliver, how much the client pays "
        "and how either side can end the arrangement. Payment and liability terms carry the most risk.",
        [_term("Limitation of liability", "A cap on how much one party can recover if something goes wrong",
               "It may leave you without compensation for real losses")],
        [
            "Right to receive the services described in the scope of work",
            "Right to terminate with the notice stated in the agreement",
        ],
        [
            "Pay invoices within the agreed payment period",
            "Provide the information and access the provider needs",
        ],
        5,
        [
            _risk("Vague scope of services", "medium",
                  "Unclear deliverables make it hard to hold the provider to a standard"),
            _risk("Automatic renewal", "medium",
                  "The agreement may renew unless cancelled within a short window"),
        ],
        ["Liability cap may be lower than the value of the contract"],
        [
            _rec("Define deliverables and deadlines precisely", "high",
                 "Clear expectations prevent payment disputes"),
            _rec("Diarise the renewal and notice dates", "medium",
                 "Avoid being locked into another term by default"),
        ],
        "Get legal advice before signing high-value agreements or if the other party fails to deliver and "
        "refuses to refund.",
    ),
    DocumentType.PURCHASE_AGREEMENT: _analysis(
        DocumentType.PURCHASE_AGREEMENT,
        "This is a purchase agreement for the sale of goods or property between a buyer and a seller. It "
        "fixes the price, the closing conditions and what happens if either side backs out.",
        [_term("As-is clause", "The buyer accepts the item in its current condition",
               "You may have no remedy for defects found later")],
        [
            "Right to receive the item described at the agreed price",
            "Right to inspect before closing, where provided",
        ],
        [
            "Pay the purchase price on the agreed schedule",
            "Meet any conditions before the closing date",
        ],
        5,
        [
            _risk("Loss of deposit", "high",
                  "Withdrawing from the purchase may forfeit the deposit"),
            _risk("No warranties", "medium",
                  "An as-is sale shifts the risk of hidden defects to the buyer"),
        ],
        ["Deposit may be non-refundable even if financing falls through"],
        [
            _rec("Arrange an independent inspection", "high",
                 "Find defects before you are committed"),
            _rec("Add a financing contingency", "medium",
                 "Protects your deposit if a loan is refused"),
        ],
        "Consult a lawyer for property purchases, large transactions, or if the seller fails to deliver.",
    ),
    DocumentType.LOAN_AGREEMENT: _analysis(
        DocumentType.LOAN_AGREEMENT,
        "This is a loan agreement setting out the amount borrowed, the interest rate and the repayment "
        "schedule. Default and acceleration clauses determine how quickly the lender can demand full "
        "repayment.",
        [_term("Acceleration clause", "Lets the lender demand the entire balance at once after a default",
               "One missed payment could make the whole loan due")],
        [
            "Right to a clear statement of interest and fees",
            "Right to repay early, if no prepayment penalty applies",
        ],
        [
            "Make each repayment in full and on time",
            "Maintain any collateral or insurance required",
        ],
        7,
        [
            _risk("Variable interest rate", "high",
                  "Payments can rise significantly if rates increase"),
            _risk("Acceleration on default", "high",
                  "A single missed payment could trigger full repayment"),
            _risk("Prepayment penalty", "medium",
                  "Paying off early may cost extra"),
        ],
        ["Lender may demand full repayment after one missed payment"],
        [
            _rec("Calculate the total cost of the loan", "high",
                 "Interest and fees can far exceed the amount borrowed"),
            _rec("Set up automatic repayments", "high",
                 "Missed payments trigger penalties and default"),
        ],
        "Seek advice from a lawyer or credit counsellor before signing, or immediately if you expect to miss "
        "a payment.",
    ),
    DocumentType.POWER_OF_ATTORNEY: _analysis(
        DocumentType.POWER_OF_ATTORNEY,
        "This is a power of attorney that authorises an agent to act on the principal's behalf. The scope "
        "of authority and whether it survives incapacity are the most important terms.",
        [_term("Durable power", "The authority continues if the principal loses mental capacity",
               "The agent may act without oversight when you cannot supervise them")],
        [
            "Right to revoke the power of attorney while you have capacity",
            "Right to limit the agent's authority to specific matters",
        ],
        [
            "Choose an agent you trust completely",
            "Notify banks and institutions if you revoke the document",
        ],
        6,
        [
            _risk("Broad financial authority", "high",
                  "The agent could sell property or move money without your approval"),
            _risk("No reporting requirement", "medium",
                  "Misuse may go unnoticed for a long time"),
        ],
        ["Agent's powers are not limited or supervised"],
        [
            _rec("Limit the powers to what is necessary", "high",
                 "Reduces the harm if the agent acts improperly"),
            _rec("Require regular accounts from the agent", "medium",
                 "Makes misuse easier to detect"),
        ],
        "Have a lawyer prepare or review the document, and seek help immediately if you suspect the agent "
        "is misusing their authority.",
    ),
    DocumentType.WILL_TESTAMENT: _analysis(
        DocumentType.WILL_TESTAMENT,
        "This is a will that sets out how the testator's estate will be distributed and who will act as "
        "executor. Validity depends on it being signed and witnessed correctly.",
        [_term("Executor", "The person responsible for carrying out the will",
               "They control the estate until it is distributed")],
        [
            "Right to change or revoke the will at any time while you have capacity",
            "Right to choose your executor and beneficiaries",
        ],
        [
            "Sign the will with the required witnesses",
            "Keep the will somewhere your executor can find it",
        ],
        4,
        [
            _risk("Improper execution", "high",
                  "A will that is not witnessed correctly may be invalid"),
            _risk("Outdated beneficiaries", "medium",
                  "Life changes can leave gifts to people who are no longer intended"),
        ],
        ["No alternate executor or beneficiary named"],
        [
            _rec("Confirm the signing and witnessing requirements", "high",
                 "An invalid will means the estate passes under default rules"),
            _rec("Review the will after major life events", "medium",
                 "Keeps the distribution in line with your wishes"),
        ],
        "Consult an estate lawyer if your estate is complex, includes a business, or if family members may "
        "contest the will.",
    ),
    DocumentType.PRIVACY_POLICY: _analysis(
        DocumentType.PRIVACY_POLICY,
        "This is a privacy policy explaining what personal data is collected, how it is used and who it is "
        "shared with. Sharing with third parties and data retention are the key points for users.",
        [_term("Third-party sharing", "Your data may be passed to partners or advertisers",
               "You lose control over how those companies use it")],
        [
            "Right to access the personal data held about you",
            "Right to opt out of marketing communications",
            "Right to request deletion, where the law provides it",
        ],
        [
            "Review your privacy settings",
            "Keep your account information accurate",
        ],
        5,
        [
            _risk("Broad data sharing", "medium",
                  "Data may be shared with unnamed partners for unspecified purposes"),
            _risk("Indefinite retention", "medium",
                  "Data may be kept long after you stop using the service"),
        ],
        ["Policy allows changes without direct notice to users"],
        [
            _rec("Opt out of non-essential data sharing", "medium",
                 "Reduces how widely your data is spread"),
            _rec("Check the policy for a retention period", "low",
                 "Tells you how long your data is kept"),
        ],
        "Contact a data protection authority or lawyer if your data is misused or a deletion request is "
        "ignored.",
    ),
    DocumentType.GENERAL_LEGAL: _analysis(
        DocumentType.GENERAL_LEGAL,
        "This is a legal document that creates rights and obligations for the parties. A detailed analysis "
        "is not available right now, so the points below are general guidance for reviewing any agreement.",
        [_term("Termination", "How and when the agreement can be ended",
               "Determines how easily you can get out of the arrangement")],
        [
            "Right to receive what the other party promised",
            "Right to ask for clarification before signing",
        ],
        [
            "Meet the obligations you agree to in the document",
            "Respect any deadlines and notice periods",
        ],
        5,
        [
            _risk("Unreviewed obligations", "medium",
                  "You may be agreeing to terms you have not fully understood"),
        ],
        ["Review penalty, termination and liability clauses carefully"],
        [
            _rec("Have the document reviewed by a qualified professional", "high",
                 "Automated analysis is not available for this request"),
        ],
        "Consult a qualified attorney before signing documents with significant financial or legal "
        "consequences.",
    ),
}

EXPLAIN_FALLBACK: Dict[str, Any] = {
    "plainEnglish": "This clause sets out specific legal terms and conditions. The exact meaning depends on "
                    "the specific language used.",
    "implications": "This affects your legal rights and obligations under the document. Understanding this "
                    "clause is important for knowing what you're agreeing to.",
    "risks": "Without understanding legal clauses, you might unknowingly agree to unfavorable terms or miss "
             "important protections.",
    "benefits": "Well-written clauses can provide clarity and protect your interests when properly understood.",
    "redFlags": "A detailed analysis of this clause is not available right now. Review it carefully with a "
                "legal professional.",
    "commonScenarios": "Legal clauses typically become relevant during disputes, contract performance, or "
                       "when specific conditions are triggered.",
}

QA_FALLBACK: Dict[str, Any] = {
    "answer": "An AI-generated answer is not available right now. The answer depends on the specific "
              "provisions in your document.",
    "explanation": "Look for the sections of the document that deal with the subject of your question, "
                   "such as definitions, obligations, payment or termination clauses.",
    "relevantClauses": "Multiple sections of the document may contain relevant information",
    "additionalConsiderations": "Always consult with a qualified attorney for legal advice specific to your "
                                "situation",
    "followUpQuestions": [
        "What are the main risks in this document?",
        "What are my key obligations?",
        "Are there any red flags I should know about?",
        "What should I do before signing this document?",
    ],
}

COMPLIANCE_FALLBACK: Dict[str, Any] = {
    "complianceScore": 6,
    "overallStatus": "needs-review",
    "complianceIssues": [
        {
            "issue": "Automated compliance analysis unavailable",
            "severity": "medium",
            "requirement": "Professional legal review recommended",
            "recommendation": "Have the document reviewed by a qualified attorney",
            "consequence": "Compliance cannot be verified without a review",
        }
    ],
    "strengths": [
        "Document structure appears standard",
        "Basic legal language is present",
    ],
    "requiredActions": [
        {
            "action": "Professional compliance review",
            "priority": "high",
            "deadline": "Before document execution",
            "legalBasis": "Legal compliance best practices",
        }
    ],
    "recommendations": [
        "Engage qualified legal counsel for a compliance review",
        "Verify current regulatory requirements for your jurisdiction",
        "Ensure all required disclosures are included",
    ],
    "nextSteps": [
        "Schedule a professional legal review",
        "Research applicable compliance requirements",
        "Document any concerns for legal review",
    ],
}

BENCHMARK_FALLBACK: Dict[str, Any] = {
    "overallScore": 6,
    "industryRating": "average",
    "strengths": [
        {
            "area": "Basic Structure",
            "description": "Document contains standard legal elements",
            "industryComparison": "Appears to follow conventional format",
        }
    ],
    "weaknesses": [
        {
            "area": "Benchmarking Analysis",
            "description": "Detailed industry comparison is not available right now",
            "industryStandard": "Comprehensive analysis against industry benchmarks",
            "improvement": "Obtain a professional review against industry standards",
        }
    ],
    "benchmarkMetrics": {
        "clarity": 6,
        "completeness": 6,
        "enforceability": 6,
        "protection": 6,
        "fairness": 6,
    },
    "industryComparison": {
        "betterThan": "Not available without automated analysis",
        "commonPractices": ["Standard legal terminology", "Basic contract provisions"],
        "missingElements": ["Detailed industry comparison not available"],
    },
    "recommendations": [
        {
            "priority": "high",
            "improvement": "Professional legal review",
            "justification": "Expert evaluation against industry standards",
            "industryTrend": "Regular benchmarking against industry best practices",
        }
    ],
    "modernization": [
        "Consider professional industry-specific review",
        "Evaluate the document against recent legal developments",
        "Research current industry standard practices",
    ],
}

TASK_FALLBACKS: Dict[PromptTask, Dict[str, Any]] = {
    PromptTask.EXPLAIN_CLAUSE: EXPLAIN_FALLBACK,
    PromptTask.QA: QA_FALLBACK,
    PromptTask.COMPLIANCE_CHECK: COMPLIANCE_FALLBACK,
    PromptTask.BENCHMARK: BENCHMARK_FALLBACK,
}


def fallback(task: Union[PromptTask, str],
             document_type: Union[DocumentType, str] = DocumentType.GENERAL_LEGAL) -> Dict[str, Any]:
    """Return a fresh copy of the canned result for a task and document type."""
    task = PromptTask(task)
    document_type = DocumentType(document_type)
    if task is PromptTask.ANALYZE:
        entry = ANALYSIS_FALLBACKS.get(document_type, ANALYSIS_FALLBACKS[DocumentType.GENERAL_LEGAL])
    else:
        entry = TASK_FALLBACKS[task]
    return copy.deepcopy(entry)
