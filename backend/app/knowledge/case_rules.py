from ..models import CaseCategory, ServiceCategory
from .base import CaseTypeRule

_CONSULTATION = ServiceCategory.CONSULTATION
_DOCUMENTS = ServiceCategory.DOCUMENT_PREPARATION
_COURT = ServiceCategory.COURT_APPEARANCE
_RESEARCH = ServiceCategory.RESEARCH
_OUTREACH = ServiceCategory.COMMUNITY_OUTREACH
_MEDIATION = ServiceCategory.MEDIATION
_CLIENT_MEETING = ServiceCategory.CLIENT_MEETING
_CASE_REVIEW = ServiceCategory.CASE_REVIEW

# Litigated matters: advice, filings and at least one appearance.
_LITIGATION = frozenset({_CONSULTATION, _DOCUMENTS, _COURT})
# Matters normally closed by agreement rather than judgment.
_NEGOTIATED = frozenset({_CONSULTATION, _DOCUMENTS, _MEDIATION})
# Regulatory matters that turn on research into the rules.
_REGULATORY = frozenset({_CONSULTATION, _DOCUMENTS, _RESEARCH})
# Application-driven matters with ongoing client contact.
_APPLICATION = frozenset({_CONSULTATION, _DOCUMENTS, _CLIENT_MEETING, _CASE_REVIEW})
# Public-interest matters.
_PUBLIC_INTEREST = frozenset({_CONSULTATION, _RESEARCH, _OUTREACH, _CASE_REVIEW})

CASE_TYPE_RULES: dict[CaseCategory, CaseTypeRule] = {
    CaseCategory.CRIMINAL: CaseTypeRule(
        required=_LITIGATION,
        optional=frozenset({_OUTREACH}),
    ),
    CaseCategory.CIVIL: CaseTypeRule(
        required=_LITIGATION,
        optional=frozenset({_RESEARCH, _MEDIATION}),
    ),
    CaseCategory.PROPERTY: CaseTypeRule(
        required=_LITIGATION,
        optional=frozenset({_RESEARCH, _CASE_REVIEW}),
    ),
    CaseCategory.FAMILY: CaseTypeRule(
        required=_NEGOTIATED,
        optional=frozenset({_COURT, _CLIENT_MEETING}),
    ),
    CaseCategory.LABOR: CaseTypeRule(
        required=_NEGOTIATED,
        optional=frozenset({_COURT, _OUTREACH}),
    ),
    CaseCategory.COMMERCIAL: CaseTypeRule(
        required=_NEGOTIATED,
        optional=frozenset({_RESEARCH, _CASE_REVIEW}),
    ),
    CaseCategory.CONSTITUTIONAL: CaseTypeRule(
        required=frozenset({_CONSULTATION, _RESEARCH, _COURT}),
        optional=frozenset({_DOCUMENTS, _OUTREACH}),
    ),
    CaseCategory.ADMINISTRATIVE: CaseTypeRule(
        required=_REGULATORY,
        optional=frozenset({_COURT, _CASE_REVIEW}),
    ),
    CaseCategory.TAX: CaseTypeRule(
        required=_REGULATORY,
        optional=frozenset({_CLIENT_MEETING}),
    ),
    CaseCategory.IMMIGRATION: CaseTypeRule(
        required=_APPLICATION,
        optional=frozenset({_COURT, _RESEARCH}),
    ),
    CaseCategory.HUMAN_RIGHTS: CaseTypeRule(
        required=_PUBLIC_INTEREST,
        optional=frozenset({_COURT, _DOCUMENTS, _MEDIATION}),
    ),
    CaseCategory.ENVIRONMENTAL: CaseTypeRule(
        required=_PUBLIC_INTEREST,
        optional=frozenset({_COURT, _DOCUMENTS}),
    ),
    CaseCategory.OTHER: CaseTypeRule(required=_APPLICATION),
}
