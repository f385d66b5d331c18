from ..models import ServiceCategory

# Chosen so that every required set in case_rules.py sums to exactly 100.
SERVICE_WEIGHTS: dict[ServiceCategory, float] = {
    ServiceCategory.CONSULTATION: 40,
    ServiceCategory.DOCUMENT_PREPARATION: 30,
    ServiceCategory.COURT_APPEARANCE: 30,
    ServiceCategory.RESEARCH: 30,
    ServiceCategory.COMMUNITY_OUTREACH: 20,
    ServiceCategory.MEDIATION: 30,
    ServiceCategory.CLIENT_MEETING: 20,
    ServiceCategory.CASE_REVIEW: 10,
}

# Lowercase substrings matched against activity descriptions. Categories
# are tried in ServiceCategory order, so "review" lands on RESEARCH.
SERVICE_KEYWORDS: dict[ServiceCategory, tuple[str, ...]] = {
    ServiceCategory.CONSULTATION: ("consult", "advice", "discuss", "meeting"),
    ServiceCategory.DOCUMENT_PREPARATION: ("draft", "prepare", "document", "file"),
    ServiceCategory.COURT_APPEARANCE: ("court", "hearing", "trial", "appear"),
    ServiceCategory.RESEARCH: ("research", "analyze", "review", "study"),
    ServiceCategory.COMMUNITY_OUTREACH: ("community", "outreach", "workshop", "education"),
    ServiceCategory.MEDIATION: ("mediate", "negotiate", "settle", "resolve"),
    ServiceCategory.CLIENT_MEETING: ("client", "meet", "interview", "conference"),
    ServiceCategory.CASE_REVIEW: ("review", "assess", "evaluate", "examine"),
}
