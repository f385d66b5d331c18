from ..config import settings
from .base import CaseTypeRule, ProgressConfig
from .case_rules import CASE_TYPE_RULES
from .services import SERVICE_KEYWORDS, SERVICE_WEIGHTS

DEFAULT_CONFIG = ProgressConfig(
    rules=CASE_TYPE_RULES,
    weights=SERVICE_WEIGHTS,
    keywords=SERVICE_KEYWORDS,
    optional_weight_factor=settings.optional_weight_factor,
)

__all__ = [
    "CASE_TYPE_RULES",
    "DEFAULT_CONFIG",
    "SERVICE_KEYWORDS",
    "SERVICE_WEIGHTS",
    "CaseTypeRule",
    "ProgressConfig",
]
