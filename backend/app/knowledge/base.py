from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..models import CaseCategory, ServiceCategory

REQUIRED_WEIGHT_TOTAL = 100


@dataclass(frozen=True)
class CaseTypeRule:
    required: frozenset[ServiceCategory]
    optional: frozenset[ServiceCategory] = frozenset()


@dataclass(frozen=True)
class ProgressConfig:
    """Everything the engine needs to score a case, passed in explicitly."""

    rules: dict[CaseCategory, CaseTypeRule]
    weights: dict[ServiceCategory, float]
    keywords: dict[ServiceCategory, tuple[str, ...]]
    default_service: ServiceCategory = ServiceCategory.CASE_REVIEW
    optional_weight_factor: float = 0.5

    def rules_for(self, case_category: CaseCategory) -> CaseTypeRule:
        return self.rules[case_category]

    def weight_of(self, service: ServiceCategory) -> float:
        return self.weights[service]

    def validate(self) -> "ProgressConfig":
        """
        Fail fast on an incomplete or inconsistent table.

        Meant for startup and tests; the engine itself assumes a
        validated config and never degrades per request.
        """
        missing_rules = [c.value for c in CaseCategory if c not in self.rules]
        if missing_rules:
            raise ConfigurationError(
                "No case type rule for some case categories",
                details={"case_categories": missing_rules},
            )

        missing_weights = [s.value for s in ServiceCategory if s not in self.weights]
        if missing_weights:
            raise ConfigurationError(
                "No weight for some service categories",
                details={"service_categories": missing_weights},
            )

        negative = [s.value for s, w in self.weights.items() if w < 0]
        if negative:
            raise ConfigurationError(
                "Service weights must not be negative",
                details={"service_categories": negative},
            )

        if not 0 <= self.optional_weight_factor <= 1:
            raise ConfigurationError(
                "Optional weight factor must be between 0 and 1",
                details={"optional_weight_factor": self.optional_weight_factor},
            )

        for case_category, rule in self.rules.items():
            overlap = rule.required & rule.optional
            if overlap:
                raise ConfigurationError(
                    f"{case_category.value}: services are both required and optional",
                    details={"service_categories": sorted(s.value for s in overlap)},
                )
            total = sum(self.weights[s] for s in rule.required)
            if total != REQUIRED_WEIGHT_TOTAL:
                raise ConfigurationError(
                    f"{case_category.value}: required weights sum to {total}, "
                    f"expected {REQUIRED_WEIGHT_TOTAL}",
                    details={"case_category": case_category.value, "total": total},
                )

        return self
