from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..knowledge import ProgressConfig
from ..models import CaseCategory, ServiceCategory, in_enum_order


@dataclass(frozen=True)
class ProgressScore:
    total: float
    completed: frozenset[ServiceCategory]
    remaining: frozenset[ServiceCategory]
    optional_completed: frozenset[ServiceCategory]


def compute_progress(
    config: ProgressConfig,
    case_category: CaseCategory,
    completed: Iterable[ServiceCategory],
) -> ProgressScore:
    """
    Weight-based completion score for a case.

    Required services contribute their full weight and, by construction
    of the weight table, add up to 100. Optional services add a fraction
    of their weight on top; the result is capped at 100. Each category
    counts once no matter how many activities recorded it.
    """
    rule = config.rules_for(case_category)
    done = frozenset(completed)

    remaining = rule.required - done
    optional_completed = done & rule.optional

    required_score = sum(config.weight_of(s) for s in in_enum_order(rule.required & done))
    optional_score = sum(
        config.weight_of(s) * config.optional_weight_factor
        for s in in_enum_order(optional_completed)
    )

    return ProgressScore(
        total=float(min(100, required_score + optional_score)),
        completed=done,
        remaining=remaining,
        optional_completed=optional_completed,
    )
