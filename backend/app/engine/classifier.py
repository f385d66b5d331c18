from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..models import ServiceCategory

logger = logging.getLogger(__name__)


class KeywordClassifier:
    """
    Infers a service category from a free-text activity description.

    Categories are tried in ``ServiceCategory`` declaration order and the
    first one with a keyword contained in the description wins. Anything
    that matches nothing falls back to ``default``, so ``classify`` is
    total. Any object with the same ``classify`` method can stand in for
    this one in ``ProgressService``.
    """

    def __init__(
        self,
        keywords: Mapping[ServiceCategory, Sequence[str]],
        default: ServiceCategory = ServiceCategory.CASE_REVIEW,
    ) -> None:
        self.default = default
        self._table: tuple[tuple[ServiceCategory, tuple[str, ...]], ...] = tuple(
            (category, tuple(k.lower() for k in keywords[category]))
            for category in ServiceCategory
            if category in keywords
        )

    def classify(self, description: str | None) -> ServiceCategory:
        text = (description or "").lower()
        for category, keywords in self._table:
            if any(keyword in text for keyword in keywords):
                return category
        logger.debug("No keyword match for %r, using %s", text[:80], self.default.value)
        return self.default
