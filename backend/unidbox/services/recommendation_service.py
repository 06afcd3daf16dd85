"""
Recommendation Service - cross-sell suggestions for a dealer cart

Callers go through RankingService. StaticAssociationRanker, the default,
walks the catalog's fixed cross-sell table.

Author: TM3
Date: 2026-01-30
"""
from abc import ABC, abstractmethod
from itertools import islice
from typing import AbstractSet, Iterable, Iterator, Optional, Sequence

from unidbox.domain.dealer import CatalogItem, Recommendation

MAX_RECOMMENDATIONS = 3
ASSOCIATION_CONFIDENCE = 0.85


class RankingService(ABC):
    """Produces recommendations for a set of selected catalog item ids"""

    @abstractmethod
    def recommend(self, selected_ids: AbstractSet[str]) -> Iterator[Recommendation]:
        """Return a lazy, single-pass iterator of at most three recommendations"""


class StaticAssociationRanker(RankingService):
    """
    Ranker over the catalog's cross_sell associations

    Selected items are visited in catalog order, so the output does not
    depend on how the caller's set iterates. A suggestion is skipped when
    it is already selected or was already emitted.
    """

    def __init__(self, catalog: Sequence[CatalogItem]):
        self.catalog = tuple(catalog)
        self._by_id = {item.id: item for item in self.catalog}

    def _associations(self, selected_ids: AbstractSet[str]) -> Iterator[Recommendation]:
        emitted = set()
        for item in self.catalog:
            if item.id not in selected_ids:
                continue
            for suggested_id in item.cross_sell:
                if suggested_id in selected_ids or suggested_id in emitted:
                    continue
                suggested = self._by_id.get(suggested_id)
                if suggested is None:
                    continue
                emitted.add(suggested_id)
                yield Recommendation(
                    product_id=suggested_id,
                    reason=f"Frequently bought with {item.name}",
                    confidence=ASSOCIATION_CONFIDENCE,
                    potential_revenue=suggested.price,
                )

    def recommend(self, selected_ids: AbstractSet[str]) -> Iterator[Recommendation]:
        return islice(self._associations(frozenset(selected_ids)), MAX_RECOMMENDATIONS)


def get_recommendations(
    selected_ids: Iterable[str],
    ranker: Optional[RankingService] = None,
) -> Iterator[Recommendation]:
    """
    Recommendations for the given catalog item ids

    Args:
        selected_ids: Ids currently in the cart; unknown ids are ignored
        ranker: Defaults to a StaticAssociationRanker over the reference catalog

    Returns:
        Lazy iterator of at most three Recommendation records
    """
    if ranker is None:
        from unidbox.repositories.reference_repository import get_reference_data
        ranker = StaticAssociationRanker(get_reference_data().catalog)
    return ranker.recommend(frozenset(selected_ids))
