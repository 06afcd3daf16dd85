"""
Unit tests for the recommendation service
"""
from collections.abc import Iterator

import pytest

from unidbox.domain.dealer import Recommendation
from unidbox.services.recommendation_service import (
    RankingService,
    StaticAssociationRanker,
    get_recommendations,
)


@pytest.fixture
def ranker(reference_data):
    return StaticAssociationRanker(reference_data.catalog)


class TestStaticAssociationRanker:

    def test_returns_lazy_iterator(self, ranker):
        result = ranker.recommend({"prod-001"})

        assert isinstance(result, Iterator)

    def test_single_pass(self, ranker):
        result = ranker.recommend({"prod-001"})

        first = list(result)
        assert len(first) > 0
        assert list(result) == []

    def test_cross_sell_for_single_item(self, ranker):
        # Act
        recs = list(ranker.recommend({"prod-001"}))

        # Assert
        assert [r.product_id for r in recs] == ["prod-002", "prod-003"]
        assert all(isinstance(r, Recommendation) for r in recs)
        assert recs[0].reason == "Frequently bought with CAT6 Ethernet Cable 100m"
        assert recs[0].confidence == 0.85
        assert recs[0].potential_revenue == 24.99

    def test_skips_selected_and_already_emitted(self, ranker):
        """prod-001 suggests 002/003, prod-002 suggests 001/004; 001 and 002 are selected"""
        recs = [r.product_id for r in ranker.recommend({"prod-001", "prod-002"})]

        assert recs == ["prod-003", "prod-004"]
        assert len(recs) == len(set(recs))

    def test_at_most_three(self, ranker):
        recs = list(ranker.recommend({"prod-001", "prod-003", "prod-005", "prod-007"}))

        assert len(recs) == 3

    def test_deterministic_regardless_of_input_order(self, ranker):
        ids = ["prod-007", "prod-003", "prod-001"]

        forward = [r.product_id for r in ranker.recommend(set(ids))]
        backward = [r.product_id for r in ranker.recommend(set(reversed(ids)))]

        assert forward == backward

    def test_unknown_and_empty_input(self, ranker):
        assert list(ranker.recommend(set())) == []
        assert list(ranker.recommend({"prod-999"})) == []


class TestGetRecommendations:

    def test_defaults_to_reference_catalog(self):
        recs = list(get_recommendations(["prod-007"]))

        assert [r.product_id for r in recs] == ["prod-008"]

    def test_accepts_custom_ranker(self):
        class FixedRanker(RankingService):
            def recommend(self, selected_ids):
                return iter([Recommendation(product_id="prod-006", reason="Fixed",
                                            confidence=1.0, potential_revenue=12.99)])

        recs = list(get_recommendations(["prod-001"], ranker=FixedRanker()))

        assert [r.product_id for r in recs] == ["prod-006"]
