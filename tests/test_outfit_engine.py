"""
Outfit engine behaviour: required categories, ranking, optional pieces
and explanations.
"""
import pytest

from app.services.outfits import (
    LIMITATIONS,
    OutfitEngine,
    OutfitRequest,
    suggest_outfits,
)
from tests.fixtures import basic_closet, make_item


class TestRequiredCategories:

    def test_complete_closet_returns_one_suggestion(self):
        result = suggest_outfits(basic_closet(), OutfitRequest(occasion="casual"))

        assert result.missing_required_categories == []
        assert len(result.suggestions) == 1
        first = result.suggestions[0]
        assert first.top.id == "top-1"
        assert first.bottom.id == "bottom-1"
        assert first.shoes.id == "shoes-1"
        assert result.limitations == LIMITATIONS

    def test_missing_shoes_reported(self):
        items = [make_item("top-1", "top"), make_item("bottom-1", "bottom")]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))

        assert result.missing_required_categories == ["shoes"]
        assert result.suggestions == []
        assert result.limitations == LIMITATIONS

    def test_empty_closet_lists_all_required_in_order(self):
        result = suggest_outfits([], OutfitRequest(occasion="casual"))
        assert result.missing_required_categories == ["top", "bottom", "shoes"]

    def test_optional_items_do_not_fill_required_slots(self):
        items = [
            make_item("coat", "outerwear"),
            make_item("scarf", "accessory"),
            make_item("shoes-1", "shoes"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        assert result.missing_required_categories == ["top", "bottom"]

    def test_constraints_can_empty_a_category(self):
        items = basic_closet() + [make_item("jeans", "bottom", name="Blue Jeans")]
        items = [it for it in items if it.id != "bottom-1"]

        result = suggest_outfits(items, OutfitRequest(occasion="casual", constraints="no jeans"))

        assert result.suggestions == []
        assert result.missing_required_categories == ["bottom"]
        assert result.constraints_applied == ["no jeans"]


class TestScoring:

    def test_basic_closet_score(self):
        # formality 3 x 5, all-neutral colors 3 x 2, no weather band
        result = suggest_outfits(basic_closet(), OutfitRequest(occasion="casual"))
        assert result.suggestions[0].score == 21

    def test_interview_prefers_business_top(self):
        items = [
            make_item("top-casual", "top", formality="casual"),
            make_item("top-business", "top", formality="business"),
            make_item("bottom-smart", "bottom", formality="smart"),
            make_item("shoes-business", "shoes", formality="business"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="Job interview"))

        assert result.suggestions[0].top.id == "top-business"
        assert result.suggestions[0].score == 21
        assert result.suggestions[1].score == 11

    def test_weather_band_changes_ranking(self):
        items = [
            make_item("tee", "top", warmth="light"),
            make_item("sweater", "top", warmth="heavy"),
            make_item("bottom-1", "bottom"),
            make_item("shoes-1", "shoes"),
        ]
        cold = suggest_outfits(items, OutfitRequest(occasion="casual", temperature_c=3))
        hot = suggest_outfits(items, OutfitRequest(occasion="casual", temperature_c=30))

        assert cold.suggestions[0].top.id == "sweater"
        assert hot.suggestions[0].top.id == "tee"

    def test_temperature_takes_precedence_over_weather_text(self):
        items = [
            make_item("tee", "top", warmth="light"),
            make_item("sweater", "top", warmth="heavy"),
            make_item("bottom-1", "bottom"),
            make_item("shoes-1", "shoes"),
        ]
        result = suggest_outfits(
            items, OutfitRequest(occasion="casual", temperature_c=30, weather="freezing winter")
        )
        assert result.suggestions[0].top.id == "tee"


class TestRanking:

    def test_at_most_three_suggestions(self):
        items = [
            make_item("top-a", "top"),
            make_item("top-b", "top"),
            make_item("bottom-a", "bottom"),
            make_item("bottom-b", "bottom"),
            make_item("shoes-a", "shoes"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        assert len(result.suggestions) == 3

    def test_fewer_combinations_than_limit(self):
        items = [
            make_item("top-a", "top"),
            make_item("bottom-a", "bottom"),
            make_item("shoes-a", "shoes"),
            make_item("shoes-b", "shoes"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        assert len(result.suggestions) == 2

    def test_sorted_by_score_descending(self):
        items = [
            make_item("top-casual", "top", formality="casual"),
            make_item("top-smart", "top", formality="smart"),
            make_item("top-business", "top", formality="business"),
            make_item("bottom-1", "bottom"),
            make_item("shoes-1", "shoes"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        scores = [s.score for s in result.suggestions]

        assert scores == sorted(scores, reverse=True)
        assert [s.top.id for s in result.suggestions] == ["top-casual", "top-smart", "top-business"]

    def test_ties_broken_by_id_string(self):
        items = [
            make_item("top-b", "top"),
            make_item("top-a", "top"),
            make_item("bottom-1", "bottom"),
            make_item("shoes-1", "shoes"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))

        assert result.suggestions[0].score == result.suggestions[1].score
        assert [s.top.id for s in result.suggestions] == ["top-a", "top-b"]

    def test_ranking_ignores_input_order(self):
        items = [
            make_item("top-a", "top"),
            make_item("top-b", "top", colors=["red"]),
            make_item("bottom-a", "bottom"),
            make_item("bottom-b", "bottom", formality="smart"),
            make_item("shoes-a", "shoes"),
        ]
        forward = suggest_outfits(items, OutfitRequest(occasion="date"))
        backward = suggest_outfits(list(reversed(items)), OutfitRequest(occasion="date"))

        assert [s.ranking_key for s in forward.suggestions] == [s.ranking_key for s in backward.suggestions]

    def test_identical_calls_give_identical_results(self):
        items = basic_closet() + [make_item("coat", "outerwear", warmth="heavy")]
        request = OutfitRequest(occasion="date", weather="chilly", constraints="no hoodies")

        assert suggest_outfits(items, request) == suggest_outfits(items, request)

    def test_engine_limit_is_configurable(self):
        items = [
            make_item("top-a", "top"),
            make_item("top-b", "top"),
            make_item("bottom-a", "bottom"),
            make_item("shoes-a", "shoes"),
        ]
        result = OutfitEngine(max_suggestions=1).suggest(items, OutfitRequest(occasion="casual"))
        assert len(result.suggestions) == 1


class TestOptionalPieces:

    def test_outerwear_added_when_cold(self):
        items = basic_closet() + [make_item("coat", "outerwear", warmth="heavy")]
        result = suggest_outfits(items, OutfitRequest(occasion="casual", temperature_c=5))
        first = result.suggestions[0]

        assert first.outerwear is not None
        assert first.outerwear.id == "coat"
        assert "with added outerwear for cold weather" in first.explanation

    def test_outerwear_skipped_when_hot(self):
        items = basic_closet() + [
            make_item("parka", "outerwear", warmth="heavy", formality="business", colors=[])
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual", temperature_c=30))
        assert result.suggestions[0].outerwear is None

    def test_outerwear_bonus_of_exactly_one_is_skipped(self):
        # -4/2 formality + red/red 1 + red/black 2 = 1
        items = [
            make_item("top-1", "top", colors=["red"], formality="business"),
            make_item("bottom-1", "bottom", formality="business"),
            make_item("shoes-1", "shoes", formality="business"),
            make_item("jacket", "outerwear", colors=["red"], formality="casual"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="interview"))
        assert result.suggestions[0].outerwear is None

    def test_first_best_outerwear_wins(self):
        items = basic_closet() + [
            make_item("coat-1", "outerwear", warmth="heavy"),
            make_item("coat-2", "outerwear", warmth="heavy"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual", weather="cold"))
        assert result.suggestions[0].outerwear.id == "coat-1"

    def test_casual_accessory_adds_bonus(self):
        # 5/2 formality + 1 casual match, no colors
        items = basic_closet() + [make_item("cap", "accessory", colors=[])]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        first = result.suggestions[0]

        assert first.accessory.id == "cap"
        assert first.score == 24.5

    def test_accessory_with_zero_bonus_skipped(self):
        # 2/2 formality + red/green -2 + red/red 1 = 0
        items = [
            make_item("top-1", "top", colors=["green"]),
            make_item("bottom-1", "bottom"),
            make_item("shoes-1", "shoes", colors=["red"]),
            make_item("belt", "accessory", colors=["red"], formality="smart"),
        ]
        result = suggest_outfits(items, OutfitRequest(occasion="casual"))
        assert result.suggestions[0].accessory is None


class TestExplanation:

    def test_casual_without_weather(self):
        result = suggest_outfits(basic_closet(), OutfitRequest(occasion="casual"))
        assert result.suggestions[0].explanation == (
            "Built around Tee, Chinos, and Loafers to keep things casual and easy to wear."
        )

    @pytest.mark.parametrize(
        "occasion,weather,expected",
        [
            (
                "interview",
                "mild spring day",
                "Built around Tee, Chinos, and Loafers to keep the look business-leaning "
                "for interview settings with medium warmth for mild weather.",
            ),
            (
                "dinner date",
                "hot",
                "Built around Tee, Chinos, and Loafers to balance smart and approachable "
                "pieces for a date with lighter pieces for hot weather.",
            ),
            (
                "park",
                "winter",
                "Built around Tee, Chinos, and Loafers to keep things casual and easy to wear "
                "using warmer pieces for cold weather.",
            ),
        ],
    )
    def test_occasion_and_weather_clauses(self, occasion, weather, expected):
        result = suggest_outfits(basic_closet(), OutfitRequest(occasion=occasion, weather=weather))
        assert result.suggestions[0].explanation == expected

    def test_mentions_constraints_when_applied(self):
        result = suggest_outfits(
            basic_closet(), OutfitRequest(occasion="casual", constraints="No hoodies")
        )
        assert result.constraints_applied == ["no hoodies"]
        assert result.suggestions[0].explanation.endswith("while respecting your constraints.")

    def test_generic_terms_alone_do_not_mention_constraints(self):
        result = suggest_outfits(
            basic_closet(), OutfitRequest(occasion="casual", constraints="no wool")
        )
        assert result.constraints_applied == []
        assert "constraints" not in result.suggestions[0].explanation
