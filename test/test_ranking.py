"""Unit tests for cleanliness ranking and recommendations."""
import pytest

from reststop.errors import InvalidArgument
from reststop.models.request import Preferences
from reststop.services.ranking import (
    RECOMMENDATION_LIMIT,
    CleanlinessTier,
    cleanliness_tier,
    filter_by_preferences,
    recommend,
    sort_by_cleanliness_desc,
)


@pytest.mark.parametrize(
    "score, tier",
    [
        (100, CleanlinessTier.HIGH),
        (88, CleanlinessTier.HIGH),
        (85, CleanlinessTier.HIGH),
        (84.9, CleanlinessTier.MEDIUM),
        (70, CleanlinessTier.MEDIUM),
        (69.9, CleanlinessTier.LOW),
        (0, CleanlinessTier.LOW),
    ],
)
def test_cleanliness_tier_boundaries(score, tier):
    assert cleanliness_tier(score) is tier


def test_sort_is_stable_for_equal_scores(make_facility):
    first = make_facility("First", score=80)
    best = make_facility("Best", score=90)
    second = make_facility("Second", score=80)
    worst = make_facility("Worst", score=40)

    ranked = sort_by_cleanliness_desc([first, worst, best, second])

    assert [f.name for f in ranked] == ["Best", "First", "Second", "Worst"]


def test_recommend_puts_highest_score_first(make_facility):
    ninety = make_facility("Ninety", score=90)
    ninety_five = make_facility("Ninety five", score=95)

    ranked = recommend([ninety, ninety_five], Preferences())

    assert [f.name for f in ranked] == ["Ninety five", "Ninety"]


def test_accessibility_preference_excludes_cleaner_inaccessible(make_facility):
    accessible = make_facility("Accessible", score=70, accessibility=True)
    inaccessible = make_facility("Inaccessible", score=95, accessibility=False)

    result = recommend([accessible, inaccessible], Preferences(accessibility=True))

    assert result == [accessible]


def test_recommend_is_bounded_and_respects_every_preference(make_facility):
    facilities = [
        make_facility(
            f"Restroom {i}",
            score=50 + i * 5,
            accessibility=i % 2 == 0,
            baby_changing=i % 3 != 0,
            gender_neutral=True,
        )
        for i in range(10)
    ]
    preferences = Preferences(
        accessibility=True, baby_changing=True, gender_neutral=True, min_cleanliness=55
    )

    result = recommend(facilities, preferences)

    assert len(result) <= RECOMMENDATION_LIMIT
    assert result, "expected at least one qualifying facility"
    for facility in result:
        assert facility.accessibility and facility.baby_changing and facility.gender_neutral
        assert facility.cleanliness.score >= 55
    scores = [f.cleanliness.score for f in result]
    assert scores == sorted(scores, reverse=True)


def test_recommend_truncates_to_limit(make_facility):
    facilities = [make_facility(f"R{i}", score=i) for i in range(12)]

    result = recommend(facilities, None)

    assert [f.name for f in result] == ["R11", "R10", "R9", "R8", "R7"]


def test_no_qualifying_facility_is_an_empty_result(make_facility):
    facilities = [make_facility("Plain", score=99)]

    assert recommend(facilities, Preferences(gender_neutral=True)) == []


def test_unset_preferences_impose_no_constraint(make_facility):
    facilities = [make_facility("A", score=10), make_facility("B", score=99)]

    assert filter_by_preferences(facilities, Preferences()) == facilities
    assert filter_by_preferences(facilities, None) == facilities


def test_false_flag_does_not_require_absence(make_facility):
    accessible = make_facility("Accessible", accessibility=True)

    assert filter_by_preferences([accessible], Preferences(accessibility=False)) == [accessible]


@pytest.mark.parametrize("floor", [-1, 100.5, float("nan")])
def test_malformed_min_cleanliness_is_rejected(make_facility, floor):
    with pytest.raises(InvalidArgument):
        filter_by_preferences([make_facility()], Preferences(min_cleanliness=floor))
