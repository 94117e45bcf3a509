"""Tests for the lamb calculation engine."""

import itertools

from lamb_calculator.domain.calculator import HungerLevel, LambCut
from lamb_calculator.services.calculator import (
    SERVING_TIPS,
    calculate_lamb_requirements,
    generate_cut_recommendations,
)


def _cut_names(people: int) -> list[str]:
    return [cut.name for cut in generate_cut_recommendations(people)]


def test_single_hungry_guest() -> None:
    result = calculate_lamb_requirements(1, HungerLevel.HUNGRY)

    assert result.total_weight == "1-1 lbs"
    assert result.total_description == "For 1 hungry person"
    assert result.cuts == (
        LambCut("Lamb Chops", "2-3 pieces", "utensils"),
        LambCut("Rack of Lamb", "1 rack (8 ribs)", "drumstick-bite"),
    )


def test_four_starving_guests() -> None:
    result = calculate_lamb_requirements(4, HungerLevel.STARVING)

    assert result.total_weight == "1-3 lbs"
    assert result.total_description == "For 4 starving people"
    assert result.cuts == (
        LambCut("Leg of Lamb", "1 whole leg (5-7 lbs)", "drumstick-bite"),
        LambCut("Lamb Shoulder", "1 shoulder roast (3-4 lbs)", "beef"),
        LambCut("Lamb Chops", "8 pieces", "utensils"),
    )


def test_ten_snacky_guests() -> None:
    result = calculate_lamb_requirements(10, HungerLevel.SNACKY)

    # 50oz -> 3.2 lbs
    assert result.total_weight == "2-4 lbs"
    assert result.cuts[-1] == LambCut("Lamb Shanks", "10 pieces", "utensils")


def test_largest_party() -> None:
    result = calculate_lamb_requirements(50, HungerLevel.STARVING)

    # 450oz -> 28.2 lbs
    assert result.total_weight == "27-29 lbs"
    assert result.cuts[-1].amount == "50 pieces"


def test_two_guests_use_plural() -> None:
    result = calculate_lamb_requirements(2, HungerLevel.HUNGRY)

    assert result.total_description == "For 2 hungry people"
    assert result.cuts[0].amount == "4-6 pieces"


def test_cut_tier_boundaries() -> None:
    assert _cut_names(2) == ["Lamb Chops", "Rack of Lamb"]
    assert _cut_names(3) == ["Leg of Lamb", "Lamb Shoulder", "Lamb Chops"]
    assert _cut_names(6) == ["Leg of Lamb", "Lamb Shoulder", "Lamb Chops"]
    assert _cut_names(7) == [
        "Whole Lamb Leg",
        "Lamb Shoulder Roast",
        "Lamb Shanks",
    ]


def test_weight_range_is_well_formed_for_all_inputs() -> None:
    for people, hunger_level in itertools.product(range(1, 51), HungerLevel):
        result = calculate_lamb_requirements(people, hunger_level)
        low, high = result.total_weight.removesuffix(" lbs").split("-")

        assert int(low) >= 1
        assert int(high) >= int(low)


def test_calculation_is_deterministic() -> None:
    for people, hunger_level in itertools.product(range(1, 51), HungerLevel):
        first = calculate_lamb_requirements(people, hunger_level)
        second = calculate_lamb_requirements(people, hunger_level)

        assert first == second


def test_serving_tips_do_not_depend_on_input() -> None:
    small = calculate_lamb_requirements(1, HungerLevel.SNACKY)
    large = calculate_lamb_requirements(40, HungerLevel.STARVING)

    assert small.serving_tips == large.serving_tips == SERVING_TIPS
    assert small.serving_tips[0] == "Allow 30 minutes resting time before serving"
    assert len(SERVING_TIPS) == 4
