from collections import Counter

import pytest

from drills.allergies import Allergen, Allergies


def assert_same_allergens(expected, actual):
    assert Counter(actual) == Counter(expected)


@pytest.mark.parametrize(
    "score, allergen, expected",
    [
        (0, Allergen.EGGS, False),
        (1, Allergen.EGGS, True),
        (3, Allergen.EGGS, True),
        (2, Allergen.EGGS, False),
        (255, Allergen.EGGS, True),
        (0, Allergen.PEANUTS, False),
        (2, Allergen.PEANUTS, True),
        (7, Allergen.PEANUTS, True),
        (5, Allergen.PEANUTS, False),
        (255, Allergen.PEANUTS, True),
        (0, Allergen.SHELLFISH, False),
        (4, Allergen.SHELLFISH, True),
        (14, Allergen.SHELLFISH, True),
        (10, Allergen.SHELLFISH, False),
        (255, Allergen.SHELLFISH, True),
        (0, Allergen.STRAWBERRIES, False),
        (8, Allergen.STRAWBERRIES, True),
        (28, Allergen.STRAWBERRIES, True),
        (20, Allergen.STRAWBERRIES, False),
        (255, Allergen.STRAWBERRIES, True),
        (0, Allergen.TOMATOES, False),
        (16, Allergen.TOMATOES, True),
        (56, Allergen.TOMATOES, True),
        (40, Allergen.TOMATOES, False),
        (255, Allergen.TOMATOES, True),
        (0, Allergen.CHOCOLATE, False),
        (32, Allergen.CHOCOLATE, True),
        (112, Allergen.CHOCOLATE, True),
        (80, Allergen.CHOCOLATE, False),
        (255, Allergen.CHOCOLATE, True),
        (0, Allergen.POLLEN, False),
        (64, Allergen.POLLEN, True),
        (224, Allergen.POLLEN, True),
        (160, Allergen.POLLEN, False),
        (255, Allergen.POLLEN, True),
        (0, Allergen.CATS, False),
        (128, Allergen.CATS, True),
        (192, Allergen.CATS, True),
        (64, Allergen.CATS, False),
        (255, Allergen.CATS, True),
    ],
)
def test_is_allergic_to(score, allergen, expected):
    assert Allergies(score).is_allergic_to(allergen) is expected


def test_no_allergies():
    assert_same_allergens([], Allergies(0).allergies())


def test_just_eggs():
    assert_same_allergens([Allergen.EGGS], Allergies(1).allergies())


def test_just_peanuts():
    assert_same_allergens([Allergen.PEANUTS], Allergies(2).allergies())


def test_just_strawberries():
    assert_same_allergens([Allergen.STRAWBERRIES], Allergies(8).allergies())


def test_eggs_and_peanuts():
    assert_same_allergens(
        [Allergen.EGGS, Allergen.PEANUTS], Allergies(3).allergies()
    )


def test_more_than_eggs_but_not_peanuts():
    assert_same_allergens(
        [Allergen.EGGS, Allergen.SHELLFISH], Allergies(5).allergies()
    )


def test_lots_of_stuff():
    assert_same_allergens(
        [
            Allergen.STRAWBERRIES,
            Allergen.TOMATOES,
            Allergen.CHOCOLATE,
            Allergen.POLLEN,
            Allergen.CATS,
        ],
        Allergies(248).allergies(),
    )


def test_everything():
    assert_same_allergens(list(Allergen), Allergies(255).allergies())


def test_no_allergen_score_parts():
    assert_same_allergens(
        [
            Allergen.EGGS,
            Allergen.SHELLFISH,
            Allergen.STRAWBERRIES,
            Allergen.TOMATOES,
            Allergen.CHOCOLATE,
            Allergen.POLLEN,
            Allergen.CATS,
        ],
        Allergies(509).allergies(),
    )


def test_no_allergen_score_parts_without_highest_valid_score():
    assert_same_allergens([Allergen.EGGS], Allergies(257).allergies())


def test_allergies_are_listed_highest_first():
    assert Allergies(5).allergies() == [Allergen.SHELLFISH, Allergen.EGGS]


def test_score_is_reduced_below_256():
    assert Allergies(257).score == 1


def test_negative_score_is_rejected():
    with pytest.raises(ValueError):
        Allergies(-1)