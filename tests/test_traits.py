import pytest

from drills.traits import (
    Animal,
    Cat,
    Countable,
    Describable,
    Dog,
    Plant,
    Rock,
    describe_and_count,
    pick_countable,
)


def test_animal_describe_pinned():
    assert Animal("doggo", 4).describe() == "Name:doggo Legs:4"


def test_animal_count_is_legs():
    assert Animal("spider", 8).count() == 8


def test_animal_rejects_too_many_legs():
    with pytest.raises(ValueError):
        Animal("centipede", 300)


def test_plant_describe_mentions_flowering_flag():
    assert "is_flowering:false" in Plant("sokoia", False).describe()
    assert "sokoia" in Plant("sokoia", False).describe()


def test_plant_count_follows_flowering():
    assert Plant("rose", True).count() == 1
    assert Plant("fern", False).count() == 0


def test_shout_is_upper_case_description():
    items = [Animal("doggo", 4), Plant("sokoia", False), Rock(12)]
    for item in items:
        assert item.shout() == item.describe().upper()


def test_rock_describe_contains_weight():
    description = Rock(37).describe()
    assert description.startswith("weight")
    assert description.endswith("37")


def test_rock_is_not_countable():
    assert not isinstance(Rock(1), Countable)
    with pytest.raises(TypeError):
        describe_and_count(Rock(1))


def test_describe_and_count_combines_both():
    animal = Animal("doggo", 4)
    result = describe_and_count(animal)
    assert result.startswith(animal.describe())
    assert result.endswith(f"count:{animal.count()}")


def test_pick_countable_flowering_plant():
    animal = Animal("dog", 4)
    plant = Plant("lily", True)
    assert pick_countable(animal, plant) is plant


def test_pick_countable_not_flowering_gives_animal():
    animal = Animal("dog", 4)
    plant = Plant("oak", False)
    assert pick_countable(animal, plant) is animal


def test_describable_is_abstract():
    with pytest.raises(TypeError):
        Describable()


def test_speakers():
    assert Cat().speak() == "meow"
    assert Dog().speak() == "woof"