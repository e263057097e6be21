import pytest

from drills.space_age import Duration, Planet


@pytest.mark.parametrize(
    "planet, seconds, expected",
    [
        (Planet.EARTH, 1000000000, 31.69),
        (Planet.MERCURY, 2134835688, 280.88),
        (Planet.VENUS, 189839836, 9.78),
        (Planet.MARS, 2129871239, 35.88),
        (Planet.JUPITER, 901876382, 2.41),
        (Planet.SATURN, 2000000000, 2.15),
        (Planet.URANUS, 1210123456, 0.46),
        (Planet.NEPTUNE, 1821023456, 0.35),
    ],
)
def test_years_during(planet, seconds, expected):
    output = planet.years_during(Duration.from_seconds(seconds))
    assert output == pytest.approx(expected, abs=0.01)


def test_one_earth_year_of_seconds():
    assert Duration.from_seconds(31_557_600).in_earth_years == 1.0