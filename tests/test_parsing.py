import pytest

from philosophers.parsing import ArgumentError, Settings, check_atol, parse_args


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t+7", 7),
        ("12abc", 12),
        ("2147483647", 2147483647),
        ("", 0),
    ],
)
def test_check_atol_reads_leading_number(text, expected):
    assert check_atol(text) == expected


@pytest.mark.parametrize("text", ["-5", "-0", "2147483648", "99999999999999999999"])
def test_check_atol_rejects_negative_and_overflow(text):
    assert check_atol(text) == -1


def test_parse_args_without_meal_limit():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, -1)


def test_parse_args_with_meal_limit():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.meal_limit == 7
    assert settings.n_philo == 4


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1", "2", "3"],
        ["1", "100", "100", "100", "1", "1"],
        ["0", "100", "100", "100"],
        ["201", "100", "100", "100"],
        ["5", "59", "100", "100"],
        ["5", "100", "59", "100"],
        ["5", "100", "100", "59"],
        ["5", "-100", "100", "100"],
        ["5", "100", "100", "100", "0"],
        ["5", "100", "100", "100", "-3"],
    ],
)
def test_parse_args_rejects_bad_input(argv):
    with pytest.raises(ArgumentError):
        parse_args(argv)


def test_parse_args_accepts_limits():
    settings = parse_args(["200", "60", "60", "60"])
    assert settings.n_philo == 200
    assert settings.die_time == 60