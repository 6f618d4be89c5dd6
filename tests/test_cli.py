from philosophers.cli import error_message, main


def test_error_messages():
    assert error_message(2) == "Init error"
    assert error_message(3) == "Free error"
    assert error_message(0) == ""
    assert error_message(1).startswith("Argument error. For proper usage provide:")


def test_main_rejects_too_few_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert "Argument error" in capsys.readouterr().out


def test_main_rejects_short_times(capsys):
    assert main(["3", "10", "100", "100"]) == 1
    assert "time_to_die" in capsys.readouterr().out


def test_main_single_philosopher_dies(capsys):
    assert main(["1", "100", "60", "60"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("1 has taken a fork")
    assert lines[-1].endswith("1 died")


def test_main_meal_limit_finishes(capsys):
    assert main(["3", "600", "60", "60", "1"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    eaters = {line.split()[1] for line in out.splitlines() if line.endswith("is eating")}
    assert eaters == {"1", "2", "3"}