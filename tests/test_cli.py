from dining.cli import main


def test_wrong_count(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out.strip() == "argc should be 5 or 6"


def test_non_numeric(capsys):
    assert main(["1", "x", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "argv should be nbr only"


def test_out_of_range(capsys):
    main(["1", "99999999999", "1", "1"])
    assert capsys.readouterr().out.strip() == "argv should within INT_RANGE"


def test_zero_philosophers_prints_nothing(capsys):
    assert main(["0", "800", "200", "200"]) == 0
    assert capsys.readouterr().out == ""


def test_zero_meals_prints_nothing(capsys):
    assert main(["3", "800", "200", "200", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    out = capsys.readouterr().out
    assert "has taken a fork" in out
    assert out.strip().endswith("1 died")