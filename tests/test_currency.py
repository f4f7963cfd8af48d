import pytest

from algobox.currency import Currency, convert, main, parse_currency


def test_parse_letters_any_case():
    assert parse_currency("a") is Currency.DOLLAR
    assert parse_currency("B") is Currency.RUPEES
    assert parse_currency("euro") is Currency.EURO
    assert parse_currency(Currency.POUND) is Currency.POUND


@pytest.mark.parametrize("code", ["e", "", "yen", "ab"])
def test_parse_rejects_unknown(code):
    with pytest.raises(ValueError):
        parse_currency(code)


def test_rates_from_table():
    assert convert(1, Currency.DOLLAR, Currency.RUPEES) == pytest.approx(73.84)
    assert convert(1, "d", "b") == pytest.approx(101.20)
    assert convert(1, "b", "d") == pytest.approx(0.009)


@pytest.mark.parametrize("currency", list(Currency))
def test_same_currency_is_identity(currency):
    assert convert(42.5, currency, currency) == 42.5


@pytest.mark.parametrize("source", list(Currency))
@pytest.mark.parametrize("target", list(Currency))
def test_conversion_is_linear(source, target):
    assert convert(6, source, target) == pytest.approx(3 * convert(2, source, target))


def test_convert_rejects_unknown_target():
    with pytest.raises(ValueError):
        convert(1, "a", "z")


def test_main_with_arguments(capsys):
    assert main(["1", "a", "b"]) == 0
    assert capsys.readouterr().out.strip() == "The Result Is : 73.84"


def test_main_rejects_bad_currency():
    with pytest.raises(SystemExit):
        main(["1", "a", "zz"])


def test_main_rejects_wrong_argument_count():
    with pytest.raises(SystemExit):
        main(["1", "a"])


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_interactive_session(monkeypatch, capsys):
    _feed(monkeypatch, ["x", "s", "z", "1", "a", "1", "q", "b", "maybe", "n"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "You did not press s, press s to start" in out
    assert out.count("you have entered wrong value, please type again") == 2
    assert "The Result Is : 73.84" in out
    assert "You have entered wrong value , please type again" in out
    assert out.rstrip().endswith("Thank You For Using The Application")


def test_interactive_runs_again_on_yes(monkeypatch, capsys):
    _feed(monkeypatch, ["s", "a", "2", "a", "y", "S", "c", "1", "C", "n"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Welcome To Currency Convertor Application") == 2
    assert "The Result Is : 2" in out
    assert "The Result Is : 1" in out


def test_interactive_end_of_input(monkeypatch):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main([]) == 1