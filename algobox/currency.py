"""Conversion between dollars, rupees, euros and pounds at fixed rates."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum


class Currency(Enum):
    """A supported currency, keyed by the letter used to select it."""

    DOLLAR = "a"
    RUPEES = "b"
    EURO = "c"
    POUND = "d"


_RATES: dict[Currency, dict[Currency, float]] = {
    Currency.DOLLAR: {
        Currency.DOLLAR: 1.0,
        Currency.RUPEES: 73.84,
        Currency.EURO: 0.85,
        Currency.POUND: 0.72,
    },
    Currency.RUPEES: {
        Currency.DOLLAR: 0.01,
        Currency.RUPEES: 1.0,
        Currency.EURO: 0.01,
        Currency.POUND: 0.009,
    },
    Currency.EURO: {
        Currency.DOLLAR: 1.16,
        Currency.RUPEES: 86.37,
        Currency.EURO: 1.0,
        Currency.POUND: 0.85,
    },
    Currency.POUND: {
        Currency.DOLLAR: 1.37,
        Currency.RUPEES: 101.20,
        Currency.EURO: 1.17,
        Currency.POUND: 1.0,
    },
}

_WRONG_VALUE = "you have entered wrong value, please type again"

_BANNER = """          Welcome To Currency Convertor Application            


          Please Follow The Given Instructiions               

This Convertor Will Work For Dollar,Rupees,Euro,Pound
Give the following character to get the required currency
DOLLAR : a
RUPEES : b
EURO : c
POUND : d

Enter The Currency To Be Converted
Enter The Value For That Currency
Select The Currency In Which The Value Needs To Be Converted

             Please press s to start      """


def parse_currency(code: str | Currency) -> Currency:
    """Return the currency for a selection letter or a name, in any case."""
    if isinstance(code, Currency):
        return code
    text = code.strip().lower()
    for currency in Currency:
        if text in (currency.value, currency.name.lower()):
            return currency
    raise ValueError(f"unknown currency: {code!r}")


def convert(amount: float, source: str | Currency, target: str | Currency) -> float:
    """Convert ``amount`` from ``source`` to ``target`` at the fixed rate."""
    return amount * _RATES[parse_currency(source)][parse_currency(target)]


def _read_char(prompt: str = "") -> str:
    while True:
        text = input(prompt).strip()
        if text:
            return text[0]


def _read_amount(prompt: str) -> float:
    while True:
        text = input(prompt).strip()
        try:
            return float(text)
        except ValueError:
            print(_WRONG_VALUE)


def _convert_interactively() -> float:
    while True:
        code = _read_char("enter the curency name : ")
        amount = _read_amount("enter the value for that currency : ")
        try:
            source = parse_currency(code)
        except ValueError:
            print(_WRONG_VALUE)
            continue
        break
    while True:
        code = _read_char("enter currency name in which it needs to be converted :")
        try:
            target = parse_currency(code)
        except ValueError:
            print(_WRONG_VALUE)
            continue
        return convert(amount, source, target)


def _interactive() -> int:
    while True:
        print(_BANNER)
        while _read_char().lower() != "s":
            print("You did not press s, press s to start")
        result = _convert_interactively()
        print(f"The Result Is : {result:g}\n")
        print("do you want to use the application again ? press y for yes or n for no")
        while True:
            answer = _read_char().lower()
            if answer == "y":
                break
            if answer == "n":
                print("Thank You For Using The Application")
                return 0
            print("You have entered wrong value , please type again")


def main(argv: Sequence[str] | None = None) -> int:
    """Convert once from the arguments, or run the interactive converter."""
    parser = argparse.ArgumentParser(
        prog="algobox-currency",
        description="Convert between dollar (a), rupees (b), euro (c) and pound (d).",
    )
    parser.add_argument(
        "conversion",
        nargs="*",
        metavar="AMOUNT SOURCE TARGET",
        help="convert once instead of asking interactively",
    )
    args = parser.parse_args(argv)
    if not args.conversion:
        try:
            return _interactive()
        except EOFError:
            return 1
    if len(args.conversion) != 3:
        parser.error("expected AMOUNT SOURCE TARGET")
    amount_text, source_code, target_code = args.conversion
    try:
        amount = float(amount_text)
        result = convert(amount, source_code, target_code)
    except ValueError as error:
        parser.error(str(error))
    print(f"The Result Is : {result:g}")
    return 0