"""Identity Number Codec - known vectors, malformed input, century cutoff.

Tests:
    - The reference number decodes to 1980-01-01, male, citizen
    - Malformed input (length, non-digits, None, non-str) is rejected, never raises
    - Two-digit years below 16 are 20xx, the rest 19xx
    - Invalid numbers are neither female nor male
"""

from datetime import date

import pytest

from masterdata.core import id_number
from masterdata.core.domain_types import Sex

VALID = "8001015009087"


def _luhn_total(digits: str) -> int:
    total = 0
    for i, char in enumerate(reversed(digits)):
        d = int(char)
        if i % 2 == 1:
            d = d * 2 - 9 if d * 2 > 9 else d * 2
        total += d
    return total


def _with_check_digit(prefix: str) -> str:
    """Complete a 12-digit prefix with the digit that makes the Luhn sum divisible by 10."""
    for check in "0123456789":
        candidate = prefix + check
        if _luhn_total(candidate) % 10 == 0:
            return candidate
    raise AssertionError("no check digit found")


# ─── Known vector ────────────────────────────────────────────────

def test_reference_number_is_valid():
    assert id_number.is_valid(VALID)


def test_reference_number_decodes():
    assert id_number.get_date_of_birth(VALID) == date(1980, 1, 1)
    assert id_number.is_male(VALID)
    assert not id_number.is_female(VALID)
    assert id_number.is_citizen(VALID)
    assert id_number.get_sex(VALID) is Sex.MALE


def test_decode_returns_all_fields():
    decoded = id_number.decode(VALID)
    assert decoded is not None
    assert decoded.value == VALID
    assert decoded.date_of_birth == date(1980, 1, 1)
    assert decoded.sex is Sex.MALE
    assert decoded.sequence == 0
    assert decoded.citizen is True


def test_wrong_check_digit_is_invalid():
    assert not id_number.is_valid(VALID[:-1] + "8")


# ─── Malformed input ─────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "", "800101500908", "80010150090870", "80010150090a7",
    " 8001015009087", "８００１０１５００９０８７", None, 8001015009087, [],
])
def test_malformed_input_is_rejected_without_raising(value):
    assert id_number.is_valid(value) is False
    assert id_number.get_date_of_birth(value) is None
    assert id_number.is_citizen(value) is False
    assert id_number.decode(value) is None


def test_checksum_passing_but_impossible_date_is_invalid():
    number = _with_check_digit("800230500908")
    assert id_number.is_valid(number) is False
    assert id_number.get_date_of_birth(number) is None


def test_invalid_number_is_neither_female_nor_male():
    assert id_number.is_female("garbage") is False
    assert id_number.is_male("garbage") is False
    assert id_number.get_sex("garbage") is Sex.UNKNOWN


# ─── Fields ─────────────────────────────────────────────────────

def test_century_cutoff():
    assert id_number.get_date_of_birth(_with_check_digit("150101500008")) == date(2015, 1, 1)
    assert id_number.get_date_of_birth(_with_check_digit("160101500008")) == date(1916, 1, 1)
    assert id_number.get_date_of_birth(_with_check_digit("000229500008")) == date(2000, 2, 29)


def test_female_sex_digit():
    number = _with_check_digit("900315412308")
    assert id_number.is_female(number)
    assert not id_number.is_male(number)
    assert id_number.get_sex(number) is Sex.FEMALE


def test_permanent_resident_is_not_citizen():
    number = _with_check_digit("900315512318")
    assert id_number.is_valid(number)
    assert not id_number.is_citizen(number)
    assert id_number.decode(number).sequence == 123
