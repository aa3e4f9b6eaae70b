"""National Identity Number Codec - checksum validation and field decode.

Format (13 ASCII digits): YYMMDD G SSS C A Z
    YYMMDD  date of birth
    G       sex digit: 0-4 female, 5-9 male (index 6)
    SSS     sequence number for the date/sex combination (indices 7-9)
    C       citizenship: 0 citizen, 1 permanent resident (index 10)
    A       filler, usually 8 or 9 (index 11)
    Z       check digit (index 12)

Invariants:
    - All functions are PURE and TOTAL: malformed input (wrong length, non-digits,
      None, non-str) evaluates to False / None / Sex.UNKNOWN, never raises
    - Date plausibility is evaluated only after the checksum passes
    - Two-digit years below CENTURY_CUTOFF are 20xx, the rest 19xx; the cutoff
      is fixed and never derived from today's date
"""

from dataclasses import dataclass
from datetime import date

from masterdata.core.domain_types import Sex

ID_NUMBER_LENGTH = 13
CENTURY_CUTOFF = 16

_SEX_INDEX = 6
_SEQUENCE_SLICE = slice(7, 10)
_CITIZENSHIP_INDEX = 10


@dataclass(frozen=True)
class IdentityNumber:
    """Fields embedded in a valid identity number."""
    value: str
    date_of_birth: date
    sex: Sex
    sequence: int
    citizen: bool


# ─── Validation ──────────────────────────────────────────────────

def is_valid(id_number: object) -> bool:
    """True iff the number has 13 digits, a correct check digit and a real birth date."""
    if not _is_digit_string(id_number):
        return False
    if _checksum(id_number) % 10 != 0:
        return False
    return _birth_date(id_number) is not None


def _is_digit_string(id_number: object) -> bool:
    return (
        isinstance(id_number, str)
        and len(id_number) == ID_NUMBER_LENGTH
        and id_number.isascii()
        and id_number.isdigit()
    )


def _checksum(digits: str) -> int:
    """Luhn sum: rightmost digit is position 1; even positions doubled, minus 9 if >= 10."""
    total = 0
    for position, char in enumerate(reversed(digits), start=1):
        digit = int(char)
        if position % 2 == 0:
            digit *= 2
            if digit >= 10:
                digit -= 9
        total += digit
    return total


def _birth_date(digits: str) -> date | None:
    yy = int(digits[0:2])
    year = 2000 + yy if yy < CENTURY_CUTOFF else 1900 + yy
    try:
        return date(year, int(digits[2:4]), int(digits[4:6]))
    except ValueError:
        return None


# ─── Decode ──────────────────────────────────────────────────────

def get_date_of_birth(id_number: object) -> date | None:
    """Decoded birth date, or None when the number is invalid."""
    if not is_valid(id_number):
        return None
    return _birth_date(id_number)


def get_sex(id_number: object) -> Sex:
    """Tri-state sex: UNKNOWN for an invalid number."""
    if not is_valid(id_number):
        return Sex.UNKNOWN
    return Sex.FEMALE if int(id_number[_SEX_INDEX]) < 5 else Sex.MALE


def is_female(id_number: object) -> bool:
    """Sex digit 0-4. An invalid number is neither female nor male."""
    return get_sex(id_number) is Sex.FEMALE


def is_male(id_number: object) -> bool:
    """Sex digit 5-9. An invalid number is neither female nor male."""
    return get_sex(id_number) is Sex.MALE


def is_citizen(id_number: object) -> bool:
    """Citizenship digit is '0'. False for an invalid number."""
    if not is_valid(id_number):
        return False
    return id_number[_CITIZENSHIP_INDEX] == "0"


def decode(id_number: object) -> IdentityNumber | None:
    """All embedded fields at once, or None when the number is invalid."""
    if not is_valid(id_number):
        return None
    return IdentityNumber(
        value=id_number,
        date_of_birth=_birth_date(id_number),
        sex=get_sex(id_number),
        sequence=int(id_number[_SEQUENCE_SLICE]),
        citizen=id_number[_CITIZENSHIP_INDEX] == "0",
    )
