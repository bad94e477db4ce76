import re
from typing import Optional, Union

Number = Union[int, float]

LEADING_NUMBER = re.compile(r"-?(\d+\.?\d*|\.\d+)")


def format_currency(value: Number) -> str:
    """
    Whole-dollar USD, e.g. 1234.5 -> "$1,234" and -50 -> "-$50".
    """
    amount = int(round(value))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_percentage(value: Number) -> str:
    return f"{int(round(value * 100))}%"


def parse_currency(value) -> Optional[float]:
    """
    Parse "$1,234.50" style input. Anything other than digits, "." and "-"
    is dropped and the leading number is read, so "1.2.3" gives 1.2 and
    "$3k" gives 3. Blank or unparsable input gives None.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)

    cleaned = re.sub(r"[^0-9.\-]", "", str(value))
    match = LEADING_NUMBER.match(cleaned)
    if match is None:
        return None
    return float(match.group(0))


def clamp(value: Number, lower: Number, upper: Number) -> Number:
    return min(max(value, lower), upper)
