"""Guess a cat's age from the Danish text of its listing."""
import logging
import re
from typing import Optional

from src.parse.models import UNKNOWN_AGE, Cat

logger = logging.getLogger(__name__)

YEARS = re.compile(r"([\d\.,]+)\s*år")
# Loose on purpose: matches "md", "mdr", "mnd", "måned", "måneder", ...
MONTHS = re.compile(r"([\d\.,]+)\s*må?n?e?de?r?")
WEEKS = re.compile(r"([\d\.,]+)\s*uger?")

# (field, pattern, months per unit), tried in order; the first match wins
AGE_PATTERNS = [
    ("name", YEARS, 12),
    ("name", MONTHS, 1),
    ("name", WEEKS, 1 / 4),
    ("description", YEARS, 12),
    ("description", MONTHS, 1),
    ("description", WEEKS, 1 / 4),
]


def parse_numeral(text: str) -> Optional[float]:
    """Parse a numeral that may use a decimal comma ("2,5" -> 2.5)."""
    try:
        return float(text.replace(",", "."))
    except ValueError:
        return None


def guess_age_in_months(cat: Cat, log=None) -> float:
    """Return the age in months found in the cat's name or description, or -1."""
    log = log or logger
    age = UNKNOWN_AGE
    for field, pattern, scale in AGE_PATTERNS:
        match = pattern.search(getattr(cat, field) or "")
        if not match:
            continue
        value = parse_numeral(match.group(1))
        if value is None:
            log.debug(f"Ignoring numeral {match.group(1)!r} in {field} of cat {cat.name}")
            continue
        age = value * scale
        break

    if age == UNKNOWN_AGE:
        log.warning(f"Couldn't guess age of cat {cat.name}")
    else:
        log.debug(f"Guessed age of cat {cat.name} to be {age}")
    return age
