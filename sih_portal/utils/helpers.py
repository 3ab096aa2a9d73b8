from datetime import datetime, timezone
import re

PROBLEM_CODE_PREFIX_LENGTH = 3

# Problem ids are stored in a signed 64-bit INTEGER column
PROBLEM_ID_MIN = -(2 ** 63)
PROBLEM_ID_MAX = 2 ** 63 - 1

_PROBLEM_NUMBER = re.compile(r"[+-]?[0-9]+")

def get_utc_now() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)

def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime read back from the store"""
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt

def parse_problem_id(problem_code: str) -> int:
    """
    Derive the numeric problem id from a problem code

    Args:
        problem_code: Code such as "SIH25010"

    Returns:
        The integer after the 3-character prefix, or 0 when it is not a plain
        ASCII integer or does not fit the problem_id column
    """
    remainder = problem_code[PROBLEM_CODE_PREFIX_LENGTH:].strip(" \t\r\n")
    if not _PROBLEM_NUMBER.fullmatch(remainder):
        return 0
    value = int(remainder)
    if not PROBLEM_ID_MIN <= value <= PROBLEM_ID_MAX:
        return 0
    return value
