"""
Utility functions for parsing loosely typed catalog data and validating payloads
"""
import math
import re
from typing import Any, Dict, List, Optional


PROGRAM_KINDS = ("scheme", "scholarship")


def normalize_text(value: Any) -> str:
    """
    Normalize a value for case-insensitive comparison

    Args:
        value: Any value; non-strings are converted with str()

    Returns:
        Trimmed, case-folded string ("" for None)
    """
    if value is None:
        return ""
    return re.sub(r'\s+', ' ', str(value)).strip().casefold()


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a number the way form inputs store it (int, float or numeric string)

    Args:
        value: Raw value from a document or form

    Returns:
        The parsed float, or None when the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(',', '').lstrip('₹').strip()
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer, truncating numeric strings like "18.0"."""
    number = parse_number(value)
    if number is None:
        return None
    return int(number)


def parse_bool(value: Any) -> bool:
    """Parse a boolean flag; "Yes"/"true"/"1" are true, anything else is false."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in ('yes', 'true', '1', 'y')
    return False


def parse_string_list(value: Any) -> List[str]:
    """
    Parse a restriction field stored either as a list or as a single string

    Comma separated strings are split. Blank entries are dropped and
    duplicates removed while preserving order.

    Args:
        value: A list, tuple, set, string or None

    Returns:
        List of trimmed strings
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(',')
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        return []

    result = []
    seen = set()
    for item in items:
        if item is None or isinstance(item, (dict, list)):
            continue
        text = str(item).strip()
        key = text.casefold()
        if text and key not in seen:
            seen.add(key)
            result.append(text)
    return result


def format_inr(amount: float) -> str:
    """
    Format an amount in rupees using Indian digit grouping

    Args:
        amount: Amount in rupees

    Returns:
        Formatted string such as "₹1,00,000" or "₹2,50,000.50"
    """
    negative = amount < 0
    amount = abs(amount)
    whole = int(amount)
    paise = round((amount - whole) * 100)
    if paise == 100:
        whole += 1
        paise = 0

    digits = str(whole)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ','.join(groups) + ',' + tail

    text = f"₹{digits}"
    if paise:
        text += f".{paise:02d}"
    return f"-{text}" if negative else text


def validate_program_kind(kind: str) -> bool:
    """Check that a catalog kind is one of the known collections."""
    return kind in PROGRAM_KINDS


def validate_program_name(name: str) -> bool:
    """
    Validate a scheme or scholarship name

    Args:
        name: Name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name or not name.strip():
        return False

    # Check length
    if len(name.strip()) < 3 or len(name.strip()) > 200:
        return False

    return True


def validate_program_payload(payload: Dict[str, Any], kind: str, partial: bool = False) -> List[str]:
    """
    Validate an admin program payload and return list of validation errors

    Args:
        payload: Document fields in catalog (camelCase) form
        kind: "scheme" or "scholarship"
        partial: Update payload; required fields are only checked when sent

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    name_field = "name" if kind == "scheme" else "title"
    required_fields = [name_field, "description", "deadline"]
    for field in required_fields:
        if partial and field not in payload:
            continue
        value = payload.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.append(f"Missing required field: {field}")

    if payload.get(name_field) and not validate_program_name(str(payload[name_field])):
        errors.append(f"{name_field} must be between 3 and 200 characters")

    # Income validation
    income_limit = payload.get("incomeLimit")
    if income_limit not in (None, ""):
        number = parse_number(income_limit)
        if number is None:
            errors.append("incomeLimit must be a valid number")
        elif number < 0:
            errors.append("incomeLimit cannot be negative")

    # Age validation
    age_min = payload.get("ageMin")
    age_max = payload.get("ageMax")
    parsed_min = parse_int(age_min) if age_min not in (None, "") else None
    parsed_max = parse_int(age_max) if age_max not in (None, "") else None
    if age_min not in (None, "") and parsed_min is None:
        errors.append("ageMin must be a valid number")
    if age_max not in (None, "") and parsed_max is None:
        errors.append("ageMax must be a valid number")
    if parsed_min is not None and parsed_min < 0:
        errors.append("ageMin cannot be negative")
    if parsed_min is not None and parsed_max and parsed_min > parsed_max:
        errors.append("ageMin cannot be greater than ageMax")

    return errors
