# src/shift_wage/utils/time_utils.py
"""
Utility functions for time input and duration display.
"""
import re
from typing import Optional, Tuple

MAX_TIME_DIGITS = 4


def format_time_input(text: str) -> Tuple[str, int]:
    """
    Reformat raw text typed into a time field into the 'HH:MM' shape.

    Non-digits are dropped, only the first four digits are kept, and a colon is
    placed after the second digit. Returns the new text and where the cursor
    should go. For example "0930" becomes ("09:30", 5) and "12" becomes ("12:", 2).
    """
    digits = re.sub(r"\D", "", text or "")[:MAX_TIME_DIGITS]

    if len(digits) >= 2:
        formatted = f"{digits[:2]}:{digits[2:4]}"
    else:
        formatted = digits

    if not digits:
        cursor = 0
    elif len(digits) <= 2:
        cursor = len(digits)
    else:
        # +1 for the colon
        cursor = min(len(digits) + 1, len(formatted))
    return formatted, cursor


def hours_to_hhmm(hours: Optional[float]) -> str:
    """Converts decimal hours into a readable 'Xh Ym' string, e.g. 1.25 -> '1h 15m'."""
    if hours is None or hours < 0:
        return "0h 0m"
    total_minutes = int(round(hours * 60))
    whole_hours, minutes = divmod(total_minutes, 60)
    return f"{whole_hours}h {minutes}m"
