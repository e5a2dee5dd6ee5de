"""
Parsing Service

Functions for reading the leading quantity and unit of an ingredient line
and for formatting converted quantities back into text.
"""

import logging
import math
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

# Leading quantity (integer, decimal or a/b) followed by a one or two word unit
LEADING_MEASUREMENT_PATTERN = re.compile(
    r'^(\d+(?:\.\d+)?(?:/\d+)?)\s+([a-zA-Z]+)(\s+[a-zA-Z]+)?'
)

# quantity: the number as written
# candidates: (unit, matched_text) pairs, two-word unit first
LeadingMeasurement = namedtuple('LeadingMeasurement', ['quantity', 'candidates'])


def match_leading_measurement(text):
    """
    Match the quantity and unit at the start of an ingredient line.

    For '2 cups flour' the candidates are ('cups flour', '2 cups flour')
    followed by ('cups', '2 cups'); the caller decides which unit is real.

    Returns:
        LeadingMeasurement, or None when the line has no leading quantity
    """
    if not isinstance(text, str):
        return None

    match = LEADING_MEASUREMENT_PATTERN.match(text)
    if not match:
        return None

    first_word = match.group(2)
    candidates = []
    if match.group(3):
        second_word = match.group(3).strip()
        candidates.append((f"{first_word} {second_word}", match.group(0)))
    candidates.append((first_word, text[:match.end(2)]))

    return LeadingMeasurement(match.group(1), tuple(candidates))


def parse_quantity(text):
    """Convert '2', '1.5' or '1/2' to a float. Mixed numbers are not supported."""
    if not text:
        return None

    text = str(text).strip()
    try:
        if '/' in text:
            num, den = text.split('/')
            return float(num) / float(den)
        return float(text)
    except ZeroDivisionError:
        logger.debug("Zero denominator in quantity %r", text)
        return None
    except ValueError:
        return None


def format_quantity(value):
    """Format a converted quantity for display ('2' rather than '2.0')."""
    if isinstance(value, float) and math.isfinite(value) and value == int(value):
        return str(int(value))
    return str(value)
