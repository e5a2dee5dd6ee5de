"""
Input Sanitization Module

Cleans ingredient lines and unit names received by the API before they
reach the conversion service.
"""

import re

from constants import MAX_LENGTHS

CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_ingredient_text(text, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize a single ingredient line.

    Args:
        text: Single ingredient line (can be None)
        max_length: Maximum length (default 500)

    Returns:
        Sanitized ingredient text
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Strip whitespace
    text = text.strip()

    # Remove control characters and null bytes
    text = CONTROL_CHARS.sub('', text)

    # Truncate
    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_unit(unit, max_length=MAX_LENGTHS['unit']):
    """Sanitize a unit name; returns '' when nothing usable is left."""
    if not unit or not isinstance(unit, str):
        return ''

    unit = CONTROL_CHARS.sub('', unit.strip())

    # Collapse multiple spaces ('fluid   ounces' -> 'fluid ounces')
    unit = re.sub(r'\s+', ' ', unit)

    return unit[:max_length]
