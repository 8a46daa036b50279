"""Utility functions for the course planner."""

import re
import logging
from typing import Optional

logger = logging.getLogger(__name__)

COURSE_NUMBER_RE = re.compile(r'^[A-Z]{2,8}\s?\d{3,4}[A-Z]?$')

def trim(text: Optional[str]) -> str:
    """Strip surrounding whitespace, treating None as empty."""
    if not text:
        return ''
    return text.strip()

def normalize_course_number(text: Optional[str]) -> str:
    """Normalize a course number for storage and lookup."""
    return trim(text).upper()

def parse_menu_choice(text: Optional[str]) -> Optional[int]:
    """Convert a menu entry to an int, or None if it isn't one."""
    clean_value = trim(text)
    if not clean_value:
        return None
    try:
        return int(clean_value)
    except ValueError:
        return None

def validate_course_number(course_number: str) -> bool:
    """Validate that a course number looks reasonable."""
    if not course_number:
        return False
    # Letters followed by digits, e.g. CSCI300 or MATH 201
    return bool(COURSE_NUMBER_RE.match(course_number.strip()))
