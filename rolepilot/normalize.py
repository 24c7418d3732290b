"""
Form input normalization shared by the job and bullet handlers.

Submitted forms arrive as flat mappings of field name to string (or nothing).
These helpers turn raw values into the typed values the models store.
"""
import uuid
from typing import Any, List, Optional

# Value a checked HTML checkbox submits.
CHECKBOX_ON = 'on'


def to_optional_string(value: Any) -> Optional[str]:
    """
    Trim a submitted value.

    Returns None for anything that is not a string or is blank after trimming.
    """
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def to_skills_list(value: Any) -> List[str]:
    """
    Split a comma separated skills field.

    Example: "Go,  Rust ,,TypeScript" -> ["Go", "Rust", "TypeScript"]
    Order and duplicates are kept.
    """
    if not isinstance(value, str):
        return []
    return [skill.strip() for skill in value.split(',') if skill.strip()]


def to_flag(value: Any) -> bool:
    return value == CHECKBOX_ON


def to_record_id(value: Any) -> Optional[uuid.UUID]:
    """
    Parse a submitted row identifier.

    Returns None when the value is blank or not a UUID, since such an id
    can never match a stored row.
    """
    raw = to_optional_string(value)
    if raw is None:
        return None
    try:
        return uuid.UUID(raw)
    except ValueError:
        return None
