from typing import Any, Optional

from ..errors import ValidationError

# largest value an INTEGER column holds on every supported database
MAX_ID = 2**31 - 1


def ensure_positive_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"The field {field} must be a positive integer", field=field)
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"The field {field} must be a positive integer", field=field) from None
    if number <= 0:
        raise ValidationError(f"The field {field} must be a positive integer", field=field)
    if number > MAX_ID:
        raise ValidationError(f"The field {field} must not exceed {MAX_ID}", field=field)
    return number


def bounded_str(value: Any, field: str, max_length: int) -> str:
    text = require_str(value, field)
    if len(text) > max_length:
        raise ValidationError(f"The field {field} must be at most {max_length} characters", field=field)
    return text


def optional_positive_int(value: Any, field: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return ensure_positive_int(value, field)


def require_str(value: Any, field: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError(f"The field {field} must not be empty", field=field)
    return text


def optional_str(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        raise ValidationError(f"The field {field} must not be empty", field=field)
    return text
