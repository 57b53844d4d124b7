"""
Coercing field types shared by the request schemas.

Form posts send everything as strings: numbers may carry units ("72 kg"),
dates may be full ISO timestamps from a client-local Date, and flags come as
"Y"/"N". These annotated types normalise the raw values before pydantic sees
them so a sloppy number never fails a request; it just becomes null.
"""

import math
import re
from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel

_NON_NUMERIC = re.compile(r"[^\d.]")
SMALLINT_MIN, SMALLINT_MAX = -32768, 32767


def clean_to_float(value: Any) -> Optional[float]:
    """Strip everything but digits and dots, then parse. Unparsable -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = float(value)
        return value if math.isfinite(value) else None
    cleaned = _NON_NUMERIC.sub("", str(value))
    try:
        number = float(cleaned)
    except ValueError:
        return None
    # a long enough digit run parses as inf
    return number if math.isfinite(number) else None


def clean_to_int(value: Any) -> Optional[int]:
    number = clean_to_float(value)
    return int(number) if number is not None else None


def to_plain_date(value: Any) -> Optional[date]:
    """Reduce dates and timestamps to a plain calendar date (UTC for aware values)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return to_plain_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        return None


def to_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def yes_no_flag(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"y", "yes", "true", "1", "on"}


def yes_no_or_false(value: Any) -> bool:
    return bool(yes_no_flag(value))


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _required(value: Any) -> Any:
    if value is None:
        raise ValueError("field is required")
    return value


def _fits_small_integer(value: Optional[int]) -> Optional[int]:
    if value is not None and not SMALLINT_MIN <= value <= SMALLINT_MAX:
        raise ValueError(f"must be between {SMALLINT_MIN} and {SMALLINT_MAX}")
    return value


CleanFloat = Annotated[Optional[float], BeforeValidator(clean_to_float)]
CleanInt = Annotated[Optional[int], BeforeValidator(clean_to_int)]
SmallInt = Annotated[Optional[int], BeforeValidator(clean_to_int), AfterValidator(_fits_small_integer)]
RequiredInt = Annotated[Optional[int], BeforeValidator(clean_to_int), AfterValidator(_required)]
PlainDate = Annotated[Optional[date], BeforeValidator(to_plain_date)]
RequiredDate = Annotated[Optional[date], BeforeValidator(to_plain_date), AfterValidator(_required)]
Timestamp = Annotated[Optional[datetime], BeforeValidator(to_timestamp)]
ClockTime = Annotated[Optional[time], BeforeValidator(blank_to_none)]
Flag = Annotated[Optional[bool], BeforeValidator(yes_no_flag)]
CheckedFlag = Annotated[bool, BeforeValidator(yes_no_or_false)]
Text = Annotated[Optional[str], BeforeValidator(blank_to_none)]
RequiredText = Annotated[Optional[str], BeforeValidator(blank_to_none), AfterValidator(_required)]


class FormModel(BaseModel):
    """Base for request bodies: camelCase keys in, snake_case column names out."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

    def to_columns(self) -> dict:
        return self.model_dump(exclude_none=True)
