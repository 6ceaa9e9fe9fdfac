from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from .exceptions import RecordNormalizationError

DEFAULT_STATUS = "standard"
DEFAULT_CATEGORY = "інше"
DEFAULT_DESCRIPTION = ""

# Any Record field can be used as a sort key
RECORD_FIELDS = ("tag", "status", "category", "description")


@dataclass(frozen=True)
class Record:
    """
    One normalized catalog entry.

    Every field is populated after normalization; fallbacks have already been
    applied, so downstream code never sees a missing value.
    """

    tag: str
    status: str = DEFAULT_STATUS
    category: str = DEFAULT_CATEGORY
    description: str = DEFAULT_DESCRIPTION

    def field_value(self, key: str) -> str:
        return getattr(self, key, "") or ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _optional_text(raw: Mapping[str, Any], key: str, fallback: str) -> str:
    value = raw.get(key)
    # None and "" both count as missing
    if value is None or value == "":
        return fallback
    return value if isinstance(value, str) else str(value)


def normalize_record(
        raw: Any,
        *,
        default_category: str = DEFAULT_CATEGORY,
) -> Record:
    """
    Build a Record from a raw, untyped catalog entry.

    :param raw: mapping with a required 'tag' and optional 'status', 'category', 'description'
    :param default_category: localized fallback for a missing category
    :return: the normalized Record
    :raises RecordNormalizationError: if the entry is not a mapping or has no usable tag
    """
    if not isinstance(raw, Mapping):
        raise RecordNormalizationError(f"Catalog entry must be an object, got {type(raw).__name__}")

    tag = raw.get("tag")
    if not isinstance(tag, str) or not tag:
        raise RecordNormalizationError(f"Catalog entry has no valid 'tag': {tag!r}")

    return Record(
        tag=tag,
        status=_optional_text(raw, "status", DEFAULT_STATUS),
        category=_optional_text(raw, "category", default_category),
        description=_optional_text(raw, "description", DEFAULT_DESCRIPTION),
    )
