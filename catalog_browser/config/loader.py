from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from catalog_browser.config.model import DEFAULT_STATUSES, GlobalConfig
from catalog_browser.core.exceptions import ConfigError
from catalog_browser.core.messages import Messages

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = "CATALOG_BROWSER_DATA_SOURCE"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_data_source(raw: str, root: Path) -> str:
    """
    URLs are used as-is. Absolute paths are used as-is.
    Relative paths are resolved relative to the config root directory.
    """
    if is_url(raw):
        return raw
    path = Path(raw)
    if path.is_absolute():
        return str(path)
    return str((root / path).resolve())


def _require_str(raw: Dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"global.json: '{key}' must be a non-empty string, got {value!r}")
    return value


def _require_statuses(raw: Dict[str, Any]) -> List[str]:
    value = raw.get("statuses", list(DEFAULT_STATUSES))
    if not isinstance(value, list) or not all(isinstance(s, str) and s for s in value):
        raise ConfigError(f"global.json: 'statuses' must be a list of strings, got {value!r}")
    if "all" in value:
        raise ConfigError("global.json: 'all' is reserved and cannot be a status")
    # keep first occurrence order
    return list(dict.fromkeys(value))


def _require_messages(raw: Dict[str, Any]) -> Dict[str, Any]:
    messages = raw.get("messages", {})
    if not isinstance(messages, dict):
        raise ConfigError("global.json: 'messages' must be an object")

    # count_template is formatted on every render
    template = Messages().with_overrides(messages).count_template
    try:
        template.format(count=0)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigError(
            f"global.json: messages.count_template {template!r} must only use {{count}}: {e!r}"
        ) from e
    return messages


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json
            data/
                html-elements.json   (or any path / URL named by data_source)

    Recognised keys in global.json:

    - ui_title: title for UI, defaults to 'HTML Elements'
    - subtitle: small text under the title
    - data_source: URL or path to the catalog document, defaults to 'data/html-elements.json'
    - records_field: array field in that document, defaults to 'html_elements'
    - statuses: closed list of status values for the filter chips
    - messages: overrides for user-facing strings (see Messages)

    The CATALOG_BROWSER_DATA_SOURCE env var overrides data_source.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or has wrongly typed values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    messages = _require_messages(raw)

    env_source = os.getenv(DATA_SOURCE_ENV)
    if env_source:
        logger.info(
            "Data source overridden from environment",
            extra={"env_var": DATA_SOURCE_ENV, "data_source": env_source},
        )
        data_source = env_source
    else:
        data_source = _require_str(raw, "data_source", "data/html-elements.json")

    return GlobalConfig(
        ui_title=_require_str(raw, "ui_title", "HTML Elements"),
        subtitle=_require_str(raw, "subtitle", "Довідник HTML-елементів"),
        data_source=resolve_data_source(data_source, root),
        records_field=_require_str(raw, "records_field", "html_elements"),
        statuses=_require_statuses(raw),
        messages=messages,
    )
