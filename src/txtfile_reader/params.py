"""Job parameter handling: validation, merging and digests."""
from __future__ import annotations

import codecs
import hashlib
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator

from .config import ConfigError, load_custom_config, load_default_config
from .constants import DEFAULT_ENCODING, DEFAULT_FIELD_DELIMITER, JOB_CONFIG_SCHEMA, SUPPORTED_COMPRESS
from .errors import InvalidConfig


@dataclass
class ReaderParams:
    """Validated job parameters shared by the job and every reader task."""

    path: List[str] = field(default_factory=list)
    encoding: str = DEFAULT_ENCODING
    compress: Optional[str] = None
    field_delimiter: str = DEFAULT_FIELD_DELIMITER
    column: Optional[List[Dict[str, Any]]] = None
    skip_header: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.path),
            "encoding": self.encoding,
            "compress": self.compress,
            "field_delimiter": self.field_delimiter,
            "column": [dict(col) for col in self.column] if self.column is not None else None,
            "skip_header": bool(self.skip_header),
        }


def _schema_errors(config: Dict[str, Any]) -> List[str]:
    with JOB_CONFIG_SCHEMA.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator = Draft202012Validator(schema)
    return [
        f"{'.'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in validator.iter_errors(config)
    ]


def _normalize_path(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return [str(item) for item in value]


def _normalize_encoding(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return DEFAULT_ENCODING
    encoding = value.strip()
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise InvalidConfig(f"Unsupported encoding: [{encoding}]", key="encoding") from exc
    return encoding


def _normalize_compress(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    compress = value.strip().lower()
    if compress not in SUPPORTED_COMPRESS:
        supported = ", ".join(sorted(SUPPORTED_COMPRESS))
        raise InvalidConfig(
            f"Only {supported} compression is supported, got: [{compress}]",
            key="compress",
        )
    return compress


def _normalize_delimiter(value: Optional[str]) -> str:
    if value is None:
        return DEFAULT_FIELD_DELIMITER
    if len(value) != 1:
        raise InvalidConfig(
            f"Field delimiter must be a single character, got: [{value}]",
            key="field_delimiter",
        )
    return value


def _normalize_columns(value: Optional[List[Any]]) -> Optional[List[Dict[str, Any]]]:
    # ["*"] (or nothing) selects every column
    if not value or value == ["*"]:
        return None
    columns: List[Dict[str, Any]] = []
    for position, column in enumerate(value):
        key = f"column[{position}]"
        if not isinstance(column, dict):
            raise InvalidConfig(f"{key}: '*' is only allowed as the single column entry", key=key)
        if not column.get("type"):
            raise InvalidConfig(f"{key}: 'type' is required", key=key)
        index = column.get("index")
        constant = column.get("value")
        if index is None and constant is None:
            raise InvalidConfig(f"{key}: a typed column needs 'index' or 'value'", key=key)
        if index is not None and constant is not None:
            raise InvalidConfig(f"{key}: 'index' and 'value' are mutually exclusive", key=key)
        if index is not None and index < 0:
            raise InvalidConfig(f"{key}: 'index' must be >= 0, got [{index}]", key=key)
        columns.append(dict(column))
    return columns


def params_from_config(config: Dict[str, Any]) -> ReaderParams:
    """Validate a raw configuration mapping and build :class:`ReaderParams`.

    Raises
    ------
    InvalidConfig
        If the mapping does not match the job schema or breaks a semantic rule.
    """

    problems = _schema_errors(config)
    if problems:
        raise InvalidConfig("Invalid job config: " + "; ".join(problems))

    return ReaderParams(
        path=_normalize_path(config.get("path")),
        encoding=_normalize_encoding(config.get("encoding")),
        compress=_normalize_compress(config.get("compress")),
        field_delimiter=_normalize_delimiter(config.get("field_delimiter")),
        column=_normalize_columns(config.get("column")),
        skip_header=bool(config.get("skip_header", False)),
    )


def load_config_params(config_path: Optional[Path | str]) -> Optional[Dict[str, Any]]:
    """Load the raw mapping of a user-provided config path if present."""

    if config_path is None:
        return None
    path_obj = Path(config_path)
    if not path_obj.exists():
        raise ConfigError(f"Config path does not exist: {path_obj}")
    return load_custom_config(path_obj)


def merge_params(
    user_config: Optional[Dict[str, Any]],
    cli_overrides: Dict[str, Any],
    default_config: Optional[Dict[str, Any]] = None,
) -> Tuple[ReaderParams, Dict[str, str]]:
    """Merge raw configs with precedence cli > config > default, tracking sources.

    ``default_config`` falls back to the bundled default configuration. The
    merged mapping is validated once, so a bad value is reported no matter
    which layer it came from.
    """

    if default_config is None:
        default_config = load_default_config()
    merged: Dict[str, Any] = {}
    sources: Dict[str, str] = {}
    for field_name in ReaderParams().to_dict().keys():
        if cli_overrides.get(field_name) is not None:
            merged[field_name] = cli_overrides[field_name]
            sources[field_name] = "cli"
        elif user_config is not None and user_config.get(field_name) is not None:
            merged[field_name] = user_config[field_name]
            sources[field_name] = "config"
        else:
            if default_config.get(field_name) is not None:
                merged[field_name] = default_config[field_name]
            sources[field_name] = "default"

    return params_from_config(merged), sources


def params_digest(params: ReaderParams) -> str:
    serialized = json.dumps(params.to_dict(), ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
