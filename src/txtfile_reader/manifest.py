"""Split plan manifest: one JSON line per reader task."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from jsonschema import Draft202012Validator

from .constants import PLAN_MANIFEST_SCHEMA, PLAN_MANIFEST_SCHEMA_VERSION
from .job import TaskConfig
from .params import ReaderParams, params_digest


def _manifest_line(record: Dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False, sort_keys=True)


def build_plan_records(tasks: Sequence[TaskConfig], params: ReaderParams) -> List[Dict[str, Any]]:
    created_at = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    digest = params_digest(params)
    return [
        {
            "schema_version": PLAN_MANIFEST_SCHEMA_VERSION,
            "group_index": task.index,
            "group_count": len(tasks),
            "file_count": len(task.files),
            "files": list(task.files),
            "params_digest": digest,
            "created_at": created_at,
        }
        for task in tasks
    ]


def write_plan_manifest(records: Iterable[Dict[str, Any]], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        for record in records:
            f.write(_manifest_line(record) + "\n")
    return path


def validate_plan_record(record: Dict[str, Any], schema_path: Path = PLAN_MANIFEST_SCHEMA) -> Tuple[bool, List[str]]:
    with schema_path.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator = Draft202012Validator(schema)
    errors = [error.message for error in validator.iter_errors(record)]
    return len(errors) == 0, errors
