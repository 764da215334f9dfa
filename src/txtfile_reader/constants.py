"""Constants and path conventions for the text file reader."""
from __future__ import annotations

from pathlib import Path

DEFAULT_ENCODING = "utf-8"
DEFAULT_FIELD_DELIMITER = ","
DEFAULT_PLAN_MANIFEST_NAME = "split.plan.jsonl"
PLAN_MANIFEST_SCHEMA_VERSION = "split.plan.v1"

SCHEMAS_DIR = Path(__file__).parent / "schemas"
JOB_CONFIG_SCHEMA = SCHEMAS_DIR / "job_config.schema.json"
PLAN_MANIFEST_SCHEMA = SCHEMAS_DIR / "split_plan.schema.json"

# Compression codecs understood by the record decoder (names only; decoding is external)
SUPPORTED_COMPRESS = {"gzip", "bzip2", "zip"}

# Characters that make a path specification a wildcard pattern
WILDCARD_CHARS = frozenset("*?")
