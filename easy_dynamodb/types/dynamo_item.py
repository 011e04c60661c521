"""Plain item as supplied by callers."""

from typing import Any, Dict

DynamoItem = Dict[str, Any]
