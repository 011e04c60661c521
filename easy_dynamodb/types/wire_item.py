"""Attribute-value item as sent to and returned by DynamoDB."""

from typing import Any, Dict

WireItem = Dict[str, Dict[str, Any]]
