"""Request and response mappings of the low-level client."""

from typing import Any, Dict

RequestParams = Dict[str, Any]
ResponseData = Dict[str, Any]
