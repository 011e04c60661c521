"""Protocol tokens accepted by the DynamoDB client, as closed enumerations."""

from enum import Enum
from typing import Any, Dict, List


class AttributeType(str, Enum):
    STRING = "S"
    NUMBER = "N"
    BINARY = "B"


class KeyType(str, Enum):
    HASH = "HASH"
    RANGE = "RANGE"


class ReturnValue(str, Enum):
    NONE = "NONE"
    ALL_OLD = "ALL_OLD"
    UPDATED_OLD = "UPDATED_OLD"
    ALL_NEW = "ALL_NEW"
    UPDATED_NEW = "UPDATED_NEW"


class WaitState(str, Enum):
    """Waiter names understood by ``client.get_waiter``."""

    TABLE_EXISTS = "table_exists"
    TABLE_NOT_EXISTS = "table_not_exists"


def normalize_table_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of create/update table params with enum tokens validated.

    Raises ``ValueError`` when an attribute type or key role is unknown.
    """
    normalized = dict(params)
    definitions = normalized.get("AttributeDefinitions")
    if isinstance(definitions, list):
        normalized["AttributeDefinitions"] = [
            _coerce(definition, "AttributeType", AttributeType) for definition in definitions
        ]
    if isinstance(normalized.get("KeySchema"), list):
        normalized["KeySchema"] = _normalize_key_schema(normalized["KeySchema"])
    for index_field in ("GlobalSecondaryIndexes", "LocalSecondaryIndexes"):
        indexes = normalized.get(index_field)
        if isinstance(indexes, list):
            normalized[index_field] = [_normalize_index(index) for index in indexes]
    updates = normalized.get("GlobalSecondaryIndexUpdates")
    if isinstance(updates, list):
        normalized["GlobalSecondaryIndexUpdates"] = [
            {action: _normalize_index(body) for action, body in update.items()} for update in updates
        ]
    return normalized


def normalize_return_values(params: Dict[str, Any]) -> Dict[str, Any]:
    if "ReturnValues" not in params:
        return params
    return {**params, "ReturnValues": ReturnValue(params["ReturnValues"]).value}


def _normalize_index(index: Any) -> Any:
    if isinstance(index, dict) and isinstance(index.get("KeySchema"), list):
        return {**index, "KeySchema": _normalize_key_schema(index["KeySchema"])}
    return index


def _normalize_key_schema(schema: List[Any]) -> List[Any]:
    return [_coerce(element, "KeyType", KeyType) for element in schema]


def _coerce(entry: Any, field: str, enum: Any) -> Any:
    if not isinstance(entry, dict) or field not in entry:
        return entry
    return {**entry, field: enum(entry[field]).value}
