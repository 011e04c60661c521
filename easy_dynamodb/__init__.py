"""Public interface for the easy_dynamodb package."""

from typing import Any

from .adapter import DynamodbAdapter
from .common import fail, invoke, promisify
from .constants import AttributeType, KeyType, ReturnValue, WaitState
from .exception import EasyDynamodbException, MissingParameterException
from .marshaler import DynamodbMarshaler, marshal_item, unmarshal_item


def client(**kwargs: Any) -> DynamodbAdapter:
    """Factory helper building a callback-or-future DynamoDB adapter."""

    engine = kwargs.pop("engine", "dynamodb")
    if engine and engine != "dynamodb":
        raise ValueError(f"engine {engine} not supported; only 'dynamodb' is available")
    return DynamodbAdapter(**kwargs)


__all__ = [
    "AttributeType",
    "DynamodbAdapter",
    "DynamodbMarshaler",
    "EasyDynamodbException",
    "KeyType",
    "MissingParameterException",
    "ReturnValue",
    "WaitState",
    "client",
    "fail",
    "invoke",
    "marshal_item",
    "promisify",
    "unmarshal_item",
]
