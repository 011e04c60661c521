"""Type exports for easy_dynamodb."""

from .callbacks import Callback, Completion, Operation, Transform
from .dynamo_item import DynamoItem
from .request_params import RequestParams, ResponseData
from .wire_item import WireItem

__all__ = [
    "Callback",
    "Completion",
    "DynamoItem",
    "Operation",
    "RequestParams",
    "ResponseData",
    "Transform",
    "WireItem",
]
