"""Plain item <-> attribute-value conversion on request and response fields."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary, TypeDeserializer, TypeSerializer

from easy_dynamodb.exception import MissingParameterException
from easy_dynamodb.types import DynamoItem, RequestParams, ResponseData, WireItem


class DynamodbMarshaler:

    def __init__(self) -> None:
        self.serializer = TypeSerializer()
        self.deserializer = TypeDeserializer()

    def marshal(self, item: DynamoItem) -> WireItem:
        return {name: self.serializer.serialize(self.__to_wire_number(value)) for name, value in item.items()}

    def unmarshal(self, wire_item: WireItem) -> DynamoItem:
        return {name: self.__to_plain(self.deserializer.deserialize(value)) for name, value in wire_item.items()}

    def marshal_request(self, params: RequestParams, field: str) -> RequestParams:
        """Return a copy of ``params`` with ``field`` converted to the wire format.

        The caller's mapping is left untouched. A missing field raises
        :class:`MissingParameterException` before anything is sent.
        """
        if params is None or params.get(field) is None:
            raise MissingParameterException(field)
        return {**params, field: self.marshal(params[field])}

    def unmarshal_response(self, data: ResponseData, field: str) -> ResponseData:
        if not isinstance(data, dict) or not data.get(field):
            return data
        return {**data, field: self.unmarshal(data[field])}

    def __to_wire_number(self, value: Any) -> Any:
        # boto3 refuses floats; route them through their shortest repr
        if isinstance(value, float):
            return Decimal(str(value))
        if isinstance(value, dict):
            return {key: self.__to_wire_number(nested) for key, nested in value.items()}
        if isinstance(value, list):
            return [self.__to_wire_number(nested) for nested in value]
        if isinstance(value, (set, frozenset)):
            return {self.__to_wire_number(nested) for nested in value}
        return value

    def __to_plain(self, value: Any) -> Any:
        if isinstance(value, Decimal):
            return int(value) if value == value.to_integral_value() else float(value)
        if isinstance(value, Binary):
            return value.value
        if isinstance(value, dict):
            return {key: self.__to_plain(nested) for key, nested in value.items()}
        if isinstance(value, list):
            return [self.__to_plain(nested) for nested in value]
        if isinstance(value, set):
            return {self.__to_plain(nested) for nested in value}
        return value


def marshal_item(item: DynamoItem) -> WireItem:
    return _MARSHALER.marshal(item)


def unmarshal_item(wire_item: WireItem) -> DynamoItem:
    return _MARSHALER.unmarshal(wire_item)


_MARSHALER = DynamodbMarshaler()


__all__ = ["DynamodbMarshaler", "marshal_item", "unmarshal_item"]
