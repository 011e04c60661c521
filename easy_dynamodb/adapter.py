"""DynamoDB adapter exposing callback-or-future operations on plain items."""

from concurrent.futures import Future
from typing import Any, Callable, Optional

from easy_dynamodb.constants import WaitState, normalize_return_values, normalize_table_params
from easy_dynamodb.marshaler import DynamodbMarshaler
from easy_dynamodb.paginator import TableListPaginator
from easy_dynamodb.types import Callback, RequestParams

from .common import fail, invoke
from .common.base_adapter import BaseAdapter

Result = Optional["Future[Any]"]


class DynamodbAdapter(BaseAdapter):
    """Wraps the low-level client so each call takes an optional ``callback``.

    With a callable ``callback(error, data)`` the call returns ``None``;
    without one it returns a :class:`concurrent.futures.Future`.
    ``Key``/``Item`` request fields and ``Item``/``Attributes`` response
    fields are plain mappings rather than attribute-value mappings.
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.marshaler = DynamodbMarshaler()
        self.paginator = TableListPaginator(self)

    # table operations

    def create_table(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        try:
            request = normalize_table_params(params)
        except Exception as error:
            return fail(error, callback)
        return invoke(self._operation(self.client.create_table, request), callback)

    def delete_table(self, table_name: str, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.delete_table, {"TableName": table_name}), callback)

    def describe_table(self, table_name: str, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.describe_table, {"TableName": table_name}), callback)

    def list_tables(self, callback: Optional[Callback] = None) -> Result:
        return invoke(self.paginator.operation, callback)

    def update_table(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        try:
            request = normalize_table_params(params)
        except Exception as error:
            return fail(error, callback)
        return invoke(self._operation(self.client.update_table, request), callback)

    def change_provisioned_throughput(
        self, table_name: str, read_capacity: int, write_capacity: int, callback: Optional[Callback] = None
    ) -> Result:
        params = {
            "TableName": table_name,
            "ProvisionedThroughput": {
                "ReadCapacityUnits": read_capacity,
                "WriteCapacityUnits": write_capacity,
            },
        }
        return self.update_table(params, callback)

    def delete_global_secondary_index(
        self, table_name: str, index_name: str, callback: Optional[Callback] = None
    ) -> Result:
        params = {
            "TableName": table_name,
            "GlobalSecondaryIndexUpdates": [{"Delete": {"IndexName": index_name}}],
        }
        return self.update_table(params, callback)

    def wait_for(self, table_name: str, state: Any, callback: Optional[Callback] = None) -> Result:
        try:
            waiter = self.client.get_waiter(WaitState(state).value)
        except Exception as error:
            return fail(error, callback)
        return invoke(self._operation(waiter.wait, {"TableName": table_name}), callback)

    # item operations

    def batch_get_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.batch_get_item, params), callback)

    def batch_write_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.batch_write_item, params), callback)

    def get_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return self.__item_operation(self.client.get_item, params, "Key", "Item", callback)

    def put_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return self.__item_operation(self.client.put_item, params, "Item", "Attributes", callback)

    def update_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return self.__item_operation(self.client.update_item, params, "Key", "Attributes", callback)

    def delete_item(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return self.__item_operation(self.client.delete_item, params, "Key", "Attributes", callback)

    def query(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.query, params), callback)

    def scan(self, params: RequestParams, callback: Optional[Callback] = None) -> Result:
        return invoke(self._operation(self.client.scan, params), callback)

    def __item_operation(
        self,
        native: Callable[..., Any],
        params: RequestParams,
        request_field: str,
        response_field: str,
        callback: Optional[Callback],
    ) -> Result:
        try:
            request = normalize_return_values(self.marshaler.marshal_request(params, request_field))
        except Exception as error:  # usage errors and numbers boto3 cannot encode
            return fail(error, callback)
        operation = self._operation(
            native, request, lambda data: self.marshaler.unmarshal_response(data, response_field)
        )
        return invoke(operation, callback)
