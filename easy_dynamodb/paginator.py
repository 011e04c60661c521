"""Paginated listing of every table name visible to the client."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, List, Optional

from easy_dynamodb.common import promisify
from easy_dynamodb.common.base_adapter import BaseAdapter
from easy_dynamodb.types import Completion

logger = logging.getLogger(__name__)


class TableListPaginator:
    """Follows ``LastEvaluatedTableName`` until every table name is collected.

    Pages are appended in the order the service returns them. A failing page
    completes the whole listing with that error and the names gathered so far
    are discarded.
    """

    def __init__(self, adapter: BaseAdapter) -> None:
        self.adapter = adapter

    def list_all(self) -> Future[List[str]]:
        return promisify(self.operation)

    def operation(self, completion: Completion) -> None:
        self.__next_page(completion, [], None)

    def __next_page(self, completion: Completion, table_names: List[str], start_table: Optional[str]) -> None:
        params = {} if start_table is None else {"ExclusiveStartTableName": start_table}

        def handle_page(error: Optional[BaseException], data: Any = None) -> None:
            if error is not None:
                completion(error, None)
                return
            try:
                collected = table_names + list(data.get("TableNames", []))
                last_evaluated = data.get("LastEvaluatedTableName")
            except Exception as page_error:  # malformed page
                completion(page_error, None)
                return
            if last_evaluated is None:
                completion(None, collected)
                return
            logger.debug("listed %d tables so far, continuing after %s", len(collected), last_evaluated)
            self.__next_page(completion, collected, last_evaluated)

        self.adapter._operation(self.adapter.client.list_tables, params)(handle_page)
