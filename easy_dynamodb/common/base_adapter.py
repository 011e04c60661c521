"""Shared base adapter that binds boto3 client calls to completion handlers."""

import logging
import os
import weakref
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import lru_cache
from typing import Any, Callable, Optional

import boto3

from easy_dynamodb.types import Completion, Operation, RequestParams, Transform

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def get_dynamo_client(region: Optional[str] = None, endpoint: Optional[str] = None) -> Any:
    return boto3.client("dynamodb", region_name=region, endpoint_url=endpoint)


class BaseAdapter:
    """Owns the DynamoDB client and the executor its blocking calls run on."""

    def __init__(self, **kwargs: Any) -> None:
        self.region: Optional[str] = kwargs.get("region")
        self.endpoint: Optional[str] = kwargs.get("endpoint") or os.environ.get("DYNAMODB_ENDPOINT")
        self.client: Any = kwargs.get("client") or get_dynamo_client(self.region, self.endpoint)
        self.owns_executor: bool = kwargs.get("executor") is None
        self.executor: Executor = kwargs.get("executor") or ThreadPoolExecutor(
            max_workers=kwargs.get("max_workers", 8), thread_name_prefix="easy-dynamodb"
        )
        # an executor created here is shut down when the adapter is collected
        self._finalizer: Optional[weakref.finalize] = (
            weakref.finalize(self, self.executor.shutdown, wait=False) if self.owns_executor else None
        )

    def __enter__(self) -> "BaseAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        if self._finalizer is not None:
            self._finalizer.detach()
            self.executor.shutdown(wait=wait)

    def _operation(
        self, native: Callable[..., Any], params: RequestParams, transform: Optional[Transform] = None
    ) -> Operation:
        """Bind ``native(**params)`` into a callback-accepting operation.

        Errors raised by the client reach the completion handler unchanged.
        """
        name = getattr(native, "__name__", repr(native))

        def operation(completion: Completion) -> None:
            logger.debug("dispatching %s", name)
            try:
                pending = self.executor.submit(native, **params)
            except RuntimeError as error:
                completion(error, None)
                return

            def handle_response(done: Future) -> None:
                error = done.exception()
                if error is not None:
                    logger.debug("%s failed: %r", name, error)
                    completion(error, None)
                    return
                result = done.result()
                if transform is not None:
                    try:
                        result = transform(result)
                    except Exception as transform_error:  # malformed response data
                        completion(transform_error, None)
                        return
                completion(None, result)

            pending.add_done_callback(handle_response)

        return operation
