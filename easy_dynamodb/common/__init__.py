from .invoker import Deferred, fail, invoke, once, promisify

__all__ = ["Deferred", "fail", "invoke", "once", "promisify"]
