"""Completion handler and operation signatures shared by every call."""

from typing import Any, Callable, Optional

Completion = Callable[[Optional[BaseException], Any], None]
Callback = Completion
Operation = Callable[[Completion], None]
Transform = Callable[[Any], Any]
