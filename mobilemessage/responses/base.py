from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from mobilemessage.types import ResponseContract

R = TypeVar("R", bound="BaseResponse")


class BaseResponse:
    """Read-only wrapper over a decoded API response.

    The raw dict stays reachable (`response["key"]`, `get`, `dig`, `raw`) so
    callers never lose fields the wrapper does not model. Everything that
    depends on the wire contract is answered by `contract`.
    """

    def __init__(self, raw: Mapping[str, Any], contract: ResponseContract) -> None:
        self._raw: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        self.contract = contract

    def __getitem__(self, key: str) -> Any:
        return self._raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}(success={self.is_success}, raw={dict(self._raw)!r})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._raw.get(key, default)

    def dig(self, *keys: Any) -> Any:
        """Walk nested dicts/lists, returning None as soon as a step is missing."""
        node: Any = self._raw
        for key in keys:
            if isinstance(node, Mapping):
                node = node.get(key)
            elif isinstance(node, list) and isinstance(key, int) and -len(node) <= key < len(node):
                node = node[key]
            else:
                return None
            if node is None:
                return None
        return node

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._raw

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._raw)

    @property
    def is_success(self) -> bool:
        return self.contract.is_success(self._raw)

    @property
    def is_error(self) -> bool:
        return not self.is_success

    @property
    def error_message(self) -> Optional[str]:
        return self.dig("error", "message")

    @property
    def error_code(self) -> Optional[str]:
        return self.dig("error", "code")

    # Chainable callbacks; both always return the response itself
    def on_success(self: R, fn: Callable[[R], Any]) -> R:
        if self.is_success:
            fn(self)
        return self

    def on_error(self: R, fn: Callable[[R], Any]) -> R:
        if self.is_error:
            fn(self)
        return self
