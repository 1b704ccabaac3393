from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

from .base import BaseResponse


class ResponseCollection:
    """Aggregate view over several independent responses.

    Used for the per-batch results of `Client.send_batches`, or built by hand
    around any set of responses.
    """

    def __init__(self, responses: Optional[Iterable[BaseResponse]] = None) -> None:
        self.responses: List[BaseResponse] = list(responses or [])

    def add(self, response: BaseResponse) -> "ResponseCollection":
        self.responses.append(response)
        return self

    def __iter__(self) -> Iterator[BaseResponse]:
        return iter(self.responses)

    def __len__(self) -> int:
        return len(self.responses)

    @property
    def total_count(self) -> int:
        return len(self.responses)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.responses if r.is_success)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.responses if r.is_error)

    @property
    def success_rate(self) -> float:
        """Percentage of successful responses, rounded to two places."""
        if self.total_count == 0:
            return 0.0
        return round(self.success_count / self.total_count * 100, 2)

    @property
    def all_successful(self) -> bool:
        return all(r.is_success for r in self.responses)

    @property
    def any_failures(self) -> bool:
        return any(r.is_error for r in self.responses)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total_count,
            "success": self.success_count,
            "failures": self.failure_count,
            "success_rate": self.success_rate,
            "responses": [r.to_dict() for r in self.responses],
        }
