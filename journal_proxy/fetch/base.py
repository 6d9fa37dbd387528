from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

class FetchMode(str, Enum):
    FULL_FETCH = "full-fetch"
    REACHABILITY_CHECK = "reachability-check"

@dataclass
class FetchOutcome:
    url: str
    index: int
    success: bool
    status: Optional[int] = None
    status_text: Optional[str] = None
    body: Optional[str] = None
    content_type: Optional[str] = None
    error: Optional[str] = None
    # Only meaningful for reachability checks: the HTTP "ok" flag
    accessible: Optional[bool] = None

@dataclass
class BatchResult:
    mode: FetchMode
    outcomes: List[FetchOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        if self.mode is FetchMode.REACHABILITY_CHECK:
            return sum(1 for o in self.outcomes if o.accessible)
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failure_count(self) -> int:
        return self.total - self.success_count
