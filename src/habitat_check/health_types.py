"""Data types produced by the check executor."""

from dataclasses import dataclass, field
from typing import List, Optional

from .check_state import CheckState
from .service_identifier import ServiceIdentifier


@dataclass
class ServiceHealth:
    """Health reported (or inferred) for one supervised service"""

    service: ServiceIdentifier
    status: CheckState
    error_message: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == CheckState.OK


@dataclass
class CheckResult:
    """Outcome of one check run: overall state plus the text handed to the pipeline"""

    state: CheckState
    lines: List[str] = field(default_factory=list)
    message: Optional[str] = None

    def output_lines(self) -> List[str]:
        """Per-service lines first, then the summary message when there is one."""
        if self.message is None:
            return list(self.lines)
        return [*self.lines, self.message]

    @property
    def exit_code(self) -> int:
        return self.state.value
