"""Type definitions and constants for the sharpcheck analyzer."""

from dataclasses import dataclass
from typing import NamedTuple

# Colors for terminal output
RED = "\033[0;31m"
GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
NC = "\033[0m"  # No Color

RULE_COUNT = 10


class Violation(NamedTuple):
    """A single failure of one numbered rule."""

    rule: int
    message: str
    line: int | None = None  # 1-based, None for whole-file rules


@dataclass(frozen=True)
class AnalysisReport:
    """Ordered violations of one analysis run.

    Order is rule execution order, then line order within a rule.
    An empty report is the success state.
    """

    violations: tuple[Violation, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def for_rule(self, rule: int) -> list[Violation]:
        """Return the violations raised by one rule."""
        return [v for v in self.violations if v.rule == rule]

    def __iter__(self):
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self.violations)
