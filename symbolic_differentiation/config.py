"""Settings for the differentiation engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .logging_system import LogLevel


class QuotientRuleMode(Enum):
    """How d/dx(c / x) is produced.

    REFERENCE keeps the historical shortcut c / (x * x), which lacks the minus
    sign. CORRECTED skips that shortcut and uses the general quotient rule.
    """
    REFERENCE = 'reference'
    CORRECTED = 'corrected'


@dataclass(frozen=True)
class DifferentiationConfig:
    quotient_rule_mode: QuotientRuleMode = QuotientRuleMode.REFERENCE
    max_depth: Optional[int] = 200     # ~2 interpreter frames per level
    log_level: Optional[LogLevel] = None

    def __post_init__(self):
        """Validate fields after initialization"""
        if not isinstance(self.quotient_rule_mode, QuotientRuleMode):
            raise ValueError(f"quotient_rule_mode must be a QuotientRuleMode, got {self.quotient_rule_mode!r}")
        if self.max_depth is not None and (isinstance(self.max_depth, bool)
                                           or not isinstance(self.max_depth, int)
                                           or self.max_depth <= 0):
            raise ValueError(f"max_depth must be a positive integer or None, got {self.max_depth!r}")
        if self.log_level is not None and not isinstance(self.log_level, LogLevel):
            raise ValueError(f"log_level must be a LogLevel or None, got {self.log_level!r}")


DEFAULT_CONFIG = DifferentiationConfig()
