"""
Platform profiles: named, versioned bundles of pattern rules.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError
from .rule import PatternRule


@dataclass(frozen=True)
class PlatformProfile:
    """One target runtime/framework epoch and the rules that break under it."""
    id: str
    name: str
    version_label: str
    description: str
    rules: Tuple[PatternRule, ...] = ()

    def __post_init__(self):
        if not self.id:
            raise ConfigurationError("Profile id must not be empty")
        rules = tuple(self.rules)
        seen = set()
        for rule in rules:
            if not isinstance(rule, PatternRule):
                raise ConfigurationError(
                    f"Profile {self.id}: rules must be PatternRule instances"
                )
            if rule.id in seen:
                raise ConfigurationError(
                    f"Profile {self.id}: duplicate rule id {rule.id!r}"
                )
            seen.add(rule.id)
        object.__setattr__(self, "rules", rules)

    @property
    def title(self) -> str:
        return f"{self.name} {self.version_label}"

    def get_rule(self, rule_id: str) -> Optional[PatternRule]:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None
