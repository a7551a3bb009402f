"""
Angular 20 (zoneless) profile.
"""

from ..issue import Severity
from ..profile import PlatformProfile
from ..rule import Literal, Pattern, PatternRule, Rewrite

ANGULAR_2026 = PlatformProfile(
    id="angular-2026",
    name="Angular",
    version_label="v20 (Zoneless)",
    description=(
        "Simulates Angular 2026. Zone.js is gone, Decorators are deprecated "
        "in favor of Signals."
    ),
    rules=(
        PatternRule(
            id="input-decorator",
            matcher=Literal("@Input()"),
            severity=Severity.WARNING,
            message="@Input decorator usage triggers legacy compatibility mode.",
            migration_suggestion="Use the new signal-based input() function.",
            rewrite=Rewrite(
                pattern=r"@Input\(\)\s*(\w+)\s*:\s*([^;]+);",
                template=r"\g<1> = input<\g<2>>();",
                lookahead=200,
            ),
        ),
        PatternRule(
            id="ng-if-directive",
            matcher=Literal("*ngIf"),
            severity=Severity.WARNING,
            message="*ngIf directive is deprecated.",
            migration_suggestion="Use the new @if block syntax.",
        ),
        PatternRule(
            id="zone-usage",
            matcher=Pattern(r"NgZone"),
            severity=Severity.CRITICAL,
            message="NgZone dependency injection failed. App is running Zoneless.",
            migration_suggestion="Remove Zone.js dependencies and use Signals for reactivity.",
        ),
    ),
)
