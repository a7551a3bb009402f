"""
Vue 5 (Vapor Mode) profile.
"""

from ..issue import Severity
from ..profile import PlatformProfile
from ..rule import Literal, Pattern, PatternRule, Rewrite

VUE_5 = PlatformProfile(
    id="vue-5",
    name="Vue.js",
    version_label="v5 (Vapor Mode)",
    description="Simulates Vue 5. Options API is removed. V-Model breaking changes.",
    rules=(
        PatternRule(
            id="options-api-data",
            matcher=Pattern(r"data\s*\(\)\s*\{"),
            severity=Severity.CRITICAL,
            message='Options API "data()" detected. Component failed to mount.',
            migration_suggestion="Rewrite using Composition API (script setup).",
        ),
        PatternRule(
            id="legacy-v-model",
            matcher=Literal("v-model:value"),
            severity=Severity.CRITICAL,
            message="v-model:value is not supported.",
            migration_suggestion="Use standard v-model or defineModel().",
            rewrite=Rewrite(pattern=r"v-model:value", template="v-model"),
        ),
        PatternRule(
            id="vue-observable",
            matcher=Pattern(r"Vue\.observable"),
            severity=Severity.WARNING,
            message="Vue.observable is removed.",
            migration_suggestion="Use reactive() from Vue core.",
            rewrite=Rewrite(pattern=r"Vue\.observable\(", template="reactive(", lookahead=1),
        ),
    ),
)
