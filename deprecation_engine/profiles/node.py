"""
Node.js 24 (ESM only) profile.
"""

from ..issue import Category, Severity
from ..profile import PlatformProfile
from ..rule import Literal, Pattern, PatternRule, Rewrite

NODE_24 = PlatformProfile(
    id="node-24",
    name="Node.js",
    version_label="v24 (ESM Only)",
    description=(
        "Simulates Node.js 24 environment where CommonJS is disabled by "
        "default and legacy FS APIs are gone."
    ),
    rules=(
        PatternRule(
            id="no-require",
            matcher=Pattern(r"""require\s*\(['"][^'"]+['"]\)"""),
            severity=Severity.CRITICAL,
            message='CommonJS "require" is disabled. Module loading failed.',
            migration_suggestion='Switch to ESM "import" syntax.',
            # Reaches back over "const name = " to produce a default import.
            rewrite=Rewrite(
                pattern=r"""const\s+(\w+)\s*=\s*require\s*\(['"]([^'"]+)['"]\)""",
                template=r'import \g<1> from "\g<2>"',
                lookbehind=120,
            ),
        ),
        PatternRule(
            id="no-dirname",
            matcher=Literal("__dirname"),
            severity=Severity.CRITICAL,
            message="__dirname is not defined in ESM modules.",
            migration_suggestion="Use import.meta.url and fileURLToPath.",
            rewrite=Rewrite(pattern=r"__dirname", template="import.meta.dirname"),
        ),
        PatternRule(
            id="fs-exists-removed",
            matcher=Literal("fs.exists("),
            severity=Severity.WARNING,
            message="fs.exists is hard-removed.",
            migration_suggestion="Use fs.stat() or fs.access().",
        ),
        PatternRule(
            id="buffer-constructor",
            matcher=Pattern(r"new\s+Buffer\("),
            severity=Severity.CRITICAL,
            message="Buffer() constructor throws SecurityError.",
            migration_suggestion="Use Buffer.from() or Buffer.alloc().",
            rewrite=Rewrite(pattern=r"new\s+Buffer\(", template="Buffer.from("),
            category=Category.SECURITY,
        ),
    ),
)
