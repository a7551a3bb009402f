"""
React 19 (compiler era) profile.
"""

from ..issue import Category, Severity
from ..profile import PlatformProfile
from ..rule import Pattern, PatternRule, Rewrite

REACT_19 = PlatformProfile(
    id="react-19",
    name="React",
    version_label="v19 (Compiler Era)",
    description=(
        "Simulates React 19 environment with React Compiler, removal of "
        "forwardRef, and strict async component rules."
    ),
    rules=(
        PatternRule(
            id="no-forward-ref",
            matcher=Pattern(r"forwardRef\s*\("),
            severity=Severity.CRITICAL,
            message="forwardRef is removed in React 19. Refs are now passed as standard props.",
            migration_suggestion='Remove forwardRef wrapper and accept "ref" as a prop directly.',
            rewrite=Rewrite(
                pattern=r"forwardRef\s*\(\s*(?:async\s*)?function\s*([^(]*)\(([^)]*)\)",
                template=r"function \g<1>(\g<2>)",
                lookahead=200,
            ),
            documentation_url="https://react.dev/blog/2024/12/05/react-19#ref-as-a-prop",
        ),
        PatternRule(
            id="use-callback-obsolete",
            matcher=Pattern(r"useCallback\("),
            severity=Severity.WARNING,
            message="useCallback is often redundant with React Compiler auto-memoization.",
            migration_suggestion="Remove useCallback unless specifically needed for external consumers.",
            rewrite=Rewrite(
                pattern=r"useCallback\(\s*\(\)\s*=>\s*{([^}]*)}\s*,\s*\[[^\]]*\]\s*\)",
                template=r"() => {\g<1>}",
                lookahead=400,
            ),
            category=Category.PERFORMANCE,
        ),
        PatternRule(
            id="no-default-props",
            matcher=Pattern(r"\.defaultProps\s*="),
            severity=Severity.CRITICAL,
            message="defaultProps on function components are removed.",
            migration_suggestion="Use default parameter values in the component function signature.",
        ),
        PatternRule(
            id="legacy-lifecycle",
            matcher=Pattern(r"componentWill(Mount|ReceiveProps|Update)"),
            severity=Severity.CRITICAL,
            message="Legacy lifecycle methods throw runtime errors in React 19.",
            migration_suggestion="Migrate to useEffect or functional components.",
        ),
    ),
)
