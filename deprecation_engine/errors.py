"""
Error types for the deprecation engine and its collaborators.
"""

from typing import Optional


class DeprecationEngineError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(DeprecationEngineError):
    """A rule or profile is malformed (e.g. invalid regular expression)."""


class ProfileNotFoundError(DeprecationEngineError):
    """No profile is registered under the requested id."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"Unknown platform profile: {profile_id}")


class SnippetNotFoundError(DeprecationEngineError):
    """The text to fix is no longer present in the current code."""

    def __init__(self, snippet: str):
        self.snippet = snippet
        super().__init__(
            "Could not locate the code snippet (formatting might differ). "
            "It may have already been changed."
        )


class NoApplicableFixesError(DeprecationEngineError):
    """None of the issues of a bulk fix could be located in the code."""

    def __init__(self, issue_count: int = 0):
        self.issue_count = issue_count
        super().__init__(
            "No applicable fixes found automatically (code might have changed "
            "or formatting differs). Please apply fixes manually."
        )


# Categories reported by the external analyzer boundary.
AUTH = "auth"
RATE_LIMIT = "rate_limit"
OVERLOADED = "overloaded"
BLOCKED = "blocked"
MALFORMED = "malformed"
NETWORK = "network"
UNAVAILABLE = "unavailable"
UNKNOWN = "unknown"


class ExternalAnalyzerError(DeprecationEngineError):
    """The external analysis provider failed; message is user-facing."""

    def __init__(self, category: str, message: str, cause: Optional[BaseException] = None):
        self.category = category
        self.message = message
        self.cause = cause
        super().__init__(message)
