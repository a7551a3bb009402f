"""
Rule-based detection and rewrite engine for deprecated platform APIs.
"""

from .emulator import ShadowEmulator
from .errors import (
    ConfigurationError,
    DeprecationEngineError,
    ExternalAnalyzerError,
    NoApplicableFixesError,
    ProfileNotFoundError,
    SnippetNotFoundError,
)
from .issue import (
    AnalysisReport,
    Category,
    CompatibilityStatus,
    DependencyAudit,
    EmulationResult,
    Finding,
    FixStatus,
    RewriteResult,
    ScanResult,
    Severity,
)
from .profile import PlatformProfile
from .registry import ProfileRegistry, get_profile, list_profiles
from .reporter import ReportGenerator, assemble, build_timeline
from .rewriter import Fix, apply_all_fixes, apply_fix, fixes_from_findings
from .rule import Literal, Pattern, PatternRule, Rewrite
from .scanner import scan
from .scorer import ANALYZER_POLICY, DEFAULT_POLICY, ScoringPolicy, score, severity_counts

__all__ = [
    'ShadowEmulator',
    'ConfigurationError',
    'DeprecationEngineError',
    'ExternalAnalyzerError',
    'NoApplicableFixesError',
    'ProfileNotFoundError',
    'SnippetNotFoundError',
    'AnalysisReport',
    'Category',
    'CompatibilityStatus',
    'DependencyAudit',
    'EmulationResult',
    'Finding',
    'FixStatus',
    'RewriteResult',
    'ScanResult',
    'Severity',
    'PlatformProfile',
    'ProfileRegistry',
    'get_profile',
    'list_profiles',
    'ReportGenerator',
    'assemble',
    'build_timeline',
    'Fix',
    'apply_all_fixes',
    'apply_fix',
    'fixes_from_findings',
    'Literal',
    'Pattern',
    'PatternRule',
    'Rewrite',
    'scan',
    'ANALYZER_POLICY',
    'DEFAULT_POLICY',
    'ScoringPolicy',
    'score',
    'severity_counts',
]
