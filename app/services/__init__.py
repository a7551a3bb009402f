"""Services for the rule engine and the external analyzer."""

from .checker import CheckerService
from .ai import AIService

__all__ = ["CheckerService", "AIService"]
