"""
Process-wide registry of platform profiles.
"""

from typing import Dict, Iterable, List, Optional

from .errors import ConfigurationError, ProfileNotFoundError
from .profile import PlatformProfile
from .profiles import BUILTIN_PROFILES


class ProfileRegistry:
    """Ordered lookup of profiles by id. The first registered one is the default."""

    def __init__(self, profiles: Iterable[PlatformProfile] = ()):
        self._profiles: Dict[str, PlatformProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: PlatformProfile) -> None:
        """Add a profile; ids must be unique."""
        if not isinstance(profile, PlatformProfile):
            raise ConfigurationError("Only PlatformProfile instances can be registered")
        if profile.id in self._profiles:
            raise ConfigurationError(f"Profile {profile.id!r} is already registered")
        self._profiles[profile.id] = profile

    def list_profiles(self) -> List[PlatformProfile]:
        return list(self._profiles.values())

    def get_profile(self, profile_id: Optional[str] = None) -> PlatformProfile:
        """Return the profile with the given id, or the default when id is empty."""
        if not profile_id:
            return self.default()
        try:
            return self._profiles[profile_id]
        except KeyError:
            raise ProfileNotFoundError(profile_id) from None

    def default(self) -> PlatformProfile:
        if not self._profiles:
            raise ProfileNotFoundError("<default>")
        return next(iter(self._profiles.values()))

    def __contains__(self, profile_id: str) -> bool:
        return profile_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


_default_registry = ProfileRegistry(BUILTIN_PROFILES)


def default_registry() -> ProfileRegistry:
    """The registry holding the built-in profiles."""
    return _default_registry


def list_profiles() -> List[PlatformProfile]:
    return _default_registry.list_profiles()


def get_profile(profile_id: Optional[str] = None) -> PlatformProfile:
    return _default_registry.get_profile(profile_id)
