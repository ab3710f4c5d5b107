"""
Module Component Exceptions

Custom exceptions for module component resolution.
"""

from django.core.exceptions import ImproperlyConfigured


class ModuleComponentError(Exception):
    """Base exception for module component errors"""
    pass


class ComponentLoadError(ModuleComponentError):
    """Raised by a loader when a candidate location cannot be loaded"""

    def __init__(self, location: str, reason: str = ''):
        self.location = location
        self.reason = reason
        message = f"Cannot load component location '{location}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ComponentRenderError(ModuleComponentError):
    """Raised when a resolved component fails while rendering its panel"""
    pass


class ModuleComponentConfigurationError(ModuleComponentError, ImproperlyConfigured):
    """Raised when module component settings or registrations are invalid"""
    pass
