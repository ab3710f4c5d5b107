"""
Module Component Signals

Django signals for component resolution and cache events.
"""

from django.dispatch import Signal

# Resolution signals
component_resolved = Signal()           # When a module resolves to a component (cold resolution only)
component_resolution_failed = Signal()  # When every candidate location missed

# Cache signals
component_cache_invalidated = Signal()  # When one cached component is evicted
component_cache_cleared = Signal()      # When the whole cache is emptied
