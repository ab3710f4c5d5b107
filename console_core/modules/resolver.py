"""
Module Component Resolver

Maps a module ID to the component that renders it. Candidate locations are
probed strictly in order through a ``ComponentLoader``; the first location
that loads and exports an invokable component wins and is cached for the
lifetime of the resolver.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from asgiref.sync import async_to_sync
from django.conf import settings

from . import signals
from .base import ModuleComponent, is_component
from .exceptions import ComponentLoadError, ModuleComponentConfigurationError
from .loaders import ComponentLoader, ImportComponentLoader, RegistryComponentLoader
from .registry import component_registry

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = 'Component'

DEFAULT_COMPONENT_PACKAGE = 'console_modules'

# Relative bases are resolved against this package
COMPONENT_ANCHOR_PACKAGE = 'console_core.modules'

RELATIVE_COMPONENT_BASE = '.components'

# Naming conventions, in priority order
DEFAULT_CONVENTIONS = (
    '{base}.{module_id}',
    '{base}.{module_id}.component',
    '{base}.{module_id}.{module_id}',
)


class CandidateLocations:
    """
    Builds the ordered candidate locations for a module ID.
    
    Every convention is tried for the first base before moving on to the
    next base.
    """
    
    def __init__(self, bases: Sequence[str], conventions: Sequence[str] = DEFAULT_CONVENTIONS):
        if not bases:
            raise ModuleComponentConfigurationError("At least one component base is required")
        self.bases = list(bases)
        self.conventions = list(conventions)
    
    def __call__(self, module_id: str) -> List[str]:
        return [
            convention.format(base=base, module_id=module_id)
            for base in self.bases
            for convention in self.conventions
        ]


def module_id_candidates(module_id: str) -> List[str]:
    """Single candidate: the module ID itself (registry lookups)"""
    return [module_id]


class ModuleComponentResolver:
    """
    Resolves module IDs to components and caches successful resolutions.
    
    Usage:
        resolver = ModuleComponentResolver(loader, CandidateLocations(['console_modules']))
        component = await resolver.resolve('people')
        if component is None:
            ...  # module has no UI component
    """
    
    def __init__(
        self,
        loader: ComponentLoader,
        candidate_builder: Callable[[str], List[str]] = module_id_candidates,
        export_name: str = DEFAULT_EXPORT_NAME,
    ):
        self.loader = loader
        self.candidate_builder = candidate_builder
        self.export_name = export_name
        self._cache: Dict[str, ModuleComponent] = {}
    
    def candidates(self, module_id: str) -> List[str]:
        """Return the candidate locations for a module, in probe order"""
        if not module_id:
            return []
        return self.candidate_builder(module_id)
    
    async def resolve(self, module_id: str) -> Optional[ModuleComponent]:
        """
        Resolve a module ID to its component.
        
        Args:
            module_id: The module ID (e.g. 'ats_core')
            
        Returns:
            The component, or None when the module has no UI component
        """
        if not module_id:
            logger.debug("Skipping resolution of empty module ID")
            return None
        
        # Check cache first
        if module_id in self._cache:
            return self._cache[module_id]
        
        candidates = self.candidates(module_id)
        
        for location in candidates:
            logger.debug(f"Probing '{location}' for module '{module_id}'")
            
            try:
                exports = await self.loader.load(location)
            except ComponentLoadError as e:
                logger.debug(f"Probe miss for module '{module_id}': {e}")
                continue
            except Exception as e:
                logger.warning(
                    f"Unexpected error loading '{location}' for module '{module_id}': {e}",
                    exc_info=True
                )
                continue
            
            component = self._select_component(exports, module_id)
            if component is None:
                logger.debug(f"No component exported by '{location}' for module '{module_id}'")
                continue
            
            self._cache[module_id] = component
            logger.info(f"Resolved module '{module_id}' from '{location}'")
            signals.component_resolved.send(
                sender=self.__class__,
                resolver=self,
                module_id=module_id,
                component=component,
                location=location
            )
            return component
        
        logger.warning(f"No component found for module '{module_id}'")
        signals.component_resolution_failed.send(
            sender=self.__class__,
            resolver=self,
            module_id=module_id,
            candidates=candidates
        )
        return None
    
    def resolve_sync(self, module_id: str) -> Optional[ModuleComponent]:
        """Resolve from synchronous code (views, management commands)"""
        return async_to_sync(self.resolve)(module_id)
    
    def get_cached(self, module_id: str) -> Optional[ModuleComponent]:
        return self._cache.get(module_id)
    
    def put(self, module_id: str, component: ModuleComponent) -> None:
        """Cache a component, replacing any existing entry"""
        self._cache[module_id] = component
    
    def invalidate(self, module_id: str) -> None:
        """Remove one module from the cache"""
        if self._cache.pop(module_id, None) is not None:
            logger.info(f"Invalidated cached component for module '{module_id}'")
            signals.component_cache_invalidated.send(
                sender=self.__class__,
                resolver=self,
                module_id=module_id
            )
    
    def clear(self) -> None:
        """Clear all cached components"""
        self._cache.clear()
        logger.info("Cleared module component cache")
        signals.component_cache_cleared.send(sender=self.__class__, resolver=self)
    
    def cached_module_ids(self) -> List[str]:
        return sorted(self._cache)
    
    def _select_component(self, exports: Mapping[str, Any], module_id: str) -> Optional[ModuleComponent]:
        """Pick the first invokable export: the default export, then one named after the module"""
        for name in (self.export_name, module_id):
            value = exports.get(name)
            if is_component(value):
                return value
        return None


def build_component_resolver() -> ModuleComponentResolver:
    """
    Build a resolver from the CONSOLE_MODULE_* settings.
    
    Raises:
        ModuleComponentConfigurationError: If CONSOLE_MODULE_LOADER is unknown
    """
    loader_name = getattr(settings, 'CONSOLE_MODULE_LOADER', 'registry')
    export_name = getattr(settings, 'CONSOLE_MODULE_COMPONENT_EXPORT', DEFAULT_EXPORT_NAME)
    
    if loader_name == 'registry':
        return ModuleComponentResolver(
            RegistryComponentLoader(component_registry, export_name=export_name),
            module_id_candidates,
            export_name=export_name
        )
    
    if loader_name == 'import':
        bases = getattr(settings, 'CONSOLE_MODULE_COMPONENT_BASES', None)
        if not bases:
            package = getattr(settings, 'CONSOLE_MODULE_COMPONENT_PACKAGE', DEFAULT_COMPONENT_PACKAGE)
            bases = [package, RELATIVE_COMPONENT_BASE]
        return ModuleComponentResolver(
            ImportComponentLoader(package=COMPONENT_ANCHOR_PACKAGE),
            CandidateLocations(bases),
            export_name=export_name
        )
    
    raise ModuleComponentConfigurationError(
        f"CONSOLE_MODULE_LOADER must be 'registry' or 'import', got {loader_name!r}"
    )


# Process-wide resolver, built on first use
_component_resolver: Optional[ModuleComponentResolver] = None
_component_resolver_lock = threading.Lock()


def get_component_resolver() -> ModuleComponentResolver:
    global _component_resolver
    resolver = _component_resolver
    if resolver is None:
        # Threaded servers must share one resolver and its cache
        with _component_resolver_lock:
            if _component_resolver is None:
                _component_resolver = build_component_resolver()
            resolver = _component_resolver
    return resolver


def reset_component_resolver() -> None:
    """Drop the process-wide resolver so the next call rebuilds it from settings"""
    global _component_resolver
    with _component_resolver_lock:
        _component_resolver = None
