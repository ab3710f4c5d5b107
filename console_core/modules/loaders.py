"""
Component Loaders

A loader turns a candidate location into the bindings it exports. The
resolver only depends on the ``ComponentLoader`` protocol; two loaders are
provided:

1. ``RegistryComponentLoader`` serves locations from the component registry
   populated at startup (the default).
2. ``ImportComponentLoader`` imports locations as Python modules, for
   deployments that drop component packages on the Python path.
"""

import importlib
import importlib.util
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from asgiref.sync import sync_to_async

from .exceptions import ComponentLoadError, ModuleComponentConfigurationError
from .registry import ComponentRegistry

logger = logging.getLogger(__name__)


class ComponentLoader(Protocol):
    """Loads a location and returns its exported bindings"""
    
    async def load(self, location: str) -> Mapping[str, Any]:
        """
        Load a candidate location.
        
        Raises:
            ComponentLoadError: If the location does not exist or cannot be loaded
        """
        ...


class ImportComponentLoader:
    """
    Loads candidate locations as dotted Python module paths.
    
    A module that does not exist, or whose code fails while importing, is
    reported as a ``ComponentLoadError`` so the resolver can move on to the
    next candidate. Relative locations ('.components.people') are resolved
    against ``package``.
    """

    def __init__(self, package: Optional[str] = None):
        self.package = package

    async def load(self, location: str) -> Mapping[str, Any]:
        try:
            absolute_name = importlib.util.resolve_name(location, self.package)
        except (ImportError, ValueError) as e:
            raise ComponentLoadError(location, str(e)) from e

        try:
            # Imports run off the event loop
            module = await sync_to_async(importlib.import_module)(absolute_name)
        except ModuleNotFoundError as e:
            # Only a missing location (or parent package) is a plain miss;
            # a missing dependency inside existing code is a broken module.
            if e.name and (absolute_name == e.name or absolute_name.startswith(f"{e.name}.")):
                raise ComponentLoadError(location, 'module not found') from e
            logger.warning(f"Component module '{location}' has a missing import: {e}")
            raise ComponentLoadError(location, str(e)) from e
        except Exception as e:
            logger.warning(f"Component module '{location}' failed to import: {e}")
            raise ComponentLoadError(location, str(e)) from e
        
        return vars(module)


class RegistryComponentLoader:
    """
    Loads candidate locations from an explicit component registry.
    
    Locations are module IDs; nothing is discovered at runtime.
    """
    
    def __init__(self, registry: ComponentRegistry, export_name: str = 'Component'):
        self.registry = registry
        self.export_name = export_name
    
    async def load(self, location: str) -> Mapping[str, Any]:
        if not self.registry.is_registered(location):
            raise ComponentLoadError(location, 'not registered')
        
        try:
            component = await sync_to_async(self.registry.get_component)(location)
        except ModuleComponentConfigurationError as e:
            raise ComponentLoadError(location, str(e)) from e
        
        exports: Dict[str, Any] = {self.export_name: component}
        return exports
