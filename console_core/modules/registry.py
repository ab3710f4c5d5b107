"""
Component Registry

Explicit mapping from module ID to the component that renders it. The
registry is populated at startup from ``CONSOLE_MODULE_COMPONENTS`` and by
code calling ``register``; the resolver reads it through
``RegistryComponentLoader``.
"""

from typing import Any, Dict, List, Union
import logging
from django.conf import settings
from django.utils.module_loading import import_string

from .base import ModuleComponent
from .exceptions import ModuleComponentConfigurationError


logger = logging.getLogger(__name__)

ComponentEntry = Union[ModuleComponent, str]


class ComponentRegistry:
    """
    Registry of module components.
    
    Entries are either component objects or dotted paths to them. Dotted
    paths are imported on first use and the imported object replaces the
    path.
    """
    
    def __init__(self):
        self._entries: Dict[str, ComponentEntry] = {}
    
    def register(self, module_id: str, component: ModuleComponent) -> None:
        """
        Register a component for a module.
        
        Args:
            module_id: The module ID (e.g. 'people')
            component: The invokable component
            
        Raises:
            ModuleComponentConfigurationError: If the module ID is invalid
        """
        self._validate_module_id(module_id)
        
        if module_id in self._entries:
            logger.info(f"Replacing registered component for module '{module_id}'")
        
        self._entries[module_id] = component
        logger.debug(f"Registered component for module '{module_id}'")
    
    def register_path(self, module_id: str, dotted_path: str) -> None:
        """
        Register a dotted path to a component, imported lazily.
        
        Args:
            module_id: The module ID
            dotted_path: Import path such as 'console_modules.people.Component'
        """
        self._validate_module_id(module_id)
        
        if not isinstance(dotted_path, str) or not dotted_path:
            raise ModuleComponentConfigurationError(
                f"Component path for module '{module_id}' must be a non-empty string"
            )
        
        self._entries[module_id] = dotted_path
        logger.debug(f"Registered component path '{dotted_path}' for module '{module_id}'")
    
    def unregister(self, module_id: str) -> None:
        """Remove a module's component; no-op for unknown modules"""
        if self._entries.pop(module_id, None) is not None:
            logger.info(f"Unregistered component for module '{module_id}'")
    
    def is_registered(self, module_id: str) -> bool:
        return module_id in self._entries
    
    def module_ids(self) -> List[str]:
        return sorted(self._entries)
    
    def get_component(self, module_id: str) -> Any:
        """
        Get the registered component, importing it if registered by path.
        
        Raises:
            KeyError: If the module has no registered component
            ModuleComponentConfigurationError: If a registered path cannot be imported
        """
        entry = self._entries[module_id]
        
        if isinstance(entry, str):
            try:
                component = import_string(entry)
            except ImportError as e:
                raise ModuleComponentConfigurationError(
                    f"Cannot import component '{entry}' for module '{module_id}': {e}"
                ) from e
            self._entries[module_id] = component
            return component
        
        return entry
    
    def reset(self) -> None:
        """Remove every registration"""
        self._entries.clear()
    
    def populate_from_settings(self) -> None:
        """Register the components configured in CONSOLE_MODULE_COMPONENTS"""
        configured = getattr(settings, 'CONSOLE_MODULE_COMPONENTS', {}) or {}
        
        if not isinstance(configured, dict):
            raise ModuleComponentConfigurationError(
                "CONSOLE_MODULE_COMPONENTS must be a dict of module ID to component path"
            )
        
        for module_id, component in configured.items():
            if isinstance(component, str):
                self.register_path(module_id, component)
            else:
                self.register(module_id, component)
        
        if configured:
            logger.info(f"Registered {len(configured)} module components from settings")
    
    def _validate_module_id(self, module_id: str) -> None:
        if not isinstance(module_id, str) or not module_id:
            raise ModuleComponentConfigurationError(
                f"Module ID must be a non-empty string, got {module_id!r}"
            )


# Global component registry instance
component_registry = ComponentRegistry()
