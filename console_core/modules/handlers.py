"""
Module Component Signal Handlers
"""

import logging
from django.core.signals import setting_changed
from django.dispatch import receiver

from .registry import component_registry
from .resolver import reset_component_resolver

logger = logging.getLogger(__name__)


@receiver(setting_changed)
def reload_component_settings(sender, setting, **kwargs):
    """Rebuild the registry and resolver when CONSOLE_MODULE_* settings change"""
    if not setting.startswith('CONSOLE_MODULE_'):
        return
    
    if setting == 'CONSOLE_MODULE_COMPONENTS':
        component_registry.reset()
        component_registry.populate_from_settings()
    
    reset_component_resolver()
    logger.debug(f"Reloaded module component configuration after {setting} changed")
