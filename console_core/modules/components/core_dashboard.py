"""
Core dashboard panel: overview of the module components known to the console.
"""

from ..base import ModulePanel
from ..naming import get_display_name
from ..registry import component_registry


class CoreDashboardPanel(ModulePanel):
    title = 'Core Dashboard'
    
    def get_sections(self):
        from ..resolver import get_component_resolver
        
        resolver = get_component_resolver()
        return [
            {
                'key': 'registered_modules',
                'label': 'Registered Modules',
                'items': [
                    {'module_id': module_id, 'display_name': get_display_name(module_id)}
                    for module_id in component_registry.module_ids()
                ],
            },
            {
                'key': 'loaded_modules',
                'label': 'Loaded Modules',
                'items': [
                    {'module_id': module_id, 'display_name': get_display_name(module_id)}
                    for module_id in resolver.cached_module_ids()
                ],
            },
        ]


Component = CoreDashboardPanel
