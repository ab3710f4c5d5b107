from django.apps import AppConfig


class ModulesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'console_core.modules'
    verbose_name = 'Console Module Components'
    
    def ready(self):
        # Import signal handlers
        from . import handlers  # noqa: F401
        from .registry import component_registry
        
        component_registry.populate_from_settings()
