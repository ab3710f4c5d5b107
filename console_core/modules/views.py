"""
Module Component Views

HTTP surface for the module-rendering shell and superadmin cache control.
"""

import logging
from django.conf import settings
from rest_framework import status, permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .base import render_component
from .exceptions import ComponentRenderError
from .naming import get_display_name
from .registry import component_registry
from .resolver import get_component_resolver
from .serializers import ModuleComponentSerializer, ModuleComponentCatalogSerializer

logger = logging.getLogger(__name__)


def _entries(module_ids):
    return [
        {'module_id': module_id, 'display_name': get_display_name(module_id)}
        for module_id in module_ids
    ]


class ModuleComponentView(APIView):
    """
    Render a module's panel.
    
    Modules without a component are a normal state: the response carries a
    placeholder instead of a panel.
    """
    permission_classes = [permissions.IsAuthenticated]
    
    def get(self, request, module_id):
        """Resolve and render the module component"""
        resolver = get_component_resolver()
        component = resolver.resolve_sync(module_id)
        display_name = get_display_name(module_id)
        
        if component is None:
            serializer = ModuleComponentSerializer({
                'module_id': module_id,
                'display_name': display_name,
                'available': False,
                'panel': None,
                'placeholder': f"{display_name} has no console panel",
            })
            return Response(serializer.data)
        
        try:
            panel = render_component(component, request, module_id=module_id)
        except ComponentRenderError as e:
            logger.error(str(e), exc_info=True)
            return Response(
                {'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        
        serializer = ModuleComponentSerializer({
            'module_id': module_id,
            'display_name': display_name,
            'available': True,
            'panel': panel,
            'placeholder': None,
        })
        return Response(serializer.data)


class ModuleComponentCacheView(APIView):
    """Evict one module's cached component"""
    permission_classes = [permissions.IsAdminUser]
    
    def delete(self, request, module_id):
        get_component_resolver().invalidate(module_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ModuleComponentCatalogView(APIView):
    """
    Registry and cache state for the superadmin settings screen.
    """
    permission_classes = [permissions.IsAdminUser]
    
    def get(self, request):
        resolver = get_component_resolver()
        registered = component_registry.module_ids()
        cached = resolver.cached_module_ids()
        
        serializer = ModuleComponentCatalogSerializer({
            'loader': getattr(settings, 'CONSOLE_MODULE_LOADER', 'registry'),
            'registered_count': len(registered),
            'cached_count': len(cached),
            'registered_modules': _entries(registered),
            'cached_modules': _entries(cached),
        })
        return Response(serializer.data)


class ModuleComponentCatalogCacheView(APIView):
    """Clear every cached component"""
    permission_classes = [permissions.IsAdminUser]
    
    def delete(self, request):
        get_component_resolver().clear()
        return Response(status=status.HTTP_204_NO_CONTENT)
