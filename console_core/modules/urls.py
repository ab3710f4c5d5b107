"""
Module Component URLs
"""

from django.urls import path

from .views import (
    ModuleComponentView,
    ModuleComponentCacheView,
    ModuleComponentCatalogView,
    ModuleComponentCatalogCacheView,
)

app_name = 'modules'

urlpatterns = [
    path('components/', ModuleComponentCatalogView.as_view(), name='component-catalog'),
    path('components/cache/', ModuleComponentCatalogCacheView.as_view(), name='component-cache'),
    path('<str:module_id>/component/', ModuleComponentView.as_view(), name='module-component'),
    path('<str:module_id>/component/cache/', ModuleComponentCacheView.as_view(), name='module-component-cache'),
]
