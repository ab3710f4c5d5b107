"""
Module Component Serializers
"""

from rest_framework import serializers


class ModuleComponentSerializer(serializers.Serializer):
    """Serializer for a resolved (or missing) module component panel"""
    module_id = serializers.CharField()
    display_name = serializers.CharField()
    available = serializers.BooleanField()
    panel = serializers.JSONField(allow_null=True)
    placeholder = serializers.CharField(allow_null=True)


class ModuleComponentEntrySerializer(serializers.Serializer):
    module_id = serializers.CharField()
    display_name = serializers.CharField()


class ModuleComponentCatalogSerializer(serializers.Serializer):
    """Serializer for registry and cache state"""
    loader = serializers.CharField()
    registered_count = serializers.IntegerField()
    cached_count = serializers.IntegerField()
    registered_modules = ModuleComponentEntrySerializer(many=True)
    cached_modules = ModuleComponentEntrySerializer(many=True)
