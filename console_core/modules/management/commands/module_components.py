"""
Module Components Management Command

Diagnose how module IDs resolve to console components.
"""

import json
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings

from console_core.modules import signals
from console_core.modules.naming import get_display_name
from console_core.modules.registry import component_registry
from console_core.modules.resolver import build_component_resolver


class Command(BaseCommand):
    help = 'Inspect module component resolution: candidates, resolve, list'
    
    def add_arguments(self, parser):
        parser.add_argument(
            'operation',
            type=str,
            choices=['candidates', 'resolve', 'list'],
            help='Operation to perform'
        )
        parser.add_argument(
            'module_id',
            nargs='?',
            help='Module ID for candidates and resolve'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Output in JSON format',
        )
    
    def handle(self, *args, **options):
        operation = options['operation']
        module_id = options.get('module_id')
        output_json = options.get('json')
        
        if operation in ('candidates', 'resolve') and not module_id:
            raise CommandError(f"'{operation}' requires a module ID")
        
        # A fresh resolver so every run performs a cold resolution
        resolver = build_component_resolver()
        
        if operation == 'candidates':
            self._candidates(resolver, module_id, output_json)
        elif operation == 'resolve':
            self._resolve(resolver, module_id, output_json)
        else:
            self._list(output_json)
    
    def _candidates(self, resolver, module_id, output_json):
        candidates = resolver.candidates(module_id)
        
        if output_json:
            self.stdout.write(json.dumps({'module_id': module_id, 'candidates': candidates}, indent=2))
            return
        
        self.stdout.write(self.style.SUCCESS(f"=== Candidates for {module_id} ==="))
        for position, location in enumerate(candidates, start=1):
            self.stdout.write(f"  {position}. {location}")
    
    def _resolve(self, resolver, module_id, output_json):
        resolved = {}
        
        def capture(sender, **kwargs):
            if kwargs.get('resolver') is resolver:
                resolved['location'] = kwargs['location']
        
        signals.component_resolved.connect(capture, weak=False)
        try:
            component = resolver.resolve_sync(module_id)
        finally:
            signals.component_resolved.disconnect(capture)
        
        if component is None:
            raise CommandError(f"No component found for module '{module_id}'")
        
        result = {
            'module_id': module_id,
            'display_name': get_display_name(module_id),
            'location': resolved.get('location'),
            'component': f"{getattr(component, '__module__', '')}.{getattr(component, '__qualname__', repr(component))}",
        }
        
        if output_json:
            self.stdout.write(json.dumps(result, indent=2))
            return
        
        self.stdout.write(self.style.SUCCESS(f"=== {result['display_name']} ==="))
        self.stdout.write(f"Location: {result['location']}")
        self.stdout.write(f"Component: {result['component']}")
    
    def _list(self, output_json):
        modules = [
            {'module_id': module_id, 'display_name': get_display_name(module_id)}
            for module_id in component_registry.module_ids()
        ]
        
        if output_json:
            self.stdout.write(json.dumps({
                'loader': getattr(settings, 'CONSOLE_MODULE_LOADER', 'registry'),
                'modules': modules,
            }, indent=2))
            return
        
        self.stdout.write(self.style.SUCCESS('=== Registered Module Components ==='))
        if not modules:
            self.stdout.write('  (none)')
        for module in modules:
            self.stdout.write(f"  {module['module_id']}: {module['display_name']}")
