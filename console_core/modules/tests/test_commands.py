"""
Tests for the module_components management command
"""

import json
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings


class ModuleComponentsCommandTestCase(SimpleTestCase):
    
    def call(self, *args):
        out = StringIO()
        call_command('module_components', *args, stdout=out)
        return out.getvalue()
    
    def test_candidates_registry(self):
        output = json.loads(self.call('candidates', 'people', '--json'))
        
        self.assertEqual(output, {'module_id': 'people', 'candidates': ['people']})
    
    @override_settings(
        CONSOLE_MODULE_LOADER='import',
        CONSOLE_MODULE_COMPONENT_PACKAGE='console_core.modules.tests.sample_components',
    )
    def test_candidates_import(self):
        output = self.call('candidates', 'ats_core')
        
        self.assertIn('1. console_core.modules.tests.sample_components.ats_core', output)
        self.assertIn('6. .components.ats_core.ats_core', output)
    
    def test_resolve(self):
        output = json.loads(self.call('resolve', 'people', '--json'))
        
        self.assertEqual(output['location'], 'people')
        self.assertEqual(output['display_name'], 'People Management')
        self.assertTrue(output['component'].endswith('people.PeoplePanel'))
    
    @override_settings(
        CONSOLE_MODULE_LOADER='import',
        CONSOLE_MODULE_COMPONENT_PACKAGE='console_core.modules.tests.sample_components',
    )
    def test_resolve_import(self):
        output = self.call('resolve', 'ats_core')
        
        self.assertIn('Location: console_core.modules.tests.sample_components.ats_core.component', output)
    
    def test_resolve_missing_module(self):
        with self.assertRaises(CommandError):
            self.call('resolve', 'talent_database')
    
    def test_module_id_required(self):
        with self.assertRaises(CommandError):
            self.call('resolve')
    
    def test_list(self):
        output = json.loads(self.call('list', '--json'))
        
        self.assertEqual(output['loader'], 'registry')
        self.assertIn({'module_id': 'core_dashboard', 'display_name': 'Core Dashboard'}, output['modules'])
