"""
Tests for the module component contract
"""

from django.test import SimpleTestCase

from console_core.modules.base import ModuleComponent, ModulePanel, is_component, render_component
from console_core.modules.exceptions import ComponentRenderError


class InterviewPanel(ModulePanel):
    title = 'Interviews'
    
    def get_sections(self):
        return [{'key': 'upcoming', 'label': 'Upcoming', 'items': [self.context.get('tenant')]}]


class UntitledPanel(ModulePanel):
    
    def get_sections(self):
        return []


def plain_panel(request, **context):
    return {'title': 'Plain', 'module_id': context['module_id']}


class ModuleComponentContractTestCase(SimpleTestCase):
    
    def test_is_component(self):
        self.assertTrue(is_component(plain_panel))
        self.assertTrue(is_component(InterviewPanel))
        self.assertFalse(is_component({'fields': []}))
        self.assertFalse(is_component('Component'))
        self.assertFalse(is_component(None))
    
    def test_protocol(self):
        self.assertIsInstance(plain_panel, ModuleComponent)
    
    def test_render_function_component(self):
        payload = render_component(plain_panel, None, module_id='people')
        
        self.assertEqual(payload, {'title': 'Plain', 'module_id': 'people'})
    
    def test_render_panel_class(self):
        payload = render_component(InterviewPanel, None, module_id='interview_scheduling', tenant='acme')
        
        self.assertEqual(payload['title'], 'Interviews')
        self.assertEqual(payload['sections'][0]['items'], ['acme'])
    
    def test_panel_title_defaults_to_display_name(self):
        payload = render_component(UntitledPanel, None, module_id='ats_core')
        
        self.assertEqual(payload['title'], 'ATS Core')
    
    def test_render_failure_is_wrapped(self):
        def failing(request, **context):
            raise KeyError('candidates')
        
        with self.assertRaises(ComponentRenderError) as cm:
            render_component(failing, None, module_id='candidate_management')
        
        self.assertIn('candidate_management', str(cm.exception))
