"""
Module name mapping utilities for display names and normalization.
"""

import re
from typing import Dict


# Technical module names to display names, as stored in the modules table
MODULE_DISPLAY_NAMES: Dict[str, str] = {
    # Core modules
    'user_management': 'User Management',
    'core_dashboard': 'Core Dashboard',
    'ai_orchestration': 'AI Orchestration',
    'document_management': 'Document Management',
    'custom_field_management': 'Custom Field Management',
    'people': 'People Management',
    
    # Business modules
    'companies': 'Company Database',
    'talent_database': 'Talent Database',
    'smart_talent_analytics': 'Smart Talent Analytics',
    
    # ATS modules
    'ats_core': 'ATS Core',
    'candidate_management': 'Candidate Management',
    'job_posting_management': 'Job Posting Management',
    'interview_scheduling': 'Interview Scheduling',
    
    # Communication modules
    'email_management': 'Email Management',
    'notification_system': 'Notification System',
    'collaboration_tools': 'Collaboration Tools',
    
    # Analytics modules
    'reporting_analytics': 'Reporting & Analytics',
    'business_intelligence': 'Business Intelligence',
    'performance_metrics': 'Performance Metrics',
    
    # Integration modules
    'api_integrations': 'API Integrations',
    'third_party_connectors': 'Third Party Connectors',
    'data_sync_services': 'Data Sync Services',
    'linkedin_integration': 'LinkedIn Integration',
    
    # Workflow and AI modules
    'workflow_management': 'Workflow Management',
    'predictive_insights': 'Predictive Insights',
}

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]')
_REPEATED_UNDERSCORES = re.compile(r'_+')
_WORD_SEPARATORS = re.compile(r'[_\s-]+')


def normalize_module_name(module_name: str) -> str:
    """Normalize a module name to its technical form ('ATS Core' -> 'ats_core')"""
    if not module_name:
        return ''
    
    name = _NON_ALPHANUMERIC.sub('_', module_name.lower())
    name = _REPEATED_UNDERSCORES.sub('_', name)
    return name.strip('_')


def format_module_name(module_name: str) -> str:
    """Fallback display formatting for modules without a known display name"""
    if not module_name:
        return 'Unknown Module'
    
    words = _WORD_SEPARATORS.split(module_name)
    return ' '.join(word[:1].upper() + word[1:].lower() for word in words)


def get_display_name(module_name: str) -> str:
    normalized = normalize_module_name(module_name)
    return MODULE_DISPLAY_NAMES.get(normalized) or format_module_name(module_name)


def get_technical_name(display_name: str) -> str:
    """Reverse lookup of a display name, falling back to normalization"""
    for technical_name, name in MODULE_DISPLAY_NAMES.items():
        if name == display_name:
            return technical_name
    return normalize_module_name(display_name)
