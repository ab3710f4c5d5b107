"""
Components bundled with the console.

Resolved through the relative '.components' base when the import loader is
enabled, e.g. '.components.core_dashboard'.
"""
