"""
Console Module Components

Resolves pluggable platform modules (e.g. 'people', 'ats_core') to the
component that renders their panel in the superadmin console.
"""
