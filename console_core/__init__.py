"""
Console Core Package

Server side of the superadmin console for the recruitment/HR platform:
- Module component resolution for the module-rendering shell
- Module naming utilities shared by the console screens
"""

__version__ = '1.0.0'
