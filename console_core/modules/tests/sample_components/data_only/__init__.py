# Data-only module: exports configuration, not a component
Component = {'fields': ['name', 'email']}
