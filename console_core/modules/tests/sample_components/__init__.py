"""Component packages used by the resolver and loader tests."""
