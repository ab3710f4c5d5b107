import console_core_uninstalled_dependency  # noqa: F401


def Component(request, **context):
    return {}
