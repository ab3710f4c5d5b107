"""
Module Component Contract

Defines what a module component is: anything invokable with the console's
render contract ``component(request, **context)``. Plain functions return the
panel payload directly; class-based components derive from ``ModulePanel``
and are rendered after instantiation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Protocol, runtime_checkable

from .exceptions import ComponentRenderError


@runtime_checkable
class ModuleComponent(Protocol):
    """Invokable UI unit a module resolves to"""
    
    def __call__(self, request, **context) -> Any:
        ...


def is_component(value: Any) -> bool:
    """Return True when a loaded export can be used as a module component"""
    return value is not None and callable(value)


class ModulePanel(ABC):
    """
    Base class for class-based module components.
    
    The resolver hands back the class itself; the rendering shell calls it
    with the request and context and then renders the instance.
    """
    
    title: str = ''
    
    def __init__(self, request, **context):
        self.request = request
        self.context = context
        self.module_id = context.get('module_id')
    
    @abstractmethod
    def get_sections(self) -> List[Dict[str, Any]]:
        """Return the sections making up this panel"""
        pass
    
    def get_title(self) -> str:
        if self.title:
            return self.title
        from .naming import get_display_name
        return get_display_name(self.module_id or '')
    
    def render(self) -> Dict[str, Any]:
        return {
            'title': self.get_title(),
            'sections': self.get_sections(),
        }


def render_component(component: ModuleComponent, request, **context) -> Any:
    """
    Invoke a component and return its serializable panel payload.
    
    Raises:
        ComponentRenderError: If the component fails while rendering
    """
    module_id = context.get('module_id')
    try:
        result = component(request, **context)
        if isinstance(result, ModulePanel):
            return result.render()
    except Exception as e:
        raise ComponentRenderError(f"Module '{module_id}' failed to render: {e}") from e
    return result
