from .component import (
    Component, ComponentRepository, ComponentNotAvailable,
    check_component, is_complete, require_segments, resolve_component
)
