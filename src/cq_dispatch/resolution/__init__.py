"""Resolution – registry/scope ports and the in-process container."""
from cq_dispatch.resolution.container import Container, ContainerBuilder, Registration, Scope
from cq_dispatch.resolution.ports import DependencyRegistry, Factory, Lifetime, ResolutionScope

__all__ = [
    "Container",
    "ContainerBuilder",
    "DependencyRegistry",
    "Factory",
    "Lifetime",
    "Registration",
    "ResolutionScope",
    "Scope",
]
