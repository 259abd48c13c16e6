"""Fragment collection across module, component and operation metadata."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Protocol

from .models import Documentable, Module, ModuleFragment


class FragmentLookup(Protocol):
    """Capability returning the documentation fragment attached to an entity."""

    def fragment_for(self, entity: Documentable) -> Optional[str]:
        """Return the attached fragment, or None when nothing is attached."""


class AttachedFragmentLookup:
    """Reads fragments stored on the entities' ``documentation`` field."""

    def fragment_for(self, entity: Documentable) -> Optional[str]:
        return entity.documentation


class FragmentCollector:
    """Walks modules in order and yields the fragments each one owns.

    Order per module: the module fragment, then for each component its type
    fragment followed by the fragments of its public operations.
    """

    def __init__(self, lookup: FragmentLookup | None = None) -> None:
        self.lookup = lookup or AttachedFragmentLookup()

    def collect(self, modules: Iterable[Module]) -> Iterator[ModuleFragment]:
        for module in modules:
            yield from self.collect_module(module)

    def collect_module(self, module: Module) -> Iterator[ModuleFragment]:
        text = self.lookup.fragment_for(module)
        if text is not None:
            yield ModuleFragment(module, text)

        for component in module.components:
            component_type = component.type
            text = self.lookup.fragment_for(component_type)
            if text is not None:
                yield ModuleFragment(module, text)

            for operation in component_type.operations:
                if not operation.is_public:
                    continue
                text = self.lookup.fragment_for(operation)
                if text is not None:
                    yield ModuleFragment(module, text)


__all__ = ["AttachedFragmentLookup", "FragmentCollector", "FragmentLookup"]
