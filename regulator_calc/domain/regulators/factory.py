"""Factory responsible for resolving regulator models by topology."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Dict

from .base import RegulatorModel, Topology, TopologyNotSupportedError

ModelProvider = Callable[[], RegulatorModel]


@dataclass(frozen=True)
class TopologyInfo:
    """Metadata describing an available topology in the factory."""

    topology: Topology
    name: str
    schematic: str | None = None
    description: str | None = None


class RegulatorFactory:
    """Registry-backed factory that resolves models on demand."""

    def __init__(self) -> None:
        self._registry: Dict[Topology, ModelProvider] = {}
        self._descriptions: Dict[Topology, TopologyInfo] = {}

    def register(
        self,
        topology: Topology,
        provider: ModelProvider,
        *,
        name: str | None = None,
        schematic: str | None = None,
        description: str | None = None,
        override: bool = False,
    ) -> None:
        """Register a model provider for the given topology."""

        if not override and topology in self._registry:
            raise ValueError(f"Topology {topology} already registered")

        self._registry[topology] = provider
        display_name = name or topology.name.replace("_", " ").title()
        self._descriptions[topology] = TopologyInfo(
            topology=topology,
            name=display_name,
            schematic=schematic,
            description=description,
        )

    def resolve(self, topology: Topology) -> RegulatorModel:
        """Return a model instance for the requested topology."""

        try:
            provider = self._registry[topology]
        except KeyError as exc:
            raise TopologyNotSupportedError(topology) from exc

        return provider()

    def info(self, topology: Topology) -> TopologyInfo:
        try:
            return self._descriptions[topology]
        except KeyError as exc:
            raise TopologyNotSupportedError(topology) from exc
