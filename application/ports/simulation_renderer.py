# application/ports/simulation_renderer.py
from __future__ import annotations

from abc import ABC, abstractmethod

from application.services.chunker import Chains
from domain.scenario import HeaderGroups, ProtocolElement


class SimulationRendererPort(ABC):
    @abstractmethod
    def render(
        self,
        package: str,
        class_name: str,
        protocol: ProtocolElement,
        headers: HeaderGroups,
        scenario_name: str,
        chains: Chains,
    ) -> str:
        """Full text of the simulation file."""
        ...
