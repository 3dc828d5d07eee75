# application/services/scenario_exporter.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from application.ports.artifact_writer import ArtifactWriterPort
from application.ports.logger import LoggerPort
from application.ports.simulation_renderer import SimulationRendererPort
from application.services.chunker import Chains, GroupedChains, chunk
from application.services.export_config import ExportConfig
from application.services.frequency_analyzer import resolve_base_headers, resolve_base_url
from application.services.header_deduplicator import HeaderDeduplicator, filtered_header_names
from application.services.url_normalizer import normalize
from domain.elements import RequestBodyBytes, RequestElement, ScenarioElement
from domain.exceptions import BodyDumpError, EmptyScenarioError, OutputWriteError
from domain.scenario import HeaderGroups, ProtocolElement, Scenario


@dataclass(frozen=True)
class SimulationModel:
    """Everything the renderer needs, in render-call order."""
    package: str
    class_name: str
    protocol: ProtocolElement
    headers: HeaderGroups
    scenario_name: str
    chains: Chains


class ScenarioExporter:
    """
    baseline -> relative urls + ids -> body dumps -> header dedup -> chunking -> render -> write
    """

    def __init__(
        self,
        config: ExportConfig,
        renderer: SimulationRendererPort,
        writer: ArtifactWriterPort,
        logger: LoggerPort,
    ):
        self._config = config
        self._renderer = renderer
        self._writer = writer
        self._logger = logger.bind(simulation=config.class_name)
        self._deduplicator = HeaderDeduplicator(filtered_header_names(config.automatic_referer))

    def export(self, scenario: Scenario) -> Path:
        if scenario.is_empty:
            raise EmptyScenarioError("scenario has no elements")

        self._logger.info("export.start", elements=len(scenario.elements))
        output = self.render(scenario)

        path = self._config.simulation_path()
        try:
            self._writer.write_text(path, output, self._config.encoding)
        except (OSError, UnicodeError) as exc:
            self._logger.error("export.write.failed", path=str(path), error=str(exc))
            raise OutputWriteError(str(path), str(exc)) from exc

        self._logger.info("export.written", path=str(path), chars=len(output))
        return path

    def render(self, scenario: Scenario) -> str:
        model = self.build_model(scenario)
        return self._renderer.render(
            model.package,
            model.class_name,
            model.protocol,
            model.headers,
            model.scenario_name,
            model.chains,
        )

    def build_model(self, scenario: Scenario) -> SimulationModel:
        if scenario.is_empty:
            raise EmptyScenarioError("scenario has no elements")

        raw = scenario.elements
        base_url = resolve_base_url(raw)
        base_headers = resolve_base_headers(raw)
        protocol = ProtocolElement(base_url=base_url, headers=base_headers)
        self._logger.debug("export.baseline", base_url=base_url, headers=sorted(base_headers))

        elements = normalize(raw, base_url)
        self._dump_bodies(elements)

        dedup = self._deduplicator.deduplicate(elements, base_headers)
        chains = chunk(dedup.elements, self._config.events_grouping)
        self._logger.debug(
            "export.prepared",
            header_groups=len(dedup.header_groups),
            grouped=isinstance(chains, GroupedChains),
        )

        return SimulationModel(
            package=self._config.package,
            class_name=self._config.class_name,
            protocol=protocol,
            headers=dedup.header_groups,
            scenario_name=self._config.scenario_name,
            chains=chains,
        )

    def _dump_bodies(self, elements: Sequence[ScenarioElement]) -> None:
        for el in elements:
            if isinstance(el, RequestElement) and isinstance(el.body, RequestBodyBytes):
                try:
                    self._dump_body(el.id, el.body.content)
                except BodyDumpError as exc:
                    # logged only, the simulation is still written
                    self._logger.error(
                        "export.body_dump.failed",
                        element_id=exc.element_id,
                        path=exc.path,
                        error=str(exc),
                    )

    def _dump_body(self, element_id: int, content: bytes) -> None:
        path = self._config.request_body_path(element_id)
        try:
            self._writer.write_bytes(path, content)
        except OSError as exc:
            raise BodyDumpError(element_id, str(path), str(exc)) from exc
        self._logger.debug("export.body_dump.saved", element_id=element_id, path=str(path), size=len(content))
