# infrastructure/rendering/jinja_simulation_renderer.py
from __future__ import annotations

from typing import Any, Dict

from jinja2 import Environment, StrictUndefined

from application.ports.simulation_renderer import SimulationRendererPort
from application.services.chunker import Chains, GroupedChains
from domain.elements import (
    PauseElement,
    RequestBodyBytes,
    RequestBodyParams,
    RequestElement,
    TagElement,
)
from domain.scenario import HeaderGroups, ProtocolElement

SIMULATION_TEMPLATE = """\
{% if package %}
package {{ package }}

{% endif %}
import scala.concurrent.duration._

import io.gatling.core.Predef._
import io.gatling.http.Predef._

class {{ class_name }} extends Simulation {

	val httpProtocol = http
		.baseURL({{ protocol.base_url | protect }})
{% for method, value in protocol.builder_calls() %}
		.{{ method }}({{ value | protect }})
{% endfor %}

{% for id, pairs in headers.items() %}
	val headers_{{ id }} = Map(
{% for name, value in pairs %}
		{{ name | protect }} -> {{ value | protect }}{{ "," if not loop.last else "" }}
{% endfor %}
	)

{% endfor %}
{% if grouped %}
{% for group in chains.groups %}
	val chain_{{ loop.index0 }} =
{% for el in group %}
		{{ "" if loop.first else "." }}{{ element(el) }}
{% endfor %}

{% endfor %}
	val scn = scenario({{ scenario_name | protect }})
{% for group in chains.groups %}
		.exec(chain_{{ loop.index0 }})
{% endfor %}
{% else %}
	val scn = scenario({{ scenario_name | protect }})
{% for el in chains.elements %}
		.{{ element(el) }}
{% endfor %}
{% endif %}

	setUp(scn.inject(atOnceUsers(1))).protocols(httpProtocol)
}
"""


def protect(value: Any) -> str:
    """Scala triple-quoted literal; survives quotes and backslashes in recorded values."""
    text = str(value)
    if '"""' in text:
        text = text.replace('"""', '""" + "\\"\\"\\"" + """')
    return '"""' + text + '"""'


class JinjaSimulationRenderer(SimulationRendererPort):
    def __init__(self) -> None:
        self._env = Environment(
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.filters["protect"] = protect
        self._template = self._env.from_string(SIMULATION_TEMPLATE)

    def render(
        self,
        package: str,
        class_name: str,
        protocol: ProtocolElement,
        headers: HeaderGroups,
        scenario_name: str,
        chains: Chains,
    ) -> str:
        context: Dict[str, Any] = {
            "package": package,
            "class_name": class_name,
            "protocol": protocol,
            "headers": headers,
            "scenario_name": scenario_name,
            "chains": chains,
            "grouped": isinstance(chains, GroupedChains),
            "element": lambda el: self._render_element(el, class_name),
        }
        return self._template.render(**context)

    def _render_element(self, el: Any, class_name: str) -> str:
        if isinstance(el, RequestElement):
            return self._render_request(el, class_name)
        if isinstance(el, PauseElement):
            return f"pause({el.duration_ms} milliseconds)"
        if isinstance(el, TagElement):
            # line breaks would end the comment
            text = " ".join(el.text.splitlines())
            return f"exec(session => session) // {text}"
        raise TypeError(f"unsupported scenario element: {type(el).__name__}")

    def _render_request(self, el: RequestElement, class_name: str) -> str:
        parts = [
            f"exec(http({protect(f'request_{el.id}')})",
            f".{el.method.lower()}({protect(el.url)})" if el.method in _DSL_METHODS
            else f".httpRequest({protect(el.method)}, {protect(el.url)})",
        ]
        if el.filtered_headers_id is not None:
            parts.append(f".headers(headers_{el.filtered_headers_id})")
        if isinstance(el.body, RequestBodyBytes):
            parts.append(f".body(RawFileBody({protect(f'{class_name}_request_{el.id}.txt')}))")
        elif isinstance(el.body, RequestBodyParams):
            for name, value in el.body.params:
                parts.append(f".formParam({protect(name)}, {protect(value)})")
        if el.status_code is not None and el.status_code != 200:
            parts.append(f".check(status.is({el.status_code}))")
        return "".join(parts) + ")"


_DSL_METHODS = {"GET", "POST", "PUT", "DELETE", "HEAD", "PATCH", "OPTIONS"}
