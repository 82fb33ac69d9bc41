from __future__ import annotations

from typing import Iterable

from light_exporter.parsing.lightvalue import LightStatus


METRIC_NAME = "light_brightness"
CONTENT_TYPE = "text/plain"


def _escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def render_light_metrics(statuses: Iterable[LightStatus]) -> str:
    """
    Render statuses in the Prometheus text exposition format.

    One TYPE header, then one sample per status in the order given.
    """
    lines = [f"# TYPE {METRIC_NAME} gauge"]
    for s in statuses:
        lines.append(
            f'{METRIC_NAME}{{index="{s.index}",model_number="{_escape_label_value(s.model_number)}"}} '
            f"{s.brightness}"
        )
    return "\n".join(lines) + "\n"
