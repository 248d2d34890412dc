"""
Inference speed and latency simulation for the typing and ping demos.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..catalog.agents import CLOUD_LATENCY_MS, LOCAL_LATENCY_LABEL
from ..catalog.models import DEFAULT_ENGINE_SPEED, ENGINE_SPEEDS

SAMPLE_OUTPUT = (
    "Here is a poem about space coding:\n\n"
    "Stars align in binary code,\n"
    "A cosmic script, a silent mode.\n"
    "While neurons fire in silicone,\n"
    "We build new worlds, purely known."
)


@dataclass(frozen=True)
class InferenceStats:
    engine: str
    chars_per_second: int
    char_count: int
    seconds: float


def simulate_inference(
    engine: str,
    text: Optional[str] = None,
    speeds: Optional[Mapping[str, int]] = None,
) -> InferenceStats:
    """
    Compute how long a serving engine takes to stream ``text``.
    
    When ``text`` is omitted the sample poem is used, signed with the engine name.
    """
    speeds = speeds if speeds is not None else ENGINE_SPEEDS
    speed = speeds.get(engine, DEFAULT_ENGINE_SPEED)
    if text is None:
        text = f"{SAMPLE_OUTPUT}\n\n(Generated by {engine})"
    return InferenceStats(
        engine=engine,
        chars_per_second=speed,
        char_count=len(text),
        seconds=len(text) / speed,
    )


@dataclass(frozen=True)
class LatencyReport:
    local_label: str
    cloud_ms: int
    
    @property
    def cloud_label(self) -> str:
        return f"{self.cloud_ms} ms"
    
    def to_dict(self) -> Dict[str, Any]:
        return {"local": self.local_label, "cloud": self.cloud_label, "cloud_ms": self.cloud_ms}


def simulate_ping(
    rng: Optional[random.Random] = None,
    cloud_range: Tuple[int, int] = CLOUD_LATENCY_MS,
) -> LatencyReport:
    """
    Compare a local round trip with a cloud one.
    
    Local inference is always reported as instant; the cloud latency is drawn
    uniformly from the inclusive ``cloud_range``.
    """
    rng = rng or random.Random()
    low, high = cloud_range
    return LatencyReport(local_label=LOCAL_LATENCY_LABEL, cloud_ms=rng.randint(low, high))
