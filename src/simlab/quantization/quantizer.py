"""
Quantizer - simulated precision reduction of a weight array.

These are display simulations, not real number formats:
- FP32: 8 decimals, value unchanged
- FP16: 4 decimals
- INT8: symmetric linear quantizer over [-1, 1], ``round(w * 127) / 127``
- INT4: a 1-bit sign indicator ("1" if w > 0 else "0")
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Union

from ..catalog.quantization import QUANTIZATION_PROFILES, SAMPLE_WEIGHTS
from ..core.types import QuantizationLevel, QuantizationProfile, QuantizedWeight

logger = logging.getLogger(__name__)

INT8_SCALE = 127

LevelLike = Union[QuantizationLevel, str, int]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_weight(weight: float, level: QuantizationLevel) -> str:
    """Render one weight at the given precision level."""
    if level is QuantizationLevel.FULL_PRECISION:
        return f"{weight:.8f}"
    if level is QuantizationLevel.HALF:
        return f"{weight:.4f}"
    if level is QuantizationLevel.INT8:
        scaled = weight * INT8_SCALE
        if not math.isfinite(scaled):
            # nan, inf and overflowing weights have no integer grid point
            return f"{weight:.2f}"
        return f"{_round_half_up(scaled) / INT8_SCALE:.2f}"
    return "1" if weight > 0 else "0"


class Quantizer:
    """
    Applies a quantization level to weights and exposes level metadata.
    
    Example:
        >>> [w.display_value for w in Quantizer().quantize([0.5, -0.5], "int4")]
        ['1', '0']
    """
    
    def __init__(self, profiles: Optional[Dict[QuantizationLevel, QuantizationProfile]] = None):
        self.profiles = profiles if profiles is not None else QUANTIZATION_PROFILES
    
    def quantize(self, weights: Sequence[float], level: LevelLike) -> List[QuantizedWeight]:
        """
        Reduce the display precision of each weight.
        
        Args:
            weights: Weight values
            level: QuantizationLevel, its value ("int8") or slider index (0-3)
            
        Returns:
            One QuantizedWeight per input weight, in order
            
        Raises:
            ValueError: If the level cannot be resolved
        """
        resolved = QuantizationLevel.coerce(level)
        style = self.profiles[resolved].style_tag
        logger.debug(f"Quantizing {len(weights)} weights at {resolved.value}")
        return [QuantizedWeight(format_weight(w, resolved), style) for w in weights]
    
    def profile(self, level: LevelLike) -> QuantizationProfile:
        """Static size/RAM/loss/hardware figures for a level."""
        return self.profiles[QuantizationLevel.coerce(level)]


def quantize(
    weights: Sequence[float] = SAMPLE_WEIGHTS,
    level: LevelLike = QuantizationLevel.FULL_PRECISION,
) -> List[QuantizedWeight]:
    """Quantize weights with the built-in level profiles."""
    return Quantizer().quantize(weights, level)
