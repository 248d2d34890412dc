"""
Quantization module: simulated precision tiers for a sample weight matrix.
"""

from .quantizer import Quantizer, format_weight, quantize

__all__ = ["Quantizer", "format_weight", "quantize"]
