"""
Quantization level metadata and the sample weight matrix.
"""

from typing import Dict, Tuple

from ..core.types import QuantizationLevel, QuantizationProfile

QUANTIZATION_PROFILES: Dict[QuantizationLevel, QuantizationProfile] = {
    QuantizationLevel.FULL_PRECISION: QuantizationProfile(
        "FP32", "28 GB", "32 GB", "0%", "Server GPU (A100)", "slate",
    ),
    QuantizationLevel.HALF: QuantizationProfile(
        "FP16", "14 GB", "16 GB", "0.01%", "Desktop GPU (RTX 4090)", "indigo",
    ),
    QuantizationLevel.INT8: QuantizationProfile(
        "INT8", "7 GB", "8 GB", "0.5%", "Laptop (MacBook M1)", "blue",
    ),
    QuantizationLevel.INT4: QuantizationProfile(
        "INT4", "3.5 GB", "4 GB", "3-5%", "Phone (iPhone 15)", "red",
    ),
}

SAMPLE_WEIGHTS: Tuple[float, ...] = (
    0.12345678, -0.98765432, 0.55555555, -0.11111111,
    0.00000001, 0.88888888, -0.44444444, 0.33333333,
    0.77777777, -0.22222222, 0.66666666, -0.55555555,
)
