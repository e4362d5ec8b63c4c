# renderer/tone_mapping.py
import math
from typing import Tuple
from core.vector import Vector3

def color_to_pixel(accumulated: Vector3, samples_per_pixel: int,
                   gamma: float = 2.0) -> Tuple[int, int, int]:
    """
    Average an accumulated sample sum, apply gamma correction and quantize
    each channel to [0, 255].
    """
    scale = 1.0 / samples_per_pixel
    return tuple(_to_byte(channel * scale, gamma) for channel in accumulated)

def _to_byte(value: float, gamma: float) -> int:
    if not value > 0.0:
        return 0
    corrected = math.pow(value, 1.0 / gamma)
    return int(256 * min(corrected, 0.999))
