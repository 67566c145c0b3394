"""Altitude-layered wind models with pink-noise turbulence."""

from .config import WindProfileConfig
from .errors import DegenerateBracketError, WindConfigurationError, WindModelError
from .interfaces import TurbulenceModel, WindModel
from .interpolation import blend_layers, describe_layer, find_bracket, interpolate
from .layered import LayeredWindModel
from .noise import PinkNoise
from .turbulence import PinkNoiseWindModel
from .types import WindLayer, as_vector3, velocity_from_heading

__all__ = [
    "DegenerateBracketError",
    "LayeredWindModel",
    "PinkNoise",
    "PinkNoiseWindModel",
    "TurbulenceModel",
    "WindConfigurationError",
    "WindLayer",
    "WindModel",
    "WindModelError",
    "WindProfileConfig",
    "as_vector3",
    "blend_layers",
    "describe_layer",
    "find_bracket",
    "interpolate",
    "velocity_from_heading",
]
