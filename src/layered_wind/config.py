"""Configuration container for building layered wind models."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Iterable, Mapping, Sequence

import numpy as np

from .errors import WindConfigurationError
from .layered import DEFAULT_SEED, LayeredWindModel
from .types import WindLayer


def _layer_from_entry(entry: Any, degrees: bool) -> WindLayer:
    """Build one layer from a ``WindLayer``, mapping, or 3-sequence entry."""
    if isinstance(entry, WindLayer):
        return entry
    if isinstance(entry, Mapping):
        missing = [key for key in ("altitude", "speed", "direction") if key not in entry]
        if missing:
            raise WindConfigurationError(f"layer mapping is missing keys {missing}.")
        values = (entry["altitude"], entry["speed"], entry["direction"])
    elif isinstance(entry, (Sequence, np.ndarray)) and not isinstance(entry, str):
        values = tuple(entry)
    else:
        raise WindConfigurationError(f"cannot build a wind layer from {entry!r}.")

    if degrees:
        if len(values) != 3:
            raise WindConfigurationError(
                f"layer must be (altitude, speed, direction), got {len(values)} values."
            )
        return WindLayer.from_degrees(*values)
    return WindLayer.from_sequence(values)


def _coerce(name: str, value: Any, kind: Callable[[Any], Any]) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise WindConfigurationError(f"{name} must be a number, got {value!r}.") from exc


@dataclass
class WindProfileConfig:
    """Settings for a :class:`LayeredWindModel`.

    Attributes
    ----------
    layers
        Wind observations. Entries given as mappings or sequences are
        converted in ``__post_init__``.
    standard_deviation
        Turbulence standard deviation applied after construction.
    turbulence_intensity
        Optional intensity relative to the lowest layer's speed. Applied
        after ``standard_deviation`` and therefore takes precedence.
    seed
        Noise seed for the default turbulence delegate.
    degrees
        Interpret non-``WindLayer`` directions as degrees.
    """

    layers: list[WindLayer] = field(default_factory=list)
    standard_deviation: float = 0.0
    turbulence_intensity: float | None = None
    seed: int = DEFAULT_SEED
    degrees: bool = False

    def __post_init__(self) -> None:
        self.degrees = bool(self.degrees)
        if self.layers is None or isinstance(self.layers, (str, Mapping)) or not isinstance(self.layers, Iterable):
            raise WindConfigurationError(f"layers must be a list of wind layers, got {self.layers!r}.")
        self.layers = [_layer_from_entry(entry, self.degrees) for entry in self.layers]
        self.standard_deviation = _coerce("standard_deviation", self.standard_deviation, float)
        if self.turbulence_intensity is not None:
            self.turbulence_intensity = _coerce("turbulence_intensity", self.turbulence_intensity, float)
        self.seed = _coerce("seed", self.seed, int)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "WindProfileConfig":
        """Construct a config from a partially specified mapping.

        Parameters
        ----------
        values
            Mapping of field names to values. Unknown keys are ignored.

        Returns
        -------
        WindProfileConfig
            Validated configuration.
        """
        if values is None:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    def build(self) -> LayeredWindModel:
        """Create the configured wind model."""
        model = LayeredWindModel(self.layers, seed=self.seed)
        model.set_standard_deviation(self.standard_deviation)
        if self.turbulence_intensity is not None:
            model.set_turbulence_intensity(self.turbulence_intensity)
        return model
