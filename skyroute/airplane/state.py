"""Mini README: Smoothed kinematic and visual state of the animated aircraft.

Structure:
    * AirplaneTuning - frozen constants controlling animation feel.
    * AirplaneState - mutable state blended towards route samples each frame.

``AirplaneState.update`` filters position and attitude towards the sampled
route target and derives gear, light and banking effects from the filtered
altitude and accumulated animation time. Translation converges faster than
rotation so the aircraft turns with some weight.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from ..route import RouteSample
from ..utils.math_utils import clamp01, lerp, lerp_angle, rad_to_deg, sin_phase


@dataclass(frozen=True, slots=True)
class AirplaneTuning:
    """Per-millisecond smoothing rates and altitude windows for derived effects."""

    position_rate: float = 0.05
    rotation_rate: float = 0.01
    gear_window: float = 50.0
    taxi_light_window: float = 100.0
    bank_floor: float = 50.0
    bank_window: float = 100.0
    bank_amplitude_rad: float = 0.1
    bank_frequency: float = 0.2
    light_period_s: float = 2.0
    strobe_period_s: float = 1.0

    def __post_init__(self) -> None:
        if not 0 < self.rotation_rate < self.position_rate:
            raise ValueError("rotation_rate must be positive and below position_rate")
        for name in ("gear_window", "taxi_light_window", "bank_window"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.strobe_period_s <= 0 or self.light_period_s <= 0:
            raise ValueError("Light periods must be positive")


@dataclass(slots=True)
class AirplaneState:
    """Live flight state; mutated in place once per frame."""

    position: Tuple[float, float] = (0.0, 0.0)
    altitude: float = 0.0
    bearing: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    front_gear_rotation: float = 0.0
    rear_gear_rotation: float = 0.0
    light_phase: float = 0.0
    light_phase_strobe: float = 0.0
    light_taxi_phase: float = 0.0
    anim_time_s: float = 0.0
    tuning: AirplaneTuning = field(default_factory=AirplaneTuning)

    @classmethod
    def from_sample(
        cls, sample: RouteSample, tuning: AirplaneTuning | None = None
    ) -> "AirplaneState":
        """Place a fresh aircraft exactly on ``sample``."""

        return cls(
            position=sample.position,
            altitude=sample.altitude,
            bearing=sample.bearing,
            pitch=sample.pitch,
            tuning=tuning or AirplaneTuning(),
        )

    def update(self, target: RouteSample, dtime_ms: float) -> None:
        """Blend towards ``target`` and refresh derived effects."""

        tuning = self.tuning
        self.anim_time_s += dtime_ms / 1000.0

        move = dtime_ms * tuning.position_rate
        turn = dtime_ms * tuning.rotation_rate
        self.position = (
            lerp(self.position[0], target.position[0], move),
            lerp(self.position[1], target.position[1], move),
        )
        self.altitude = lerp(self.altitude, target.altitude, move)
        self.bearing = lerp_angle(self.bearing, target.bearing, turn)
        self.pitch = lerp(self.pitch, target.pitch, turn)

        gear_ratio = clamp01(self.altitude / tuning.gear_window)
        self.front_gear_rotation = lerp(0.0, 90.0, gear_ratio)
        self.rear_gear_rotation = lerp(0.0, -90.0, gear_ratio)

        self.light_phase = sin_phase(self.anim_time_s, tuning.light_period_s) * 0.25 + 0.75
        self.light_phase_strobe = sin_phase(self.anim_time_s, tuning.strobe_period_s)
        self.light_taxi_phase = lerp(1.0, 0.0, clamp01(self.altitude / tuning.taxi_light_window))

        # Banking only kicks in once clear of the takeoff window.
        roll_target = math.sin(self.anim_time_s * math.pi * tuning.bank_frequency) * tuning.bank_amplitude_rad
        bank_ratio = clamp01((self.altitude - tuning.bank_floor) / tuning.bank_window)
        self.roll = rad_to_deg(lerp(0.0, roll_target, bank_ratio))
