"""Mini README: Renderer handoff snapshots for the animated aircraft.

Structure:
    * RenderSnapshot - immutable per-frame copy of everything a model layer needs.
    * initial_feature - zeroed GeoJSON feature used before the first frame.

Snapshots are value copies taken at handoff so a renderer on another
thread never observes the live ``AirplaneState`` changing underneath it.
``to_feature`` emits the property names the map model layer matches on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..airplane import AirplaneState

MODEL_ID = "plane"

Triple = Tuple[float, float, float]

_ZEROS: Triple = (0.0, 0.0, 0.0)


def _propeller_angle(anim_time_s: float) -> float:
    return -(anim_time_s % 0.5) * 2.0 * 360.0


def _propeller_blur_angle(anim_time_s: float) -> float:
    return (anim_time_s % 0.1) * 10.0 * 360.0


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Frozen view of the aircraft for one rendered frame."""

    longitude: float
    latitude: float
    altitude: float
    rotation: Triple
    front_gear_rotation: Triple
    rear_gear_rotation: Triple
    propeller_rotation: Triple
    propeller_rotation_blur: Triple
    light_emission: float
    light_emission_strobe: float
    light_emission_taxi: float

    @classmethod
    def from_state(cls, airplane: AirplaneState) -> "RenderSnapshot":
        """Copy the renderable parts of ``airplane``."""

        longitude, latitude = airplane.position
        return cls(
            longitude=longitude,
            latitude=latitude,
            altitude=airplane.altitude,
            # The model's nose points along +x, hence the quarter turn on yaw.
            rotation=(airplane.roll, airplane.pitch, airplane.bearing + 90.0),
            front_gear_rotation=(0.0, 0.0, airplane.front_gear_rotation),
            rear_gear_rotation=(0.0, 0.0, airplane.rear_gear_rotation),
            propeller_rotation=(0.0, 0.0, _propeller_angle(airplane.anim_time_s)),
            propeller_rotation_blur=(0.0, 0.0, _propeller_blur_angle(airplane.anim_time_s)),
            light_emission=airplane.light_phase,
            light_emission_strobe=airplane.light_phase_strobe,
            light_emission_taxi=airplane.light_taxi_phase,
        )

    def to_feature(self) -> Dict[str, Any]:
        """Return the GeoJSON Point feature consumed by the model layer."""

        return {
            "type": "Feature",
            "id": MODEL_ID,
            "geometry": {
                "type": "Point",
                "coordinates": [self.longitude, self.latitude, self.altitude],
            },
            "properties": {
                "model-id": MODEL_ID,
                "z-elevation": self.altitude,
                "model-translation": [0.0, 0.0, self.altitude],
                "rotation": list(self.rotation),
                "light-emission": self.light_emission,
                "light-emission-strobe": self.light_emission_strobe,
                "light-emission-taxi": self.light_emission_taxi,
                "front-gear-rotation": list(self.front_gear_rotation),
                "rear-gear-rotation": list(self.rear_gear_rotation),
                "propeller-rotation": list(self.propeller_rotation),
                "propeller-rotation-blur": list(self.propeller_rotation_blur),
            },
        }


def initial_feature(longitude: float, latitude: float, altitude: float = 0.0) -> Dict[str, Any]:
    """Feature published before the first animated frame."""

    return {
        "type": "Feature",
        "id": MODEL_ID,
        "geometry": {"type": "Point", "coordinates": [longitude, latitude, altitude]},
        "properties": {
            "model-id": MODEL_ID,
            "rotation": list(_ZEROS),
            "light-emission": 0.0,
            "light-emission-strobe": 0.0,
            "light-emission-taxi": 0.0,
            "front-gear-rotation": list(_ZEROS),
            "rear-gear-rotation": list(_ZEROS),
            "propeller-rotation": list(_ZEROS),
            "propeller-rotation-blur": list(_ZEROS),
        },
    }
