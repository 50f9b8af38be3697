"""Mini README: Animated aircraft state.

Exports the smoothed airplane state and its tuning constants.
"""

from .state import AirplaneState, AirplaneTuning

__all__ = ["AirplaneState", "AirplaneTuning"]
