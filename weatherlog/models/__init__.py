# Domain models package

from weatherlog.models.base import ValueModel
from weatherlog.models.wigos import WigosStationIdentifier
from weatherlog.models.observation import Observation

__all__ = [
    "ValueModel",
    "WigosStationIdentifier",
    "Observation",
]
