from .angle import Angle, ClockTime
from .chart import ChartInfo
from .coordinates import EquatorialCoordinates, Frame, HorizonCoordinates, LatLng
from .star import Star

__all__ = [
    "Angle",
    "ClockTime",
    "ChartInfo",
    "EquatorialCoordinates",
    "Frame",
    "HorizonCoordinates",
    "LatLng",
    "Star",
]
