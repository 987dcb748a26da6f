from dataclasses import dataclass

from .coordinates import EquatorialCoordinates, Frame, HorizonCoordinates


@dataclass(frozen=True)
class Star:
    """A star's position in either coordinate frame, plus its apparent magnitude.

    Lower magnitude means brighter.
    """

    coordinates: EquatorialCoordinates | HorizonCoordinates
    magnitude: float

    @property
    def frame(self) -> Frame:
        return self.coordinates.frame
