from .projector import (
    cartesian_projection,
    stereographic_projection,
    stereographic_projection_array,
)

__all__ = [
    "cartesian_projection",
    "stereographic_projection",
    "stereographic_projection_array",
]
