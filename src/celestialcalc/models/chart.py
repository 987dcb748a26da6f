from dataclasses import dataclass


@dataclass(frozen=True)
class ChartInfo:
    local_time: str
    utc_time: str
    latitude: float
    longitude: float
    local_sidereal_time: float
    star_count: int
    renderer_id: str
