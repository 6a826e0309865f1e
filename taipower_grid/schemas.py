from typing import List, Optional

from pydantic import BaseModel

from .conversion import ConversionResult
from .model import GeographicCoordinate, GridCoordinate


class GridCoordinateSchema(BaseModel):
    raw_text: str
    formatted: str
    sector: str
    zone: str
    block: str
    precision: str

    @classmethod
    def from_coordinate(cls, coordinate: GridCoordinate) -> "GridCoordinateSchema":
        return cls(
            raw_text=coordinate.raw_text,
            formatted=coordinate.formatted,
            sector=coordinate.sector,
            zone=coordinate.zone,
            block=coordinate.block,
            precision=coordinate.precision,
        )


class GeographicCoordinateSchema(BaseModel):
    latitude: float
    longitude: float
    accuracy_meters: float
    is_in_taiwan: bool

    @classmethod
    def from_coordinate(cls, coordinate: GeographicCoordinate) -> "GeographicCoordinateSchema":
        return cls(
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            accuracy_meters=coordinate.accuracy_meters,
            is_in_taiwan=coordinate.is_in_taiwan,
        )


class ConversionResponse(BaseModel):
    grid: GridCoordinateSchema
    x: float
    y: float
    region: str
    geographic: GeographicCoordinateSchema
    is_plausible: bool

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionResponse":
        return cls(
            grid=GridCoordinateSchema.from_coordinate(result.grid),
            x=result.xy[0],
            y=result.xy[1],
            region=result.region.value,
            geographic=GeographicCoordinateSchema.from_coordinate(result.geographic),
            is_plausible=result.is_plausible,
        )


class ScanResponse(BaseModel):
    results: List[ConversionResponse]
    strategy: Optional[str] = None
