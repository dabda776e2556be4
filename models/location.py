"""
Data models for waypoint locations.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from .base import ApiModel, require_int
from .faction import TraitData


def _optional_map(value: Any) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TypeError(f"Expected an object, got {type(value).__name__}")
    return dict(value)


@dataclass(frozen=True)
class LocationData(ApiModel):
    """
    A waypoint as reported by the API.

    Orbitals, traits, chart and faction are absent in some contexts, e.g.
    route endpoints or waypoints that have not been charted or claimed yet.
    Chart and faction shapes vary upstream, so they are kept as plain maps.
    """
    system_symbol: str
    symbol: str
    location_type: str
    x: int
    y: int
    orbitals: Optional[Tuple[Dict[str, Any], ...]] = None
    traits: Optional[Tuple[TraitData, ...]] = None
    chart: Optional[Dict[str, Any]] = None
    faction: Optional[Dict[str, Any]] = None

    api_names: ClassVar[Dict[str, str]] = {'location_type': 'type'}

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'LocationData':
        """Create LocationData from API response."""
        orbitals = data.get('orbitals')
        traits = data.get('traits')
        return cls(
            system_symbol=data['systemSymbol'],
            symbol=data['symbol'],
            location_type=data['type'],
            x=require_int(data, 'x'),
            y=require_int(data, 'y'),
            orbitals=tuple(dict(o) for o in orbitals) if orbitals is not None else None,
            traits=tuple(TraitData.from_api_response(t) for t in traits) if traits is not None else None,
            chart=_optional_map(data.get('chart')),
            faction=_optional_map(data.get('faction')),
        )
