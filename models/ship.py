"""
Data models for ships and their components.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .base import ApiModel
from .faction import Factions
from .location import LocationData


@dataclass(frozen=True)
class ComponentRequirements(ApiModel):
    """Crew, power and slots a component needs to operate."""
    crew: Optional[int] = None
    power: Optional[int] = None
    slots: Optional[int] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ComponentRequirements':
        return cls(
            crew=data.get('crew'),
            power=data.get('power'),
            slots=data.get('slots'),
        )


@dataclass(frozen=True)
class ComponentInfo(ApiModel):
    """Fields shared by every installed ship component."""
    symbol: str
    name: str
    description: str
    condition: Optional[int]
    requirements: ComponentRequirements

    @staticmethod
    def _component_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(
            symbol=data['symbol'],
            name=data['name'],
            description=data['description'],
            condition=data.get('condition'),
            requirements=ComponentRequirements.from_api_response(data.get('requirements') or {}),
        )

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ComponentInfo':
        return cls(**cls._component_fields(data))


@dataclass(frozen=True)
class FrameInfo(ComponentInfo):
    module_slots: int
    mounting_points: int
    fuel_capacity: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'FrameInfo':
        return cls(
            **cls._component_fields(data),
            module_slots=data['moduleSlots'],
            mounting_points=data['mountingPoints'],
            fuel_capacity=data['fuelCapacity'],
        )


@dataclass(frozen=True)
class ReactorInfo(ComponentInfo):
    power_output: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ReactorInfo':
        return cls(**cls._component_fields(data), power_output=data['powerOutput'])


@dataclass(frozen=True)
class EngineInfo(ComponentInfo):
    speed: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'EngineInfo':
        return cls(**cls._component_fields(data), speed=data['speed'])


@dataclass(frozen=True)
class ModuleInfo(ComponentInfo):
    capacity: Optional[int] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ModuleInfo':
        return cls(**cls._component_fields(data), capacity=data.get('capacity'))


@dataclass(frozen=True)
class MountInfo(ComponentInfo):
    strength: int
    deposits: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'MountInfo':
        deposits = data.get('deposits')
        return cls(
            **cls._component_fields(data),
            strength=data['strength'],
            deposits=tuple(deposits) if deposits is not None else None,
        )


@dataclass(frozen=True)
class ShipRegistration(ApiModel):
    """Which agent and faction a ship is registered to."""
    name: str
    faction_symbol: Factions
    role: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ShipRegistration':
        return cls(
            name=data['name'],
            faction_symbol=Factions(data['factionSymbol']),
            role=data['role'],
        )


@dataclass(frozen=True)
class Route(ApiModel):
    """Departure and destination of a ship's current or last trip."""
    departure: LocationData
    destination: LocationData
    departure_time: Optional[str] = None
    arrival: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'Route':
        # Newer API revisions call the departure point "origin".
        departure = data['departure'] if 'departure' in data else data['origin']
        return cls(
            departure=LocationData.from_api_response(departure),
            destination=LocationData.from_api_response(data['destination']),
            departure_time=data.get('departureTime'),
            arrival=data.get('arrival'),
        )


@dataclass(frozen=True)
class NavInfo(ApiModel):
    """Ship navigation information."""
    system_symbol: str
    waypoint_symbol: str
    route: Route
    status: str
    flight_mode: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'NavInfo':
        """Create NavInfo from API response."""
        return cls(
            system_symbol=data['systemSymbol'],
            waypoint_symbol=data['waypointSymbol'],
            route=Route.from_api_response(data['route']),
            status=data['status'],
            flight_mode=data['flightMode'],
        )


@dataclass(frozen=True)
class CrewInfo(ApiModel):
    current: int
    capacity: int
    required: int
    rotation: str
    morale: int
    wages: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'CrewInfo':
        return cls(
            current=data['current'],
            capacity=data['capacity'],
            required=data['required'],
            rotation=data['rotation'],
            morale=data['morale'],
            wages=data['wages'],
        )


@dataclass(frozen=True)
class ConsumedFuel(ApiModel):
    amount: int
    timestamp: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ConsumedFuel':
        return cls(amount=data['amount'], timestamp=data['timestamp'])


@dataclass(frozen=True)
class FuelInfo(ApiModel):
    """Ship fuel information."""
    current: int
    capacity: int
    consumed: ConsumedFuel

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'FuelInfo':
        """Create FuelInfo from API response."""
        return cls(
            current=data['current'],
            capacity=data['capacity'],
            consumed=ConsumedFuel.from_api_response(data['consumed']),
        )


@dataclass(frozen=True)
class CargoItem(ApiModel):
    """Item in ship cargo."""
    symbol: str
    name: str
    description: str
    units: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'CargoItem':
        return cls(
            symbol=data['symbol'],
            name=data['name'],
            description=data['description'],
            units=data['units'],
        )


@dataclass(frozen=True)
class CargoInfo(ApiModel):
    """Ship cargo information."""
    capacity: int
    units: int
    inventory: Tuple[CargoItem, ...] = ()

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'CargoInfo':
        """Create CargoInfo from API response."""
        return cls(
            capacity=data['capacity'],
            units=data['units'],
            inventory=tuple(CargoItem.from_api_response(item) for item in data.get('inventory', [])),
        )


@dataclass(frozen=True)
class ShipData(ApiModel):
    """Metadata associated with a given ship."""
    symbol: str
    registration: ShipRegistration
    nav: NavInfo
    crew: CrewInfo
    fuel: FuelInfo
    frame: FrameInfo
    reactor: ReactorInfo
    engine: EngineInfo
    modules: Tuple[ModuleInfo, ...]
    mounts: Tuple[MountInfo, ...]
    cargo: CargoInfo

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ShipData':
        """Create ShipData from API response."""
        return cls(
            symbol=data['symbol'],
            registration=ShipRegistration.from_api_response(data['registration']),
            nav=NavInfo.from_api_response(data['nav']),
            crew=CrewInfo.from_api_response(data['crew']),
            fuel=FuelInfo.from_api_response(data['fuel']),
            frame=FrameInfo.from_api_response(data['frame']),
            reactor=ReactorInfo.from_api_response(data['reactor']),
            engine=EngineInfo.from_api_response(data['engine']),
            modules=tuple(ModuleInfo.from_api_response(m) for m in data.get('modules', [])),
            mounts=tuple(MountInfo.from_api_response(m) for m in data.get('mounts', [])),
            cargo=CargoInfo.from_api_response(data['cargo']),
        )
