"""
Data models for SpaceTraders API responses.
"""

from .agent_data import AgentData, RegistrationData
from .contract import ContractData, ContractTerms, DeliveryInfo, PaymentInfo
from .envelope import ApiResponse, EnvelopeError, ErrorInfo
from .faction import FactionData, Factions, TraitData
from .location import LocationData
from .ship import (
    CargoInfo,
    CargoItem,
    ComponentInfo,
    ComponentRequirements,
    ConsumedFuel,
    CrewInfo,
    EngineInfo,
    FrameInfo,
    FuelInfo,
    ModuleInfo,
    MountInfo,
    NavInfo,
    ReactorInfo,
    Route,
    ShipData,
    ShipRegistration,
)

__all__ = [
    'AgentData', 'RegistrationData',
    'ContractData', 'ContractTerms', 'DeliveryInfo', 'PaymentInfo',
    'ApiResponse', 'EnvelopeError', 'ErrorInfo',
    'FactionData', 'Factions', 'TraitData',
    'LocationData',
    'CargoInfo', 'CargoItem', 'ComponentInfo', 'ComponentRequirements', 'ConsumedFuel',
    'CrewInfo', 'EngineInfo', 'FrameInfo', 'FuelInfo', 'ModuleInfo', 'MountInfo',
    'NavInfo', 'ReactorInfo', 'Route', 'ShipData', 'ShipRegistration',
]
