"""
Data models for factions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from .base import ApiModel


class Factions(Enum):
    """Names of the factions an agent can join."""
    COSMIC = "COSMIC"
    VOID = "VOID"
    GALACTIC = "GALACTIC"
    QUANTUM = "QUANTUM"
    DOMINION = "DOMINION"
    ASTRO = "ASTRO"
    CORSAIRS = "CORSAIRS"

    @classmethod
    def parse(cls, value: Union['Factions', str]) -> 'Factions':
        """
        Resolve a faction from an enum member or a case-insensitive name.

        Raises:
            ValueError: If the name is not a known faction
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Faction must be a string, got {type(value).__name__}")
        try:
            return cls(value.strip().upper())
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown faction {value!r}; expected one of: {known}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TraitData(ApiModel):
    """General characteristics, used for factions and locations."""
    symbol: str
    name: str
    description: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'TraitData':
        return cls(
            symbol=data['symbol'],
            name=data['name'],
            description=data['description'],
        )


@dataclass(frozen=True)
class FactionData(ApiModel):
    """Metadata pertaining to each faction."""
    symbol: Factions
    name: str
    description: str
    headquarters: str
    traits: Tuple[TraitData, ...] = ()

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'FactionData':
        """Create FactionData from API response."""
        return cls(
            symbol=Factions(data['symbol']),
            name=data['name'],
            description=data['description'],
            headquarters=data['headquarters'],
            traits=tuple(TraitData.from_api_response(t) for t in data.get('traits', [])),
        )
