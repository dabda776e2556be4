"""
Data models for agent information and registration.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet

from .base import ApiModel, require_int
from .contract import ContractData
from .faction import FactionData
from .ship import ShipData


@dataclass(frozen=True)
class AgentData(ApiModel):
    """Basic information about a player agent."""
    account_id: str
    symbol: str
    headquarters: str
    credits: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'AgentData':
        """Create AgentData from API response."""
        return cls(
            account_id=data['accountId'],
            symbol=data['symbol'],
            headquarters=data['headquarters'],
            credits=require_int(data, 'credits'),
        )


@dataclass(frozen=True)
class RegistrationData(ApiModel):
    """Everything the API hands back when a new agent is created."""
    token: str
    agent: AgentData
    contract: ContractData
    faction: FactionData
    ship: ShipData

    redacted_fields: ClassVar[FrozenSet[str]] = frozenset({'token'})

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'RegistrationData':
        """Create RegistrationData from API response."""
        return cls(
            token=data['token'],
            agent=AgentData.from_api_response(data['agent']),
            contract=ContractData.from_api_response(data['contract']),
            faction=FactionData.from_api_response(data['faction']),
            ship=ShipData.from_api_response(data['ship']),
        )

    def __repr__(self) -> str:
        # Keep the bearer token out of logs and diagnostics.
        return (
            f"RegistrationData(token='***', agent={self.agent!r}, contract={self.contract!r}, "
            f"faction={self.faction!r}, ship={self.ship!r})"
        )
