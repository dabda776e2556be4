"""
Data models for contracts.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

from .base import ApiModel


@dataclass(frozen=True)
class DeliveryInfo(ApiModel):
    """Contract delivery requirement."""
    trade_symbol: str
    destination_symbol: str
    units_required: int
    units_fulfilled: int = 0

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'DeliveryInfo':
        """Create DeliveryInfo from API response."""
        return cls(
            trade_symbol=data['tradeSymbol'],
            destination_symbol=data['destinationSymbol'],
            units_required=data['unitsRequired'],
            units_fulfilled=data.get('unitsFulfilled', 0),
        )


@dataclass(frozen=True)
class PaymentInfo(ApiModel):
    """Payment split between accepting and fulfilling a contract."""
    on_accepted: int
    on_fulfilled: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'PaymentInfo':
        return cls(
            on_accepted=data['onAccepted'],
            on_fulfilled=data['onFulfilled'],
        )


@dataclass(frozen=True)
class ContractTerms(ApiModel):
    """Contract terms and payments."""
    deadline: str
    payment: PaymentInfo
    deliveries: Tuple[DeliveryInfo, ...] = ()

    api_names: ClassVar[Dict[str, str]] = {'deliveries': 'deliver'}

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ContractTerms':
        """Create ContractTerms from API response."""
        return cls(
            deadline=data['deadline'],
            payment=PaymentInfo.from_api_response(data['payment']),
            deliveries=tuple(
                DeliveryInfo.from_api_response(delivery)
                for delivery in data.get('deliver', [])
            ),
        )


@dataclass(frozen=True)
class ContractData(ApiModel):
    """Information about a contract, the game's missions."""
    id: str
    faction_symbol: str
    contract_type: str
    terms: ContractTerms
    accepted: bool = False
    fulfilled: bool = False
    expiration: str = ""

    api_names: ClassVar[Dict[str, str]] = {'contract_type': 'type'}

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ContractData':
        """Create ContractData from API response."""
        return cls(
            id=data['id'],
            faction_symbol=data['factionSymbol'],
            contract_type=data['type'],
            terms=ContractTerms.from_api_response(data['terms']),
            accepted=data.get('accepted', False),
            fulfilled=data.get('fulfilled', False),
            expiration=data.get('expiration', ''),
        )
