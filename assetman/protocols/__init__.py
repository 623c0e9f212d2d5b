"""
Assetman Protocols.

Defines interfaces for external system integration.
"""

from assetman.protocols.status import (
    AssetStatusProvider,
    FulfillmentStatusProvider,
)

__all__ = [
    "AssetStatusProvider",
    "FulfillmentStatusProvider",
]
