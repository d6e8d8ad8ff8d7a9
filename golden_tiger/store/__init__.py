"""Record store package."""

from golden_tiger.store.collections import (
    ChallengesCollection,
    CollectionDefinition,
    DerivationContext,
    GoalsCollection,
    PortfolioCollection,
    SimulationsCollection,
    default_collections,
)
from golden_tiger.store.record_store import (
    RecordStore,
    UnknownCollectionError,
    new_record_id,
)

__all__ = [
    "ChallengesCollection",
    "CollectionDefinition",
    "DerivationContext",
    "GoalsCollection",
    "PortfolioCollection",
    "RecordStore",
    "SimulationsCollection",
    "UnknownCollectionError",
    "default_collections",
    "new_record_id",
]
