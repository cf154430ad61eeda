"""Truth and reconstructed output objects."""

from .interaction import RecoInteraction, TruthInteraction
from .particle import RecoParticle, TruthParticle

__all__ = ["RecoParticle", "TruthParticle", "RecoInteraction", "TruthInteraction"]
