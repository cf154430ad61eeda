"""Top-level module of the nusel source code."""

from .version import __version__

# Import commonly used data structures
from .data import RecoInteraction, RecoParticle, TruthInteraction, TruthParticle

# Import the selection configuration
from .sel.config import DEFAULT_CONFIG, SelectionConfig
