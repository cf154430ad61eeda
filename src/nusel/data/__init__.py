"""Data structures which represent truth and reconstructed objects.

**Data Hierarchy:**
```
DataBase -> OutBase -> RecoBase  -> RecoParticle, RecoInteraction
                    -> TruthBase -> TruthParticle, TruthInteraction
```

The selection engine is written once against the shared attributes of these
classes. The representation-specific pieces (which kinetic energy estimator
to trust, how the initial kinetic energy is obtained) are resolved by the
classes themselves through properties.
"""

from .out import *
