"""Core of the 1muNp event selection.

**Modules:**
- `config`: Constants which parametrize the selection (:class:`SelectionConfig`)
- `kinematics`: Per-particle kinematic quantities
- `energy`: Energy model of truth and reconstructed particles
- `cuts`: Particle-level and interaction-level selection cuts
- `category`: Mutually exclusive interaction classification schemes
- `variables`: Derived interaction-level variables
- `record`: Flat output records

All the functions are pure and accept truth or reconstructed objects
indifferently. None of them mutates its input or raises on degenerate
kinematics; undefined quantities evaluate to NaN.

**Example Usage:**
```python
from nusel.sel import all_1muNp_cut, category, topology

if all_1muNp_cut(interaction):
    print(topology(interaction), category(interaction))
```
"""

from .config import *
from .kinematics import *
from .energy import *
from .cuts import *
from .category import *
from .variables import *
from .record import *
