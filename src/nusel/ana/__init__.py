"""Analysis scripts which run the selection over entries and log the output.

**Core Analysis Management:**
- `AnaManager`: Loads the analysis scripts from a configuration block,
  feeds them entries and releases their writers once done
- `AnaBase`: Parent class of all analysis scripts

**Analysis Scripts:**
- `SelectionAna` (`selection_1muNp`): Stores the selection output of matched
  truth/reco interaction pairs (SIGNAL and SELECTED rows)

**Example Usage:**
```python
from nusel.ana import AnaManager

cfg = {'selection_1muNp': {'beam': 'numi', 'variables': ['phiT']}}
with AnaManager(cfg, log_dir='logs') as manager:
    for data in entries:
        manager(data)
```
"""

from .base import AnaBase
from .manager import AnaManager
