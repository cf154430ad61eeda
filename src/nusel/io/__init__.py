"""I/O tools used to store the output of the selection.

**Writers:**
- `CSVWriter`: Appends flat records (dictionaries of scalars) to a CSV file
"""

from .write import *
