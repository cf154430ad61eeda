"""Utility functions and tools used across the nusel package.

**Core Utilities:**
- `globals`: Global constants (particle species, masses, selection defaults)
- `enums`: Enumerated views of the global constants
- `factory`: Generic factory pattern implementations
- `logger`: Logging utilities and configuration

**Decorators:**
- `docstring`: Docstring inheritance utilities for class hierarchies
"""
