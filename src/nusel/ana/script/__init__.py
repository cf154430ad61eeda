"""Module with all analysis scripts."""

from .selection import *
