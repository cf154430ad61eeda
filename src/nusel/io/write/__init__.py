"""Module with all the output writers."""

from .csv import *
