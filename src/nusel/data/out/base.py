"""Module with classes shared by all reconstructed and true objects."""

from dataclasses import dataclass

import numpy as np

from nusel.data.base import DataBase
from nusel.utils.docstring import inherit_docstring

__all__ = ["OutBase", "RecoBase", "TruthBase"]


@dataclass(eq=False)
class OutBase(DataBase):
    """Base data structure shared among all output classes.

    Attributes
    ----------
    id : int
        Unique index of the object within the object list
    is_contained : bool
        Whether this object is fully contained within the detector
    is_matched: bool
        True if a match in the other representation was found
    match_ids : np.ndarray
        List of object IDs in the other representation this object is
        matched to
    is_truth: bool
        Whether this object contains truth information or not
    units : str
        Units in which coordinates are expressed
    """

    id: int = -1
    is_contained: bool = False
    is_matched: bool = False
    match_ids: np.ndarray = None
    is_truth: bool = None
    units: str = "cm"

    # Variable-length attribtues
    _var_length_attrs = (("match_ids", np.int64),)

    # Boolean attributes
    _bool_attrs = ("is_contained", "is_matched", "is_truth")


@dataclass(eq=False)
@inherit_docstring(OutBase)
class RecoBase(OutBase):
    """Base data structure shared among all reconstructed output classes."""

    is_truth: bool = False


@dataclass(eq=False)
@inherit_docstring(OutBase)
class TruthBase(OutBase):
    """Base data structure shared among all truth output classes."""

    is_truth: bool = True
