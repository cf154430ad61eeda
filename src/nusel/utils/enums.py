"""Module which contains enumerated variables shared across the project."""

from enum import IntEnum

import numpy as np

from .globals import *

__all__ = ["enum_factory", "PIDEnum"]


def enum_factory(enum, value):
    """Parses an enumerated object from string name(s) to value(s).

    Integers are passed through as is, which allows configuration blocks to
    mix names and raw values.

    Parameters
    ----------
    enum : str
        Name of the enumerated type
    value : Union[int, np.integer, str, List[Union[int, str]]]
        Name or names of the enumerated objects (from config)

    Returns
    -------
    Union[int, List[int]]
        Value or values of the enumerated objects
    """
    # Get the enumerated type
    ENUM_DICT = {"pid": PIDEnum}
    assert enum in ENUM_DICT, (
        f"Enumerated type not recognized: {enum}. Must be one of "
        f"{list(ENUM_DICT.keys())}."
    )
    enum = ENUM_DICT[enum]

    # Translate enumerated strings into values
    if isinstance(value, (str, int, np.integer)):
        return _parse(enum, value)

    return [_parse(enum, v) for v in value]


def _parse(enum, value):
    """Parses a single enumerated object.

    Parameters
    ----------
    enum : IntEnum
        Enumerated type
    value : Union[int, str]
        Name or value of the enumerated object

    Returns
    -------
    int
        Value of the enumerated object
    """
    if isinstance(value, str):
        if not hasattr(enum, value.upper()):
            raise ValueError(
                f"Enumerated object not recognized: {value}. Must be one "
                f"of {[e.name for e in enum]}."
            )

        return getattr(enum, value.upper()).value

    return enum(int(value)).value


class PIDEnum(IntEnum):
    """Enumerates all possible particle species values."""

    PHOTON = PHOT_PID
    ELECTRON = ELEC_PID
    MUON = MUON_PID
    PION = PION_PID
    PROTON = PROT_PID
    KAON = KAON_PID

