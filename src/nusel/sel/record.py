"""Flat output records of the 1muNp selection.

Each function in this module produces a dictionary of named scalars which
corresponds to one row of the output log (see :class:`nusel.io.CSVWriter`).
"""

import numpy as np

from nusel.utils.globals import INVALID_VALUE

from .category import category, category_interaction_mode, category_topology
from .config import DEFAULT_CONFIG
from .cuts import all_1muNp_cut, count_primaries, topology
from .energy import visible_energy
from .variables import VARIABLES

__all__ = ["interaction_record", "pair_record", "sanitize"]


def check_variables(variables):
    """Checks that all the requested variable names are known.

    Parameters
    ----------
    variables : List[str]
        List of derived variable names
    """
    unknown = set(variables).difference(VARIABLES)
    if unknown:
        raise ValueError(
            f"Derived variable(s) not recognized: {sorted(unknown)}. Must be "
            f"among {list(VARIABLES.keys())}."
        )


def variable_values(interaction, variables=(), cfg=DEFAULT_CONFIG):
    """Evaluates a set of derived variables on an interaction.

    A variable is only evaluated if the final state of the interaction
    contains all the particle species it requires. It is NaN otherwise.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    variables : List[str], optional
        List of derived variable names
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    dict
        Value of each requested variable
    """
    check_variables(variables)
    counts = count_primaries(interaction, cfg)
    values = {}
    for name in variables:
        func, required_pids = VARIABLES[name]
        if all(counts[pid] > 0 for pid in required_pids):
            values[name] = func(interaction, cfg)
        else:
            values[name] = np.nan

    return values


def interaction_record(interaction, cfg=DEFAULT_CONFIG, variables=()):
    """Builds the output record of a single interaction.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration
    variables : List[str], optional
        List of derived variables to append to the record

    Returns
    -------
    dict
        Flat record of the interaction
    """
    row = {
        "id": interaction.id,
        "nu_id": interaction.nu_id,
        "topology": topology(interaction, cfg),
        "category": category(interaction, cfg),
        "category_topology": category_topology(interaction, cfg),
        "category_interaction_mode": category_interaction_mode(interaction),
        "visible_energy": visible_energy(interaction, cfg),
        "all_1muNp_cut": all_1muNp_cut(interaction, cfg),
    }
    row.update(variable_values(interaction, variables, cfg))

    return row


def pair_record(truth, reco, cfg=DEFAULT_CONFIG, variables=()):
    """Builds the output record of a matched truth/reco interaction pair.

    The categories describe the truth interaction, the selection outcome
    describes the reconstructed interaction. All other quantities are
    reported for both, with a `truth_` or `reco_` prefix.

    Parameters
    ----------
    truth : TruthInteraction
        Truth interaction
    reco : RecoInteraction
        Reconstructed interaction
    cfg : SelectionConfig, optional
        Selection configuration
    variables : List[str], optional
        List of derived variables to append to the record

    Returns
    -------
    dict
        Flat record of the interaction pair
    """
    row = {
        "nu_id": truth.nu_id,
        "truth_id": truth.id,
        "reco_id": reco.id,
        "category": category(truth, cfg),
        "category_topology": category_topology(truth, cfg),
        "category_interaction_mode": category_interaction_mode(truth),
    }
    for prefix, inter in (("truth", truth), ("reco", reco)):
        row[f"{prefix}_topology"] = topology(inter, cfg)
        row[f"{prefix}_visible_energy"] = visible_energy(inter, cfg)

    row["all_1muNp_cut"] = all_1muNp_cut(reco, cfg)

    for prefix, inter in (("truth", truth), ("reco", reco)):
        for key, value in variable_values(inter, variables, cfg).items():
            row[f"{prefix}_{key}"] = value

    return row


def sanitize(row, sentinel=INVALID_VALUE):
    """Substitutes a sentinel to all the non-finite values of a record.

    Parameters
    ----------
    row : dict
        Flat record
    sentinel : Union[int, float], default -9999
        Value which replaces NaN and infinite values

    Returns
    -------
    dict
        Sanitized copy of the record
    """
    clean = {}
    for key, value in row.items():
        if (
            isinstance(value, (float, np.floating))
            and not np.isfinite(value)
        ):
            value = sentinel

        clean[key] = value

    return clean
