"""Selection cuts of the 1muNp analysis.

Every cut is a pure and total boolean function of a single particle or
interaction, applicable to both truth and reconstructed objects.
"""

import numpy as np

from nusel.utils.globals import (
    ELEC_PID,
    FLASH_WINDOWS,
    MUON_PID,
    NUM_SIGNAL_PIDS,
    PHOT_PID,
    PID_TAGS,
    PION_PID,
    PROT_PID,
)

from .config import DEFAULT_CONFIG
from .energy import kinetic_energy

__all__ = [
    "matched",
    "valid_flashmatch",
    "final_state_signal",
    "count_primaries",
    "topology",
    "topological_1muNp_cut",
    "fiducial_cut",
    "containment_cut",
    "flash_cut",
    "flash_cut_bnb",
    "flash_cut_numi",
    "all_1muNp_cut",
    "neutrino",
    "cosmic",
    "matched_neutrino",
    "matched_cosmic",
    "signal_1muNp",
    "other_nu_1muNp",
]


def matched(obj):
    """Check whether an object is matched to the other representation.

    Parameters
    ----------
    obj : object
        Truth or reconstructed particle or interaction

    Returns
    -------
    bool
        `True` if the object has at least one match
    """
    return len(obj.match_ids) > 0


def valid_flashmatch(interaction):
    """Check whether an interaction is matched to a flash with a valid time.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance

    Returns
    -------
    bool
        `True` if the interaction is flash matched and the time is valid
    """
    return bool(interaction.is_flash_matched) and not np.isnan(interaction.flash_time)


def final_state_signal(particle, cfg=DEFAULT_CONFIG):
    """Check if the particle meets final state signal requirements.

    Particles must be primary and have a kinetic energy above threshold.
    Muons must have a kinetic energy corresponding to at least 50 cm of
    range, protons an energy above 50 MeV and photons, electrons and pions
    an energy above 25 MeV (default thresholds). No other species passes.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance
    cfg : SelectionConfig, optional
        Selection configuration (provides the thresholds)

    Returns
    -------
    bool
        `True` if the particle is a final state signal particle
    """
    if not particle.is_primary:
        return False

    pid, energy = particle.pid, kinetic_energy(particle)
    if pid == MUON_PID:
        return energy > cfg.muon_ke_threshold
    if pid in (PHOT_PID, ELEC_PID, PION_PID):
        return energy > cfg.other_ke_threshold
    if pid == PROT_PID:
        return energy > cfg.proton_ke_threshold

    return False


def count_primaries(interaction, cfg=DEFAULT_CONFIG):
    """Count the final state signal particles of each species.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    np.ndarray
        (5) Number of final state photons, electrons, muons, pions and protons
    """
    counts = np.zeros(NUM_SIGNAL_PIDS, dtype=int)
    for part in interaction.particles:
        if final_state_signal(part, cfg):
            counts[part.pid] += 1

    return counts


def topology(interaction, cfg=DEFAULT_CONFIG):
    """Canonical string representation of the final state of an interaction.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    str
        Topology of the interaction (e.g. 0ph0e1mu0pi1p)
    """
    counts = count_primaries(interaction, cfg)
    return "".join(f"{counts[pid]}{tag}" for pid, tag in PID_TAGS.items())


def topological_1muNp_cut(interaction, cfg=DEFAULT_CONFIG):
    """Select interactions with exactly one muon, at least one proton and
    nothing else in the final state.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    bool
        `True` if the interaction has a 1muNp topology
    """
    c = count_primaries(interaction, cfg)
    return bool(
        c[PHOT_PID] == 0
        and c[ELEC_PID] == 0
        and c[MUON_PID] == 1
        and c[PION_PID] == 0
        and c[PROT_PID] >= 1
    )


def fiducial_cut(interaction, cfg=DEFAULT_CONFIG):
    """Apply a fiducial volume cut.

    The interaction must be flagged as fiducial and its vertex must not
    lie within the region excluded from the fiducial volume.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration (provides the excluded region)

    Returns
    -------
    bool
        `True` if the vertex is in the fiducial volume
    """
    if not interaction.is_fiducial:
        return False

    excluded = all(
        lower < v < upper
        for v, (lower, upper) in zip(interaction.vertex, cfg.fiducial_exclusion)
    )

    return not excluded


def containment_cut(interaction):
    """Apply a containment cut.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance

    Returns
    -------
    bool
        `True` if the interaction is contained
    """
    return bool(interaction.is_contained)


def flash_cut(interaction, window):
    """Apply a flash time cut.

    The interaction must be matched to a flash within [0, window].

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    window : float
        Upper bound of the in-time window in microseconds

    Returns
    -------
    bool
        `True` if the interaction has been matched to an in-time flash
    """
    if not valid_flashmatch(interaction):
        return False

    return bool(0.0 <= interaction.flash_time <= window)


def flash_cut_bnb(interaction):
    """Apply the flash time cut with the BNB in-time window."""
    return flash_cut(interaction, FLASH_WINDOWS["bnb"])


def flash_cut_numi(interaction):
    """Apply the flash time cut with the NuMI in-time window."""
    return flash_cut(interaction, FLASH_WINDOWS["numi"])


def all_1muNp_cut(interaction, cfg=DEFAULT_CONFIG):
    """Apply the full 1muNp selection.

    Logical "and" of the topological, fiducial, containment and flash time
    cuts. The flash window is that of the configured beam.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    bool
        `True` if the interaction passes all the cuts
    """
    # Cheapest cuts first
    return (
        containment_cut(interaction)
        and fiducial_cut(interaction, cfg)
        and flash_cut(interaction, cfg.flash_window)
        and topological_1muNp_cut(interaction, cfg)
    )


def neutrino(interaction):
    """Check whether an interaction is a neutrino interaction."""
    return interaction.nu_id > -1


def cosmic(interaction):
    """Check whether an interaction is a cosmic."""
    return interaction.nu_id == -1


def matched_neutrino(interaction):
    """Check whether an interaction is a matched neutrino interaction."""
    return matched(interaction) and neutrino(interaction)


def matched_cosmic(interaction):
    """Check whether an interaction is a matched cosmic."""
    return matched(interaction) and cosmic(interaction)


def signal_1muNp(interaction, cfg=DEFAULT_CONFIG):
    """Define the 1muNp signal: a neutrino interaction with a 1muNp topology.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    bool
        `True` if the interaction is a 1muNp neutrino interaction
    """
    return topological_1muNp_cut(interaction, cfg) and neutrino(interaction)


def other_nu_1muNp(interaction, cfg=DEFAULT_CONFIG):
    """Define the neutrino background: a neutrino interaction with any
    topology other than 1muNp.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    bool
        `True` if the interaction is a non-1muNp neutrino interaction
    """
    return not topological_1muNp_cut(interaction, cfg) and neutrino(interaction)
