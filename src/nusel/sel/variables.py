"""Derived interaction-level variables of the 1muNp analysis.

Most variables are defined with respect to the leading particle of a given
species, i.e. the final state signal particle of that species with the
largest initial kinetic energy. When no such particle exists, the variables
which depend on it are undefined and evaluate to NaN.

The :data:`VARIABLES` registry maps each variable name to the function which
computes it and to the particle species that must be present in the final
state for it to be defined.
"""

from functools import partial

import numpy as np

from nusel.utils.enums import enum_factory
from nusel.utils.globals import ELEC_PID, MUON_PID, PROT_PID

from .config import DEFAULT_CONFIG
from .cuts import final_state_signal
from .energy import initial_kinetic_energy
from .kinematics import (
    azimuthal_angle,
    beam_relative_angle,
    momentum_magnitude,
    polar_angle,
)

__all__ = [
    "leading_particle_index",
    "leading_muon_ke",
    "leading_particle_momentum",
    "leading_proton_p",
    "true_leading_proton_p",
    "electron_polar_angle",
    "electron_azimuthal_angle",
    "electron_beam_angle",
    "proton_polar_angle",
    "proton_azimuthal_angle",
    "opening_angle",
    "phiT",
    "alphaT",
    "electron_softmax",
    "proton_softmax",
    "VARIABLES",
]


def leading_particle_index(interaction, pid, cfg=DEFAULT_CONFIG):
    """Finds the index of the leading particle of a given species.

    Only final state signal particles are considered. Ties are resolved in
    favor of the particle which appears first in the particle list.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    pid : int
        Particle species
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    int
        Index of the leading particle in the particle list, `None` if
        there is no qualifying particle
    """
    index, leading_ke = None, -np.inf
    for i, part in enumerate(interaction.particles):
        if part.pid != pid or not final_state_signal(part, cfg):
            continue

        ke = initial_kinetic_energy(part)
        if index is None or ke > leading_ke:
            index, leading_ke = i, ke

    return index


def _leading_particle(interaction, pid, cfg=DEFAULT_CONFIG):
    """Returns the leading particle of a given species, or `None`."""
    index = leading_particle_index(interaction, pid, cfg)
    if index is None:
        return None

    return interaction.particles[index]


def _apply_leading(func, interaction, pid, cfg=DEFAULT_CONFIG):
    """Evaluates a particle-level function on the leading particle of a
    given species, NaN if there is none.
    """
    part = _leading_particle(interaction, pid, cfg)
    if part is None:
        return np.nan

    return func(part)


def _angle(u, v):
    """Angle between two vectors (NaN if either of them is null)."""
    u, v = np.asarray(u, dtype=float), np.asarray(v, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        cosine = np.dot(u, v) / (np.linalg.norm(u) * np.linalg.norm(v))
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))


def leading_muon_ke(interaction, cfg=DEFAULT_CONFIG):
    """Initial kinetic energy of the leading muon.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        Kinetic energy of the leading muon in MeV
    """
    return _apply_leading(initial_kinetic_energy, interaction, MUON_PID, cfg)


def leading_particle_momentum(interaction, pid, cfg=DEFAULT_CONFIG):
    """Momentum magnitude of the leading particle of a given species.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    pid : Union[int, str]
        Particle species, as a value or as a name (e.g. 'proton')
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        Momentum of the leading particle in MeV/c
    """
    pid = enum_factory("pid", pid)
    return _apply_leading(momentum_magnitude, interaction, pid, cfg)


def leading_proton_p(interaction, cfg=DEFAULT_CONFIG):
    """Momentum magnitude of the leading proton."""
    return leading_particle_momentum(interaction, PROT_PID, cfg)


def true_leading_proton_p(interaction, cfg=DEFAULT_CONFIG):
    """Momentum magnitude of the truth particle matched to the leading
    reconstructed proton.

    Only defined for reconstructed interactions which have been attached to
    their matched truth interaction (see
    :meth:`RecoInteraction.attach_truth`).

    Parameters
    ----------
    interaction : RecoInteraction
        Reconstructed interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        Momentum of the matched truth particle in MeV/c
    """
    truth_particles = getattr(interaction, "truth_particles", None)
    index = leading_particle_index(interaction, PROT_PID, cfg)
    if index is None or truth_particles is None or index >= len(truth_particles):
        return np.nan

    truth = truth_particles[index]
    if truth is None:
        return np.nan

    return momentum_magnitude(truth)


def electron_polar_angle(interaction, cfg=DEFAULT_CONFIG):
    """Polar angle of the leading electron."""
    return _apply_leading(polar_angle, interaction, ELEC_PID, cfg)


def electron_azimuthal_angle(interaction, cfg=DEFAULT_CONFIG):
    """Azimuthal angle of the leading electron."""
    return _apply_leading(azimuthal_angle, interaction, ELEC_PID, cfg)


def electron_beam_angle(interaction, cfg=DEFAULT_CONFIG):
    """Angle of the leading electron w.r.t. the beam direction."""
    return _apply_leading(
        partial(beam_relative_angle, cfg=cfg), interaction, ELEC_PID, cfg
    )


def proton_polar_angle(interaction, cfg=DEFAULT_CONFIG):
    """Polar angle of the leading proton."""
    return _apply_leading(polar_angle, interaction, PROT_PID, cfg)


def proton_azimuthal_angle(interaction, cfg=DEFAULT_CONFIG):
    """Azimuthal angle of the leading proton."""
    return _apply_leading(azimuthal_angle, interaction, PROT_PID, cfg)


def opening_angle(interaction, cfg=DEFAULT_CONFIG):
    """Opening angle between the leading electron and the leading proton.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        Opening angle in radians
    """
    electron = _leading_particle(interaction, ELEC_PID, cfg)
    proton = _leading_particle(interaction, PROT_PID, cfg)
    if electron is None or proton is None:
        return np.nan

    return _angle(electron.start_dir, proton.start_dir)


def _transverse_momenta(interaction, cfg=DEFAULT_CONFIG):
    """Transverse momenta and species of the final state signal particles.

    Returns
    -------
    np.ndarray
        (N, 2) Transverse momentum of each final state signal particle
    np.ndarray
        (N) Species of each final state signal particle
    """
    parts = [p for p in interaction.particles if final_state_signal(p, cfg)]
    if not len(parts):
        return np.empty((0, 2)), np.empty(0, dtype=int)

    pt = np.array([p.momentum[:2] for p in parts], dtype=float)
    pids = np.array([p.pid for p in parts], dtype=int)

    return pt, pids


def phiT(interaction, cfg=DEFAULT_CONFIG):
    """Transverse opening angle between the muon and the hadronic system.

    The final state signal particles are split into a light (muon) and a
    heavy (pions and protons) system. The angle is measured between the
    transverse momentum of the light system and the reversed transverse
    momentum of the heavy system.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        phi_T in radians
    """
    pt, pids = _transverse_momenta(interaction, cfg)
    heavy = pt[pids > MUON_PID].sum(axis=0)
    light = pt[pids == MUON_PID].sum(axis=0)

    return _angle(-heavy, light)


def alphaT(interaction, cfg=DEFAULT_CONFIG):
    """Transverse boosting angle of the interaction.

    The angle is measured between the transverse momentum of the light
    system (muons and lighter) and the reversed total transverse momentum
    of the final state signal particles.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    float
        alpha_T in radians
    """
    pt, pids = _transverse_momenta(interaction, cfg)
    total = pt.sum(axis=0)
    light = pt[pids <= MUON_PID].sum(axis=0)

    return _angle(-total, light)


def _pid_score(part, pid):
    return float(part.pid_scores[pid])


def electron_softmax(interaction, cfg=DEFAULT_CONFIG):
    """Electron softmax score of the leading electron.

    Truth particles carry no score, the placeholder value is returned.
    """
    return _apply_leading(
        partial(_pid_score, pid=ELEC_PID), interaction, ELEC_PID, cfg
    )


def proton_softmax(interaction, cfg=DEFAULT_CONFIG):
    """Proton softmax score of the leading proton.

    Truth particles carry no score, the placeholder value is returned.
    """
    return _apply_leading(
        partial(_pid_score, pid=PROT_PID), interaction, PROT_PID, cfg
    )


# Registry of derived variables as name: (function, required species)
VARIABLES = {
    "leading_muon_ke": (leading_muon_ke, (MUON_PID,)),
    "leading_proton_p": (leading_proton_p, (PROT_PID,)),
    "true_leading_proton_p": (true_leading_proton_p, (PROT_PID,)),
    "electron_polar_angle": (electron_polar_angle, (ELEC_PID,)),
    "electron_azimuthal_angle": (electron_azimuthal_angle, (ELEC_PID,)),
    "electron_beam_angle": (electron_beam_angle, (ELEC_PID,)),
    "proton_polar_angle": (proton_polar_angle, (PROT_PID,)),
    "proton_azimuthal_angle": (proton_azimuthal_angle, (PROT_PID,)),
    "opening_angle": (opening_angle, (ELEC_PID, PROT_PID)),
    "phiT": (phiT, (MUON_PID,)),
    "alphaT": (alphaT, (MUON_PID,)),
    "electron_softmax": (electron_softmax, (ELEC_PID,)),
    "proton_softmax": (proton_softmax, (PROT_PID,)),
}
