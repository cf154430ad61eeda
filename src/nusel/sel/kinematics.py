"""Per-particle kinematic quantities.

All the functions in this module are pure and accept either truth or
reconstructed particles. Degenerate inputs yield non-finite values (NaN)
rather than exceptions; it is up to the caller to substitute a sentinel
before storing them.
"""

import numpy as np

from .config import DEFAULT_CONFIG

__all__ = [
    "momentum_magnitude",
    "transverse_momentum",
    "polar_angle",
    "azimuthal_angle",
    "beam_relative_angle",
]


def momentum_magnitude(particle):
    """Norm of the momentum of a particle.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Momentum magnitude in MeV/c
    """
    return float(np.linalg.norm(particle.momentum))


def transverse_momentum(particle):
    """Norm of the momentum of a particle in the plane transverse to the
    beam (z) axis.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Transverse momentum magnitude in MeV/c
    """
    return float(np.linalg.norm(particle.momentum[:2]))


def polar_angle(particle):
    """Polar angle of the particle direction w.r.t. the z axis.

    The start direction is assumed to be a unit vector. If it is not and its
    z component falls outside of [-1, 1], the result is NaN.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Polar angle in radians
    """
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.float64(particle.start_dir[2])))


def azimuthal_angle(particle):
    """Azimuthal angle of the particle direction around the z axis.

    Undefined (NaN) for a particle travelling along the z axis.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Azimuthal angle in radians, within [0, pi]
    """
    x, y = np.asarray(particle.start_dir[:2], dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.arccos(x / np.sqrt(x**2 + y**2)))


def beam_relative_angle(particle, cfg=DEFAULT_CONFIG):
    """Angle between the particle direction and the direction of the beam at
    the particle start point.

    The beam direction is taken as the unit vector from the configured beam
    source towards the particle start point. The result is pi minus the
    angle measured with respect to the direction pointing from the start
    point back to the beam source.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance
    cfg : SelectionConfig, optional
        Selection configuration (provides the beam source position)

    Returns
    -------
    float
        Angle w.r.t. the beam in radians
    """
    diff = particle.start_point - np.asarray(cfg.beam_source, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        diff /= np.linalg.norm(diff)
        cosine = np.clip(np.dot(diff, particle.start_dir), -1.0, 1.0)

        return float(np.arccos(cosine))
