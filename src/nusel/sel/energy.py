"""Energy model of truth and reconstructed particles."""

from nusel.utils.globals import VISIBLE_MASS_PIDS

from .config import DEFAULT_CONFIG

__all__ = [
    "kinetic_energy",
    "initial_kinetic_energy",
    "rest_mass",
    "visible_energy",
]


def kinetic_energy(particle):
    """Kinetic energy of a particle, as used by the selection.

    For truth particles, this is the energy deposited in the detector. For
    reconstructed particles, this is the calorimetric estimate for photons
    and electrons and the range-based (CSDA) estimate otherwise.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Kinetic energy in MeV
    """
    return particle.ke


def initial_kinetic_energy(particle):
    """Initial kinetic energy of a particle, used to rank particles.

    For truth particles, this is the generated kinetic energy. For
    reconstructed particles, this is the same as :func:`kinetic_energy`.

    Parameters
    ----------
    particle : Union[RecoParticle, TruthParticle]
        Particle instance

    Returns
    -------
    float
        Initial kinetic energy in MeV
    """
    return particle.ke_init


def rest_mass(pid, cfg=DEFAULT_CONFIG):
    """Rest mass of a particle species.

    Parameters
    ----------
    pid : int
        Particle species
    cfg : SelectionConfig, optional
        Selection configuration (provides the mass table)

    Returns
    -------
    float
        Rest mass in MeV/c^2 (0 for species not in the mass table)
    """
    return cfg.masses.get(pid, 0.0)


def visible_energy(interaction, cfg=DEFAULT_CONFIG):
    """Total visible energy of an interaction.

    Sums the kinetic energy of all primary particles. The rest mass of
    primary muons and pions is added on top, as it is released in the
    detector; that of electrons and protons is not.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration (provides the mass table)

    Returns
    -------
    float
        Visible energy in MeV
    """
    energy = 0.0
    for part in interaction.particles:
        if not part.is_primary:
            continue

        energy += kinetic_energy(part)
        if part.pid in VISIBLE_MASS_PIDS:
            energy += rest_mass(part.pid, cfg)

    return energy
