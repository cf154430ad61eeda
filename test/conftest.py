"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import numpy as np
import pytest

from nusel.data import RecoInteraction, RecoParticle, TruthInteraction, TruthParticle
from nusel.utils.globals import CC_CURR, MUON_PID, PID_MASSES, PROT_PID, QE_MODE

# Attributes of an interaction which passes the full 1muNp selection
SIGNAL_ATTRS = {
    "is_fiducial": True,
    "is_contained": True,
    "is_flash_matched": True,
    "flash_time": 1.0,
    "vertex": np.zeros(3),
    "nu_id": 0,
    "current_type": CC_CURR,
    "pdg_code": 14,
    "interaction_mode": QE_MODE,
}


def build_particle(pid, ke, truth=False, is_primary=True, **kwargs):
    """Builds a particle with a given species and selection kinetic energy.

    Parameters
    ----------
    pid : int
        Particle species
    ke : float
        Kinetic energy used by the selection, in MeV
    truth : bool, default False
        If `True`, build a :class:`TruthParticle`
    is_primary : bool, default True
        Whether the particle is primary
    **kwargs : dict, optional
        Additional particle attributes

    Returns
    -------
    Union[RecoParticle, TruthParticle]
        Particle instance
    """
    attrs = {"start_dir": np.array([0.0, 0.0, 1.0])}
    attrs.update(kwargs)
    if truth:
        mass = PID_MASSES.get(pid, 0.0)
        attrs.setdefault("energy_init", ke + mass)
        return TruthParticle(
            pid=pid, is_primary=is_primary, energy_deposit=ke, **attrs
        )

    return RecoParticle(
        pid=pid, is_primary=is_primary, calo_ke=ke, csda_ke=ke, **attrs
    )


def build_interaction(particles, truth=False, **kwargs):
    """Builds an interaction which, by default, passes all the cuts but the
    topological one.

    Parameters
    ----------
    particles : List[Union[RecoParticle, TruthParticle]]
        Particles which make up the interaction
    truth : bool, default False
        If `True`, build a :class:`TruthInteraction`
    **kwargs : dict, optional
        Interaction attributes which override the defaults

    Returns
    -------
    Union[RecoInteraction, TruthInteraction]
        Interaction instance
    """
    for i, part in enumerate(particles):
        if part.id < 0:
            part.id = i

    attrs = dict(SIGNAL_ATTRS, **kwargs)
    cls = TruthInteraction if truth else RecoInteraction

    return cls.from_particles(particles, **attrs)


@pytest.fixture(name="make_particle")
def fixture_make_particle():
    """Provides the particle builder to the tests."""
    return build_particle


@pytest.fixture(name="make_interaction")
def fixture_make_interaction():
    """Provides the interaction builder to the tests."""
    return build_interaction


@pytest.fixture(name="truth", params=[False, True], ids=["reco", "truth"])
def fixture_truth(request):
    """Runs a test once on reconstructed and once on truth objects."""
    return request.param


@pytest.fixture(name="signal_interaction")
def fixture_signal_interaction(truth):
    """Generates a 1mu2p interaction which passes the full selection.

    The interaction is made of a 200 MeV muon and two protons of 60 and
    90 MeV, all primary and travelling along the beam axis.
    """
    particles = [
        build_particle(MUON_PID, 200.0, truth, momentum=[0.0, 0.0, 300.0]),
        build_particle(PROT_PID, 60.0, truth, momentum=[0.0, 0.0, 340.0]),
        build_particle(PROT_PID, 90.0, truth, momentum=[0.0, 0.0, 420.0]),
    ]

    return build_interaction(particles, truth)
