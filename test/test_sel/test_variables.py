"""Test that the derived interaction variables work as intended."""

import numpy as np
import pytest

from nusel.data import TruthParticle
from nusel.sel.config import DEFAULT_CONFIG
from nusel.sel.variables import *
from nusel.utils.globals import ELEC_PID, MUON_PID, PION_PID, PROT_MASS, PROT_PID


def rotate_z(vector, angle):
    """Rotates a vector around the z axis."""
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    return rot @ np.asarray(vector, dtype=float)


def test_leading_particle_index(signal_interaction):
    """Tests that the most energetic qualifying particle is picked."""
    assert leading_particle_index(signal_interaction, PROT_PID) == 2
    assert leading_particle_index(signal_interaction, MUON_PID) == 0
    assert leading_particle_index(signal_interaction, ELEC_PID) is None


def test_leading_particle_index_tie(make_particle, make_interaction, truth):
    """Tests that ties are resolved in favor of the first particle."""
    particles = [
        make_particle(PROT_PID, 40.0, truth),
        make_particle(PROT_PID, 80.0, truth),
        make_particle(PROT_PID, 80.0, truth),
    ]
    inter = make_interaction(particles, truth)
    assert leading_particle_index(inter, PROT_PID) == 1


def test_leading_particle_index_qualifying(make_particle, make_interaction, truth):
    """Tests that particles which do not count are never leading."""
    particles = [
        make_particle(PROT_PID, 1000.0, truth, is_primary=False),
        make_particle(PROT_PID, 60.0, truth),
    ]
    inter = make_interaction(particles, truth)
    assert leading_particle_index(inter, PROT_PID) == 1


def test_leading_particle_index_truth_init(make_interaction):
    """Tests that truth particles are ranked by initial kinetic energy."""
    particles = [
        TruthParticle(
            pid=PROT_PID, is_primary=True, energy_deposit=200.0,
            energy_init=PROT_MASS + 210.0,
        ),
        TruthParticle(
            pid=PROT_PID, is_primary=True, energy_deposit=100.0,
            energy_init=PROT_MASS + 300.0,
        ),
    ]
    inter = make_interaction(particles, truth=True)
    assert leading_particle_index(inter, PROT_PID) == 1


def test_leading_kinematics(signal_interaction, truth):
    """Tests the leading muon and proton variables."""
    assert leading_muon_ke(signal_interaction) == pytest.approx(200.0)
    assert leading_proton_p(signal_interaction) == pytest.approx(420.0)
    assert leading_particle_momentum(signal_interaction, "proton") == pytest.approx(420.0)
    assert leading_particle_momentum(signal_interaction, MUON_PID) == pytest.approx(300.0)
    pids = np.array([MUON_PID, PROT_PID])
    assert leading_particle_momentum(signal_interaction, pids[1]) == pytest.approx(420.0)
    assert proton_polar_angle(signal_interaction) == pytest.approx(0.0, abs=1e-6)
    assert np.isnan(proton_azimuthal_angle(signal_interaction))


def test_missing_leading_particle(signal_interaction):
    """Tests that variables of an absent leading particle are NaN."""
    for func in (
        electron_polar_angle,
        electron_azimuthal_angle,
        electron_beam_angle,
        electron_softmax,
        opening_angle,
    ):
        assert np.isnan(func(signal_interaction))


def test_electron_variables(make_particle, make_interaction, truth):
    """Tests the leading electron variables and the opening angle."""
    particles = [
        make_particle(
            ELEC_PID, 100.0, truth, start_point=[0.0, 0.0, 0.0], start_dir=[1.0, 0.0, 0.0]
        ),
        make_particle(PROT_PID, 100.0, truth, start_dir=[0.0, 1.0, 0.0]),
    ]
    inter = make_interaction(particles, truth)
    assert electron_polar_angle(inter) == pytest.approx(np.pi / 2)
    assert electron_azimuthal_angle(inter) == pytest.approx(0.0, abs=1e-6)
    assert proton_azimuthal_angle(inter) == pytest.approx(np.pi / 2)
    assert opening_angle(inter) == pytest.approx(np.pi / 2)


@pytest.mark.parametrize(
    "direction, expected",
    [([0.0, 0.0, 1.0], 0.0), ([1.0, 0.0, 0.0], np.pi / 2), ([0.0, 0.0, -1.0], np.pi)],
)
def test_electron_beam_angle(make_particle, make_interaction, truth, direction, expected):
    """Tests the angle of the leading electron w.r.t. the beam direction."""
    cfg = DEFAULT_CONFIG.update(beam_source=(0.0, 0.0, -100.0))
    electron = make_particle(
        ELEC_PID, 100.0, truth, start_point=[0.0, 0.0, 0.0], start_dir=direction
    )
    inter = make_interaction([electron], truth)
    assert electron_beam_angle(inter, cfg) == pytest.approx(expected, abs=1e-6)


def test_opening_angle_parallel(make_particle, make_interaction, truth):
    """Tests that the opening angle of parallel particles is exactly 0."""
    direction = np.array([1.0, 1.0, 1.0]) / np.sqrt(3.0)
    particles = [
        make_particle(ELEC_PID, 100.0, truth, start_dir=direction),
        make_particle(PROT_PID, 100.0, truth, start_dir=direction),
    ]
    inter = make_interaction(particles, truth)
    assert opening_angle(inter) == pytest.approx(0.0, abs=1e-6)


def test_softmax(make_particle, make_interaction):
    """Tests the softmax scores of reconstructed leading particles."""
    scores = np.array([0.0, 0.7, 0.1, 0.1, 0.1])
    particles = [
        make_particle(ELEC_PID, 100.0, pid_scores=scores),
        make_particle(PROT_PID, 100.0, pid_scores=scores[::-1]),
    ]
    inter = make_interaction(particles)
    assert electron_softmax(inter) == pytest.approx(0.7)
    assert proton_softmax(inter) == pytest.approx(0.0)


def test_softmax_truth(make_particle, make_interaction):
    """Tests that truth particles return a placeholder score."""
    particles = [make_particle(PROT_PID, 100.0, truth=True)]
    inter = make_interaction(particles, truth=True)
    assert proton_softmax(inter) == -np.inf


def test_true_leading_proton_p(make_particle, make_interaction):
    """Tests the momentum of the truth match of the leading proton."""
    truth_parts = [
        make_particle(MUON_PID, 200.0, truth=True, momentum=[0.0, 0.0, 300.0]),
        make_particle(PROT_PID, 95.0, truth=True, momentum=[0.0, 0.0, 430.0]),
    ]
    truth_inter = make_interaction(truth_parts, truth=True)

    reco_parts = [
        make_particle(MUON_PID, 200.0, match_ids=np.array([0])),
        make_particle(PROT_PID, 90.0, match_ids=np.array([1])),
    ]
    reco_inter = make_interaction(reco_parts)
    assert np.isnan(true_leading_proton_p(reco_inter))

    reco_inter.attach_truth(truth_inter)
    assert true_leading_proton_p(reco_inter) == pytest.approx(430.0)

    # Unmatched leading proton
    reco_inter.particles[1].match_ids = np.empty(0, dtype=np.int64)
    reco_inter.attach_truth(truth_inter)
    assert np.isnan(true_leading_proton_p(reco_inter))


def test_transverse_angles(make_particle, make_interaction, truth):
    """Tests phiT and alphaT on a simple back-to-back configuration."""
    particles = [
        make_particle(MUON_PID, 200.0, truth, momentum=[100.0, 0.0, 500.0]),
        make_particle(PROT_PID, 100.0, truth, momentum=[-100.0, 0.0, 300.0]),
    ]
    inter = make_interaction(particles, truth)

    # Balanced transverse momentum
    assert phiT(inter) == pytest.approx(0.0, abs=1e-6)
    assert np.isnan(alphaT(inter))

    # Imbalanced transverse momentum
    particles[1].momentum = np.array([-100.0, 100.0, 300.0])
    assert phiT(inter) == pytest.approx(np.pi / 4)
    assert alphaT(inter) == pytest.approx(np.pi / 2)


def test_transverse_angles_rotation(make_particle, make_interaction, truth):
    """Tests that phiT and alphaT are invariant under rotations around z."""
    momenta = {
        MUON_PID: [120.0, -40.0, 500.0],
        PROT_PID: [-60.0, 90.0, 300.0],
        PION_PID: [-30.0, -20.0, 100.0],
    }

    def build(angle):
        particles = [
            make_particle(pid, 200.0, truth, momentum=rotate_z(mom, angle))
            for pid, mom in momenta.items()
        ]
        return make_interaction(particles, truth)

    ref = build(0.0)
    for angle in (0.3, np.pi / 2, 2.0, -1.0):
        rotated = build(angle)
        assert phiT(rotated) == pytest.approx(phiT(ref), abs=1e-9)
        assert alphaT(rotated) == pytest.approx(alphaT(ref), abs=1e-9)


def test_transverse_angles_undefined(make_particle, make_interaction, truth):
    """Tests that the angles are NaN without a muon or hadronic system."""
    particles = [make_particle(PROT_PID, 100.0, truth, momentum=[10.0, 0.0, 0.0])]
    inter = make_interaction(particles, truth)
    assert np.isnan(phiT(inter))
    assert np.isnan(alphaT(inter))


def test_registry(signal_interaction):
    """Tests that all the registered variables are callable."""
    assert set(VARIABLES) >= {"phiT", "alphaT", "leading_muon_ke", "opening_angle"}
    for name, (func, required) in VARIABLES.items():
        assert callable(func)
        assert all(0 <= pid < 5 for pid in required)
        value = func(signal_interaction)
        assert np.isscalar(value)
