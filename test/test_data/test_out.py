"""Test suite for the nusel.data.out module."""

import numpy as np
import pytest

from nusel.data import RecoInteraction, RecoParticle, TruthInteraction, TruthParticle
from nusel.utils.globals import ELEC_PID, MUON_MASS, MUON_PID, PHOT_PID, PROT_PID


class TestParticleCreation:
    """Test particle creation and basic properties."""

    def test_defaults(self):
        """Test the default values of the particle attributes."""
        for cls in (RecoParticle, TruthParticle):
            particle = cls()
            assert particle.id == -1
            assert particle.pid == -1
            assert particle.is_primary is False
            assert len(particle.match_ids) == 0
            assert particle.start_point.shape == (3,)
            assert np.all(np.isinf(particle.start_point))
            assert particle.pid_scores.shape == (5,)
            assert np.all(particle.pid_scores == -np.inf)

    def test_array_defaults_not_shared(self):
        """Test that array defaults are not shared between instances."""
        part_a, part_b = RecoParticle(), RecoParticle()
        part_a.start_point[0] = 1.0
        assert part_b.start_point[0] == -np.inf

    def test_list_conversion(self):
        """Test that lists are converted to arrays."""
        particle = RecoParticle(momentum=[3.0, 4.0, 0.0])
        assert isinstance(particle.momentum, np.ndarray)
        assert particle.p == pytest.approx(5.0)

    def test_bool_casting(self):
        """Test that numpy booleans are cast back to python booleans."""
        particle = RecoParticle(is_primary=np.bool_(True), is_contained=np.uint8(1))
        assert particle.is_primary is True
        assert particle.is_contained is True

    def test_truth_flag(self):
        """Test the representation flag of each class."""
        assert RecoParticle().is_truth is False
        assert TruthParticle().is_truth is True
        assert RecoInteraction().is_truth is False
        assert TruthInteraction().is_truth is True


class TestParticleEnergy:
    """Test the representation-specific energy attributes."""

    @pytest.mark.parametrize(
        "pid, expected", [(PHOT_PID, 10.0), (ELEC_PID, 10.0), (MUON_PID, 20.0)]
    )
    def test_reco_ke(self, pid, expected):
        """Test that EM showers use calorimetry, other species use range."""
        particle = RecoParticle(pid=pid, calo_ke=10.0, csda_ke=20.0)
        assert particle.ke == expected
        assert particle.ke_init == expected

    def test_truth_ke(self):
        """Test that truth particles use the deposited energy."""
        particle = TruthParticle(
            pid=MUON_PID, energy_deposit=150.0, energy_init=MUON_MASS + 180.0
        )
        assert particle.mass == MUON_MASS
        assert particle.ke == 150.0
        assert particle.ke_init == pytest.approx(180.0)

    def test_derived_setters(self):
        """Test that derived attributes cannot be overridden."""
        particle = RecoParticle(pid=PROT_PID, csda_ke=50.0, ke=1.0, mass=1.0)
        assert particle.ke == 50.0
        assert particle.mass == pytest.approx(938.272)

        particle.ke = 3.0
        assert particle.ke == 50.0


class TestInteraction:
    """Test interaction creation and truth attachment."""

    def test_defaults(self):
        """Test the default values of the interaction attributes."""
        for cls in (RecoInteraction, TruthInteraction):
            interaction = cls()
            assert interaction.particles == []
            assert interaction.num_particles == 0
            assert interaction.nu_id == -1
            assert interaction.current_type == -1
            assert interaction.pdg_code == -1
            assert interaction.interaction_mode == -1
            assert np.isnan(interaction.flash_time)
            assert interaction.vertex.shape == (3,)

    def test_from_particles(self):
        """Test building an interaction from a list of particles."""
        particles = [
            TruthParticle(id=4, is_primary=True),
            TruthParticle(id=7, is_primary=False),
        ]
        interaction = TruthInteraction.from_particles(particles, id=2, nu_id=0)

        assert interaction.id == 2
        assert interaction.nu_id == 0
        assert interaction.num_particles == 2
        np.testing.assert_array_equal(interaction.particle_ids, [4, 7])
        assert interaction.primary_particles == [particles[0]]

    def test_from_particles_mixed(self):
        """Test that truth and reco particles cannot be mixed."""
        with pytest.raises(AssertionError):
            RecoInteraction.from_particles([RecoParticle(), TruthParticle()])

        with pytest.raises(AssertionError):
            RecoInteraction.from_particles([TruthParticle()])

    def test_attach_truth(self):
        """Test the transfer of the matched truth information."""
        truth_parts = [TruthParticle(id=0), TruthParticle(id=1)]
        truth = TruthInteraction.from_particles(
            truth_parts, nu_id=3, current_type=0, pdg_code=14, interaction_mode=10
        )

        reco_parts = [
            RecoParticle(id=0, match_ids=np.array([1])),
            RecoParticle(id=1),
            RecoParticle(id=2, match_ids=np.array([0, 1])),
        ]
        reco = RecoInteraction.from_particles(reco_parts)
        reco.attach_truth(truth)

        assert reco.nu_id == 3
        assert reco.current_type == 0
        assert reco.pdg_code == 14
        assert reco.interaction_mode == 10
        assert reco.truth_particles == [truth_parts[1], None, truth_parts[0]]

    def test_as_dict(self):
        """Test that the particle lists are not stored."""
        reco = RecoInteraction.from_particles([RecoParticle()])
        keys = reco.as_dict().keys()
        assert "particles" not in keys
        assert "truth_particles" not in keys
        assert "nu_id" in keys

    def test_scalar_dict(self):
        """Test that positions are expanded and arrays are dropped."""
        interaction = TruthInteraction(vertex=[1.0, 2.0, 3.0], nu_id=1)
        scalars = interaction.scalar_dict()
        assert scalars["vertex_x"] == 1.0
        assert scalars["vertex_z"] == 3.0
        assert scalars["nu_id"] == 1
        assert "particle_ids" not in scalars

        assert interaction.scalar_dict(["nu_id"]) == {"nu_id": 1}
        with pytest.raises(AttributeError):
            interaction.scalar_dict(["not_an_attribute"])

    def test_str(self):
        """Test the human-readable representation."""
        reco = RecoInteraction.from_particles([RecoParticle(id=0, pid=MUON_PID)])
        info = str(reco)
        assert info.startswith("RecoInteraction")
        assert "RecoParticle" in info
        assert "Muon" in info
