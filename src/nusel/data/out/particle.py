"""Module with a data class objects which represent output particles."""

from dataclasses import dataclass

import numpy as np

from nusel.utils.docstring import inherit_docstring
from nusel.utils.globals import MUON_PID, NUM_SIGNAL_PIDS, PID_LABELS, PID_MASSES

from .base import RecoBase, TruthBase

__all__ = ["RecoParticle", "TruthParticle"]


@dataclass(eq=False)
class ParticleBase:
    """Base particle-specific information.

    Attributes
    ----------
    interaction_id : int
        Index of the interaction this particle belongs to
    pid : int
        Particle spcies (Photon (0), Electron (1), Muon (2), Charged Pion (3),
        Proton (4)) of this particle
    is_primary : bool
        Whether this particle originates from the interaction vertex
    length : float
        Length of the particle (only assigned to track objects)
    start_point : np.ndarray
        (3) Particle start point
    end_point : np.ndarray
        (3) Particle end point (only assigned to track objects)
    start_dir : np.ndarray
        (3) Unit particle direction w.r.t. the start point
    momentum : np.ndarray
        3-momentum of the particle at the production point in MeV/c
    calo_ke : float
        Kinetic energy reconstructed from the energy depositions alone in MeV
    csda_ke : float
        Kinetic energy reconstructed from the particle range in MeV
    pid_scores : np.ndarray
        (P) Array of softmax scores associated with each of particle class.
        Truth particles carry placeholders (-inf).
    mass : float
        Rest mass of the particle in MeV/c^2
    ke : float
        Kinetic energy of the particle in MeV, as used by the selection
    ke_init : float
        Initial kinetic energy of the particle in MeV, used to rank particles
    p : float
        Momentum magnitude of the particle at the production point in MeV/c
    """

    interaction_id: int = -1
    pid: int = -1
    is_primary: bool = False
    length: float = -1.0
    start_point: np.ndarray = None
    end_point: np.ndarray = None
    start_dir: np.ndarray = None
    momentum: np.ndarray = None
    calo_ke: float = -1.0
    csda_ke: float = -1.0
    pid_scores: np.ndarray = None
    mass: float = -1.0
    ke: float = -1.0
    ke_init: float = -1.0
    p: float = None

    # Fixed-length attributes
    _fixed_length_attrs = (
        ("start_point", 3),
        ("end_point", 3),
        ("start_dir", 3),
        ("momentum", 3),
        ("pid_scores", NUM_SIGNAL_PIDS),
    )

    # Attributes specifying coordinates
    _pos_attrs = ("start_point", "end_point")

    # Attributes specifying vector components
    _vec_attrs = ("start_dir", "momentum")

    # Boolean attributes
    _bool_attrs = ("is_primary",)

    def __str__(self):
        """Human-readable string representation of the particle object.

        Results
        -------
        str
            Basic information about the particle properties
        """
        pid_label = PID_LABELS.get(self.pid, PID_LABELS[-1])
        match = self.match_ids[0] if len(self.match_ids) > 0 else -1
        return (
            f"Particle(ID: {self.id:<3} | PID: {pid_label:<8} "
            f"| Primary: {self.is_primary:<2} "
            f"| KE: {self.ke:<8.2f} | Match: {match:<3})"
        )

    @property
    def p(self):
        """Computes the magnitude of the initial momentum.

        Returns
        -------
        float
            Norm of the initial momentum vector
        """
        return float(np.linalg.norm(self.momentum))

    @p.setter
    def p(self, p):
        pass


@dataclass(eq=False)
@inherit_docstring(RecoBase, ParticleBase)
class RecoParticle(ParticleBase, RecoBase):
    """Reconstructed particle information.

    Attributes
    ----------
    primary_scores : np.ndarray
        (2) Array of softmax scores associated with secondary and primary
    """

    primary_scores: np.ndarray = None

    # Fixed-length attributes
    _fixed_length_attrs = (
        ("primary_scores", 2),
        *ParticleBase._fixed_length_attrs,
    )

    # Variable-length attributes
    _var_length_attrs = RecoBase._var_length_attrs

    # Boolean attributes
    _bool_attrs = (*RecoBase._bool_attrs, *ParticleBase._bool_attrs)

    def __str__(self):
        """Human-readable string representation of the particle object.

        Results
        -------
        str
            Basic information about the particle properties
        """
        return "Reco" + super().__str__()

    @property
    def mass(self):
        """Rest mass of the particle in MeV/c^2.

        The mass is inferred from the predicted particle species.

        Returns
        -------
        float
            Rest mass of the particle
        """
        return PID_MASSES.get(self.pid, 0.0)

    @mass.setter
    def mass(self, mass):
        pass

    @property
    def ke(self):
        """Kinetic energy in MeV.

        Uses calorimetry for EM activity (photons and electrons) and the
        range-based (CSDA) estimate for all other species.

        Returns
        -------
        float
            Best-guess kinetic energy
        """
        if self.pid < MUON_PID:
            return self.calo_ke

        return self.csda_ke

    @ke.setter
    def ke(self, ke):
        pass

    @property
    def ke_init(self):
        """Initial kinetic energy in MeV.

        There is no distinction between the deposited and the initial energy
        of a reconstructed particle, this is the same as :attr:`ke`.

        Returns
        -------
        float
            Initial kinetic energy
        """
        return self.ke

    @ke_init.setter
    def ke_init(self, ke_init):
        pass


@dataclass(eq=False)
@inherit_docstring(TruthBase, ParticleBase)
class TruthParticle(ParticleBase, TruthBase):
    """Truth particle information.

    Attributes
    ----------
    pdg_code : int
        PDG code of the particle
    energy_init : float
        Initial total energy of the particle in MeV
    energy_deposit : float
        Total amount of energy deposited in the detector by the particle in MeV
    """

    pdg_code: int = -1
    energy_init: float = -1.0
    energy_deposit: float = -1.0

    # Fixed-length attributes
    _fixed_length_attrs = ParticleBase._fixed_length_attrs

    # Variable-length attributes
    _var_length_attrs = TruthBase._var_length_attrs

    # Boolean attributes
    _bool_attrs = (*TruthBase._bool_attrs, *ParticleBase._bool_attrs)

    def __str__(self):
        """Human-readable string representation of the particle object.

        Results
        -------
        str
            Basic information about the particle properties
        """
        return "Truth" + super().__str__()

    @property
    def mass(self):
        """Rest mass of the particle in MeV/c^2.

        Returns
        -------
        float
            Rest mass of the particle (0 for species without a known mass)
        """
        return PID_MASSES.get(self.pid, 0.0)

    @mass.setter
    def mass(self, mass):
        pass

    @property
    def ke(self):
        """Kinetic energy in MeV.

        The deposited energy is the truth equivalent of the kinetic energy
        measured by the reconstruction.

        Returns
        -------
        float
            Energy deposited by the particle
        """
        return self.energy_deposit

    @ke.setter
    def ke(self, ke):
        pass

    @property
    def ke_init(self):
        """Converts the particle initial energy to a kinetic energy.

        Returns
        -------
        float
            Initial kinetic energy of the particle
        """
        if self.energy_init < 0.0:
            return -1.0

        return self.energy_init - self.mass

    @ke_init.setter
    def ke_init(self, ke_init):
        pass
