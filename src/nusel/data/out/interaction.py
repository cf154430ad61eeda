"""Module with a data class objects which represent output interactions."""

from dataclasses import dataclass
from typing import List

import numpy as np

from nusel.utils.docstring import inherit_docstring

from .base import RecoBase, TruthBase

__all__ = ["RecoInteraction", "TruthInteraction"]


@dataclass(eq=False)
class InteractionBase:
    """Base interaction-specific information.

    Attributes
    ----------
    particles : List[object]
        List of particles that make up the interaction
    particle_ids : np.ndarray
        List of Particle IDs that make up this interaction
    num_particles : int
        Number of particles that make up this interaction
    vertex : np.ndarray
        (3) Coordinates of the interaction vertex
    is_fiducial : bool
        Whether this interaction vertex is inside the fiducial volume
    is_flash_matched : bool
        True if the interaction was matched to an optical flash
    flash_time : float
        Time at which the matched flash occurred in microseconds (NaN if unset)
    nu_id : int
        Index of the neutrino matched to this interaction (-1 for cosmics)
    current_type : int
        Generator current type (CC (0), NC (1))
    pdg_code : int
        PDG code of the incoming neutrino
    interaction_mode : int
        Generator interaction mode code
    """

    particles: List[object] = None
    particle_ids: np.ndarray = None
    num_particles: int = None
    vertex: np.ndarray = None
    is_fiducial: bool = False
    is_flash_matched: bool = False
    flash_time: float = np.nan
    nu_id: int = -1
    current_type: int = -1
    pdg_code: int = -1
    interaction_mode: int = -1

    # Fixed-length attributes
    _fixed_length_attrs = (("vertex", 3),)

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = (("particles", object), ("particle_ids", np.int64))

    # Attributes specifying coordinates
    _pos_attrs = ("vertex",)

    # Boolean attributes
    _bool_attrs = ("is_fiducial", "is_flash_matched")

    # Attributes that must never be stored to file
    _skip_attrs = ("particles",)

    def __str__(self):
        """Human-readable string representation of the interaction object.

        Results
        -------
        str
            Basic information about the interaction properties
        """
        match = self.match_ids[0] if len(self.match_ids) > 0 else -1
        info = (
            f"Interaction(ID: {self.id:<3} | Particles: {self.num_particles:<3} "
            f"| Nu ID: {self.nu_id:<3} | Match: {match:<3})"
        )
        if len(self.particles):
            info += "\n" + len(info) * "-"
            for particle in self.particles:
                info += "\n" + str(particle)

        return info

    @property
    def num_particles(self):
        """Number of particles that make up this interaction.

        Returns
        -------
        int
            Number of particles that make up the interaction instance
        """
        return len(self.particles)

    @num_particles.setter
    def num_particles(self, num_particles):
        pass

    @property
    def primary_particles(self):
        """List of primary particles associated with this interaction.

        Returns
        -------
        List[object]
            List of primary Particle objects associated with this interaction
        """
        return [part for part in self.particles if part.is_primary]

    @classmethod
    def from_particles(cls, particles, **kwargs):
        """Builds an Interaction instance from its constituent Particle objects.

        Parameters
        ----------
        particles : List[ParticleBase]
            List of Particle objects that make up the Interaction
        **kwargs : dict, optional
            Additional interaction attributes

        Returns
        -------
        InteractionBase
            Interaction built from the particle list
        """
        # Check that the particles are all of the same kind
        assert len({p.is_truth for p in particles}) < 2, (
            "is_truth must be unique in the list of particles."
        )
        if len(particles):
            is_truth = particles[0].is_truth
            assert is_truth == cls.is_truth, (
                f"Cannot build a {cls.__name__} from particles with "
                f"is_truth={is_truth}."
            )

        # Construct interaction object, attach particle list
        particle_ids = np.array([p.id for p in particles], dtype=np.int64)
        return cls(particles=list(particles), particle_ids=particle_ids, **kwargs)


@dataclass(eq=False)
@inherit_docstring(RecoBase, InteractionBase)
class RecoInteraction(InteractionBase, RecoBase):
    """Reconstructed interaction information.

    The generator truth attributes (`nu_id`, `current_type`, `pdg_code`,
    `interaction_mode`) are only meaningful once inherited from the matched
    truth interaction (see :meth:`attach_truth`).

    Attributes
    ----------
    truth_particles : List[object]
        Truth particles matched to each of the reconstructed particles, in
        the same order as `particles` (None where a particle is unmatched)
    """

    truth_particles: List[object] = None

    # Fixed-length attributes
    _fixed_length_attrs = InteractionBase._fixed_length_attrs

    # Variable-length attributes
    _var_length_attrs = (
        *RecoBase._var_length_attrs,
        *InteractionBase._var_length_attrs,
        ("truth_particles", object),
    )

    # Boolean attributes
    _bool_attrs = (*RecoBase._bool_attrs, *InteractionBase._bool_attrs)

    # Attributes that must never be stored to file
    _skip_attrs = (*InteractionBase._skip_attrs, "truth_particles")

    def __str__(self):
        """Human-readable string representation of the interaction object.

        Results
        -------
        str
            Basic information about the interaction properties
        """
        return "Reco" + super().__str__()

    def attach_truth(self, truth):
        """Attach the information of the matched truth interaction.

        Copies the generator truth attributes and fills the list of truth
        particles matched to each of the reconstructed particles.

        Parameters
        ----------
        truth : TruthInteraction
            Truth interaction this interaction is matched to
        """
        # Transfer the generator attributes
        for attr in ("nu_id", "current_type", "pdg_code", "interaction_mode"):
            setattr(self, attr, getattr(truth, attr))

        # Align the truth particles with the reconstructed particles
        truth_map = {part.id: part for part in truth.particles}
        self.truth_particles = [
            truth_map.get(part.match_ids[0]) if len(part.match_ids) else None
            for part in self.particles
        ]


@dataclass(eq=False)
@inherit_docstring(TruthBase, InteractionBase)
class TruthInteraction(InteractionBase, TruthBase):
    """Truth interaction information."""

    # Fixed-length attributes
    _fixed_length_attrs = InteractionBase._fixed_length_attrs

    # Variable-length attributes
    _var_length_attrs = (
        *TruthBase._var_length_attrs,
        *InteractionBase._var_length_attrs,
    )

    # Boolean attributes
    _bool_attrs = (*TruthBase._bool_attrs, *InteractionBase._bool_attrs)

    def __str__(self):
        """Human-readable string representation of the interaction object.

        Results
        -------
        str
            Basic information about the interaction properties
        """
        return "Truth" + super().__str__()
