"""Configuration of the 1muNp selection.

All the physical and geometrical constants used by the selection are
gathered in a single immutable structure, so that a change of detector
geometry or beam configuration never requires a change of the algorithms.

Typical configuration should look like:

.. code-block:: yaml

    selection:
      beam: numi
      proton_ke_threshold: 50.
      fiducial_exclusion: [[210.215, .inf], [60., .inf], [290., 390.]]
"""

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from nusel.config.errors import ConfigValidationError
from nusel.utils.globals import (
    FIDUCIAL_EXCLUSION,
    FLASH_WINDOWS,
    MUON_KE_THRESHOLD,
    NUMI_SOURCE,
    OTHER_KE_THRESHOLD,
    PID_MASSES,
    PROT_KE_THRESHOLD,
)

__all__ = ["SelectionConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True)
class SelectionConfig:
    """Constants which parametrize the 1muNp selection.

    Attributes
    ----------
    muon_ke_threshold : float, default 143.425
        Kinetic energy above which a primary muon counts towards the final
        state, in MeV (equivalent to ~50 cm of range)
    proton_ke_threshold : float, default 50.
        Kinetic energy above which a primary proton counts, in MeV
    other_ke_threshold : float, default 25.
        Kinetic energy above which a primary photon, electron or pion
        counts, in MeV
    fiducial_exclusion : Tuple[Tuple[float, float], ...]
        (lower, upper) open bounds along each axis of the region carved out
        of the fiducial volume, in cm
    beam_source : Tuple[float, float, float]
        Position of the beam source in detector coordinates, in cm
    beam : str, default 'numi'
        Name of the beam, used to pick the in-time flash window
    flash_window : float, optional
        Upper bound of the in-time flash window, in microseconds. If not
        specified, it is taken from the beam name.
    masses : Mapping[int, float]
        Rest mass of each particle species, in MeV/c^2. Species absent
        from the mapping are massless.
    """

    muon_ke_threshold: float = MUON_KE_THRESHOLD
    proton_ke_threshold: float = PROT_KE_THRESHOLD
    other_ke_threshold: float = OTHER_KE_THRESHOLD
    fiducial_exclusion: Tuple[Tuple[float, float], ...] = FIDUCIAL_EXCLUSION
    beam_source: Tuple[float, float, float] = NUMI_SOURCE
    beam: str = "numi"
    flash_window: Optional[float] = None
    masses: Mapping[int, float] = field(
        default_factory=lambda: MappingProxyType(dict(PID_MASSES))
    )

    def __post_init__(self):
        """Check the consistency of the parameters and resolve the flash
        window from the beam name if it is not explicitly provided.
        """
        if self.beam not in FLASH_WINDOWS:
            raise ConfigValidationError(
                f"Beam not recognized: {self.beam}. Must be one of "
                f"{list(FLASH_WINDOWS.keys())}."
            )

        if len(self.fiducial_exclusion) != 3 or any(
            len(bounds) != 2 for bounds in self.fiducial_exclusion
        ):
            raise ConfigValidationError(
                "The fiducial exclusion region must be specified as one "
                "(lower, upper) pair per axis."
            )

        if len(self.beam_source) != 3:
            raise ConfigValidationError(
                "The beam source must be specified as an (x, y, z) point."
            )

        # Frozen dataclass, bypass the attribute protection to normalize
        normalized = {
            "fiducial_exclusion": tuple(
                (float(lo), float(hi)) for lo, hi in self.fiducial_exclusion
            ),
            "beam_source": tuple(float(v) for v in self.beam_source),
            "masses": MappingProxyType({int(k): float(v) for k, v in self.masses.items()}),
        }
        if self.flash_window is None:
            normalized["flash_window"] = FLASH_WINDOWS[self.beam]

        for key, value in normalized.items():
            object.__setattr__(self, key, value)

    @classmethod
    def from_dict(cls, cfg=None):
        """Builds a selection configuration from a configuration block.

        Parameters
        ----------
        cfg : dict, optional
            Selection configuration block. Missing keys take their default.

        Returns
        -------
        SelectionConfig
            Selection configuration
        """
        cfg = dict(cfg or {})
        valid_keys = [f.name for f in fields(cls)]
        unknown = set(cfg).difference(valid_keys)
        if unknown:
            raise ConfigValidationError(
                f"Selection parameter(s) not recognized: {sorted(unknown)}. "
                f"Must be among {valid_keys}."
            )

        return cls(**cfg)

    def update(self, **kwargs):
        """Returns a copy of the configuration with some parameters updated.

        If the beam is changed without an explicit flash window, the window
        follows the new beam.

        Parameters
        ----------
        **kwargs : dict
            Parameters to update

        Returns
        -------
        SelectionConfig
            Updated selection configuration
        """
        if "beam" in kwargs and "flash_window" not in kwargs:
            kwargs["flash_window"] = None

        return replace(self, **kwargs)


# Default selection configuration
DEFAULT_CONFIG = SelectionConfig()
