"""Classification of interactions into mutually exclusive categories.

Three independent schemes are provided:
- :func:`category`: signal, out-of-volume signal, neutrino background, cosmic
- :func:`category_topology`: based on the visible final state
- :func:`category_interaction_mode`: based on the generator interaction mode

Each scheme assigns exactly one label to any interaction. The label
descriptions are available in :mod:`nusel.utils.globals`.
"""

from nusel.utils.globals import (
    CC_CURR,
    COSMIC_CAT,
    ELEC_PID,
    INT_MODE_TO_CAT,
    MODE_COSMIC_CAT,
    MODE_NC_CAT,
    MODE_NUE_CC_CAT,
    MODE_OTHER_CC_CAT,
    MUON_PID,
    NC_CURR,
    NUMU_PDG,
    OTHER_NU_CAT,
    PHOT_PID,
    PION_PID,
    PROT_PID,
    SIGNAL_CAT,
    SIGNAL_OOFV_CAT,
    TOPO_COSMIC_CAT,
    TOPO_NC_CAT,
    TOPO_OTHER_CC_CAT,
    TOPO_SIGNAL_CAT,
    TOPO_SIGNAL_OOFV_CAT,
)

from .config import DEFAULT_CONFIG
from .cuts import (
    containment_cut,
    count_primaries,
    fiducial_cut,
    other_nu_1muNp,
    signal_1muNp,
)

__all__ = ["category", "category_topology", "category_interaction_mode"]


def category(interaction, cfg=DEFAULT_CONFIG):
    """Basic signal/background categorization of an interaction.

    - 0: 1muNp (contained and fiducial)
    - 1: 1muNp (not contained or not fiducial)
    - 2: Other neutrino interaction
    - 3: Cosmic

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    int
        Category of the interaction
    """
    if signal_1muNp(interaction, cfg):
        if fiducial_cut(interaction, cfg) and containment_cut(interaction):
            return SIGNAL_CAT

        return SIGNAL_OOFV_CAT

    if other_nu_1muNp(interaction, cfg):
        return OTHER_NU_CAT

    return COSMIC_CAT


def category_topology(interaction, cfg=DEFAULT_CONFIG):
    """Categorization of an interaction based on its visible final state.

    - 2: 1mu0piNp, contained and fiducial
    - 4: Other CC
    - 5: NC
    - 6: Cosmic (or unclassified neutrino)
    - 7: 1mu0piNp, not contained or not fiducial

    The single proton and multi-proton final states share the same labels.
    The containment and fiducial conditions use the raw interaction flags.

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance
    cfg : SelectionConfig, optional
        Selection configuration

    Returns
    -------
    int
        Topological category of the interaction
    """
    if interaction.nu_id < 0:
        return TOPO_COSMIC_CAT

    counts = count_primaries(interaction, cfg)
    is_cc = interaction.current_type == CC_CURR
    if counts[PHOT_PID] == 0 and counts[ELEC_PID] == 0 and counts[MUON_PID] == 1:
        num_pions, num_protons = counts[PION_PID], counts[PROT_PID]
        in_volume = interaction.is_contained and interaction.is_fiducial
        if num_pions == 0 and num_protons >= 1:
            return TOPO_SIGNAL_CAT if in_volume else TOPO_SIGNAL_OOFV_CAT
        if num_pions == 0 and num_protons == 0:
            return TOPO_OTHER_CC_CAT
        if num_pions == 1 and num_protons == 1:
            return TOPO_OTHER_CC_CAT
        if is_cc:
            return TOPO_OTHER_CC_CAT

    elif is_cc:
        return TOPO_OTHER_CC_CAT

    elif interaction.current_type == NC_CURR:
        return TOPO_NC_CAT

    return TOPO_COSMIC_CAT


def category_interaction_mode(interaction):
    """Categorization of an interaction based on the generator truth.

    - 0: nu_mu CC QE
    - 1: nu_mu CC Res
    - 2: nu_mu CC MEC
    - 3: nu_mu CC DIS
    - 4: nu_mu CC Coh
    - 5: nu_e CC
    - 6: NC
    - 7: Cosmic
    - 8: nu_mu CC with any other interaction mode

    Parameters
    ----------
    interaction : Union[RecoInteraction, TruthInteraction]
        Interaction instance

    Returns
    -------
    int
        Generator-mode category of the interaction
    """
    if interaction.nu_id < 0:
        return MODE_COSMIC_CAT

    if interaction.current_type != CC_CURR:
        return MODE_NC_CAT

    if abs(interaction.pdg_code) != NUMU_PDG:
        return MODE_NUE_CC_CAT

    return INT_MODE_TO_CAT.get(interaction.interaction_mode, MODE_OTHER_CC_CAT)
