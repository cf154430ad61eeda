"""Module which contains all global variables shared across the project."""

import numpy as np

# Particle ID of each recognized particle species
PHOT_PID = 0
ELEC_PID = 1
MUON_PID = 2
PION_PID = 3
PROT_PID = 4
KAON_PID = 5

# Number of particle species which can count towards a topology
NUM_SIGNAL_PIDS = 5

# Particle type labels
PID_LABELS = {
    -1: "Unknown",
    PHOT_PID: "Photon",
    ELEC_PID: "Electron",
    MUON_PID: "Muon",
    PION_PID: "Pion",
    PROT_PID: "Proton",
    KAON_PID: "Kaon",
}

# Particle type tags, in the order they appear in a topology string
PID_TAGS = {
    PHOT_PID: "ph",
    ELEC_PID: "e",
    MUON_PID: "mu",
    PION_PID: "pi",
    PROT_PID: "p",
}

# Particle masses
ELEC_MASS = 0.511    # [MeV/c^2]
MUON_MASS = 105.658  # [MeV/c^2]
PION_MASS = 139.570  # [MeV/c^2]
PROT_MASS = 938.272  # [MeV/c^2]

PID_MASSES = {
    ELEC_PID: ELEC_MASS,
    MUON_PID: MUON_MASS,
    PION_PID: PION_MASS,
    PROT_PID: PROT_MASS,
}

# Species whose rest mass counts towards the visible energy
VISIBLE_MASS_PIDS = (MUON_PID, PION_PID)

# Final state kinetic energy thresholds
MUON_KE_THRESHOLD = 143.425  # [MeV], ~50 cm of range
PROT_KE_THRESHOLD = 50.0     # [MeV]
OTHER_KE_THRESHOLD = 25.0    # [MeV]

# Region removed from the fiducial volume, as open (lower, upper) bounds
FIDUCIAL_EXCLUSION = ((210.215, np.inf), (60.0, np.inf), (290.0, 390.0))  # [cm]

# Position of the NuMI target in detector coordinates
NUMI_SOURCE = (31512.0380, 3364.4912, 73363.2532)  # [cm]

# In-time flash windows for each beam
FLASH_WINDOWS = {
    "bnb": 1.6,   # [us]
    "numi": 9.6,  # [us]
}

# Neutrino current type
CC_CURR = 0
NC_CURR = 1

# Muon neutrino PDG code (sign-less)
NUMU_PDG = 14

# Generator interaction modes
QE_MODE = 0
RES_MODE = 1
DIS_MODE = 2
COH_MODE = 3
MEC_MODE = 10

# Basic signal/background categories
SIGNAL_CAT = 0
SIGNAL_OOFV_CAT = 1
OTHER_NU_CAT = 2
COSMIC_CAT = 3

CATEGORY_LABELS = {
    SIGNAL_CAT: "1muNp",
    SIGNAL_OOFV_CAT: "1muNp (not contained or fiducial)",
    OTHER_NU_CAT: "Other nu",
    COSMIC_CAT: "Cosmic",
}

# Topology-based categories
TOPO_SIGNAL_CAT = 2
TOPO_OTHER_CC_CAT = 4
TOPO_NC_CAT = 5
TOPO_COSMIC_CAT = 6
TOPO_SIGNAL_OOFV_CAT = 7

TOPOLOGY_CATEGORY_LABELS = {
    TOPO_SIGNAL_CAT: "1muNp",
    TOPO_OTHER_CC_CAT: "Other CC",
    TOPO_NC_CAT: "NC",
    TOPO_COSMIC_CAT: "Cosmic",
    TOPO_SIGNAL_OOFV_CAT: "1muNp (not contained or fiducial)",
}

# Generator-mode-based categories
MODE_NUE_CC_CAT = 5
MODE_NC_CAT = 6
MODE_COSMIC_CAT = 7
MODE_OTHER_CC_CAT = 8

# Mapping between the generator mode of a nu_mu CC interaction and its category
INT_MODE_TO_CAT = {
    QE_MODE: 0,
    RES_MODE: 1,
    MEC_MODE: 2,
    DIS_MODE: 3,
    COH_MODE: 4,
}

INTERACTION_MODE_LABELS = {
    0: "nu_mu CC QE",
    1: "nu_mu CC Res",
    2: "nu_mu CC MEC",
    3: "nu_mu CC DIS",
    4: "nu_mu CC Coh",
    MODE_NUE_CC_CAT: "nu_e CC",
    MODE_NC_CAT: "NC",
    MODE_COSMIC_CAT: "Cosmic",
    MODE_OTHER_CC_CAT: "nu_mu CC Other",
}

# Value substituted to non-finite variables before they are stored
INVALID_VALUE = -9999
