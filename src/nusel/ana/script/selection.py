"""Analysis script which applies the 1muNp selection to matched pairs."""

from copy import copy

from nusel.ana.base import AnaBase
from nusel.sel.category import category
from nusel.sel.config import SelectionConfig
from nusel.sel.cuts import all_1muNp_cut, matched, neutrino
from nusel.sel.record import check_variables, pair_record, sanitize
from nusel.utils.globals import INVALID_VALUE, SIGNAL_CAT
from nusel.utils.logger import logger

__all__ = ["SelectionAna"]


class SelectionAna(AnaBase):
    """Class which stores the 1muNp selection output of matched interactions.

    For each entry, two kinds of rows are written:
    - `SIGNAL`: one per matched truth neutrino interaction of the signal
      category, paired with its reconstructed match (efficiency)
    - `SELECTED`: one per matched reconstructed interaction which passes the
      full selection, paired with its truth match (purity)

    Typical configuration should look like:

    .. code-block:: yaml

        ana:
          selection_1muNp:
            beam: numi
            variables: [leading_muon_ke, leading_proton_p, phiT, alphaT]
            selection:
              proton_ke_threshold: 50.
    """

    # Name of the analysis script (as specified in the configuration)
    name = "selection_1muNp"

    # Alternative allowed names of the analysis script
    aliases = ("selection",)

    # Set of data keys needed for this analysis script to operate
    _keys = (("reco_interactions", True), ("truth_interactions", True))

    def __init__(
        self,
        beam=None,
        variables=(),
        selection=None,
        writer=None,
        sentinel=INVALID_VALUE,
        **kwargs,
    ):
        """Initialize the selection analysis script.

        Parameters
        ----------
        beam : str, optional
            Name of the beam ('bnb' or 'numi'). Overrides the beam specified
            in the `selection` block, if any.
        variables : List[str], optional
            Derived variables to store for each interaction of a pair
        selection : dict, optional
            Selection configuration block (see :class:`SelectionConfig`)
        writer : object, optional
            Output row sink (any object with an `append` method). If not
            provided, a CSV file is created in the log directory.
        sentinel : Union[int, float], default -9999
            Value which replaces non-finite quantities in the output rows
        **kwargs : dict, optional
            Parameters to pass to :class:`AnaBase`
        """
        # Initialize the parent class
        super().__init__(**kwargs)
        assert self.run_mode in (None, "both", "all"), (
            "The selection needs both reconstructed and truth interactions."
        )

        # Initialize the selection configuration
        selection = dict(selection or {})
        if beam is not None:
            selection["beam"] = beam
        self.cfg = SelectionConfig.from_dict(selection)

        # Check and store the list of derived variables
        self.variables = list(variables)
        check_variables(self.variables)
        self.sentinel = sentinel

        # Initialize the output log file
        self.initialize_writer("pairs", writer)

    def process(self, data):
        """Store the selection output of matched pairs for one entry.

        Parameters
        ----------
        data : dict
            Dictionary of data products containing interaction representations
        """
        reco_inters = data["reco_interactions"]
        truth_inters = data["truth_interactions"]

        # Loop over truth interactions for efficiency metrics
        num_signal = 0
        for truth in truth_inters:
            if (
                neutrino(truth)
                and category(truth, self.cfg) == SIGNAL_CAT
                and matched(truth)
            ):
                reco = reco_inters[truth.match_ids[0]]
                self.write_pair("SIGNAL", truth, reco)
                num_signal += 1

        # Loop over reconstructed interactions for purity metrics
        num_selected = 0
        for reco in reco_inters:
            if all_1muNp_cut(reco, self.cfg) and matched(reco):
                truth = truth_inters[reco.match_ids[0]]
                self.write_pair("SELECTED", truth, reco)
                num_selected += 1

        logger.debug(
            "Entry %s: %d signal row(s), %d selected row(s).",
            data["index"],
            num_signal,
            num_selected,
        )

    def write_pair(self, tag, truth, reco):
        """Writes one matched truth/reco pair to the output log.

        Parameters
        ----------
        tag : str
            Row tag ('SIGNAL' or 'SELECTED')
        truth : TruthInteraction
            Truth interaction
        reco : RecoInteraction
            Reconstructed interaction
        """
        # Align the truth of this pair on a copy, the input is left untouched
        reco = copy(reco)
        reco.attach_truth(truth)

        row = pair_record(truth, reco, self.cfg, self.variables)
        self.append("pairs", tag=tag, **sanitize(row, self.sentinel))
