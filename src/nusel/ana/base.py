"""Base class of all analysis scripts."""

from abc import ABC, abstractmethod
from warnings import warn

from nusel.io.write import CSVWriter

__all__ = ["AnaBase"]


class AnaBase(ABC):
    """Parent class of all analysis scripts.

    This base class performs the following functions:
    - Ensures that the necessary methods exist
    - Checks that the script is provided the necessary information
    - Writes the output of the analysis to CSV

    Attributes
    ----------
    name : str
        Name of the analysis script (to call it from a configuration file)
    keys : Dict[str, bool]
        Data products needed (`True`) or optionally used (`False`) by the
        analysis script
    units : str
        Units in which the coordinates are expressed
    """

    # Name of the analysis script (as specified in the configuration)
    name = None

    # Alternative allowed names of the analysis script
    aliases = ()

    # Units in which the analysis script expects objects to be expressed in
    units = "cm"

    # Set of data keys needed for this analysis script to operate
    _keys = ()

    # Valid run modes
    _run_modes = ("reco", "truth", "both", "all")

    def __init__(
        self, run_mode=None, append=False, overwrite=False, log_dir=None, prefix=None
    ):
        """Initialize default analysis script object properties.

        Parameters
        ----------
        run_mode : str, optional
            If specified, tells whether the analysis script must run on
            reconstructed ('reco'), true ('truth') or both objects
            ('both' or 'all')
        append : bool, default False
            If True, appends existing CSV files instead of creating new ones
        overwrite : bool, default False
            If True and an output CSV file exists, overwrite it
        log_dir : str, optional
            Output CSV file directory
        prefix : str, optional
            Name to prefix every output CSV file with
        """
        # Initialize default keys
        self.update_keys({"index": True, "run_info": False})

        # If run mode is specified, process it
        self.run_mode = run_mode
        if run_mode is not None:
            # Check that the run mode is recognized
            assert run_mode in self._run_modes, (
                f"`run_mode` not recognized: {run_mode}. Must be one of "
                f"{self._run_modes}."
            )

        # Store the append flag
        self.append_file = append
        self.overwrite_file = overwrite

        # Initialize a writer dictionary to be filled by the children classes
        self.log_dir = log_dir
        self.output_prefix = prefix
        self.writers = {}
        self.base_dict = {}

    def initialize_writer(self, name, writer=None):
        """Adds a writer to the list of writers for this script.

        Parameters
        ----------
        name : str
            Name of the writer
        writer : object, optional
            Pre-initialized writer (any object with an `append` method). If
            not provided, a :class:`CSVWriter` is created.
        """
        # If a writer is provided, use it as is
        assert len(name) > 0, "Must provide a non-empty name."
        if writer is not None:
            assert hasattr(writer, "append"), (
                "The writer provided must have an `append` method."
            )
            self.writers[name] = writer
            return

        # Define the name of the file to write to
        file_name = f"{self.name}_{name}.csv"
        if self.output_prefix:
            file_name = f"{self.output_prefix}_{file_name}"
        if self.log_dir:
            file_name = f"{self.log_dir}/{file_name}"

        # Initialize the writer
        self.writers[name] = CSVWriter(
            file_name, append=self.append_file, overwrite=self.overwrite_file
        )

    def close(self):
        """Releases all the writers which hold a resource."""
        for writer in self.writers.values():
            if hasattr(writer, "close"):
                writer.close()

    @property
    def keys(self):
        """Dictionary of (key, necessity) pairs which determine which data keys
        are needed/optional for the analysis script to run.

        Returns
        -------
        Dict[str, bool]
            Dictionary of (key, necessity) pairs to be used
        """
        return dict(self._keys)

    @keys.setter
    def keys(self, keys):
        self._keys = tuple(keys.items())

    def update_keys(self, update_dict):
        """Update the underlying set of keys and their necessity in place.

        Parameters
        ----------
        update_dict : Dict[str, bool]
            Dictionary of (key, necessity) pairs to update the keys with
        """
        if len(update_dict) > 0:
            keys = self.keys
            keys.update(update_dict)
            self._keys = tuple(keys.items())

    def get_base_dict(self, data):
        """Builds the entry information dictionary.

        Parameters
        ----------
        data : dict
            Dictionary of data products

        Returns
        -------
        dict
            Dictionary of information for this entry
        """
        # Extract basic information to store in every row
        base_dict = {"index": data["index"]}
        if "run_info" in data:
            run_info = data["run_info"]
            if not isinstance(run_info, dict):
                run_info = run_info.scalar_dict()
            base_dict.update(**run_info)
        else:
            warn("`run_info` is missing; will not be included in CSV file.")

        return base_dict

    def append(self, name, **kwargs):
        """Append a log file with a set of values.

        Parameters
        ----------
        name : str
            Name of the writer
        **kwargs : dict
            Dictionary of information to save to the writer
        """
        self.writers[name].append({**self.base_dict, **kwargs})

    def __call__(self, data, entry=None):
        """Runs the analysis script on one entry.

        Parameters
        ----------
        data : dict
            Data dictionary for one entry (or a batch of entries)
        entry : int, optional
            Entry in the batch to process

        Returns
        -------
        dict
            Update to the input dictionary
        """
        # Fetch the necessary information
        data_filter = {}
        for key, req in self.keys.items():
            # If this key is needed, check that it exists
            assert not req or key in data, (
                f"Analysis script `{self.name}` is missing an essential "
                f"input to be used: `{key}`."
            )

            # Append
            if key in data:
                data_filter[key] = data[key]
                if entry is not None:
                    data_filter[key] = data[key][entry]

        # Fetch the base dictionary
        self.base_dict = self.get_base_dict(data_filter)

        # Run the analysis script
        return self.process(data_filter)

    @abstractmethod
    def process(self, data):
        """Place-holder method to be defined in each analysis script.

        Parameters
        ----------
        data : dict
            Filtered data dictionary for one entry
        """
        raise NotImplementedError("Must define the `process` function")
