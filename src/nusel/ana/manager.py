"""Manages the operation of analysis scripts."""

from collections import OrderedDict, defaultdict
from copy import deepcopy

import numpy as np

from nusel.utils.logger import logger

from .factories import ana_script_factory

__all__ = ["AnaManager"]


class AnaManager:
    """Manager class to initialize and execute analysis scripts.

    It loads all the analysis scripts and feeds them data. The scripts write
    their output to CSV files (or to the writers they are provided with),
    which are released when the manager is closed. The manager can be used
    as a context manager to guarantee that the writers are closed on exit.
    """

    def __init__(self, cfg, log_dir=None, prefix=None):
        """Initialize the analysis manager.

        Parameters
        ----------
        cfg : dict
            Analysis script configurations
        log_dir : str, optional
            Output CSV file directory
        prefix : str, optional
            Input file prefix. If requested, it will be used to prefix
            all the output CSV files.
        """
        # Parse the analysis block configuration
        self.parse_config(log_dir, prefix, **cfg)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def parse_config(
        self, log_dir, prefix, overwrite=None, prefix_output=False, **modules
    ):
        """Parse the analysis tool configuration.

        Parameters
        ----------
        log_dir : str
            Output CSV file directory
        prefix : str
            Input file prefix. If requested, it will be used to prefix
            all the output CSV files.
        overwrite : bool, optional
            If `True`, overwrite the CSV logs if they already exist
        prefix_output : bool, optional
            If `True`, will prefix the output CSV names with the input file name
        **modules : dict
            List of analysis script modules
        """
        # Loop over the analyzer modules and get their priorities
        modules = deepcopy(modules)
        keys = np.array(list(modules.keys()))
        priorities = -np.ones(len(keys), dtype=np.int32)
        for i, k in enumerate(keys):
            if "priority" in modules[k]:
                priorities[i] = modules[k].pop("priority")

        # Only use the prefix if the output is to be prefixed
        if not prefix_output:
            prefix = None

        # Add the modules to a processor list in decreasing order of priority
        self.modules = OrderedDict()
        keys = keys[np.argsort(-priorities, kind="stable")]
        for k in keys:
            self.modules[k] = ana_script_factory(
                k, modules[k], overwrite, log_dir, prefix
            )
            logger.info("Loaded analysis script: %s", k)

    def __call__(self, data):
        """Pass one entry (or batch of entries) through the analysis scripts.

        Parameters
        ----------
        data : dict
            Dictionary of data products
        """
        # Loop over the analysis script modules
        single_entry = np.isscalar(data["index"])
        for key, module in self.modules.items():
            # Run the analysis script on each entry
            if single_entry:
                result = module(data)

            else:
                num_entries = len(data["index"])
                result = defaultdict(list)
                for entry in range(num_entries):
                    result_e = module(data, entry)
                    if result_e is not None:
                        for k, v in result_e.items():
                            result[k].append(v)

                if not len(result):
                    result = None

            # Update the input dictionary
            if result is not None:
                for res_key, val in result.items():
                    if not single_entry:
                        assert len(val) == num_entries, (
                            f"The number {res_key} ({len(val)}) does not match "
                            f"the number of entries ({num_entries})."
                        )
                    data[res_key] = val

    def close(self):
        """Releases the writers of all the analysis scripts."""
        for module in self.modules.values():
            module.close()
