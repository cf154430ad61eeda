"""Construct an analysis script module class from its name."""

from nusel.utils.factory import instantiate, module_dict

from . import script

# Build a dictionary of available analysis scripts
ANA_DICT = {}
for module in [script]:
    ANA_DICT.update(**module_dict(module))


def ana_script_factory(name, cfg, overwrite=None, log_dir=None, prefix=None):
    """Instantiates an analyzer module from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the analyzer module
    cfg : dict
        Analysis script module configuration
    overwrite : bool, optional
        If `True`, overwrite the CSV logs if they already exist
    log_dir : str, optional
        Output CSV file directory
    prefix : str, optional
        Input file prefix. If requested, it will be used to prefix
        all the output CSV files.

    Returns
    -------
    object
         Initialized analyzer object
    """
    # Provide the name to the configuration
    cfg = dict(cfg)
    cfg["name"] = name

    # Instantiate the analysis script module
    if overwrite is not None:
        return instantiate(
            ANA_DICT, cfg, overwrite=overwrite, log_dir=log_dir, prefix=prefix
        )

    return instantiate(ANA_DICT, cfg, log_dir=log_dir, prefix=prefix)
