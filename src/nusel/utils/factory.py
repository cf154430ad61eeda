"""Contains functions needed to instantiate a class from a dictionary.

This allows to generically convert a YAML block into an instatiated class
with all the appropriate checks that the class exists and is provided
with appropriate arguments.
"""

from copy import deepcopy

from .logger import logger

__all__ = ["module_dict", "instantiate"]


def module_dict(module):
    """Converts module into a dictionary which maps class names onto classes.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    # Loop over classes in the module
    classes = {}
    for cls_name in getattr(module, "__all__", dir(module)):
        # Skip private objects
        if cls_name[0] == "_":
            continue

        # Only consider classes which belong to the module of interest
        cls = getattr(module, cls_name)
        if not isinstance(cls, type) or module.__name__ not in cls.__module__:
            continue

        # Store the class name as an option to fetch it
        classes[cls_name] = cls

        # If a name is provided, add it to the allowed options
        if getattr(cls, "name", None):
            classes[cls.name] = cls

        # Aliases are allowed but should be avoided
        for alias in getattr(cls, "aliases", ()):
            classes[alias] = cls

    return classes


def instantiate(classes, cfg, alt_name=None, **kwargs):
    """Instantiates a class based on a configuration dictionary and a list of
    possible classes to chose from.

    This function supports two YAML configuration structures
    (parsed as a dictionary):

    .. code-block:: yaml

        script:
          name: script_name
          kwarg_1: value_1
          kwarg_2: value_2
          ...

    or

    .. code-block:: yaml

        script:
          name: script_name
          kwargs:
            kwarg_1: value_1
            kwarg_2: value_2
            ...

    Parameters
    ----------
    classes : dict
        Dictionary which maps a class name onto an object class.
    cfg : Union[str, dict]
        Configuration dictionary (or class name)
    alt_name : str, optional
        Key under which the class name can be specfied, beside 'name' itself
    **kwargs : dict, optional
        Additional parameters to pass to the class

    Returns
    -------
    object
        Instantiated object
    """
    # If the configuration is a string, assume it is a class name with no
    # parameters to be passed to it
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    # Get the name of the class, check that it exists
    config = deepcopy(cfg)
    if alt_name is not None:
        assert (alt_name in config) ^ (
            "name" in config
        ), f"Should specify one of `name` or `{alt_name}`"
        name = alt_name if alt_name in config else "name"
    else:
        assert "name" in config, "Could not find the name of the class under `name`"
        name = "name"

    class_name = config.pop(name)
    if class_name not in classes:
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary "
            f"which maps names to classes. Available names: "
            f"{list(classes.keys())}"
        )

    # Gather the keyword arguments to pass to the class
    kwargs = dict(config.pop("kwargs", {}), **kwargs)
    for key in config.keys():
        assert key not in kwargs, (
            f"The keyword argument {key} is provided "
            "at the top level and under `kwargs`. Ambiguous."
        )
    kwargs.update(config)

    # Intialize
    cls = classes[class_name]
    try:
        return cls(**kwargs)

    except Exception as err:
        logger.error(
            "Failed to instantiate %s with these arguments:\n  - kwargs: %s",
            cls.__name__,
            kwargs,
        )

        raise err
