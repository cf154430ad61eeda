"""Module with a parent class of all data structures."""

from dataclasses import asdict, dataclass

import numpy as np

__all__ = ["DataBase"]


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    # Fixed-length attributes as (key, size) or (key, (size, dtype)) pairs
    _fixed_length_attrs = ()

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = ()

    # Attributes specifying coordinates
    _pos_attrs = ()

    # Attributes specifying vector components
    _vec_attrs = ()

    # Boolean attributes
    _bool_attrs = ()

    # Attributes that must never be stored to file
    _skip_attrs = ()

    # Euclidean axis labels
    _axes = ("x", "y", "z")

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Provides two functions:
        - Gives default values to array-like attributes. If a default value was
          provided in the attribute definition, all instances of this class
          would point to the same memory location.
        - Casts booleans provided as numpy integers back to booleans.
        """
        # Provide default values to the variable-length array attributes
        for attr, dtype in self._var_length_attrs:
            if getattr(self, attr) is None:
                if dtype is object:
                    setattr(self, attr, [])
                else:
                    setattr(self, attr, np.empty(0, dtype=dtype))

        # Provide default values to the fixed-length array attributes
        for attr, size in self._fixed_length_attrs:
            if getattr(self, attr) is None:
                if not isinstance(size, tuple):
                    dtype = np.float32
                else:
                    size, dtype = size
                setattr(self, attr, np.full(size, -np.inf, dtype=dtype))

            elif not isinstance(getattr(self, attr), np.ndarray):
                setattr(self, attr, np.asarray(getattr(self, attr), dtype=float))

        # Cast stored 8-bit unsigned integers back to booleans
        for attr in self._bool_attrs:
            if isinstance(getattr(self, attr), (np.uint8, np.bool_)):
                setattr(self, attr, bool(getattr(self, attr)))

    def as_dict(self):
        """Returns the data class as dictionary of (key, value) pairs.

        Returns
        -------
        dict
            Dictionary of attribute names and their values
        """
        return {
            k: v for k, v in asdict(self).items() if not k in self._skip_attrs
        }

    def scalar_dict(self, attrs=None):
        """Returns the data class attributes as a dictionary of scalars.

        This is useful when storing data classes in CSV files, which expect
        a single scalar per column in the table. Positions and vectors are
        expanded with their axis label, other arrays are not stored.

        Parameters
        ----------
        attrs : List[str], optional
            List of attribute names to include in the dictionary. If not
            specified, all the storable keys are included.

        Returns
        -------
        dict
            Dictionary of scalar attributes
        """
        scalar_dict, found = {}, []
        for attr, value in self.as_dict().items():
            # If the attribute is not requested, skip
            if attrs is not None and attr not in attrs:
                continue
            found.append(attr)

            # Dispatch
            if np.isscalar(value):
                scalar_dict[attr] = value

            elif attr in (*self._pos_attrs, *self._vec_attrs):
                for i, v in enumerate(value):
                    scalar_dict[f"{attr}_{self._axes[i]}"] = v

            else:
                assert attrs is None or attr not in attrs, (
                    f"Cannot cast {attr} to scalars, it is neither a scalar, "
                    "a position nor a vector."
                )

        if attrs is not None and len(attrs) != len(found):
            miss = list(set(attrs).difference(set(found)))
            raise AttributeError(
                f"Attribute(s) {miss} do(es) not appear in "
                f"{self.__class__.__name__}."
            )

        return scalar_dict
