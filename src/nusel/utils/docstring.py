"""Docstring inheritance utilities."""

__all__ = ["inherit_docstring"]

# Numpy-style header of the attribute block
TAB = "    "
HEADER = f"Attributes\n{TAB}----------\n"


def attribute_block(cls):
    """Extracts the attribute block of a numpy-style class docstring.

    Parameters
    ----------
    cls : type
        Class to extract the attribute descriptions from

    Returns
    -------
    str
        Attribute block, without its header (empty if there is none)
    """
    docstr = cls.__doc__ or ""
    if HEADER not in docstr:
        return ""

    block = docstr.split(HEADER)[-1].rstrip() + "\n"
    if "----" in block:
        # Another section follows, drop it along with its title line
        block = "\n".join(block.split("----")[0].split("\n")[:-1]).rstrip() + "\n"

    return block


def inherit_docstring(*parents):
    """Inherits docstring attributes of a parent class.

    Only handles numpy-style docstrings.

    Parameters
    ----------
    *parents : List[object]
        Parent class(es) to inherit attributes from

    Returns
    -------
    callable
        Class with updated docstring
    """

    def inherit(obj):
        # If there is no attribute block yet, add the header
        doc = obj.__doc__ or ""
        if HEADER not in doc:
            doc = doc.rstrip() + f"\n\n{TAB}{HEADER}"

        # Prepend the parent attribute descriptions to the block
        prestr = "".join(attribute_block(parent) for parent in parents)
        head, tail = doc.split(HEADER, 1)
        obj.__doc__ = head + HEADER + prestr + tail

        return obj

    return inherit
