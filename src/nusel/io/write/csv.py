"""Module to write log files to CSV."""

import os

__all__ = ["CSVWriter"]


class CSVWriter:
    """Writes data to a CSV file.

    Builds a CSV file to store the output of the selection. It can only be
    used to store relatively basic quantities (scalars, strings, etc.).

    The file handle is held open between two calls to :meth:`append` and
    must be released with :meth:`close`. The writer can also be used as a
    context manager, which closes the file on exit:

    .. code-block:: python

        with CSVWriter('output.csv') as writer:
            writer.append({'index': 0, 'category': 1})

    Typical configuration should look like:

    .. code-block:: yaml

        ana:
          selection_1muNp:
            ...
            overwrite: true
    """

    name = "csv"

    def __init__(
        self,
        file_name="output.csv",
        overwrite=False,
        append=False,
        accept_missing=False,
    ):
        """Initialize the basics of the output file.

        Parameters
        ----------
        file_name : str, default 'output.csv'
            Name of the output CSV file
        overwrite : bool, default False
            If True, overwrite the output file if it already exists
        append : bool, default False
            If True, add more rows to an existing CSV file
        accept_missing : bool, default False
            Tolerate missing keys
        """
        # Check that output file does not already exist, if requested
        if not overwrite and not append and os.path.isfile(file_name):
            raise FileExistsError(f"File with name {file_name} already exists.")

        # Store persistent attributes
        self.file_name = file_name
        self.append_file = append
        self.accept_missing = accept_missing
        self.result_keys = None
        self._file = None
        if self.append_file:
            if not os.path.isfile(file_name):
                raise FileNotFoundError(
                    f"File not found at path: {file_name}. When using "
                    "`append=True` in CSVWriter, the file must exist at "
                    "the prescribed path before data is written to it."
                )

            with open(self.file_name, "r", encoding="utf-8") as in_file:
                self.result_keys = in_file.readline().rstrip("\n").split(",")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def is_open(self):
        """Whether the underlying file handle is currently open.

        Returns
        -------
        bool
            `True` if the file is open
        """
        return self._file is not None

    def create(self, result_blob):
        """Initialize the header of the CSV file, record the keys to be stored.

        Parameters
        ----------
        result_blob : dict
            Dictionary containing one row of output
        """
        # Save the list of keys to store
        self.result_keys = list(result_blob.keys())

        # Create a header and write it to file
        self.close()
        self._file = open(self.file_name, "w", encoding="utf-8")
        header_str = ",".join(self.result_keys)
        self._file.write(header_str + "\n")

    def append(self, result_blob):
        """Append the CSV file with one row of output.

        Parameters
        ----------
        result_blob : dict
            Dictionary containing one row of output
        """
        # Fetch the values to store
        if self.result_keys is None:
            # If this function has never been called, initialize the CSV file
            self.create(result_blob)

        else:
            # If it has, check that the list of keys is identical
            if list(result_blob.keys()) != self.result_keys:
                # If it is not identical, check the discrepancies
                missing = self.array_diff(self.result_keys, result_blob.keys())
                excess = self.array_diff(result_blob.keys(), self.result_keys)
                if len(excess):
                    raise AssertionError(
                        "There are keys in this entry which were not "
                        "present when the CSV file was initialized. "
                        f"New keys: {sorted(excess)}"
                    )

                if len(missing) and not self.accept_missing:
                    raise AssertionError(
                        "There are keys missing in this entry which were "
                        "present when the CSV file was initialized. "
                        f"Missing keys: {sorted(missing)}"
                    )

                new_result_blob = {k: -1 for k in self.result_keys}
                for k, v in result_blob.items():
                    new_result_blob[k] = v
                result_blob = new_result_blob

        # Append file
        if self._file is None:
            self._file = open(self.file_name, "a", encoding="utf-8")

        result_str = ",".join([str(result_blob[k]) for k in self.result_keys])
        self._file.write(result_str + "\n")
        self._file.flush()

    def close(self):
        """Closes the underlying file handle, if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    @staticmethod
    def array_diff(array_x, array_y):
        """Compare the content of two arrays.

        This functions returns the elements of the first array that
        do not appear in the second array.

        Parameters
        ----------
        array_x : List[str]
            First array of strings
        array_y : List[str]
            Second array of strings

        Returns
        -------
        Set[str]
            Set of keys that appear in `array_x` but not in `array_y`.
        """
        return set(array_x).difference(set(array_y))
