"""
Data sources that supply raw trade dataset lines.

A data source only has to produce the dataset's lines in order. Failure to
open the data raises DataSourceUnavailableError; an I/O failure part way
through raises DataSourceReadError after the lines read so far were yielded.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from importlib import resources
from pathlib import Path
from typing import Union

from ..errors import DataSourceReadError, DataSourceUnavailableError


class BaseDataSource(ABC):
    """Base class for trade dataset sources."""

    @abstractmethod
    def iter_lines(self) -> Iterator[str]:
        """
        Yield the dataset's lines in input order, without line terminators.

        Raises:
            DataSourceUnavailableError: If the dataset cannot be opened
            DataSourceReadError: If reading fails part way through
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human readable location of the dataset, used in log events."""
        pass

    def _read_stream(self, stream: Iterable[str]) -> Iterator[str]:
        lines_read = 0
        try:
            for line in stream:
                lines_read += 1
                yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceReadError(
                f"Error reading trade dataset {self.describe()}: {e}",
                source=self.describe(),
                lines_read=lines_read,
            ) from e


class FileDataSource(BaseDataSource):
    """Reads the dataset from a text file on disk."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def iter_lines(self) -> Iterator[str]:
        try:
            stream = open(self.path, encoding=self.encoding)
        except (OSError, LookupError) as e:
            raise DataSourceUnavailableError(
                f"Trade dataset cannot be opened at {self.path}: {e}",
                source=self.describe(),
            ) from e

        with stream:
            yield from self._read_stream(stream)

    def describe(self) -> str:
        return str(self.path)


class PackageResourceDataSource(BaseDataSource):
    """Reads the dataset bundled as a resource inside an installed package."""

    def __init__(self, package: str, resource: str = "Trades.data", encoding: str = "utf-8"):
        self.package = package
        self.resource = resource
        self.encoding = encoding

    def iter_lines(self) -> Iterator[str]:
        try:
            stream = resources.files(self.package).joinpath(self.resource).open(
                "r", encoding=self.encoding
            )
        except (ModuleNotFoundError, OSError, LookupError) as e:
            raise DataSourceUnavailableError(
                f"Trade dataset resource {self.describe()} cannot be opened: {e}",
                source=self.describe(),
            ) from e

        with stream:
            yield from self._read_stream(stream)

    def describe(self) -> str:
        return f"{self.package}/{self.resource}"


class LinesDataSource(BaseDataSource):
    """Serves dataset lines already held in memory."""

    def __init__(self, lines: Iterable[str], name: str = "<memory>"):
        self.lines = tuple(lines)
        self.name = name

    def iter_lines(self) -> Iterator[str]:
        for line in self.lines:
            yield line.rstrip("\r\n")

    def describe(self) -> str:
        return self.name

    @classmethod
    def from_text(cls, text: str, name: str = "<memory>") -> "LinesDataSource":
        """Build a source from a block of newline separated dataset text."""
        return cls(text.splitlines(), name=name)
