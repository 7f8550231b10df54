"""Category name -> debounce delay lookup tables.

The debouncer itself never reads these tables. A calling layer resolves the
delay for the selected category and hands it to ``Debouncer.reconfigure``.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from lull.config import validate_delay
from lull.errors import UnknownCategory


class DelayTable(Mapping[str, float]):
    """Read-only mapping from category name to delay in seconds.

    Every value is validated on construction, so a table that exists only
    holds usable delays.
    """

    __slots__ = ("_delays",)

    def __init__(self, delays: Mapping[str, float]) -> None:
        self._delays = MappingProxyType(
            {name: validate_delay(value, f"delay for {name!r}") for name, value in delays.items()}
        )

    @classmethod
    def from_milliseconds(cls, delays: Mapping[str, float]) -> "DelayTable":
        """Build a table from values written in milliseconds."""
        converted = {name: validate_delay(value, f"delay for {name!r}") / 1000.0 for name, value in delays.items()}
        return cls(converted)

    def resolve(self, category: str) -> float:
        """Return the delay for *category*.

        Raises:
            UnknownCategory: The table has no such category.
        """
        try:
            return self._delays[category]
        except KeyError:
            known = ", ".join(repr(name) for name in self._delays)
            raise UnknownCategory(f"Unknown category {category!r}. Known: {known}") from None

    def __getitem__(self, category: str) -> float:
        return self.resolve(category)

    def __iter__(self) -> Iterator[str]:
        return iter(self._delays)

    def __len__(self) -> int:
        return len(self._delays)

    def __repr__(self) -> str:
        return f"DelayTable({dict(self._delays)!r})"


DEFAULT_QUESTION_TYPE = "page load"

# "page load" lets the first save go out almost at once; the other types
# trade latency for fewer saves while the user is still answering.
DEFAULT_QUESTION_TYPES = DelayTable.from_milliseconds(
    {
        "multiple choice": 1,
        "essay": 1000,
        "math": 500,
        "page load": 1,
    }
)
