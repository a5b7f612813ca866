"""Property parameters and ordered parameter lists.

Classes:
    - Parameter: Immutable NAME=value pair (name compared case-insensitively)
    - ParameterList: Ordered collection of parameters owned by one property

Parameter names are normalised to upper case on construction, values are kept
verbatim. Values containing COLON, SEMICOLON or COMMA are double-quoted when
written back to a content line.

Reference: RFC 5545
    - Section 3.1: Content lines (param, param-value, quoted-string)
    - Section 3.2: Property parameters
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# =============================================================================
# Content Line Constants (RFC 5545, section 3.1)
# =============================================================================

PARAMETER_SEPARATOR = ";"  # Separates parameters from the name and each other
PARAMETER_VALUE_SEPARATOR = "="  # Separates parameter name and value
QUOTE = '"'  # DQUOTE around param-values with special characters

_QUOTE_REQUIRED_CHARACTERS = frozenset(":;,")

# =============================================================================
# Parameter Classes
# =============================================================================


@dataclass(frozen=True)
class Parameter:
    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Parameter name cannot be empty")

        if QUOTE in self.value:
            raise ValueError(f"Parameter value cannot contain a double quote: {self.value!r}")

        # Frozen dataclass: bypass __setattr__ to normalise the name
        object.__setattr__(self, "name", self.name.upper())

    def to_ical(self) -> str:
        """Serialize as NAME=value, quoting the value where required."""
        value = self.value
        if any(character in _QUOTE_REQUIRED_CHARACTERS for character in value):
            value = f"{QUOTE}{value}{QUOTE}"
        return f"{self.name}{PARAMETER_VALUE_SEPARATOR}{value}"

    def __str__(self) -> str:
        return self.to_ical()


ParameterLike = Parameter | tuple[str, str]


def _as_parameter(item: ParameterLike) -> Parameter:
    if isinstance(item, Parameter):
        return item
    name, value = item
    return Parameter(name, value)


class ParameterList:
    """Ordered list of parameters with case-insensitive name lookup.

    Order of insertion is preserved and duplicates are allowed; whether a
    duplicate is meaningful is decided by the consumer of the list.

    Usage:
        parameters = ParameterList([("TZID", "Europe/Copenhagen"), ("X-FOO", "bar")])
        parameters.get("tzid").value  # "Europe/Copenhagen"
        parameters.to_ical()          # ";TZID=Europe/Copenhagen;X-FOO=bar"
    """

    _parameters: list[Parameter]

    def __init__(self, parameters: Iterable[ParameterLike] = ()) -> None:
        self._parameters = [_as_parameter(item) for item in parameters]

    def get(self, name: str) -> Parameter | None:
        """Return the first parameter with the given name, or None."""
        name = name.upper()
        for parameter in self._parameters:
            if parameter.name == name:
                return parameter
        return None

    def get_all(self, name: str) -> list[Parameter]:
        name = name.upper()
        return [parameter for parameter in self._parameters if parameter.name == name]

    def add(self, parameter: ParameterLike) -> None:
        self._parameters.append(_as_parameter(parameter))

    def remove(self, name: str) -> None:
        """Remove every parameter with the given name (no error if absent)."""
        name = name.upper()
        self._parameters = [parameter for parameter in self._parameters if parameter.name != name]

    def replace(self, parameter: ParameterLike) -> None:
        """Remove all parameters of the same name, then append the new one."""
        parameter = _as_parameter(parameter)
        self.remove(parameter.name)
        self._parameters.append(parameter)

    def copy(self) -> ParameterList:
        return ParameterList(self._parameters)

    def to_ical(self) -> str:
        """Serialize as the ;NAME=value suffix of a content line (empty if no parameters)."""
        return "".join(f"{PARAMETER_SEPARATOR}{parameter.to_ical()}" for parameter in self._parameters)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Parameter]:
        return iter(tuple(self._parameters))

    def __len__(self) -> int:
        return len(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterList):
            return NotImplemented
        return self._parameters == other._parameters

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"({parameter.name!r}, {parameter.value!r})" for parameter in self._parameters)
        return f"ParameterList([{items}])"
