"""Parameter container for vCard properties.

Parameters (called "sub types" in older vCard documents) are stored as an
ordered, case-insensitive multimap. Names are normalized to upper case;
each name keeps the position of its first insertion.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from cardprop.core.types import (
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)

# Parameter names (upper case) and the versions that define them. Names not
# listed here are allowed in every version.
_SUPPORTED_VERSIONS: dict[str, frozenset[VCardVersion]] = {
    "ALTID": frozenset({VCardVersion.V4_0}),
    "CALSCALE": frozenset({VCardVersion.V4_0}),
    "CHARSET": frozenset({VCardVersion.V2_1}),
    "ENCODING": frozenset({VCardVersion.V2_1, VCardVersion.V3_0}),
    "GEO": frozenset({VCardVersion.V4_0}),
    "INDEX": frozenset({VCardVersion.V4_0}),
    "LABEL": frozenset({VCardVersion.V4_0}),
    "LEVEL": frozenset({VCardVersion.V4_0}),
    "MEDIATYPE": frozenset({VCardVersion.V4_0}),
    "PID": frozenset({VCardVersion.V4_0}),
    "PREF": frozenset({VCardVersion.V4_0}),
    "SORT-AS": frozenset({VCardVersion.V4_0}),
    "TZ": frozenset({VCardVersion.V4_0}),
}

_ENCODINGS: dict[VCardVersion, frozenset[str]] = {
    VCardVersion.V2_1: frozenset({"QUOTED-PRINTABLE", "BASE64", "8BIT", "7BIT"}),
    VCardVersion.V3_0: frozenset({"B"}),
    VCardVersion.V4_0: frozenset(),
}

_NAME_PATTERN_V21 = re.compile(r"^[\x21-\x7e]+$")
_NAME_INVALID_V21 = set("[]=:.,;")
_NAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
_PID_PATTERN = re.compile(r"^\d+(\.\d+)?$")
_CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def _key(name: str) -> str:
    return name.upper()


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class VCardParameters:
    """Ordered, case-insensitive multimap of parameter names to values."""

    def __init__(self, other: Optional["VCardParameters"] = None) -> None:
        """Create an empty container, or a deep copy of ``other``."""
        self._params: dict[str, list[str]] = {}
        if other is not None:
            for name, values in other._params.items():
                self._params[name] = list(values)

    # -----------------------------------------------------------------
    # Generic multimap access
    # -----------------------------------------------------------------

    def first(self, name: str) -> Optional[str]:
        """Get the first value of a parameter, or None."""
        values = self._params.get(_key(name))
        return values[0] if values else None

    def get(self, name: str) -> list[str]:
        """Get all values of a parameter (a new list, possibly empty)."""
        return list(self._params.get(_key(name), []))

    def put(self, name: str, value: str) -> None:
        """Add a value to a parameter, keeping any existing values."""
        if value is None:
            raise ValueError(f"Parameter {name} cannot have a None value")
        self._params.setdefault(_key(name), []).append(value)

    def replace(self, name: str, value: Optional[str]) -> list[str]:
        """Replace every value of a parameter. ``None`` removes it.

        Returns:
            The values that were replaced.
        """
        old = self.remove_all(name)
        if value is not None:
            self.put(name, value)
        return old

    def remove_all(self, name: str) -> list[str]:
        """Remove a parameter entirely, returning its former values."""
        return self._params.pop(_key(name), [])

    def remove(self, name: str, value: str) -> bool:
        """Remove a single value from a parameter."""
        key = _key(name)
        values = self._params.get(key)
        if not values or value not in values:
            return False
        values.remove(value)
        if not values:
            del self._params[key]
        return True

    def names(self) -> list[str]:
        """Parameter names in insertion order."""
        return list(self._params)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate ``(name, value)`` pairs in order."""
        for name, values in self._params.items():
            for value in values:
                yield name, value

    def copy(self) -> "VCardParameters":
        """Return an independent deep copy."""
        return VCardParameters(self)

    def clear(self) -> None:
        self._params.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._params))

    def __len__(self) -> int:
        return sum(len(values) for values in self._params.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VCardParameters):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"VCardParameters({self._params!r})"

    # -----------------------------------------------------------------
    # Well-known parameters
    # -----------------------------------------------------------------

    @property
    def pref(self) -> Optional[int]:
        """PREF rank (1-100, lower is more preferred), or None."""
        return _to_int(self.first("PREF"))

    @pref.setter
    def pref(self, pref: Optional[int]) -> None:
        if pref is not None and not 1 <= pref <= 100:
            raise ValueError(f"PREF must be between 1 and 100, got {pref}")
        self.replace("PREF", None if pref is None else str(pref))

    @property
    def language(self) -> Optional[str]:
        return self.first("LANGUAGE")

    @language.setter
    def language(self, language: Optional[str]) -> None:
        self.replace("LANGUAGE", language)

    @property
    def index(self) -> Optional[int]:
        """Sorted position among properties of the same type."""
        return _to_int(self.first("INDEX"))

    @index.setter
    def index(self, index: Optional[int]) -> None:
        if index is not None and index <= 0:
            raise ValueError(f"INDEX must be greater than zero, got {index}")
        self.replace("INDEX", None if index is None else str(index))

    @property
    def value(self) -> Optional[VCardDataType]:
        """Data type declared by the VALUE parameter."""
        return VCardDataType.find(self.first("VALUE"))

    @value.setter
    def value(self, data_type: Optional[VCardDataType]) -> None:
        self.replace("VALUE", None if data_type is None else data_type.wire_name)

    @property
    def encoding(self) -> Optional[str]:
        return self.first("ENCODING")

    @encoding.setter
    def encoding(self, encoding: Optional[str]) -> None:
        self.replace("ENCODING", encoding)

    @property
    def charset(self) -> Optional[str]:
        return self.first("CHARSET")

    @charset.setter
    def charset(self, charset: Optional[str]) -> None:
        self.replace("CHARSET", charset)

    @property
    def alt_id(self) -> Optional[str]:
        return self.first("ALTID")

    @alt_id.setter
    def alt_id(self, alt_id: Optional[str]) -> None:
        self.replace("ALTID", alt_id)

    @property
    def types(self) -> list[str]:
        """All TYPE values."""
        return self.get("TYPE")

    def add_type(self, type_value: str) -> None:
        self.put("TYPE", type_value)

    @property
    def pids(self) -> list[tuple[int, Optional[int]]]:
        """PID values as ``(local_id, clientpidmap_ref)`` pairs.

        Malformed values are left out; ``validate`` reports them.
        """
        pids: list[tuple[int, Optional[int]]] = []
        for value in self.get("PID"):
            if not _PID_PATTERN.match(value):
                continue
            local_id, _, ref = value.partition(".")
            pids.append((int(local_id), int(ref) if ref else None))
        return pids

    def add_pid(self, local_id: int, clientpidmap_ref: Optional[int] = None) -> None:
        """Add a PID value (e.g. ``1.2``)."""
        value = str(local_id) if clientpidmap_ref is None else f"{local_id}.{clientpidmap_ref}"
        self.put("PID", value)

    def remove_pids(self) -> None:
        self.remove_all("PID")

    # -----------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------

    def validate(self, version: VCardVersion) -> list[ValidationWarning]:
        """Check the parameters against the rules of a vCard version.

        Args:
            version: Version the parameters will be written as.

        Returns:
            Warnings in parameter order; empty if nothing is wrong.
        """
        warnings: list[ValidationWarning] = []

        def warn(message: str) -> None:
            warnings.append(ValidationWarning(message, WarningKind.PARAMETER_INVALID))

        for name, values in self._params.items():
            if not _is_valid_name(name, version):
                warn(f"Parameter name {name} contains characters not allowed in version {version}.")

            supported = _SUPPORTED_VERSIONS.get(name)
            if supported is not None and version not in supported:
                warn(
                    f"Parameter {name} is not supported by version {version}.  "
                    f"Supported versions are: {_format_versions(supported)}"
                )

            for value in values:
                if _CONTROL_PATTERN.search(value):
                    warn(f"Parameter {name} has a value that contains control characters.")
                message = _check_value(name, value, version)
                if message is not None:
                    warn(message)

        return warnings


def _is_valid_name(name: str, version: VCardVersion) -> bool:
    if version is VCardVersion.V2_1:
        return bool(_NAME_PATTERN_V21.match(name)) and not (_NAME_INVALID_V21 & set(name))
    return bool(_NAME_PATTERN.match(name))


def _check_value(name: str, value: str, version: VCardVersion) -> Optional[str]:
    """Return a warning message for an invalid well-known parameter value."""
    if name == "ENCODING":
        allowed = _ENCODINGS[version]
        if allowed and value.upper() not in allowed:
            return (
                f"ENCODING value \"{value}\" is not supported by version {version}.  "
                f"Supported values are: {sorted(allowed)}"
            )
        return None

    if name == "VALUE":
        data_type = VCardDataType.find(value)
        if data_type is None:
            if value.lower().startswith("x-"):
                return None
            return f"VALUE \"{value}\" is not a recognized data type."
        if not data_type.is_supported(version):
            return f"VALUE \"{value}\" is not supported by version {version}."
        return None

    if name == "PREF":
        pref = _to_int(value)
        if pref is None or not 1 <= pref <= 100:
            return f"PREF must be an integer between 1 and 100, got \"{value}\"."
        return None

    if name == "INDEX":
        index = _to_int(value)
        if index is None or index <= 0:
            return f"INDEX must be an integer greater than zero, got \"{value}\"."
        return None

    if name == "PID":
        if not _PID_PATTERN.match(value):
            return f"PID value \"{value}\" is not in the form <local-id> or <local-id>.<clientpidmap-ref>."
        return None

    if name == "CALSCALE":
        if value.lower() != "gregorian" and not value.lower().startswith("x-"):
            return f"CALSCALE value \"{value}\" is not recognized."
        return None

    return None


def _format_versions(versions: frozenset[VCardVersion]) -> str:
    ordered = [v for v in VCardVersion if v in versions]
    return "[" + ", ".join(str(v) for v in ordered) + "]"
