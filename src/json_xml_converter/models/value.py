"""JSON value tree model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class JsonNull:
    """The JSON ``null`` literal."""

    @property
    def text(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class JsonBool:
    """A JSON boolean."""

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise ValueError(f"JsonBool expects bool, got {type(self.value).__name__}")

    @property
    def text(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class JsonNumber:
    """
    A JSON number.

    Integers are kept as ``int`` and everything else as ``Decimal`` so the
    digits written in the source survive conversion to text.
    """

    value: Union[int, Decimal]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, Decimal)):
            raise ValueError(f"JsonNumber expects int or Decimal, got {type(self.value).__name__}")
        if isinstance(self.value, Decimal) and not self.value.is_finite():
            raise ValueError(f"JsonNumber cannot hold non-finite value {self.value}")

    @property
    def text(self) -> str:
        if isinstance(self.value, int):
            # Decimal converts ints without the interpreter's digit limit
            return str(Decimal(self.value))
        return str(self.value)


@dataclass(frozen=True)
class JsonString:
    """A JSON string."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"JsonString expects str, got {type(self.value).__name__}")

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonObject:
    """
    A JSON object as an ordered sequence of ``(key, value)`` pairs.

    Keys are not required to be unique. Consumers that need a mapping use
    ``merged_pairs``, where a repeated key overwrites the earlier value while
    keeping the position of its first occurrence.
    """

    pairs: Tuple[Tuple[str, "Value"], ...] = ()

    def __post_init__(self):
        for key, _ in self.pairs:
            if not isinstance(key, str):
                raise ValueError(f"JsonObject keys must be str, got {type(key).__name__}")

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> List[str]:
        return [key for key, _ in self.merged_pairs()]

    def get(self, key: str, default: Optional["Value"] = None) -> Optional["Value"]:
        for pair_key, value in reversed(self.pairs):
            if pair_key == key:
                return value
        return default

    def merged_pairs(self) -> List[Tuple[str, "Value"]]:
        merged: Dict[str, "Value"] = {}
        for key, value in self.pairs:
            merged[key] = value
        return list(merged.items())


@dataclass(frozen=True)
class JsonArray:
    """A JSON array."""

    items: Tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)


Value = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonObject, JsonArray]


def to_value(data: Any) -> Value:
    """
    Build a Value tree from plain Python data.

    Already-built Values are returned unchanged, so this also finishes trees
    that were only partly converted (as ``json.loads`` hooks produce).

    Args:
        data: dict, list, tuple, str, int, float, Decimal, bool or None

    Returns:
        The equivalent Value

    Raises:
        TypeError: If data contains an unsupported type
    """
    if isinstance(data, (JsonNull, JsonBool, JsonNumber, JsonString, JsonObject, JsonArray)):
        return data
    if data is None:
        return JsonNull()
    # bool before int: bool is an int subclass
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, Decimal)):
        return JsonNumber(data)
    if isinstance(data, float):
        return JsonNumber(Decimal(repr(data)))
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, dict):
        return JsonObject(tuple((str(key), to_value(value)) for key, value in data.items()))
    if isinstance(data, (list, tuple)):
        return JsonArray(tuple(to_value(item) for item in data))
    raise TypeError(f"Unsupported value type: {type(data).__name__}")


def to_python(value: Value) -> Any:
    """
    Convert a Value tree back to plain Python data.

    Objects become dicts (a repeated key keeps its last value) and arrays
    become lists.
    """
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, (JsonBool, JsonNumber, JsonString)):
        return value.value
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.merged_pairs()}
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    raise TypeError(f"Unsupported value type: {type(value).__name__}")
