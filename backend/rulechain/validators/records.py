"""Record description — reads per-field rule chains and external keys off a record.

Supported record shapes:
    - pydantic models whose fields are declared with RuleField(...)
    - dataclasses whose fields carry metadata={"rules": ..., "key": ...}
    - plain mappings plus a side table {field: chain | {"rules": chain, "key": key}}

Cross-field rules never reflect over the record directly; they go through a
RecordAccessor built from the described fields.
"""

import dataclasses
import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from rulechain.config import get_settings
from rulechain.exceptions import RecordDescriptionError

CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


class _Missing:
    """Marker for a field name that does not exist on the record."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class FieldSpec(BaseModel):
    """One field of a record as seen by the validator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(description="Internal key, used for cross-field lookups")
    key: str = Field(description="External key, used in the error mapping and labels")
    rules: str = ""
    value: Any = None


def RuleField(rules: str = "", default: Any = ..., *, alias: Optional[str] = None, **kwargs: Any) -> Any:
    """pydantic Field carrying a rule chain, e.g. ``name: str = RuleField("required|alpha", "")``."""
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[get_settings().RULES_METADATA_KEY] = rules
    if alias is not None:
        kwargs["alias"] = alias
    return Field(default, json_schema_extra=extra, **kwargs)


def to_internal_key(name: str) -> str:
    """Convert a referenced field name into the internal snake_case convention."""
    return CAMEL_BOUNDARY_RE.sub(r"_\1", name.strip()).lower()


def _read_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _from_model(record: BaseModel) -> list[FieldSpec]:
    metadata_key = get_settings().RULES_METADATA_KEY
    specs = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        specs.append(FieldSpec(
            name=name,
            key=info.alias or name,
            rules=extra.get(metadata_key) or "",
            value=getattr(record, name, None),
        ))
    return specs


def _from_dataclass(record: Any) -> list[FieldSpec]:
    settings = get_settings()
    specs = []
    for f in dataclasses.fields(record):
        specs.append(FieldSpec(
            name=f.name,
            key=f.metadata.get(settings.KEY_METADATA_KEY) or f.name,
            rules=f.metadata.get(settings.RULES_METADATA_KEY) or "",
            value=getattr(record, f.name),
        ))
    return specs


def _native_fields(record: Any) -> Optional[list[FieldSpec]]:
    """Fields as the record declares them, or None for unsupported shapes."""
    if isinstance(record, BaseModel):
        return _from_model(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return _from_dataclass(record)
    if isinstance(record, Mapping):
        return [FieldSpec(name=str(k), key=str(k), value=v) for k, v in record.items()]
    return None


def _from_schema(record: Any, schema: Mapping) -> list[FieldSpec]:
    """Chains come only from the side table; every record field stays visible for lookups."""
    settings = get_settings()
    native = _native_fields(record)
    if native is None:
        native = [
            FieldSpec(name=k, key=k, value=v)
            for k, v in vars(record).items()
            if not k.startswith("_")
        ]

    specs = {f.name: f.model_copy(update={"rules": ""}) for f in native}
    for name, entry in schema.items():
        if isinstance(entry, Mapping):
            rules = entry.get(settings.RULES_METADATA_KEY) or ""
            key = entry.get(settings.KEY_METADATA_KEY)
        else:
            rules = entry or ""
            key = None
        current = specs.get(name) or FieldSpec(name=name, key=name, value=_read_value(record, name))
        specs[name] = current.model_copy(update={"rules": rules, "key": key or current.key})
    return list(specs.values())


def describe_record(record: Any, schema: Optional[Mapping] = None) -> list[FieldSpec]:
    """Describe a record as an ordered list of FieldSpec.

    With a side table, chains and key overrides come only from the table; record
    fields it does not name are kept with an empty chain so cross-field rules can
    still read them.

    Args:
        record: pydantic model, dataclass instance, or mapping
        schema: Optional side table {field: chain | {"rules": chain, "key": key}}

    Returns:
        FieldSpecs in declared order (side-table-only fields last)

    Raises:
        RecordDescriptionError: if the record shape is not supported
    """
    if schema is not None:
        if isinstance(record, type) or (
            not isinstance(record, Mapping) and not hasattr(record, "__dict__")
        ):
            raise RecordDescriptionError(f"Cannot read fields from {type(record).__name__}")
        return _from_schema(record, schema)

    fields = _native_fields(record)
    if fields is None:
        raise RecordDescriptionError(
            f"Unsupported record type {type(record).__name__}: "
            "expected a pydantic model, a dataclass instance, or a mapping"
        )
    return fields


class RecordAccessor:
    """Read-only, name-scoped view of one record's field values."""

    def __init__(self, fields: list[FieldSpec]):
        self._by_name = {f.name: f.value for f in fields}
        self._by_key = {f.key: f.value for f in fields}

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RecordAccessor":
        return cls([FieldSpec(name=k, key=k, value=v) for k, v in values.items()])

    def lookup(self, name: str) -> Any:
        """Value of the referenced field, or MISSING if the record has no such field."""
        for candidate in (name, to_internal_key(name)):
            if candidate in self._by_name:
                return self._by_name[candidate]
        if name in self._by_key:
            return self._by_key[name]
        return MISSING

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not MISSING
