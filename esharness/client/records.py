"""Base model for everything the client sends or decodes.

Unknown fields are ignored unless validation runs with the ``forbid_extra``
context flag, which StrictDecoder sets; the flag reaches nested records too.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
    model_validator,
)

FORBID_EXTRA = "forbid_extra"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, int, list, dict)) and not value)


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Field names dropped from the serialized form when empty.
    omit_empty: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_unknown_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get(FORBID_EXTRA)) or not isinstance(data, dict):
            return data
        known = set(cls.model_fields)
        known.update(f.alias for f in cls.model_fields.values() if f.alias)
        for key in data:
            if key not in known:
                raise ValueError(f'unknown field "{key}" in {cls.__name__}')
        return data

    @model_serializer(mode="wrap")
    def drop_empty_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in self.omit_empty:
            alias = type(self).model_fields[name].alias
            for key in (name, alias):
                if key in data and _is_empty(data[key]):
                    del data[key]
        return data

    def to_body(self) -> Dict[str, Any]:
        """JSON-ready dict under wire names."""

        return self.model_dump(mode="json", by_alias=True)


__all__ = ["FORBID_EXTRA", "Record"]
