"""Response body decoders: lenient by default, strict on request."""

from __future__ import annotations

import enum
import json
from typing import Any, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from .errors import DecodeError
from .records import FORBID_EXTRA


class DecoderPolicy(enum.Enum):
    LENIENT = "lenient"
    STRICT = "strict"


class DefaultDecoder:
    """Decode JSON into records, silently ignoring fields a record does not declare."""

    forbid_extra = False

    def decode(self, data: Union[bytes, str], target: Optional[Type[Any]] = None) -> Any:
        if not data or not data.strip():
            data = "{}"
        if isinstance(target, type) and issubclass(target, BaseModel):
            try:
                return target.model_validate_json(data, context={FORBID_EXTRA: self.forbid_extra})
            except ValidationError as exc:
                raise DecodeError(f"json: cannot decode {target.__name__}: {exc}") from exc
        try:
            return json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"json: invalid response body: {exc}") from exc


class StrictDecoder(DefaultDecoder):
    """Like DefaultDecoder, but any undeclared field is a DecodeError."""

    forbid_extra = True


def decoder_for(policy: DecoderPolicy) -> DefaultDecoder:
    return StrictDecoder() if policy is DecoderPolicy.STRICT else DefaultDecoder()


def install_decoder(client: Any, strict: bool) -> None:
    """Switch ``client`` to strict decoding unless a custom decoder is installed."""

    if not strict:
        return
    current = getattr(client, "decoder", None)
    if current is None or type(current) is DefaultDecoder:
        client.decoder = StrictDecoder()


__all__ = [
    "DecoderPolicy",
    "DefaultDecoder",
    "StrictDecoder",
    "decoder_for",
    "install_decoder",
]
