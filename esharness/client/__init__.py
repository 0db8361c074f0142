"""Elasticsearch HTTP client consumed by the harness."""

from .client import DEFAULT_URL, ESClient
from .decoder import DecoderPolicy, DefaultDecoder, StrictDecoder, decoder_for, install_decoder
from .errors import DecodeError, ElasticError, IndexNotFoundError

__all__ = [
    "DEFAULT_URL",
    "ESClient",
    "DecoderPolicy",
    "DefaultDecoder",
    "StrictDecoder",
    "decoder_for",
    "install_decoder",
    "DecodeError",
    "ElasticError",
    "IndexNotFoundError",
]
