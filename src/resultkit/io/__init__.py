"""Conversion between Result and plain data."""

from .envelope import Envelope, ErrorEnvelope, SuccessEnvelope, from_envelope, to_envelope

__all__ = ["Envelope", "SuccessEnvelope", "ErrorEnvelope", "to_envelope", "from_envelope"]
