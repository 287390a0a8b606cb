"""Public configuration models for jsonyaml."""

from pydantic import BaseModel, ConfigDict

from jsonyaml.codes import UnknownFieldPolicy


class DecodeOptions(BaseModel):
    """Per-call decoding configuration."""
    unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.IGNORE

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def rejects_unknown_fields(self) -> bool:
        return self.unknown_fields == UnknownFieldPolicy.REJECT


STRICT = DecodeOptions(unknown_fields=UnknownFieldPolicy.REJECT)
