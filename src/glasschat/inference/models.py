from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(str, Enum):
    """Why an inference call produced no reply."""

    TRANSPORT = "transport_failure"          # Network or connection error
    EMPTY_RESPONSE = "empty_response"        # Request completed without a body
    MALFORMED_RESPONSE = "malformed_response"  # Body present but not the expected shape


class InferenceFailure(BaseModel):
    """A failed inference call."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = Field(description="Failure category")
    detail: str = Field(default="", description="Human-readable diagnostic")


class InferenceResult(BaseModel):
    """Outcome of a single inference call: either reply text or a failure."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Generated reply text")
    failure: InferenceFailure | None = Field(
        default=None,
        description="Set when the call did not produce a reply"
    )

    @property
    def ok(self) -> bool:
        """True when the call produced reply text."""
        return self.failure is None and self.text is not None

    @classmethod
    def success(cls, text: str) -> "InferenceResult":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, detail: str = "") -> "InferenceResult":
        return cls(failure=InferenceFailure(kind=kind, detail=detail))
