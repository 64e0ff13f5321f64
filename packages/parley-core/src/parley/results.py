"""Step and plan outcome records exchanged with the plan executor."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StepResult(BaseModel):
    """Outcome of a single provider call."""

    model_config = {"frozen": True}

    step_type: str
    output: str
    success: bool

    @classmethod
    def succeeded(cls, step_type: str, output: str) -> StepResult:
        return cls(step_type=step_type, output=output, success=True)

    @classmethod
    def failed(cls, step_type: str, output: str) -> StepResult:
        return cls(step_type=step_type, output=output, success=False)

    @classmethod
    def from_error(cls, step_type: str, error: Exception) -> StepResult:
        """Record a failed call, using the error description as output."""
        return cls.failed(step_type, str(error))


class ExecutionResult(BaseModel):
    """Aggregate outcome of a plan, built by the executor."""

    model_config = {"frozen": True}

    success: bool
    final_response: str
    step_results: list[StepResult] = Field(default_factory=list)
