"""Custom exceptions for the SolarOps application."""


class SolarOpsException(Exception):
    """Base exception for SolarOps application."""
    
    pass


class ValidationError(SolarOpsException):
    """Raised when validation fails."""
    
    pass


class NotFoundError(SolarOpsException):
    """Raised when a resource is not found."""
    
    pass


class ConfigurationError(SolarOpsException):
    """Raised when configuration is invalid."""
    
    pass


class PipelineConfigurationError(ConfigurationError):
    """Raised when the static workflow pipeline definition is inconsistent."""
    
    pass


class UnknownStepError(NotFoundError):
    """Raised when a step key is not part of the workflow pipeline."""

    def __init__(self, step_key: str) -> None:
        super().__init__(f"Unknown workflow step: {step_key}")
        self.step_key = step_key


class UnknownPhaseError(NotFoundError):
    """Raised when a phase id is not part of the workflow pipeline."""

    def __init__(self, phase_id: str) -> None:
        super().__init__(f"Unknown workflow phase: {phase_id}")
        self.phase_id = phase_id
