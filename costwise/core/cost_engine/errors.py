"""Errors raised by the cost engine.

These are plain ``ValueError`` subclasses so the engine stays usable outside
the web layer; the API maps them onto HTTP responses.
"""


class CostEngineError(ValueError):
    code = "COST_ENGINE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParametersError(CostEngineError):
    code = "INVALID_PARAMETERS"


class UnsupportedProjectTypeError(CostEngineError):
    code = "UNSUPPORTED_PROJECT_TYPE"

    def __init__(self, project_type: str):
        super().__init__(f"Unsupported project type: {project_type}")
        self.project_type = project_type


class InvalidBaseCostError(CostEngineError):
    code = "INVALID_BASE_COST"


class InvalidMultiplierError(CostEngineError):
    code = "INVALID_MULTIPLIERS"


class InvalidProjectCostError(CostEngineError):
    code = "INVALID_PROJECT_COST"
