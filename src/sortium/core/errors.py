"""Core dialog-runner errors."""


class SortiumError(Exception):
    """Base class for all Sortium errors."""

    pass


class ConfigError(SortiumError):
    """Raised when a dialog, template, or settings source is invalid."""


class TemplateError(ConfigError):
    """Raised when the decision prompt template cannot be rendered."""

    pass


class CredentialsError(ConfigError):
    """Raised when the classifier credential is missing from the environment."""

    pass


class DialogLookupError(SortiumError):
    """Raised when the cursor points at a node id absent from the graph."""

    def __init__(self, node_id: str):
        super().__init__(f"Dialog node not found: {node_id!r}")
        self.node_id = node_id


class EngineStateError(SortiumError):
    """Raised when the engine is driven outside its valid states."""

    pass


class ClassifierError(SortiumError):
    """Raised when intent classification fails."""

    pass


class ClassifierTransportError(ClassifierError):
    """Error from the underlying completion provider or network."""

    pass


class ClassifierResponseError(ClassifierError):
    """Failed to parse the completion response."""

    pass


class ClassifierEmptyResponseError(ClassifierError):
    """Completion response carried no candidates."""

    def __init__(self, message: str = "Classifier returned no answer"):
        super().__init__(message)
