"""Sortium - natural-language dialog tree runner.

Walks a declarative dialog graph and lets users answer each node in free
text. A completion model classifies the answer as one of the node's
option labels and the engine follows the matching edge.

Quick start:
    from sortium import DialogEngine, DialogGraph, PromptTemplate
    from sortium.core import BufferedMessageSink

    engine = DialogEngine(
        graph=DialogGraph.from_file("dialog.yaml"),
        template=PromptTemplate.from_file("prompt_decision_template.yaml"),
        classifier=my_classifier,
        read_input=input,
        sink=BufferedMessageSink(),
    )
    engine.run()
"""

from sortium.__version__ import __version__
from sortium.config.models import DialogNode, DialogOption
from sortium.core.errors import (
    ClassifierEmptyResponseError,
    ClassifierError,
    ClassifierResponseError,
    ClassifierTransportError,
    ConfigError,
    CredentialsError,
    DialogLookupError,
    EngineStateError,
    SortiumError,
    TemplateError,
)
from sortium.dm.engine import DialogEngine, TurnResult
from sortium.dm.graph import DialogGraph
from sortium.du.classifier import LMIntentClassifier
from sortium.du.prompt import PromptTemplate

__all__ = [
    "__version__",
    "DialogEngine",
    "TurnResult",
    "DialogGraph",
    "DialogNode",
    "DialogOption",
    "PromptTemplate",
    "LMIntentClassifier",
    "SortiumError",
    "ConfigError",
    "TemplateError",
    "CredentialsError",
    "DialogLookupError",
    "EngineStateError",
    "ClassifierError",
    "ClassifierTransportError",
    "ClassifierResponseError",
    "ClassifierEmptyResponseError",
]
