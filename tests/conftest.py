"""Shared fixtures for Sortium tests.

Uses ScriptedClassifier and ScriptedInput for deterministic, fast tests
without completion API calls.
"""

import pytest

from sortium.config.models import DialogNode, DialogOption
from sortium.core.message_sink import BufferedMessageSink
from sortium.dm.engine import DialogEngine
from sortium.dm.graph import DialogGraph
from sortium.du.prompt import PromptTemplate
from tests.mocks import ScriptedClassifier, ScriptedInput

TEMPLATE_TEXT = (
    "Question: {decision_prompt}\n"
    "Options:\n{option_list}"
    "Answer given: {user_response}\n"
    "Choice:"
)


@pytest.fixture
def shop_nodes() -> list[DialogNode]:
    """Two-node shop dialog with one exit edge."""
    return [
        DialogNode(
            id="start",
            text="Hi",
            options=(
                DialogOption(label="Buy", next_id="catalog"),
                DialogOption(label="Leave", next_id="exit"),
            ),
        ),
        DialogNode(
            id="catalog",
            text="Pick a product",
            options=(
                DialogOption(label="Book", next_id="exit"),
                DialogOption(label="Back", next_id="start"),
            ),
        ),
    ]


@pytest.fixture
def shop_graph(shop_nodes) -> DialogGraph:
    return DialogGraph(shop_nodes)


@pytest.fixture
def template() -> PromptTemplate:
    return PromptTemplate(TEMPLATE_TEXT)


@pytest.fixture
def sink() -> BufferedMessageSink:
    return BufferedMessageSink()


@pytest.fixture
def make_engine(shop_graph, template, sink):
    """
    Factory fixture building an engine over the shop graph.

    Usage:
        def test_something(make_engine):
            engine, classifier, reader = make_engine(["Buy"], ["i want to buy"])
    """

    def _create(answers, lines=None, graph=None, **kwargs):
        classifier = ScriptedClassifier(answers)
        reader = ScriptedInput(lines if lines is not None else ["hello"] * len(answers))
        engine = DialogEngine(
            graph=graph if graph is not None else shop_graph,
            template=template,
            classifier=classifier,
            read_input=reader,
            sink=sink,
            **kwargs,
        )
        return engine, classifier, reader

    return _create
