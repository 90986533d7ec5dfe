"""Dialog engine: the turn-by-turn state machine.

Each turn resolves the current node, shows it, reads one line from the
user, asks the classifier which option the line means, and follows the
matching edge. A classifier answer outside the node's labels re-presents
the same node; only an ``exit`` edge ends the conversation. Lookup and
classifier failures propagate and end the run.
"""

from dataclasses import dataclass

from sortium.config.models import DialogNode
from sortium.config.settings import AgentConfig
from sortium.core.constants import OPTION_BULLET, START_NODE_ID, EngineState, TurnOutcome
from sortium.core.errors import EngineStateError
from sortium.core.interfaces import IInputReader, IIntentClassifier
from sortium.core.message_sink import MessageSink
from sortium.dm.graph import DialogGraph
from sortium.dm.matching import match_option
from sortium.du.prompt import PromptTemplate
from sortium.observability.logging import ContextLogger

logger = ContextLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one completed turn."""

    node_id: str
    user_input: str
    classification: str
    outcome: TurnOutcome
    matched_label: str | None = None
    next_id: str | None = None


class DialogEngine:
    """State machine over a dialog graph.

    The cursor (``current_id``) is the only run-time state and belongs to
    this instance. One engine drives one conversation.
    """

    def __init__(
        self,
        graph: DialogGraph,
        template: PromptTemplate,
        classifier: IIntentClassifier,
        read_input: IInputReader,
        sink: MessageSink,
        agent: AgentConfig | None = None,
        max_turns: int | None = None,
    ):
        self.graph = graph
        self.template = template
        self.classifier = classifier
        self.read_input = read_input
        self.sink = sink
        self.agent = agent or AgentConfig()
        self.max_turns = max_turns
        self.current_id = START_NODE_ID
        self.state = EngineState.RUNNING
        self.turns = 0

    @property
    def is_running(self) -> bool:
        return self.state is EngineState.RUNNING

    def reset(self) -> None:
        """Return to the start node."""
        self.current_id = START_NODE_ID
        self.state = EngineState.RUNNING
        self.turns = 0

    def say(self, text: str) -> None:
        """Send an agent line."""
        self.sink.send(f"{self.agent.name}: {text}")

    def present(self, node: DialogNode) -> None:
        """Show the node text followed by its options."""
        self.say(node.text)
        for label in node.labels:
            self.sink.send(f"{OPTION_BULLET}{label}")

    def step(self) -> TurnResult:
        """Run one turn.

        Raises:
            DialogLookupError: If the cursor names a missing node.
            ClassifierError: If classification fails.
            EngineStateError: If the conversation already ended.
        """
        if not self.is_running:
            raise EngineStateError("Conversation has already terminated")

        node = self.graph.lookup(self.current_id)
        log = logger.with_context(node_id=node.id)

        self.present(node)
        user_input = self.read_input()
        prompt = self.template.build_prompt(node, user_input)
        classification = self.classifier.classify(prompt).strip()
        self.turns += 1

        option = match_option(node.options, classification)
        if option is None:
            log.info(f"No option of {node.id!r} matches {classification!r}")
            self.say(self.agent.not_understood)
            return TurnResult(
                node_id=node.id,
                user_input=user_input,
                classification=classification,
                outcome=TurnOutcome.NO_MATCH,
            )

        if option.is_exit:
            log.info(f"Exit taken from {node.id!r} via {option.label!r}")
            self.say(self.agent.farewell)
            self.state = EngineState.TERMINATED
            outcome = TurnOutcome.TERMINATED
        else:
            log.debug(f"Transition {node.id!r} -> {option.next_id!r} via {option.label!r}")
            self.current_id = option.next_id
            outcome = TurnOutcome.ADVANCED

        return TurnResult(
            node_id=node.id,
            user_input=user_input,
            classification=classification,
            outcome=outcome,
            matched_label=option.label,
            next_id=option.next_id,
        )

    def run(self) -> list[TurnResult]:
        """Drive turns until an exit edge is taken.

        Returns:
            The results of every turn, in order.
        """
        results: list[TurnResult] = []
        while self.is_running:
            if self.max_turns is not None and self.turns >= self.max_turns:
                raise EngineStateError(f"Conversation exceeded {self.max_turns} turns")
            results.append(self.step())
        return results
