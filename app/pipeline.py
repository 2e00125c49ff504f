"""
Request Pipeline

Every create/update/read/delete operation is an explicit, ordered list of
validation steps followed by a terminal handler. Steps share a per-request
context; the first step that returns a Failure stops the run.

Usage:
    pipeline = Pipeline(
        "dishes.read",
        steps=[record_exists(store.dishes, "dishId", "dish", message)],
        terminal=read,
    )
    result = pipeline.run(RequestContext(params={"dishId": dish_id}))
    if isinstance(result, Failure):
        ...

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass
class Failure:
    """Structured failure returned by an aborting step."""
    status: int
    message: str


@dataclass
class Success:
    """
    Result of a terminal handler.

    Attributes:
        status: HTTP status code to respond with
        data: Payload placed under the "data" key; None means an empty body
    """
    status: int
    data: Any = None


@dataclass
class RequestContext:
    """
    Shared state for one request.

    Attributes:
        data: The request body's "data" object ({} if absent or not an object)
        params: Route parameters
        query: Query string parameters
        locals: Values attached by earlier steps for later ones
    """
    data: dict[str, Any] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    locals: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_body(
        cls,
        body: Any,
        params: Optional[dict[str, str]] = None,
        query: Optional[dict[str, str]] = None,
    ) -> "RequestContext":
        """Build a context from a decoded JSON body of the form {"data": {...}}."""
        data = body.get("data") if isinstance(body, dict) else None
        return cls(
            data=data if isinstance(data, dict) else {},
            params=dict(params or {}),
            query=dict(query or {}),
        )


Step = Callable[[RequestContext], Optional[Failure]]
Terminal = Callable[[RequestContext], Success]


class Pipeline:
    """
    Ordered validation steps plus a terminal handler.

    Step order is part of each operation's contract: later steps rely on
    what earlier ones proved (for example, the quantity checks assume the
    dishes field is already known to be a non-empty list).
    """

    def __init__(self, name: str, steps: Sequence[Step], terminal: Terminal) -> None:
        self.name = name
        self.steps = list(steps)
        self.terminal = terminal

    def run(self, ctx: RequestContext) -> Union[Failure, Success]:
        for step in self.steps:
            failure = step(ctx)
            if failure is not None:
                logger.info(
                    f"{self.name}: rejected by {_step_name(step)} "
                    f"({failure.status}) {failure.message}"
                )
                return failure
        return self.terminal(ctx)

    def __repr__(self):
        return f"<Pipeline {self.name} ({len(self.steps)} steps)>"


def _step_name(step: Step) -> str:
    return getattr(step, "__name__", type(step).__name__)
