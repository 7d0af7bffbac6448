"""context

The running example's metadata as seen by the browser actions.

Actions that only make sense in a real, JavaScript-capable browser (for
example screenshots) consult ``ExampleContext.js`` before touching the
driver. Under pytest the context is built from the test item's markers:

    @pytest.mark.js
    def test_publish(page, example_context): ...
"""

from __future__ import annotations

from typing import Any, Mapping

from . import constants


class ExampleContext:
    """Read-only view over an example's metadata"""

    def __init__(self, metadata: Mapping[str, Any] | None = None) -> None:
        self.metadata: dict[str, Any] = dict(metadata or {})

    @property
    def js(self) -> bool:
        return bool(self.metadata.get(constants.JS_MARKER, False))

    @classmethod
    def from_node(cls, node: Any) -> "ExampleContext":
        """Build a context from a pytest item.

        Each marker contributes ``name -> True``; a marker may switch itself
        off with ``enabled=False`` (``@pytest.mark.js(enabled=False)``).
        Markers closer to the test override module and class level ones.
        """

        metadata: dict[str, Any] = {}
        for marker in reversed(list(node.iter_markers())):
            metadata[marker.name] = marker.kwargs.get("enabled", True)
        return cls(metadata)

    def __repr__(self) -> str:
        return f"ExampleContext({self.metadata!r})"
