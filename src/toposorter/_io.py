"""Reading graph documents and writing orders as TOML."""

import logging
import tomllib
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._errors import DocumentError
from ._vertex import KeyedNode, graph_from_dependencies

logger = logging.getLogger(__name__)


class GraphDocument(BaseModel):
    """A keyed graph as written in a TOML file.

    Attributes:
        dependencies: ``item -> prerequisites``; prerequisites sort first.
        successors: ``vertex -> vertices that must come after it``.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dependencies: dict[str, list[str]] = Field(default_factory=dict)
    successors: dict[str, list[str]] = Field(default_factory=dict)

    def to_graph(self) -> dict[str, KeyedNode[str]]:
        """Merge both tables into one keyed graph.

        Dependency relations are applied first, so their keys keep their
        first-seen order at the front of the graph.
        """
        graph = graph_from_dependencies(self.dependencies)
        for key, successors in self.successors.items():
            node = graph.get(key)
            if node is None:
                node = graph[key] = KeyedNode(key)
            for succ in successors:
                if succ not in graph:
                    graph[succ] = KeyedNode(succ)
                node.successors.append(succ)
        return graph


def toml_to_document(toml_contents: dict[str, Any]) -> GraphDocument:
    """Validate parsed TOML contents as a graph document.

    Raises:
        DocumentError: If the contents do not describe a graph.

    """
    try:
        return GraphDocument.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid graph document: {e}"
        raise DocumentError(msg) from e


def load_graph_document(input_path: Path | str) -> GraphDocument:
    """Load a graph document from a TOML file.

    Raises:
        DocumentError: If the file is missing, is not TOML, or does not
            describe a graph.

    """
    input_path = Path(input_path)
    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {input_path}"
        raise DocumentError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise DocumentError(msg) from e

    document = toml_to_document(toml_contents)
    logger.debug(f"Loaded graph document from {input_path}")
    return document


def export_order_to_toml(order: Sequence[str], output_path: Path | str) -> None:
    """Write ``order = [...]`` to a TOML file."""
    output_path = Path(output_path)
    with output_path.open("wb") as f:
        tomli_w.dump({"order": list(order)}, f)

    logger.debug(f"Exported order to {output_path}")
