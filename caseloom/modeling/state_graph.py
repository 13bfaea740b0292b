"""Graph queries over a StateModel, backed by networkx."""

import networkx as nx

from .models import StateModel


def build_state_graph(model: StateModel) -> nx.DiGraph:
    """Build a directed graph with one node per state.

    Edges carry the transition condition under the ``condition`` key.
    Transitions naming undeclared states still add those nodes.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(model.states)
    for transition in model.transitions:
        graph.add_edge(
            transition.from_state,
            transition.to_state,
            condition=transition.condition,
        )
    return graph


def initial_state(model: StateModel) -> str | None:
    """The first declared state, or None for an empty model."""
    return model.states[0] if model.states else None


def terminal_states(model: StateModel) -> list[str]:
    """Declared states with no outbound transitions, in declaration order."""
    graph = build_state_graph(model)
    return [s for s in model.states if graph.out_degree(s) == 0]


def reachable_states(model: StateModel) -> set[str]:
    """All states reachable from the initial state, including itself."""
    start = initial_state(model)
    if start is None:
        return set()
    graph = build_state_graph(model)
    return {start} | nx.descendants(graph, start)


def unreachable_states(model: StateModel) -> list[str]:
    """Declared states that cannot be reached from the initial state."""
    reachable = reachable_states(model)
    return [s for s in model.states if s not in reachable]


def find_state_paths(model: StateModel) -> list[list[str]]:
    """Find the shortest path from the initial state to each terminal state.

    Returns:
        Paths sorted by length, then by terminal state name. Unreachable
        terminals are skipped.
    """
    start = initial_state(model)
    if start is None:
        return []

    graph = build_state_graph(model)
    paths = []
    for terminal in terminal_states(model):
        if terminal == start:
            continue
        try:
            paths.append(nx.shortest_path(graph, start, terminal))
        except nx.NetworkXNoPath:
            continue

    paths.sort(key=lambda p: (len(p), p[-1]))
    return paths
