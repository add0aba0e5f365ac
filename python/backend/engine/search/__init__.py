from backend.engine.search.astar import AStar, Graph, NoPathError, Node

__all__ = ["AStar", "Graph", "NoPathError", "Node"]
