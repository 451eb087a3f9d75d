from typing import Callable, Dict, Optional

from maze_generator.algo.base import Generator
from maze_generator.algo.dfs import RecursiveBacktracker
from maze_generator.algo.ellers import EllersGenerator
from maze_generator.algo.growing_tree import GrowingTreeGenerator, SelectionMethod
from maze_generator.algo.prim import PrimsAlgorithm

ALGORITHMS: Dict[str, Callable[..., Generator]] = {
    "dfs": RecursiveBacktracker,
    "eller": EllersGenerator,
    "prim": PrimsAlgorithm,
    "growing": GrowingTreeGenerator,
}

ALIASES = {
    "backtracking": "dfs",
    "ellers": "eller",
    "prims": "prim",
    "growingtree": "growing",
    "gt": "growing",
}


def create_generator(name: str, seed: Optional[bytes] = None,
                     selection_method: SelectionMethod = SelectionMethod.FIRST,
                     compute_goal: bool = True) -> Generator:
    key = name.lower()
    key = ALIASES.get(key, key)
    if key not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}', expected one of {sorted(ALGORITHMS)}")

    if key == "growing":
        return GrowingTreeGenerator(seed, selection_method=selection_method)
    if key == "dfs":
        return RecursiveBacktracker(seed, compute_goal=compute_goal)
    return ALGORITHMS[key](seed)
