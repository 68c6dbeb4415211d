"""Registries for objective functions and losses.

A registry maps a name to a factory that builds a configured object. This
lets the command line (or a config file) pick a benchmark by string name and
pass its construction parameters through.

Registries are plain objects. Nothing is registered when a module is
imported: the host program populates the module-level ``problems`` and
``losses`` registries by calling ``register_builtins()`` once at start-up, or
builds its own Registry instances.

Basic usage:
    ```python
    from pareto_gauge.registry import problems, register_builtins

    register_builtins()
    dtlz = problems.get("dtlz4", n_variables=12, n_objectives=3)
    print(problems.list())  # ["dtlz4", "fonseca", "zdt1", "zdt2", "zdt3"]
    ```

Custom registries:
    ```python
    mine = Registry("objective function")
    mine.register("sphere2", lambda n_variables=5: Sphere2(n_variables))
    f = mine.get("sphere2", n_variables=10)
    ```
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from pareto_gauge.objectives import DTLZ4, ZDT1, ZDT2, ZDT3, AbsoluteLoss, Fonseca, MultiObjectiveFunction

T = TypeVar("T")


class Registry(Generic[T]):
    """Name -> factory mapping.

    Attributes:
        kind: Human readable description of what is registered, used in
            error messages.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._registry: dict[str, Callable[..., T]] = {}

    def register(self, name: str, factory: Callable[..., T]) -> None:
        """Register a factory under ``name``. Overwrites an existing entry.

        Args:
            name: Unique name. Lookups are case sensitive.
            factory: Callable accepting keyword arguments for configuration.
        """
        self._registry[name] = factory

    def get(self, name: str, **kwargs) -> T:
        """Build a configured object by name.

        Args:
            name: Name of the registered factory.
            **kwargs: Configuration parameters passed to the factory.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available names.
        """
        if name not in self._registry:
            available = ", ".join(self.list()) or "none"
            raise KeyError(f"{self.kind.capitalize()} '{name}' not found. Available: {available}")
        return self._registry[name](**kwargs)

    def list(self) -> list[str]:
        """Return the sorted registered names."""
        return sorted(self._registry.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


problems: Registry[MultiObjectiveFunction] = Registry("objective function")
losses: Registry[AbsoluteLoss] = Registry("loss")


def register_builtins(
    problem_registry: Registry[MultiObjectiveFunction] | None = None,
    loss_registry: Registry[AbsoluteLoss] | None = None,
) -> None:
    """Register the bundled benchmark functions and losses.

    Args:
        problem_registry: Target for objective functions (default: ``problems``).
        loss_registry: Target for losses (default: ``losses``).
    """
    problem_registry = problems if problem_registry is None else problem_registry
    loss_registry = losses if loss_registry is None else loss_registry

    problem_registry.register("dtlz4", DTLZ4)
    problem_registry.register("fonseca", Fonseca)
    problem_registry.register("zdt1", ZDT1)
    problem_registry.register("zdt2", ZDT2)
    problem_registry.register("zdt3", ZDT3)
    loss_registry.register("absolute", AbsoluteLoss)


def list_problems() -> list[str]:
    """List the names in the module-level objective function registry."""
    return problems.list()


def list_losses() -> list[str]:
    """List the names in the module-level loss registry."""
    return losses.list()
