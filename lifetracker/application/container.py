"""Composition root / DI container.

Owns the single instances of the event bus, navigation stack and transition
coordinator for one application window. Views receive them through the
container instead of importing module-level globals.
"""

from __future__ import annotations

from lifetracker.application.ports.commands import CommandPort
from lifetracker.application.use_cases.run_command import RunCommandUseCase
from lifetracker.config import DEFAULT_ROUTE, MAX_HISTORY, TAB_ORDER
from lifetracker.core.events import EventBus
from lifetracker.core.navigation import DirectionResolver, NavigationStack, TabOrderRegistry
from lifetracker.core.transitions import TransitionCoordinator
from lifetracker.services import LocalCommandGateway, MemoryStore, register_store_commands


class Container:
    """Resolves application services. Single place to swap implementations if needed."""

    def __init__(self, commands: CommandPort | None = None) -> None:
        self._commands: CommandPort | None = commands
        self._event_bus: EventBus | None = None
        self._tab_registry: TabOrderRegistry | None = None
        self._direction_resolver: DirectionResolver | None = None
        self._navigation: NavigationStack | None = None
        self._transitions: TransitionCoordinator | None = None
        self._run_command_uc: RunCommandUseCase | None = None

    @property
    def commands(self) -> CommandPort:
        if self._commands is None:
            gateway = LocalCommandGateway()
            register_store_commands(gateway, MemoryStore())
            self._commands = gateway
        return self._commands

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def tab_registry(self) -> TabOrderRegistry:
        if self._tab_registry is None:
            self._tab_registry = TabOrderRegistry(TAB_ORDER)
        return self._tab_registry

    @property
    def direction_resolver(self) -> DirectionResolver:
        if self._direction_resolver is None:
            self._direction_resolver = DirectionResolver(self.tab_registry)
        return self._direction_resolver

    @property
    def navigation(self) -> NavigationStack:
        if self._navigation is None:
            self._navigation = NavigationStack(max_history=MAX_HISTORY, default_route=DEFAULT_ROUTE)
        return self._navigation

    @property
    def transitions(self) -> TransitionCoordinator:
        if self._transitions is None:
            self._transitions = TransitionCoordinator(self.direction_resolver)
        return self._transitions

    @property
    def run_command_use_case(self) -> RunCommandUseCase:
        """Application-layer API for commands.

        Prefer this over calling .commands directly from UI: it publishes the
        change event after a successful mutation.
        """
        if self._run_command_uc is None:
            self._run_command_uc = RunCommandUseCase(self.commands, self.event_bus)
        return self._run_command_uc

    def shutdown(self) -> None:
        """Window teardown: release transitions and drop every subscriber."""
        if self._transitions is not None:
            self._transitions.shutdown()
        if self._event_bus is not None:
            self._event_bus.clear()
