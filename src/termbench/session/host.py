# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Session hosting: mount points, the host capability and a headless host.

A ``SessionHost`` is what a simulated session drives. It is attached to a
``Mount`` for the lifetime of a run and turns a command string into rendered
output, synchronously or asynchronously. Metrics, aggregation and budget logic
never look inside a host, so a UI-backed host and the headless test double are
interchangeable.
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from termbench.common.exceptions import MountInUseError
from termbench.common.host_info import process_heap_usage
from termbench.session.command_surface import simulated_output

__all__ = [
    "CommandSurface",
    "HeadlessSessionHost",
    "Mount",
    "RenderedOutput",
    "SessionHost",
]

CommandSurface = Callable[[str], str | Awaitable[str]]


@dataclass(slots=True, frozen=True)
class RenderedOutput:
    """Output of one command as rendered by a host.

    Attributes:
        text: Rendered output text
        node_count: Total number of output nodes in the session after rendering
    """

    text: str
    node_count: int


class Mount:
    """Attachment point for per-session simulation state.

    A mount is owned by at most one running benchmark at a time.
    """

    def __init__(self, name: str = "termbench") -> None:
        self.name = name
        self._nodes: dict[str, Any] = {}
        self._owner: object | None = None

    def __repr__(self) -> str:
        return f"Mount(name={self.name!r}, nodes={len(self._nodes)})"

    @property
    def owner(self) -> object | None:
        return self._owner

    @property
    def nodes(self) -> Mapping[str, Any]:
        return MappingProxyType(self._nodes)

    def claim(self, owner: object) -> None:
        """Take exclusive ownership of the mount.

        Raises:
            MountInUseError: If another owner holds the mount
        """
        if self._owner is not None and self._owner is not owner:
            raise MountInUseError(
                f"Mount '{self.name}' is already in use by another benchmark run"
            )
        self._owner = owner

    def release(self, owner: object) -> None:
        if self._owner is owner:
            self._owner = None

    def attach(self, node_id: str, node: Any) -> None:
        if node_id in self._nodes:
            raise ValueError(f"Node '{node_id}' is already attached to mount '{self.name}'")
        self._nodes[node_id] = node

    def detach(self, node_id: str) -> None:
        self._nodes.pop(node_id, None)


@runtime_checkable
class SessionHost(Protocol):
    """Capability a SessionSimulator needs from whatever hosts the session."""

    def mount(self, mount: Mount) -> None: ...

    def unmount(self) -> None: ...

    def submit(self, command: str) -> RenderedOutput | Awaitable[RenderedOutput]: ...

    def heap_usage(self) -> float | None: ...


class HeadlessSessionHost:
    """In-memory host that renders through a command surface.

    Each command adds a command entry (entry, prompt and text nodes) and one
    output node to the transcript, so the node count grows by four per command.
    """

    NODES_PER_COMMAND = 4

    def __init__(
        self,
        session_id: str,
        surface: CommandSurface = simulated_output,
        heap_probe: Callable[[], float | None] | None = process_heap_usage,
    ) -> None:
        self.session_id = session_id
        self.transcript: list[str] = []
        self._surface = surface
        self._heap_probe = heap_probe
        self._mount: Mount | None = None
        self._rendered = 0

    @property
    def mounted(self) -> bool:
        return self._mount is not None

    def mount(self, mount: Mount) -> None:
        if self._mount is mount:
            return
        mount.attach(self.session_id, self)
        self._mount = mount

    def unmount(self) -> None:
        if self._mount is None:
            return
        self._mount.detach(self.session_id)
        self._mount = None

    def submit(self, command: str) -> RenderedOutput | Awaitable[RenderedOutput]:
        self.transcript.append(f"$ {command}")
        text = self._surface(command)
        if inspect.isawaitable(text):
            return self._render_later(text)
        return self._render(text)

    async def _render_later(self, pending: Awaitable[str]) -> RenderedOutput:
        return self._render(await pending)

    def _render(self, text: str) -> RenderedOutput:
        self.transcript.append(text)
        self._rendered += 1
        return RenderedOutput(text=text, node_count=self._rendered * self.NODES_PER_COMMAND)

    def heap_usage(self) -> float | None:
        if self._heap_probe is None:
            return None
        return self._heap_probe()
