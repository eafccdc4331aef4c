# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for mounts and the headless session host."""

import inspect

import pytest

from termbench.common.exceptions import ConfigurationError, MountInUseError
from termbench.session import HeadlessSessionHost, Mount, RenderedOutput, SessionHost


class TestMount:
    """Tests for Mount ownership and nodes."""

    def test_claim_by_second_owner_raises(self):
        """Test a mount can only be owned by one run at a time."""
        mount = Mount()
        first, second = object(), object()
        mount.claim(first)

        with pytest.raises(MountInUseError):
            mount.claim(second)

    def test_mount_in_use_is_configuration_error(self):
        """Test MountInUseError is reported as a configuration problem."""
        assert issubclass(MountInUseError, ConfigurationError)

    def test_claim_is_reentrant_for_same_owner(self):
        """Test the current owner may claim again."""
        mount = Mount()
        owner = object()
        mount.claim(owner)
        mount.claim(owner)

        assert mount.owner is owner

    def test_release_frees_mount(self):
        """Test releasing lets another owner claim the mount."""
        mount = Mount()
        first, second = object(), object()
        mount.claim(first)
        mount.release(first)
        mount.claim(second)

        assert mount.owner is second

    def test_release_by_non_owner_is_ignored(self):
        """Test only the owner can release a mount."""
        mount = Mount()
        owner = object()
        mount.claim(owner)
        mount.release(object())

        assert mount.owner is owner

    def test_duplicate_node_raises(self):
        """Test two nodes cannot share an id."""
        mount = Mount()
        mount.attach("session-1", object())

        with pytest.raises(ValueError, match="already attached"):
            mount.attach("session-1", object())

    def test_nodes_is_read_only(self):
        """Test the node mapping cannot be mutated from outside."""
        mount = Mount()

        with pytest.raises(TypeError):
            mount.nodes["session-1"] = object()


class TestHeadlessSessionHost:
    """Tests for HeadlessSessionHost."""

    def test_satisfies_session_host_protocol(self):
        """Test the headless host implements the SessionHost capability."""
        assert isinstance(HeadlessSessionHost("session-1"), SessionHost)

    def test_mount_and_unmount(self):
        """Test mounting attaches the host under its session id."""
        mount = Mount()
        host = HeadlessSessionHost("session-1")

        host.mount(mount)
        assert host.mounted
        assert mount.nodes["session-1"] is host

        host.unmount()
        assert not host.mounted
        assert "session-1" not in mount.nodes

    def test_mount_twice_is_harmless(self):
        """Test mounting on the same mount again is a no-op."""
        mount = Mount()
        host = HeadlessSessionHost("session-1")

        host.mount(mount)
        host.mount(mount)

        assert list(mount.nodes) == ["session-1"]

    def test_node_count_grows_by_four_per_command(self):
        """Test each rendered command adds entry, prompt, text and output nodes."""
        host = HeadlessSessionHost("session-1", surface=lambda command: "out")

        first = host.submit("ls")
        second = host.submit("ls")

        assert first == RenderedOutput(text="out", node_count=4)
        assert second.node_count == 8
        assert host.transcript == ["$ ls", "out", "$ ls", "out"]

    async def test_async_surface_returns_awaitable(self):
        """Test an async surface makes submit return an awaitable RenderedOutput."""

        async def surface(command: str) -> str:
            return command.upper()

        host = HeadlessSessionHost("session-1", surface=surface)

        pending = host.submit("pwd")
        assert inspect.isawaitable(pending)

        rendered = await pending
        assert rendered == RenderedOutput(text="PWD", node_count=4)

    @pytest.mark.parametrize(
        "probe,expected",
        [
            (None, None),
            (lambda: 3.5, 3.5),
            (lambda: None, None),
        ],
    )
    def test_heap_usage_uses_probe(self, probe, expected):
        """Test heap usage is whatever the probe reports."""
        host = HeadlessSessionHost("session-1", heap_probe=probe)
        assert host.heap_usage() == expected

    def test_default_probe_reports_process_memory(self):
        """Test the default heap probe reads the process footprint."""
        host = HeadlessSessionHost("session-1")

        usage = host.heap_usage()

        assert usage is not None
        assert usage > 0
