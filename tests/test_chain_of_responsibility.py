"""Tests for the log handler chain."""

import pytest

from pattern_catalog.behavioral.chain_of_responsibility import (
    CRITICAL,
    DEBUG,
    INFO,
    ConsoleHandler,
    CriticalHandler,
    DebugHandler,
    ErrorHandler,
    FileHandler,
    InfoHandler,
    LogHandler,
    build_chain,
    main,
)
from pattern_catalog.exceptions import InvalidArgumentError


def _severity_chain(narrator):
    return build_chain(DebugHandler(narrator), InfoHandler(narrator), CriticalHandler(narrator))


class TestRouting:
    """Tests for first-match-wins routing."""

    def test_info_level_emits_only_info_line(self, narrator):
        """[Debug, Info, Critical] at level 2 should emit exactly the Info line."""
        head = _severity_chain(narrator)

        handled = head.handle("System initialized successfully.", INFO)

        assert handled is True
        assert narrator.lines == ["[INFO] System initialized successfully."]

    @pytest.mark.parametrize(
        "level,expected",
        [
            (DEBUG, "[DEBUG] msg"),
            (INFO, "[INFO] msg"),
            (CRITICAL, "[CRITICAL] msg"),
        ],
    )
    def test_each_level_reaches_its_handler(self, narrator, level, expected):
        """Each level should be written by exactly one handler."""
        _severity_chain(narrator).handle("msg", level)

        assert narrator.lines == [expected]

    def test_unmatched_level_is_dropped(self, narrator):
        """A level no handler accepts produces no output and returns False."""
        handled = _severity_chain(narrator).handle("ignored", 7)

        assert handled is False
        assert narrator.lines == []

    def test_first_accepting_handler_wins(self, narrator):
        """When two handlers accept a level only the earlier one writes."""
        head = build_chain(
            InfoHandler(narrator),
            FileHandler(narrator),  # also accepts INFO
        )

        head.handle("once", INFO)

        assert narrator.lines == ["[INFO] once"]

    def test_order_of_chain_decides_winner(self, narrator):
        """Reordering the chain changes which handler consumes the message."""
        head = build_chain(FileHandler(narrator), InfoHandler(narrator))

        head.handle("once", INFO)

        assert narrator.lines == ["File Logger: once"]

    def test_custom_predicate(self, narrator):
        """Subclasses may override can_handle() with any predicate."""

        class AtLeastWarning(LogHandler):
            def can_handle(self, level: int) -> bool:
                return level >= 2

            def format(self, message: str) -> str:
                return f"[WARN+] {message}"

        head = build_chain(DebugHandler(narrator), AtLeastWarning(narrator))
        head.handle("a", 1)
        head.handle("b", 5)

        assert narrator.lines == ["[DEBUG] a", "[WARN+] b"]

    @pytest.mark.parametrize("level", [0, -1])
    def test_non_positive_level_rejected(self, narrator, level):
        """Levels must be positive integers."""
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            _severity_chain(narrator).handle("bad", level)


class TestBuildChain:
    """Tests for chain construction."""

    def test_links_in_order(self, narrator):
        """build_chain should link handlers head to tail."""
        debug, info, critical = DebugHandler(narrator), InfoHandler(narrator), CriticalHandler(narrator)

        head = build_chain(debug, info, critical)

        assert head is debug
        assert debug.successor is info
        assert info.successor is critical
        assert critical.successor is None

    def test_set_next_returns_successor(self, narrator):
        """set_next() should return its argument for fluent linking."""
        debug, info = DebugHandler(narrator), InfoHandler(narrator)

        assert debug.set_next(info) is info

    def test_empty_chain_rejected(self):
        """A chain needs at least one handler."""
        with pytest.raises(InvalidArgumentError):
            build_chain()


class TestDestinationHandlers:
    """Tests for the console/file/error handler family."""

    def test_destination_formats(self, narrator):
        """Destination handlers should use their own prefixes."""
        head = build_chain(ConsoleHandler(narrator), FileHandler(narrator), ErrorHandler(narrator))

        head.handle("d", DEBUG)
        head.handle("i", INFO)
        head.handle("e", CRITICAL)

        assert narrator.lines == ["Console Logger: d", "File Logger: i", "Error Logger: e"]


class TestDemo:
    """Tests for the demo driver."""

    def test_main_output(self, narrator):
        """main() should route each demo message to one handler."""
        main(narrator)

        assert narrator.lines == [
            "[INFO] System initialized successfully.",
            "[DEBUG] Variable x value is 42.",
            "[CRITICAL] Database connection failed!",
            "",
            "Console Logger: This is a Debug message",
            "File Logger: This is an Info message",
            "Error Logger: This is an Error message",
        ]
