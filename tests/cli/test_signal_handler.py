"""Unit tests for the signal handler module in the explorertree CLI."""

import os
import signal
import sys
from unittest.mock import patch

import pytest

from explorertree.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling, signal_handler


@pytest.fixture
def fresh_signal_handler():
    """A SignalHandler separate from the module singleton."""
    return SignalHandler()


@pytest.fixture
def clean_singleton():
    """Reset the singleton's events around a test."""
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
    yield signal_handler
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()


def test_initial_state(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted()


def test_handle_sigpipe(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, None)
    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.interrupted()
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)
    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.interrupted()
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


def test_setup_signal_handling():
    with patch("signal.signal") as mock_signal:
        setup_signal_handling()
    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_without_signals(clean_singleton):
    with patch("explorertree.cli.signal_handler.os") as mock_os:
        cleanup()
    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_sigpipe(clean_singleton):
    clean_singleton.sigpipe_received.set()
    with patch("explorertree.cli.signal_handler.os") as mock_os, patch.object(sys, "stdout") as mock_stdout:
        mock_os.open.return_value = 123
        mock_os.devnull = os.devnull
        mock_os.O_WRONLY = os.O_WRONLY
        mock_stdout.fileno.return_value = 1
        cleanup()
    mock_os.open.assert_called_once_with(os.devnull, os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)


def test_singleton_instance():
    assert isinstance(signal_handler, SignalHandler)


def test_sigint_while_prompting_raises(fresh_signal_handler):
    with patch("signal.signal"):
        with pytest.raises(KeyboardInterrupt):
            with fresh_signal_handler.prompting():
                fresh_signal_handler.handle_sigint(signal.SIGINT, None)
    assert fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler._prompting


def test_sigint_outside_prompt_only_records(fresh_signal_handler):
    with patch("signal.signal"):
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)
    assert fresh_signal_handler.exit_status() == 130


@pytest.mark.parametrize(
    "sigpipe,sigint,expected",
    [(False, False, None), (True, False, 141), (False, True, 130), (True, True, 141)],
)
def test_exit_status(fresh_signal_handler, sigpipe, sigint, expected):
    if sigpipe:
        fresh_signal_handler.sigpipe_received.set()
    if sigint:
        fresh_signal_handler.sigint_received.set()
    assert fresh_signal_handler.exit_status() == expected
