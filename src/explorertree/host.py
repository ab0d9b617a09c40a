"""Host interface that the tree command talks to.

The tree command never prompts, prints or reads configuration itself. Everything
interactive goes through a TreeHost, so the command can run inside an editor, a
terminal, or a test with the same code.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Sequence, TextIO

from explorertree.cli.signal_handler import signal_handler
from explorertree.types import PathType, TreeMode


class TreeHost(ABC):
    """Abstract collaborator providing the environment of a tree generation run.

    Subclasses must implement mode selection and the two display methods. The
    workspace folders and exclusion settings default to empty.
    """

    def workspace_folders(self) -> Sequence[Path]:
        """Folders open in the host; the first is used when no target is given."""
        return ()

    def exclude_patterns(self) -> Mapping[str, bool]:
        """The host's exclusion settings as a pattern-to-enabled-flag mapping."""
        return {}

    @abstractmethod
    def choose_mode(self) -> Optional[TreeMode]:
        """Ask which kind of tree to generate.

        Returns:
            The chosen mode, or None if the user dismissed the question.
        """
        pass

    @abstractmethod
    def show_error(self, text: str) -> None:
        """Report a failure to the user."""
        pass

    @abstractmethod
    def show_result(self, text: str) -> None:
        """Hand the generated tree to the user."""
        pass


MODE_CHOICES = {
    "1": TreeMode.ALL_FILES_AND_FOLDERS,
    "all": TreeMode.ALL_FILES_AND_FOLDERS,
    TreeMode.ALL_FILES_AND_FOLDERS.value.lower(): TreeMode.ALL_FILES_AND_FOLDERS,
    "2": TreeMode.FOLDERS_ONLY,
    "folders": TreeMode.FOLDERS_ONLY,
    TreeMode.FOLDERS_ONLY.value.lower(): TreeMode.FOLDERS_ONLY,
}


class ConsoleHost(TreeHost):
    """Terminal implementation of TreeHost.

    The mode is taken from the constructor when given; otherwise the choices are
    printed to the prompt stream and a selection is read from the input stream.
    An empty answer, end of input or Ctrl+C counts as dismissing the question.

    Attributes:
        error_shown (bool): True once show_error has been called.

    Example:
        >>> import io
        >>> shown = []
        >>> host = ConsoleHost(shown.append, input_stream=io.StringIO("2\\n"), prompt_stream=io.StringIO())
        >>> host.choose_mode()
        <TreeMode.FOLDERS_ONLY: 'Folders only'>
    """

    def __init__(
        self,
        writer: Callable[[str], None],
        mode: Optional[TreeMode] = None,
        workspace_folders: Sequence[PathType] = (),
        exclude_patterns: Optional[Mapping[str, bool]] = None,
        input_stream: Optional[TextIO] = None,
        prompt_stream: Optional[TextIO] = None,
    ) -> None:
        """Initialize the console host.

        Args:
            writer: Called with the finished tree text.
            mode: A preselected mode. If None the user is asked.
            workspace_folders: Candidate folders when no target is given.
            exclude_patterns: Exclusion settings offered to the tree command.
            input_stream: Where answers are read from. Defaults to stdin.
            prompt_stream: Where prompts and errors are written. Defaults to stderr.
        """
        self._writer = writer
        self._mode = mode
        self._workspace_folders = [Path(folder) for folder in workspace_folders]
        self._exclude_patterns: Dict[str, bool] = dict(exclude_patterns or {})
        self._input = input_stream
        self._prompt = prompt_stream
        self.error_shown = False

    def workspace_folders(self) -> Sequence[Path]:
        return list(self._workspace_folders)

    def exclude_patterns(self) -> Mapping[str, bool]:
        return dict(self._exclude_patterns)

    def choose_mode(self) -> Optional[TreeMode]:
        if self._mode is not None:
            return self._mode

        input_stream = self._input if self._input is not None else sys.stdin
        prompt = self._prompt if self._prompt is not None else sys.stderr

        while True:
            if signal_handler.interrupted():
                return None

            print("Select tree generation mode:", file=prompt)
            for number, mode in enumerate(TreeMode, start=1):
                print(f"  {number}) {mode.value}", file=prompt)
            print("> ", end="", file=prompt, flush=True)

            try:
                with signal_handler.prompting():
                    answer = input_stream.readline()
            except KeyboardInterrupt:
                print(file=prompt)
                return None

            if not answer.strip():
                return None

            choice = MODE_CHOICES.get(answer.strip().lower())
            if choice is not None:
                return choice
            print(f"Warning: '{answer.strip()}' is not a valid choice.", file=prompt)

    def show_error(self, text: str) -> None:
        self.error_shown = True
        prompt = self._prompt if self._prompt is not None else sys.stderr
        print(f"Error: {text}", file=prompt)

    def show_result(self, text: str) -> None:
        self._writer(text)
