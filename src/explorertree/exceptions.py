class NoTargetFolderError(Exception):
    """
    Exception raised when no folder can be resolved for tree generation.

    This happens when no target folder was given explicitly and the host has no
    workspace folder to fall back to.

    Example:
        >>> error = NoTargetFolderError()
        >>> str(error)
        'No folder selected or workspace available'
    """

    def __init__(self, message: str = "No folder selected or workspace available") -> None:
        self.message = message
        super().__init__(self.message)


class TreeGenerationError(Exception):
    """
    Exception raised when a tree cannot be generated for the requested root.

    Failures below the root (unreadable subdirectories) never raise; they render as
    empty subtrees. This exception covers problems with the root itself.

    Attributes:
        root_path (str): The root that was requested.

    Example:
        >>> error = TreeGenerationError("/missing", "Root path does not exist")
        >>> str(error)
        'Root path does not exist: /missing'
    """

    def __init__(self, root_path: str, reason: str) -> None:
        """
        Initialize the exception with the offending root and a short reason.

        Args:
            root_path (str): The root directory that was requested.
            reason (str): Why the tree could not be generated.
        """
        self.root_path = root_path
        super().__init__(f"{reason}: {root_path}")
