"""
Session entity: the live state of one file manager run.
"""

import os
from dataclasses import dataclass, field


@dataclass
class Session:
    """Current directory and display name of the user.

    ``current_directory`` starts at ``home_directory`` and is only changed by
    navigation use cases.
    """

    home_directory: str
    display_name: str = "User"
    current_directory: str = field(default="")

    def __post_init__(self) -> None:
        self.home_directory = os.path.abspath(self.home_directory)
        if not self.current_directory:
            self.current_directory = self.home_directory
        else:
            self.current_directory = os.path.abspath(self.current_directory)

    def resolve(self, path: str) -> str:
        """Resolve a user-supplied path against the current directory.

        Absolute paths pass through; the result is normalised.
        """
        return os.path.abspath(os.path.join(self.current_directory, path))

    def join_name(self, name: str) -> str:
        """Place a bare name directly inside the current directory.

        Leading separators are stripped, so an absolute-looking name still
        lands under the current directory.
        """
        separators = os.sep + (os.altsep or "")
        return os.path.join(self.current_directory, name.lstrip(separators))

    def at_home(self) -> bool:
        return self.current_directory == self.home_directory
