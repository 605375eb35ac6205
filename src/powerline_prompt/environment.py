from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
import os
import posixpath
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class Environment:
    """
    A read-only snapshot of the parts of the process state that the prompt
    depends on
    """

    #: The current working directory, as the shell sees it
    cwd: PurePosixPath

    #: The user's home directory
    home: PurePosixPath

    #: Environment variables
    env: Mapping[str, str] = field(default_factory=dict)

    #: `True` iff we are running as the superuser
    is_root: bool = False

    @classmethod
    def get(cls) -> Environment:
        # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
        cwd = os.environ.get("PWD") or os.getcwd()
        try:
            is_root = os.geteuid() == 0
        except AttributeError:
            # Windows
            is_root = False
        return cls(
            cwd=PurePosixPath(cwd.replace("\\", "/")),
            home=PurePosixPath(str(Path.home()).replace("\\", "/")),
            env=dict(os.environ),
            is_root=is_root,
        )

    def breadcrumbs(self) -> list[str]:
        """
        Return the components of the working directory path.  If the directory
        is at or under the home directory, the first component is ``~``.  The
        root directory is represented by a single ``/`` component.
        """
        cwd = PurePosixPath(posixpath.normpath(self.cwd))
        home = PurePosixPath(posixpath.normpath(self.home))
        try:
            rel = cwd.relative_to(home)
        except ValueError:
            names = [p for p in cwd.parts if p != "/"]
        else:
            names = ["~", *rel.parts]
        return names or ["/"]
