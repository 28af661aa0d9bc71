"""
Project file listing through git.

Inside a work tree the occurrence search scans what git would show: tracked
files plus untracked ones that are not ignored.
"""

from pathlib import Path
import subprocess
from typing import Generator


class GitClient:
    """
    Thin wrapper around `git ls-files` for one project root.

    Attributes:
        root: Directory the git commands run in.
        cmd: The listing command. Paths come back unquoted so non-ASCII names
            match the files on disk.
    """

    def __init__(self, root: Path):
        self.root = root
        self.cmd = [
            "git",
            "-c",
            "core.quotepath=off",
            "ls-files",
            "--cached",
            "--others",
            "--exclude-standard",
        ]

    def is_repo(self) -> bool:
        """False outside a work tree and when git itself cannot be run."""
        try:
            subprocess.run(
                ["git", "rev-parse", "--is-inside-work-tree"],
                cwd=self.root,
                check=True,
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (subprocess.CalledProcessError, OSError):
            return False
        return True

    def stream_file_paths(self) -> Generator[Path, None, None]:
        """
        Yields:
            Path: Each listed file, relative to root, in git's order.
        """
        with self._create_subprocess(self.cmd) as process:
            for line in process.stdout or ():
                line = line.rstrip("\n")
                if line:
                    yield Path(line)
            process.wait()

    def get_file_paths_list(self) -> list[Path]:
        return list(self.stream_file_paths())

    def _create_subprocess(self, cmd: list[str]) -> subprocess.Popen[str]:
        return subprocess.Popen(
            cmd,
            cwd=self.root,
            text=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            bufsize=1,
        )
