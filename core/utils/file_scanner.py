"""
File Scanner - Expand path arguments thanh danh sach files phang

Features:
- File arguments duoc giu nguyen thu tu
- Directory arguments: duyet de quy (recursive=True) hoac skip
- Loi stat/walk duoc THU THAP vao DiscoveryResult.errors thay vi
  dung walk giua chung; caller quyet dinh log nhu the nao
"""

import os
import stat
from dataclasses import dataclass, field
from typing import Iterable, List

# Discovery stages - dung de chon message phu hop khi log
STAGE_STAT = "stat"
STAGE_WALK = "walk"


@dataclass(frozen=True)
class DiscoveryError:
    """
    Mot loi xay ra trong qua trinh discovery.

    Attributes:
        path: Path gay loi
        error: Mo ta loi (str(OSError))
        stage: STAGE_STAT (argument khong stat duoc) hoac STAGE_WALK
    """

    path: str
    error: str
    stage: str = STAGE_STAT

    def describe(self) -> str:
        """Message dang log cho loi nay."""
        if self.stage == STAGE_WALK:
            return f"Error accessing path {self.path}: {self.error}"
        return f"Error stating file {self.path}: {self.error}"


@dataclass
class DiscoveryResult:
    """
    Ket qua discovery.

    Attributes:
        files: Danh sach file paths theo thu tu discovery
        errors: Cac loi stat/walk (path da bi bo qua)
        skipped_dirs: Directories bi skip vi recursive=False
    """

    files: List[str] = field(default_factory=list)
    errors: List[DiscoveryError] = field(default_factory=list)
    skipped_dirs: List[str] = field(default_factory=list)


class FileScanner:
    """
    Scanner expand path arguments thanh flat file list.

    Usage:
        result = FileScanner(recursive=True).scan(["src", "README.md"])
        for error in result.errors:
            log_error(error.describe())
    """

    def __init__(self, recursive: bool = False):
        self.recursive = recursive

    def scan(self, args: Iterable[str]) -> DiscoveryResult:
        """
        Expand moi argument.

        Args:
            args: Path arguments tu command line

        Returns:
            DiscoveryResult voi files, errors va skipped_dirs
        """
        result = DiscoveryResult()

        for arg in args:
            try:
                st = os.stat(arg)
            except OSError as e:
                result.errors.append(DiscoveryError(arg, str(e), STAGE_STAT))
                continue

            if stat.S_ISDIR(st.st_mode):
                if self.recursive:
                    self._walk_directory(arg, result)
                else:
                    result.skipped_dirs.append(arg)
            else:
                result.files.append(arg)

        return result

    def _walk_directory(self, root: str, result: DiscoveryResult) -> None:
        """
        Duyet de quy mot directory, them moi regular file vao result.

        Subdirectory khong doc duoc -> ghi loi va tiep tuc walk.
        Thu tu: sorted theo ten o moi level (deterministic).
        """

        def on_error(error: OSError) -> None:
            path = error.filename if error.filename is not None else root
            result.errors.append(DiscoveryError(str(path), str(error), STAGE_WALK))

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = os.path.join(dirpath, name)
                # Bo qua FIFO, socket, broken symlink
                if os.path.isfile(path):
                    result.files.append(path)


def discover_files(args: Iterable[str], recursive: bool = False) -> DiscoveryResult:
    """
    Shortcut cho FileScanner(recursive).scan(args).

    Args:
        args: Path arguments
        recursive: Duyet directories de quy

    Returns:
        DiscoveryResult
    """
    return FileScanner(recursive=recursive).scan(args)
