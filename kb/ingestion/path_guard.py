"""
Sandbox checks for document file access.

Every path is validated before any byte of the target is read:
- the resolved path must lie inside the configured base directory
- the file size must not exceed the configured ceiling

Symlinks are resolved for both the base and the target, so a link inside
the base that points outside of it is rejected like a '../' path.
"""
import logging
from pathlib import Path
from typing import Union

from errors import FileOperationError, ValidationError

logger = logging.getLogger(__name__)


class PathSecurityGuard:
    """Validates requested paths against a base directory and size limit

    Never clamps: an escaping or oversized path always fails fast.
    """

    def __init__(self, base_dir: Union[str, Path], max_file_size: int):
        self.base_dir = Path(base_dir)
        self.max_file_size = max_file_size

    def check(self, requested_path: Union[str, Path]) -> Path:
        """Validate a path and return its resolved form

        Relative paths are interpreted against the base directory.

        Raises:
            ValidationError: Empty path, path outside base dir, file too large
            FileOperationError: File missing or its size cannot be read
        """
        resolved = self.resolve_within_base(requested_path)
        self.check_size(resolved)
        return resolved

    def resolve_within_base(self, requested_path: Union[str, Path]) -> Path:
        """Resolve a path and ensure it stays inside the base directory"""
        if requested_path is None or str(requested_path).strip() == "":
            raise ValidationError("File path must not be empty")

        base = self._canonical(self.base_dir)
        candidate = Path(requested_path)
        if not candidate.is_absolute():
            candidate = base / candidate
        resolved = self._canonical(candidate)

        if not self._is_within(resolved, base):
            logger.warning(f"Rejected path outside base dir: {requested_path}")
            raise ValidationError(
                f"File path must be within base directory ({base}). "
                f"Received path outside base directory: {requested_path}",
                details={'path': str(requested_path), 'base_dir': str(base)}
            )
        return resolved

    def check_size(self, path: Path) -> int:
        """Stat the file and reject it if larger than the ceiling"""
        try:
            size = path.stat().st_size
        except FileNotFoundError as e:
            raise FileOperationError(f"File not found: {path}") from e
        except OSError as e:
            raise FileOperationError(f"Failed to check file size: {path}") from e

        if size > self.max_file_size:
            raise ValidationError(
                f"File size exceeds limit: {size} > {self.max_file_size}",
                details={'path': str(path), 'size': size, 'max_file_size': self.max_file_size}
            )
        return size

    @staticmethod
    def _canonical(path: Path) -> Path:
        """Resolve symlinks and '..'; missing paths resolve lexically"""
        try:
            return path.resolve(strict=False)
        except (OSError, RuntimeError) as e:
            # Symlink loops cannot be trusted
            raise ValidationError(
                f"Failed to resolve path for security validation: {path}"
            ) from e

    @staticmethod
    def _is_within(path: Path, base: Path) -> bool:
        """Component-wise containment ('/base' never matches '/base2')"""
        return path == base or base in path.parents
