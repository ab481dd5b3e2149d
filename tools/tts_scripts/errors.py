"""Typed error hierarchy for the script sync CLI.

All domain errors extend CliError, carry structured context, and know the
process exit code they map to. They are caught at the CLI boundary and
printed as a single line. Failures reading or writing the save document
itself are plain OSError / JSONDecodeError and are not part of this
hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tts_scripts.config import EXIT_INVALID_MODE, EXIT_INVALID_SAVE, EXIT_USAGE


class CliError(RuntimeError):
    """Base error for all CLI operations.

    Never raise a raw CliError; always use a specific subclass.
    """
    exit_code: int = EXIT_INVALID_SAVE


class UsageError(CliError):
    """Command line could not be parsed (wrong positional count, bad option).

    Attributes:
        prog: Program name shown in the usage line
        detail: Parser message
    """
    exit_code = EXIT_USAGE

    def __init__(self, prog: str, detail: str) -> None:
        self.prog = prog
        self.detail = detail
        super().__init__(
            f"Invalid arguments for {prog}: {detail}\n"
            f"$ {prog} extract|pack <save-name>"
        )


class InvalidModeError(CliError):
    """Mode is neither extract nor pack.

    Attributes:
        prog: Program name
        mode: The rejected mode string
    """
    exit_code = EXIT_INVALID_MODE

    def __init__(self, prog: str, mode: str) -> None:
        self.prog = prog
        self.mode = mode
        super().__init__(f'Invalid mode for {prog}: "{mode}"')


class MissingFieldError(CliError):
    """Object node lacks a field needed to name its sidecar files.

    Attributes:
        field_name: "Name" or "GUID"
    """
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Object is missing required field '{field_name}'")


class UnsafeNameError(CliError):
    """Sidecar stem would resolve outside the script directory.

    Attributes:
        stem: The offending "<Name>.<GUID>" stem
    """
    def __init__(self, stem: str) -> None:
        self.stem = stem
        super().__init__(f"Object name '{stem}' is not a safe file name")


class ScriptDirNotFoundError(CliError):
    """Script directory does not exist when packing.

    Attributes:
        path: The directory that was expected to exist
    """
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Script directory not found: {path} (run extract first)")


class ValidationError(CliError):
    """Save tree failed validation.

    Attributes:
        issues: List of validation error messages with JSON paths
    """
    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        joined = "\n".join(f" - {issue}" for issue in issues[:30])
        extra = "" if len(issues) <= 30 else f"\n - ... and {len(issues) - 30} more"
        super().__init__(f"Validation failed:\n{joined}{extra}")


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single validation issue with structured location.

    Attributes:
        path: JSON path to the problematic node (e.g., "$.ObjectStates[0].ContainedObjects[1]")
        message: Human-readable description of the problem
        severity: "error" for blocking issues, "warning" for advisories
    """
    path: str
    message: str
    severity: str = "error"

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Aggregated validation result.

    Invariants:
        - is_valid is True iff no issue has severity "error"
        - issues are in tree walk order
    """
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors (warnings don't count)."""
        return all(issue.severity != "error" for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    def add(self, path: str, message: str, *, severity: str = "error") -> None:
        """Record a validation issue."""
        self.issues.append(ValidationIssue(path=path, message=message, severity=severity))

    def to_error(self) -> ValidationError:
        """Convert the blocking issues to a ValidationError for raising."""
        return ValidationError([str(issue) for issue in self.errors])

    def __bool__(self) -> bool:
        """True if valid (no blocking errors)."""
        return self.is_valid
