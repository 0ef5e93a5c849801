"""Console output formatting utilities for pipegen."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from ..generator import GenerationResult


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_generation_started(self, output_dir: str, definition_count: int) -> None:
        """Print generation start information."""
        print("\nGENERATION STARTED")
        print(f"Output directory: {output_dir}")
        print(f"Definitions: {definition_count}")
        print()

    def print_created_directory(self, path: str) -> None:
        print(f"Created directory: {path}")

    def print_processing(self, name: str) -> None:
        """Print definition start message."""
        print(f"PROCESSING: {name}")

    def print_generated(self, path: str) -> None:
        print(f"GENERATED: {path}")

    def print_failure(self, name: str, reason: str, hint: Optional[str] = None) -> None:
        """
        Print a per-definition failure.

        Args:
            name: Definition name
            reason: Failure reason/error message
            hint: Optional hint for user
        """
        print(f"FAILED: {name}", file=sys.stderr)
        if self.debug:
            print(f"Error details: {reason}", file=sys.stderr)
        else:
            # first line only outside debug mode
            error_line = reason.split("\n")[0] if reason else "Unknown error"
            print(f"Error: {error_line}", file=sys.stderr)
        if hint:
            print(f"Hint: {hint}", file=sys.stderr)

    def print_summary(self, output_dir: str, results: Sequence[GenerationResult]) -> None:
        """Print final generation summary."""
        generated = [r for r in results if r.ok]
        print("\n" + "=" * 40)
        print("SUMMARY")
        print("=" * 40)
        print(f"Output directory: {output_dir}")
        print(f"Files generated: {len(generated)} of {len(results)}")
        for r in results:
            if r.ok:
                print(f"  {r.name}: {r.path} ({r.size:,} bytes)")
            else:
                print(f"  {r.name}: FAILED")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
