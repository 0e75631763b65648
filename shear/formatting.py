"""Rich-based console formatting utilities"""

from rich.console import Console
from rich.text import Text

# Status output goes to stderr; stdout stays free for piping
console = Console(stderr=True)

def print_success(message: str) -> None:
    """Print a success message in plain green."""
    text = Text("✓ ", style="green") + Text(message, style="green")
    console.print(text)

def print_info(message: str) -> None:
    """Print an informational message in a subtle style."""
    text = Text("ℹ ", style="bold blue") + Text(message, style="blue")
    console.print(text)

class ConsoleProgress:
    """Progress sink that prints the analyzed percentage on a single line.

    The detector's own total is unreliable for some containers, so a known
    frame count takes precedence when one is available.
    """
    def __init__(self, known_total: int = 0):
        self.known_total = known_total
        self.last_percent = None

    def percent(self, current: int, total: int) -> float:
        total = self.known_total or total
        if total <= 0:
            return 0.0
        # Clamp to 100% in case of frame count mismatch
        return min(current / total * 100.0, 100.0)

    def __call__(self, current: int, total: int) -> None:
        pct = self.percent(current, total)
        self.last_percent = pct
        console.print(f"Analyzing: {pct:.1f}%", end="\r", highlight=False)

    def finish(self) -> None:
        if self.last_percent is not None:
            console.print()
