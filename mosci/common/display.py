from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from mosci.common.models import MOSConfidenceReport

TEAL = "#2AA198"
AMBER = "#FFBF00"


_report_theme = Theme(
    {
        "primary": TEAL,
        "accent": AMBER,
        "bold": "bold",
        "success": "green bold",
        "error": "red bold",
        "warning": "yellow bold",
        "info": "blue bold",
    }
)


_console: Console | None = None


def get_console(force_terminal: bool | None = None) -> Console:
    global _console

    if _console is None or force_terminal is not None:
        _console = Console(
            theme=_report_theme,
            force_terminal=force_terminal,
            legacy_windows=False,
        )

    return _console


def success_badge() -> Text:
    return Text("[SUCCESS]", style="success")


def failed_badge() -> Text:
    return Text("[FAILED]", style="error")


def create_report_table(
    report: MOSConfidenceReport,
    labels: list[str] | None = None,
    precision: int = 3,
) -> Table:
    """Build a table with one row per test condition and one column per estimator.

    Each estimator cell shows ``[lower, upper]``.
    """
    table = Table(
        title=f"MOS confidence intervals ({(1 - report.alpha) * 100:g}%)",
        title_style="bold primary",
        border_style="accent",
        header_style="bold accent",
        show_lines=False,
    )

    table.add_column("TC", justify="right", style="bold")
    table.add_column("MOS", justify="right", style="primary")
    for label in report.short_labels:
        table.add_column(label, justify="center")

    for i, mos in enumerate(report.mos):
        cells = [labels[i] if labels else str(i + 1), f"{mos:.{precision}f}"]
        for j in range(len(report.short_labels)):
            lower, upper = report.interval(i, j)
            cells.append(f"[{lower:.{precision}f}, {upper:.{precision}f}]")
        table.add_row(*cells)

    return table


def create_summary_panel(report: MOSConfidenceReport) -> Panel:
    """Panel with the mean interval width of each estimator across test conditions."""
    text = Text()
    text.append("Test conditions: ", style="info")
    text.append(f"{report.num_conditions}", style="bold accent")
    text.append(" | ", style="default")
    text.append("Subjects: ", style="info")
    text.append(f"{report.num_subjects}", style="bold accent")
    text.append(" | ", style="default")
    text.append("alpha: ", style="info")
    text.append(f"{report.alpha:g}", style="bold accent")
    text.append("\n\nMean CI width\n", style="bold")

    for j, name in enumerate(report.method_names):
        widths = [row[j] for row in report.ci_width]
        mean_width = sum(widths) / len(widths) if widths else 0.0
        text.append(f"  {name:<16}", style="default")
        text.append(f"{mean_width:.4f}\n", style="primary")

    return Panel(text, title="Summary", border_style="accent")
