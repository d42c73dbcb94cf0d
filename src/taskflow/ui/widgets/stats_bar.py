"""Board statistics bar."""

from textual.widgets import Static

from ...models import BoardStats, list_title


class StatsBar(Static):
    """Shows task counts per list and in total."""

    def update_stats(self, stats: BoardStats) -> None:
        """Render counts from a board snapshot."""
        self.update(self.format_stats(stats))

    @staticmethod
    def format_stats(stats: BoardStats) -> str:
        parts = [f"{list_title(list_id)} [b]{count}[/]" for list_id, count in stats.counts.items()]
        parts.append(f"Total [b]{stats.total}[/]")
        return "  │  ".join(parts)
