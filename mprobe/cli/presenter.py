"""CLI presentation helpers for the run summary."""

from __future__ import annotations

import click

from mprobe.domain.models import RunResult


class CliPresenter:
    """Render human-readable command output."""

    def __init__(self, *, color: bool | None = None) -> None:
        self.color = color

    def emit_intro(self, intro: str) -> None:
        """Emit a styled intro banner."""
        click.echo(click.style(intro, fg="blue"), color=self.color)

    def emit_error(self, message: str) -> None:
        """Emit one error line to stderr."""
        click.echo(click.style(message, fg="red"), err=True, color=self.color)

    def emit_run_summary(self, result: RunResult) -> None:
        """Emit the series, its chapter count, and page count and directory per chapter."""
        series = click.style(result.series, underline=True, reverse=True)
        click.echo(f"Finished {series}", color=self.color)
        click.echo(
            f"{result.chapter_count} chapter(s) with {result.total_pages} page(s) in {series}",
            color=self.color,
        )
        for chapter, record in result.chapters.items():
            chapter_label = click.style(str(chapter), fg="green")
            click.echo(
                f"Chapter {chapter_label} with {record.pages} page attempt(s) "
                f"({record.stored_pages} stored) in {record.directory}",
                color=self.color,
            )
