#!/usr/bin/env python3
"""
Astronaut Daily Schedule - interactive menu.

Thin shell over ScheduleRegistry: reads lines, calls the registry,
prints the returned messages. All scheduling rules live in the engine.
"""

import argparse
import logging
import sys
from typing import TextIO

from astro_schedule import config
from astro_schedule.observability import REGISTRY, configure_logging, shell_session
from astro_schedule.schedule import ConsoleNotifier, ListingResult, ScheduleRegistry, get_registry

logger = logging.getLogger(__name__)

MENU = """
--- Astronaut Daily Schedule ---
1. Add Task
2. Remove Task
3. View All Tasks
4. Mark Task as Completed
5. View Tasks by Priority
6. Exit
7. Show Metrics"""

EXIT_CHOICE = 6


class Shell:
    """One interactive session bound to a registry and a pair of streams."""

    def __init__(
        self,
        registry: ScheduleRegistry,
        settings: config.ScheduleSettings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.registry = registry
        self.settings = settings or config.ScheduleSettings()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Prompt and read one line. Raises EOFError when input runs out."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def show_listing(self, listing: ListingResult) -> None:
        if listing.is_empty:
            if listing.query is None:
                self.say("No tasks scheduled for the day.")
            else:
                self.say(f"No tasks found with priority: {listing.query}")
            return
        for activity in listing:
            self.say(str(activity))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def cmd_add(self) -> None:
        description = self.ask("Enter Description: ")
        start = self.ask("Enter Start Time (HH:MM): ")
        end = self.ask("Enter End Time (HH:MM): ")
        hint = "/".join(self.settings.suggested_priorities)
        priority = self.ask(f"Enter Priority ({hint}): ")
        result = self.registry.add_task(description, start, end, priority)
        if result.ok:
            self.say(result.message)
        elif result.conflict_with is None or not self._console_notified():
            self.say(f"Error: {result.message}")

    def _console_notified(self) -> bool:
        """True when a console notifier already printed conflicts."""
        return any(isinstance(n, ConsoleNotifier) for n in self.registry.notifiers)

    def cmd_remove(self) -> None:
        description = self.ask("Enter Task Description to Remove: ")
        result = self.registry.remove_task(description)
        self.say(result.message if result.ok else f"Error: {result.message}")

    def cmd_view(self) -> None:
        self.show_listing(self.registry.list_all())

    def cmd_complete(self) -> None:
        description = self.ask("Enter Task Description to Mark Completed: ")
        result = self.registry.mark_completed(description)
        self.say(result.message if result.ok else f"Error: {result.message}")

    def cmd_by_priority(self) -> None:
        priority = self.ask("Enter Priority to View: ")
        self.show_listing(self.registry.list_by_priority(priority))

    def cmd_metrics(self) -> None:
        self.stdout.write(REGISTRY.to_prometheus())

    COMMANDS = {
        1: cmd_add,
        2: cmd_remove,
        3: cmd_view,
        4: cmd_complete,
        5: cmd_by_priority,
        7: cmd_metrics,
    }

    def run(self) -> int:
        """Menu loop. Returns the process exit code."""
        with shell_session():
            logger.info("Schedule shell started")
            while True:
                self.say(MENU)
                try:
                    raw = self.ask("Enter choice: ")
                except EOFError:
                    break

                try:
                    choice = int(raw.strip())
                except ValueError:
                    self.say("Invalid input. Try again.")
                    continue

                if choice == EXIT_CHOICE:
                    break

                command = self.COMMANDS.get(choice)
                if command is None:
                    self.say("Invalid choice. Try again.")
                    continue

                try:
                    command(self)
                except EOFError:
                    break

            self.say("Exiting... Goodbye Astronaut!")
            logger.info("Schedule shell stopped", extra={"task_count": len(self.registry)})
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astro-schedule",
        description="Manage an astronaut's daily schedule of non-overlapping tasks.",
    )
    parser.add_argument("--config", help="Path to schedule.yaml")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=config.LOG_JSON,
        help="Emit JSON log lines on stderr",
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = config.load_settings(args.config)

    configure_logging(
        level=args.log_level or settings.log_level,
        json_format=True if args.json_logs else None,
    )

    registry = get_registry()
    for notifier in config.build_notifiers(settings, stream=stdout):
        registry.add_notifier(notifier)

    return Shell(registry, settings, stdin=stdin, stdout=stdout).run()


if __name__ == "__main__":
    sys.exit(main())
