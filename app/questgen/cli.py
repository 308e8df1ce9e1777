"""
UI layer
Purpose: Terminal-only glue. Asks for subjects, difficulty and count, then
delegates all work to the controller. Keeps prompting concerns separate from
business logic so the logic can be unit tested without a terminal.

Input is parsed by small pure functions (`parse_*`) that raise ValueError;
the prompt loop re-asks until they accept.
"""

from __future__ import annotations
import logging
import sys
from enum import Enum
from typing import Callable, Optional, Sequence, TypeVar

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt

from .config import DEFAULT_COUNT, Settings, load_settings
from .controller import QuestionSessionController
from .models import Difficulty, LLMSettings, QuestionRequest, Subject
from .services.llm_gemini import GeminiLLMClient
from .services.pdf_renderer import PlaywrightPdfRenderer

logger = logging.getLogger(__name__)

SUBJECT_CHOICES: list[Subject] = list(Subject)
DIFFICULTY_CHOICES: list[Difficulty] = list(Difficulty)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")


# ---------------------------
# Parsing
# ---------------------------
def _match_choice(token: str, choices: Sequence[E]) -> E:
    """Accept a 1-based index or a case-insensitive value."""
    token = token.strip()
    if token.isdigit():
        idx = int(token)
        if 1 <= idx <= len(choices):
            return choices[idx - 1]
        raise ValueError(f"No option #{idx}")
    for choice in choices:
        if choice.value.lower() == token.lower():
            return choice
    raise ValueError(f"Unknown option: {token!r}")


def parse_subjects(raw: Optional[str]) -> list[Subject]:
    tokens = [t for t in (raw or "").split(",") if t.strip()]
    if not tokens:
        raise ValueError("Select at least one subject")
    picked: list[Subject] = []
    for token in tokens:
        subject = _match_choice(token, SUBJECT_CHOICES)
        if subject not in picked:
            picked.append(subject)
    return picked


def parse_difficulty(raw: Optional[str]) -> Difficulty:
    if not (raw or "").strip():
        raise ValueError("Choose a difficulty")
    return _match_choice(raw, DIFFICULTY_CHOICES)


def parse_count(raw: Optional[str]) -> int:
    try:
        n = int((raw or "").strip())
    except ValueError:
        raise ValueError("Must be at least 1") from None
    if n <= 0:
        raise ValueError("Must be at least 1")
    return n


# ---------------------------
# Prompts
# ---------------------------
def _print_choices(console: Console, title: str, choices: Sequence[Enum]) -> None:
    console.print(f"[bold]{title}[/bold]")
    for i, choice in enumerate(choices, start=1):
        console.print(f"  {i}. {escape(choice.value)}")


def _ask(
    console: Console,
    message: str,
    parse: Callable[[Optional[str]], T],
    default: Optional[str] = None,
) -> T:
    kwargs = {"console": console}
    if default is not None:
        kwargs["default"] = default
    while True:
        raw = Prompt.ask(message, **kwargs)
        try:
            return parse(raw)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")


def collect_request(
    console: Console, default_count: int = DEFAULT_COUNT
) -> QuestionRequest:
    """Subjects (multi-select), difficulty (single-select), count (> 0)."""
    _print_choices(console, "Subjects", SUBJECT_CHOICES)
    subjects = _ask(console, "Select subjects (comma separated)", parse_subjects)

    _print_choices(console, "Difficulty", DIFFICULTY_CHOICES)
    difficulty = _ask(console, "Choose difficulty", parse_difficulty)

    count = _ask(
        console,
        "How many questions per subject?",
        parse_count,
        default=str(default_count),
    )
    return QuestionRequest(subjects=subjects, difficulty=difficulty, count=count)


def _progress_printer(console: Console):
    def report(
        subject: Subject, difficulty: Difficulty, persona: str, done: int, total: int
    ) -> None:
        console.print(
            f"[cyan]({done}/{total}) Generating {difficulty.value} "
            f"{escape(subject.value)} question as {escape(persona)}...[/cyan]"
        )

    return report


def _configure_logging(console: Console, level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def build_controller(
    settings: Settings, console: Console
) -> QuestionSessionController:
    llm = GeminiLLMClient(settings.api_key, base_url=settings.base_url)
    return QuestionSessionController(
        llm,
        PlaywrightPdfRenderer(settings.output_dir),
        LLMSettings(model=settings.model),
        escape_html=settings.escape_html,
        on_progress=_progress_printer(console),
    )


# ---------------------------
# Entry point
# ---------------------------
def main() -> int:
    console = Console()
    settings = load_settings()
    _configure_logging(console, settings.log_level)

    console.print(
        "[bold bright_green]🎓 Welcome to AI Interview Question Generator[/]\n"
    )

    try:
        controller = build_controller(settings, console)
    except RuntimeError as e:
        console.print(f"[bold red]{escape(str(e))}[/]")
        return 1

    try:
        request = collect_request(console, settings.default_count)
        file_path = controller.run(request)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Aborted.[/yellow]")
        return 130
    except Exception as e:
        logger.exception("PDF generation failed")
        console.print(f"[bold red]❌ Failed to generate PDF: {escape(str(e))}[/]")
        return 1

    stats = controller.stats
    logger.info(
        "Tokens used: %d in, %d out", stats.tokens_in, stats.tokens_out
    )
    for reason in stats.failures:
        logger.debug("Fallback used: %s", reason)
    if stats.failed:
        console.print(
            f"[yellow]{stats.failed} of {stats.generated + stats.failed} "
            "questions could not be generated.[/yellow]"
        )
    console.print(
        f"[bold bright_green]\n✅ PDF generated successfully: "
        f"{escape(str(file_path))}\n[/]"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
