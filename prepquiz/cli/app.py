"""Typer CLI application for CCAT-style practice quizzes."""

import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from prepquiz import __version__
from prepquiz.agents.explainer import explain_word
from prepquiz.config.settings import Settings, get_settings
from prepquiz.engine.quiz_engine import QuizEngine
from prepquiz.engine.scoring import ScoringEngine
from prepquiz.errors import PrepQuizError
from prepquiz.export.docx_generator import (
    export_session_report,
    export_worksheet,
    export_worksheet_with_separate_answers,
    option_letter,
)
from prepquiz.generators.options import shuffle
from prepquiz.generators.vocabulary import VOCABULARY
from prepquiz.graph.workflow import source_questions
from prepquiz.history.store import HistoryStore
from prepquiz.models.quiz import QuizCategory, QuizMode, QuizQuestion, QuizSession
from prepquiz.models.score import QuizScore
from prepquiz.utils.logging_config import configure_logging

app = typer.Typer(
    name="prepquiz",
    help="CCAT-style practice quizzes: math, verbal and logical reasoning",
    add_completion=False,
)

console = Console()

DEFAULT_CATEGORIES = [
    QuizCategory.MATH,
    QuizCategory.VERBAL_REASONING,
    QuizCategory.LOGICAL_REASONING,
]

QUIT_KEY = "Q"


def make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


def load_questions(
    categories: List[QuizCategory],
    total: int,
    settings: Settings,
    rng: random.Random,
) -> List[QuizQuestion]:
    """Source questions behind a spinner, exiting on failure."""
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("[cyan]Generating questions...", total=None)
            questions, source = source_questions(categories, total, settings, rng=rng)
            progress.update(task, description="[green]Questions ready!")
    except PrepQuizError as e:
        fail(str(e))

    label = "AI provider" if source == "ai" else "local generator"
    console.print(f"[dim]{len(questions)} questions from the {label}[/dim]")
    return questions


@app.command()
def generate(
    categories: Optional[List[QuizCategory]] = typer.Option(
        None,
        "--category",
        "-c",
        help="Categories to include (repeatable). Defaults to math, verbal and logical.",
        case_sensitive=False,
    ),
    total: Optional[int] = typer.Option(
        None,
        "--questions",
        "-q",
        help="Total number of questions",
        min=1,
        max=200,
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable output"),
    export: bool = typer.Option(False, "--export", "-e", help="Write a DOCX worksheet"),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Worksheet file name (without extension)",
    ),
    separate_answers: bool = typer.Option(
        True,
        "--separate-answers/--include-answers",
        help="Generate a separate answer key file vs include answers in the worksheet",
    ),
    output_dir: str = typer.Option("output", "--output-dir", help="Directory for exported files"),
    show_answers: bool = typer.Option(
        False, "--show-answers", help="Print the correct option under each question"
    ),
) -> None:
    """
    Generate a question set and print it.

    Example:
        prepquiz generate -c math -c logical_reasoning -q 20 --export
    """
    settings = get_settings()
    categories = categories or DEFAULT_CATEGORIES
    total = total or settings.total_questions
    output = output or settings.default_output_path

    display_config(categories, total, QuizMode.PRACTICE, output if export else None)

    questions = load_questions(categories, total, settings, make_rng(seed))

    for number, question in enumerate(questions, 1):
        display_question(number, len(questions), question)
        if show_answers:
            console.print(
                f"   [green]Answer: {option_letter(question.correct_answer)}. "
                f"{question.correct_option}[/green]"
            )

    if not export:
        return

    console.print("\n[cyan]Exporting to DOCX...[/cyan]")
    try:
        if separate_answers:
            questions_file, answers_file = export_worksheet_with_separate_answers(
                questions, output, output_dir=output_dir
            )
            console.print("\n[green]✓[/green] Worksheet exported successfully!")
            console.print(f"  Questions: {questions_file}")
            console.print(f"  Answers:   {answers_file}")
        else:
            output_file = export_worksheet(
                questions, output, include_answers=True, output_dir=output_dir
            )
            console.print(f"\n[green]✓[/green] Worksheet exported to: {output_file}")
    except OSError as e:
        fail(f"Export failed: {e}")


@app.command()
def take(
    categories: Optional[List[QuizCategory]] = typer.Option(
        None,
        "--category",
        "-c",
        help="Categories to include (repeatable). Defaults to math, verbal and logical.",
        case_sensitive=False,
    ),
    total: Optional[int] = typer.Option(
        None, "--questions", "-q", help="Total number of questions", min=1, max=200
    ),
    mode: QuizMode = typer.Option(
        QuizMode.PRACTICE,
        "--mode",
        "-m",
        help="practice shows feedback after each answer, exam runs against the clock",
        case_sensitive=False,
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for repeatable quizzes"),
    history_path: Optional[Path] = typer.Option(
        None, "--history", help="History file (defaults to HISTORY_PATH)"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", help="Write a DOCX results report to this path"
    ),
) -> None:
    """
    Take a quiz interactively. Enter the option letter, or Q to stop early.

    Example:
        prepquiz take -q 10 --mode exam
    """
    settings = get_settings()
    categories = categories or DEFAULT_CATEGORIES
    total = total or settings.total_questions
    try:
        store = HistoryStore(history_path or settings.history_path)
    except PrepQuizError as e:
        fail(str(e))

    display_config(categories, total, mode, None)
    questions = load_questions(categories, total, settings, make_rng(seed))

    engine = QuizEngine(questions, categories, mode=mode)
    time_limit = settings.exam_time_limit

    for number, question in enumerate(questions, 1):
        if mode == QuizMode.EXAM and engine.is_time_up(time_limit):
            console.print("\n[red bold]Time is up![/red bold]")
            break

        if mode == QuizMode.EXAM:
            remaining = engine.get_time_remaining(time_limit)
            console.print(f"\n[dim]Time remaining: {remaining // 60}:{remaining % 60:02d}[/dim]")

        engine.start_question(question.id)
        display_question(number, len(questions), question)

        choice = ask_for_answer(len(question.options))
        if choice is None:
            engine.abandon_quiz()
            console.print("\n[yellow]Quiz abandoned.[/yellow]")
            break

        answer = engine.submit_answer(question.id, choice)
        if mode == QuizMode.PRACTICE:
            display_feedback(question, answer.is_correct)

    session = engine.get_current_session()
    if not session.is_terminal:
        session = engine.complete_quiz()

    score = ScoringEngine.calculate_score(session)
    previous = store.get_latest_completed(exclude_id=session.id)
    previous_score = ScoringEngine.calculate_score(previous) if previous else None

    display_results(session, score, previous_score)

    store.add_session(session)

    if report:
        report.parent.mkdir(parents=True, exist_ok=True)
        report_file = export_session_report(session, score, str(report))
        console.print(f"\n[green]✓[/green] Report exported to: {report_file}")


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of sessions to show", min=1),
    history_path: Optional[Path] = typer.Option(
        None, "--history", help="History file (defaults to HISTORY_PATH)"
    ),
) -> None:
    """Show recent quiz sessions."""
    settings = get_settings()
    try:
        store = HistoryStore(history_path or settings.history_path)
    except PrepQuizError as e:
        fail(str(e))

    sessions = store.get_recent_sessions(limit)
    if not sessions:
        console.print("[yellow]No quiz history yet.[/yellow]")
        return

    table = Table(title="Recent Quizzes", border_style="cyan")
    table.add_column("Date", style="cyan")
    table.add_column("Mode", style="white")
    table.add_column("Status", style="white")
    table.add_column("Score", style="white", justify="right")
    table.add_column("Time", style="white", justify="right")

    for session in sessions:
        score = ScoringEngine.calculate_score(session)
        level = ScoringEngine.get_performance_level(score.percentage)
        table.add_row(
            session.start_time.strftime("%Y-%m-%d %H:%M"),
            session.mode.value.capitalize(),
            session.status.value.replace("_", " "),
            f"[{level.color}]{session.score}/{session.total_questions} "
            f"({score.percentage:.0f}%)[/{level.color}]",
            format_duration(session.time_spent),
        )

    console.print()
    console.print(table)


@app.command()
def stats(
    history_path: Optional[Path] = typer.Option(
        None, "--history", help="History file (defaults to HISTORY_PATH)"
    ),
) -> None:
    """Show statistics over completed quizzes."""
    settings = get_settings()
    try:
        store = HistoryStore(history_path or settings.history_path)
    except PrepQuizError as e:
        fail(str(e))

    statistics = store.get_statistics()
    if statistics.total_quizzes == 0:
        console.print("[yellow]No completed quizzes yet.[/yellow]")
        return

    table = Table(title="Overall Statistics", show_header=False, border_style="green")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Quizzes completed", str(statistics.total_quizzes))
    table.add_row("Average score", f"{statistics.average_score:.2f}")
    table.add_row("Best score", str(statistics.best_score))
    table.add_row("Total time", format_duration(statistics.total_time_spent))
    table.add_row("Recent scores", ", ".join(str(s) for s in statistics.improvement_trend))

    console.print()
    console.print(table)

    category_table = Table(title="By Category", border_style="cyan")
    category_table.add_column("Category", style="cyan")
    category_table.add_column("Attempts", style="white", justify="right")
    category_table.add_column("Average", style="white", justify="right")
    category_table.add_column("Best", style="white", justify="right")

    for category in QuizCategory:
        category_stats = store.get_category_statistics(category)
        if category_stats.total_attempts == 0:
            continue
        category_table.add_row(
            category.display_name,
            str(category_stats.total_attempts),
            f"{category_stats.average_score:.2f}",
            str(category_stats.best_score),
        )

    console.print()
    console.print(category_table)


@app.command()
def vocab(
    count: int = typer.Option(5, "--count", "-n", help="Number of flashcards", min=1),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    explain: bool = typer.Option(
        False, "--explain", help="Ask the AI provider for a memory tip for each word"
    ),
) -> None:
    """Show vocabulary flashcards."""
    settings = get_settings()
    words = shuffle(VOCABULARY, make_rng(seed))[:count]

    for entry in words:
        body = f"[bold]{entry.meaning}[/bold]\n\n[italic]{entry.example}[/italic]"
        if entry.antonym:
            body += f"\n\n[dim]Antonym: {entry.antonym}[/dim]"

        if explain:
            try:
                body += f"\n\n[cyan]{explain_word(entry.word, entry.meaning, settings)}[/cyan]"
            except PrepQuizError as e:
                fail(str(e))

        console.print(Panel(body, title=entry.word, border_style="cyan"))


@app.command()
def info() -> None:
    """Display information about the quiz tool."""
    settings = get_settings()
    ai_status = "enabled" if settings.ai_enabled and settings.is_ai_configured else "disabled"
    info_text = f"""
[bold cyan]PrepQuiz[/bold cyan]
Version: {__version__}

[bold]Categories:[/bold]
  • Math - word problems, percentages, algebra
  • Verbal Reasoning - fill in the blank, antonyms
  • Logical Reasoning - sequences, syllogisms, text comparison
  • Spatial Reasoning - not yet available

[bold]Features:[/bold]
  • Practice and timed exam modes
  • Scoring with study recommendations
  • Local history and statistics
  • DOCX worksheets and answer keys
  • Optional AI question generation

[bold]AI provider:[/bold] {settings.llm_provider} ({ai_status})
[bold]Model:[/bold] {settings.model_name}
    """
    console.print(Panel(info_text, title="PrepQuiz Info", border_style="cyan"))


def format_duration(seconds: int) -> str:
    return f"{seconds // 60}m {seconds % 60:02d}s"


def ask_for_answer(option_count: int) -> Optional[int]:
    """Prompt until a valid option letter is entered. Returns None to quit."""
    letters = [option_letter(index) for index in range(option_count)]
    while True:
        raw = typer.prompt(f"Your answer ({'/'.join(letters)}, {QUIT_KEY} to quit)")
        choice = raw.strip().upper()
        if choice == QUIT_KEY:
            return None
        if choice in letters:
            return letters.index(choice)
        console.print(f"[red]Please enter one of {', '.join(letters)}[/red]")


def display_config(
    categories: List[QuizCategory],
    total: int,
    mode: QuizMode,
    output: Optional[str],
) -> None:
    """Display the configuration before generation."""
    table = Table(title="Quiz Configuration", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Categories", ", ".join(c.display_name for c in categories))
    table.add_row("Questions", str(total))
    table.add_row("Mode", mode.value.capitalize())
    if output:
        table.add_row("Output", output)

    console.print()
    console.print(table)


def display_question(number: int, total: int, question: QuizQuestion) -> None:
    """Print one question with lettered options."""
    console.print(
        f"\n[bold cyan]Q{number}/{total}[/bold cyan] "
        f"[dim]({question.category.display_name})[/dim]"
    )
    console.print(question.question)
    for index, option in enumerate(question.options):
        console.print(f"   {option_letter(index)}. {option}")


def display_feedback(question: QuizQuestion, is_correct: bool) -> None:
    if is_correct:
        console.print("[green]✓ Correct![/green]")
    else:
        console.print(
            f"[red]✗ Incorrect.[/red] The answer is "
            f"{option_letter(question.correct_answer)}. {question.correct_option}"
        )
    if question.explanation:
        console.print(f"[dim]{question.explanation}[/dim]")


def display_results(
    session: QuizSession, score: QuizScore, previous: Optional[QuizScore]
) -> None:
    """Display score, category breakdown, recommendations and trend."""
    level = ScoringEngine.get_performance_level(score.percentage)

    console.print(f"\n[bold {level.color}]{level.level}[/bold {level.color}] - {level.description}")

    table = Table(title="Quiz Results", border_style="green")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Score", f"{score.total_score}/{score.total_questions}")
    table.add_row("Percentage", f"{score.percentage:.1f}%")
    table.add_row("Accuracy", f"{score.accuracy:.1f}%")
    table.add_row("Time", format_duration(score.time_spent))
    table.add_row("Avg per question", f"{score.average_time_per_question:.1f}s")
    table.add_row("Status", session.status.value)

    console.print()
    console.print(table)

    category_table = Table(title="By Category", border_style="cyan")
    category_table.add_column("Category", style="cyan")
    category_table.add_column("Correct", style="white", justify="right")
    category_table.add_column("Performance", style="white")

    for category, tally in score.category_scores.items():
        if tally.total == 0:
            continue
        performance = ScoringEngine.get_category_performance(tally)
        category_table.add_row(
            category.display_name,
            f"{tally.correct}/{tally.total} ({tally.percentage:.0f}%)",
            f"[{performance.color}]{performance.level}[/{performance.color}]",
        )

    console.print()
    console.print(category_table)

    recommendations = ScoringEngine.generate_study_recommendations(score)
    if recommendations:
        console.print("\n[bold]Recommendations:[/bold]")
        for recommendation in recommendations:
            console.print(f"  • {recommendation}")

    comparison = ScoringEngine.compare_with_previous(score, previous)
    console.print(f"\n[italic]{comparison.message}[/italic]")


@app.callback()
def callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)"
    ),
) -> None:
    """
    PrepQuiz - CCAT-style practice quizzes in the terminal.
    """
    configure_logging((log_level or get_settings().log_level).upper())


if __name__ == "__main__":
    app()
