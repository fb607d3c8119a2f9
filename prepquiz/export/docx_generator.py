"""DOCX document generator for worksheets, answer keys and session reports."""

import string
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from prepquiz.models.quiz import QuizCategory, QuizQuestion, QuizSession
from prepquiz.models.score import QuizScore

HEADING_COLOR = RGBColor(0, 51, 102)
CORRECT_COLOR = RGBColor(0, 128, 0)
WRONG_COLOR = RGBColor(255, 0, 0)
MUTED_COLOR = RGBColor(128, 128, 128)
EXPLANATION_COLOR = RGBColor(64, 64, 64)

INDENT = Inches(0.5)
TABLE_STYLE = "Light Grid Accent 1"


def option_letter(index: int) -> str:
    """A, B, C, ... for option indexes 0, 1, 2, ..."""
    return string.ascii_uppercase[index]


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Create ``output_dir`` (and parents) if missing.

    Returns:
        The directory as a Path
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def generate_timestamped_filename(base_name: str, extension: str = "docx") -> str:
    """
    Build ``{stem}_{YYYYmmdd_HHMMSS}.{extension}``.

    Directories and any extension in ``base_name`` are dropped.
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{Path(base_name).stem}_{stamp}.{extension}"


def group_by_category(
    questions: Sequence[QuizQuestion],
) -> dict[QuizCategory, list[tuple[int, QuizQuestion]]]:
    """Questions grouped by category, keeping their worksheet numbers."""
    groups: dict[QuizCategory, list[tuple[int, QuizQuestion]]] = {}
    for number, question in enumerate(questions, 1):
        groups.setdefault(question.category, []).append((number, question))
    return groups


def new_document() -> Document:
    """Blank document with Calibri 11pt body text and one-inch margins."""
    doc = Document()
    normal = doc.styles["Normal"].font
    normal.name = "Calibri"
    normal.size = Pt(11)

    for section in doc.sections:
        section.top_margin = section.bottom_margin = Inches(1)
        section.left_margin = section.right_margin = Inches(1)
    return doc


def add_title(doc: Document, text: str) -> None:
    doc.add_heading(text, level=0).alignment = WD_ALIGN_PARAGRAPH.CENTER


def add_section_heading(doc: Document, text: str, centered: bool = False) -> None:
    heading = doc.add_heading(text, level=1)
    heading.runs[0].font.color.rgb = HEADING_COLOR
    if centered:
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER


def add_caption(doc: Document, text: str) -> None:
    """Small grey centred line under a title."""
    caption = doc.add_paragraph()
    caption.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = caption.add_run(text)
    run.font.size = Pt(9)
    run.font.color.rgb = MUTED_COLOR


def add_summary_line(doc: Document, parts: Sequence[str], bold: bool = True) -> None:
    """Centred ``a  |  b  |  c`` line."""
    line = doc.add_paragraph()
    line.alignment = WD_ALIGN_PARAGRAPH.CENTER
    for index, part in enumerate(parts):
        if index:
            line.add_run("  |  ")
        line.add_run(part).bold = bold


def add_indented(doc: Document, text: str = ""):
    paragraph = doc.add_paragraph(text)
    paragraph.paragraph_format.left_indent = INDENT
    return paragraph


def add_explanation(doc: Document, explanation: str) -> None:
    run = add_indented(doc).add_run(f"Explanation: {explanation}")
    run.italic = True
    run.font.size = Pt(10)
    run.font.color.rgb = EXPLANATION_COLOR


def add_question_text(doc: Document, number: int, question: QuizQuestion) -> None:
    """``Q{n}. question text`` with a bold number."""
    paragraph = doc.add_paragraph()
    label = paragraph.add_run(f"Q{number}. ")
    label.bold = True
    label.font.size = Pt(12)
    paragraph.add_run(question.question)


def add_table(doc: Document, headers: Sequence[str], rows: Sequence[Sequence[str]]):
    """Styled table with a bold header row."""
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = TABLE_STYLE

    for cell, header in zip(table.rows[0].cells, headers):
        cell.text = header
        for run in cell.paragraphs[0].runs:
            run.bold = True

    for values in rows:
        for cell, value in zip(table.add_row().cells, values):
            cell.text = value
    return table


def answer_text(question: QuizQuestion) -> str:
    return f"{option_letter(question.correct_answer)} - {question.correct_option}"


def export_worksheet(
    questions: Sequence[QuizQuestion],
    output_path: str,
    title: str = "Practice Worksheet",
    include_answers: bool = False,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export a question set to a formatted DOCX worksheet.

    Questions are printed in sections by category but keep their position in
    ``questions`` as their number.

    Args:
        questions: Questions to print
        output_path: File path, or a base name when ``use_output_dir`` is set
        title: Worksheet title
        include_answers: Mark correct options and append an answer key
        use_output_dir: Write a timestamped file into ``output_dir`` instead of ``output_path``
        output_dir: Directory used with ``use_output_dir``

    Returns:
        Path of the written file
    """
    if use_output_dir:
        directory = ensure_output_directory(output_dir)
        output_path = str(directory / generate_timestamped_filename(output_path))

    groups = group_by_category(questions)

    doc = new_document()
    add_title(doc, title)
    add_summary_line(doc, [f"Sections: {len(groups)}", f"Total Questions: {len(questions)}"])
    add_caption(doc, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    doc.add_page_break()

    for category, numbered in groups.items():
        add_section_to_document(doc, category, numbered, include_answers)

    if include_answers:
        add_answer_key(doc, questions)

    doc.save(output_path)
    return output_path


def add_section_to_document(
    doc: Document,
    category: QuizCategory,
    numbered: list[tuple[int, QuizQuestion]],
    include_answers: bool = False,
) -> None:
    """
    Add one category section to the worksheet.

    Args:
        doc: Document to add to
        category: Section category
        numbered: (worksheet number, question) pairs
        include_answers: Highlight the correct option and show explanations
    """
    add_section_heading(doc, category.display_name)

    for number, question in numbered:
        add_question_text(doc, number, question)

        for index, option in enumerate(question.options):
            option_para = add_indented(doc, f"   {option_letter(index)}. {option}")
            if include_answers and index == question.correct_answer:
                option_run = option_para.runs[0]
                option_run.bold = True
                option_run.font.color.rgb = CORRECT_COLOR
                option_para.add_run(" ✓").font.color.rgb = CORRECT_COLOR

        if include_answers and question.explanation:
            add_explanation(doc, question.explanation)

        doc.add_paragraph()


def add_answer_key(doc: Document, questions: Sequence[QuizQuestion]) -> None:
    """Page break, then a Q# / Answer / Explanation table."""
    doc.add_page_break()
    add_section_heading(doc, "Answer Key", centered=True)
    add_table(
        doc,
        ["Q#", "Answer", "Explanation"],
        [
            [str(number), answer_text(question), question.explanation or "N/A"]
            for number, question in enumerate(questions, 1)
        ],
    )


def generate_answer_key(
    questions: Sequence[QuizQuestion], output_path: str, title: str = "Practice Worksheet"
) -> str:
    """
    Write an answer key as its own document.

    Args:
        questions: Questions in worksheet order
        output_path: Where to save the key
        title: Title of the matching worksheet

    Returns:
        Path of the written file
    """
    doc = new_document()
    add_title(doc, f"{title} - Answer Key")
    add_answer_key(doc, questions)
    doc.save(output_path)
    return output_path


def export_worksheet_with_separate_answers(
    questions: Sequence[QuizQuestion],
    base_path: str,
    title: str = "Practice Worksheet",
    output_dir: str = "output",
) -> tuple[str, str]:
    """
    Export a worksheet without answers plus a separate answer key.

    Both files land in ``output_dir`` as ``{base}_questions_{stamp}.docx``
    and ``{base}_answers_{stamp}.docx``.

    Returns:
        Tuple of (questions_path, answers_path)
    """
    directory = ensure_output_directory(output_dir)
    base_name = Path(base_path).name

    questions_path = str(directory / generate_timestamped_filename(f"{base_name}_questions"))
    answers_path = str(directory / generate_timestamped_filename(f"{base_name}_answers"))

    export_worksheet(questions, questions_path, title=title, use_output_dir=False)
    generate_answer_key(questions, answers_path, title=title)

    return questions_path, answers_path


def export_session_report(session: QuizSession, score: QuizScore, output_path: str) -> str:
    """
    Write a results report for a finished session.

    The report holds the overall score, a per-category table and a review of
    every question with the chosen and correct options.

    Args:
        session: Completed or abandoned session
        score: Score computed for the session
        output_path: Path where the report should be saved

    Returns:
        Path to the created report
    """
    doc = new_document()
    add_title(doc, "Quiz Results")
    add_summary_line(
        doc,
        [
            f"Score: {score.total_score}/{score.total_questions}",
            f"{score.percentage:.1f}%",
            f"Time: {score.time_spent // 60}m {score.time_spent % 60}s",
        ],
    )
    add_caption(
        doc,
        f"Started: {session.start_time.strftime('%Y-%m-%d %H:%M')}  |  "
        f"Mode: {session.mode.value.capitalize()}  |  Status: {session.status.value}",
    )

    add_section_heading(doc, "By Category")
    add_table(
        doc,
        ["Category", "Correct", "Percentage"],
        [
            [category.display_name, f"{tally.correct}/{tally.total}", f"{tally.percentage:.1f}%"]
            for category, tally in score.category_scores.items()
            if tally.total > 0
        ],
    )

    doc.add_page_break()
    add_section_heading(doc, "Question Review")

    answers = {answer.question_id: answer for answer in session.answers}
    for number, question in enumerate(session.questions, 1):
        add_question_text(doc, number, question)

        answer = answers.get(question.id)
        if answer is None:
            result = add_indented(doc).add_run("Not answered")
            result.italic = True
            result.font.color.rgb = MUTED_COLOR
        else:
            chosen = (
                question.options[answer.selected_answer]
                if answer.selected_answer < len(question.options)
                else "?"
            )
            result = add_indented(doc).add_run(
                f"Your answer: {option_letter(answer.selected_answer)} - {chosen}"
            )
            result.font.color.rgb = CORRECT_COLOR if answer.is_correct else WRONG_COLOR

        add_indented(doc, f"Correct answer: {answer_text(question)}")
        if question.explanation:
            add_explanation(doc, question.explanation)

    doc.save(output_path)
    return output_path
