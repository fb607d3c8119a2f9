"""Export functionality for worksheets and quiz reports."""

from .docx_generator import (
    export_session_report,
    export_worksheet,
    export_worksheet_with_separate_answers,
    generate_answer_key,
)

__all__ = [
    "export_worksheet",
    "export_worksheet_with_separate_answers",
    "export_session_report",
    "generate_answer_key",
]
