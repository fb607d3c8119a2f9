"""Scoring engine: score breakdowns, performance bands and study tips."""

from prepquiz.models.quiz import QuizCategory, QuizSession
from prepquiz.models.score import (
    CategoryPerformance,
    CategoryScore,
    PerformanceLevel,
    QuizScore,
    ScoreComparison,
)

TREND_THRESHOLD = 5.0
SLOW_ANSWER_SECONDS = 20

CATEGORY_TIPS = {
    QuizCategory.MATH: "Focus on basic arithmetic and word problems for Math",
    QuizCategory.VERBAL_REASONING: "Study vocabulary words and practice reading comprehension",
    QuizCategory.LOGICAL_REASONING: "Practice pattern recognition and logical puzzles",
    QuizCategory.SPATIAL_REASONING: "Work on visual-spatial reasoning exercises",
}


def percent(part: float, whole: float) -> float:
    """``part / whole * 100``, or 0 when ``whole`` is 0."""
    return part / whole * 100 if whole > 0 else 0.0


class ScoringEngine:
    """Stateless scoring helpers."""

    @staticmethod
    def calculate_score(session: QuizSession) -> QuizScore:
        """
        Compute a score breakdown for a session.

        Answers are cross-referenced with questions by id, so the result does
        not depend on the stored ``score`` field.

        Args:
            session: A quiz session (normally terminal)

        Returns:
            QuizScore with overall, per-category and timing figures
        """
        questions = session.question_map()
        latest_answers = {answer.question_id: answer for answer in session.answers}
        valid_answers = [a for qid, a in latest_answers.items() if qid in questions]

        total_questions = len(session.questions)
        total_score = sum(1 for answer in valid_answers if answer.is_correct)

        category_scores = {category: CategoryScore() for category in QuizCategory}
        for question in session.questions:
            tally = category_scores[question.category]
            tally.total += 1
            answer = latest_answers.get(question.id)
            if answer is not None and answer.is_correct:
                tally.correct += 1
        for tally in category_scores.values():
            tally.percentage = round(percent(tally.correct, tally.total), 2)

        average_time = session.time_spent / total_questions if total_questions > 0 else 0.0

        return QuizScore(
            total_score=total_score,
            total_questions=total_questions,
            percentage=round(percent(total_score, total_questions), 2),
            category_scores=category_scores,
            time_spent=session.time_spent,
            average_time_per_question=round(average_time, 2),
            accuracy=round(percent(total_score, len(valid_answers)), 2),
        )

    @staticmethod
    def get_performance_level(percentage: float) -> PerformanceLevel:
        """Map an overall percentage to one of five bands."""
        if percentage >= 90:
            return PerformanceLevel(
                level="Excellent", color="green", description="Outstanding performance!"
            )
        if percentage >= 80:
            return PerformanceLevel(level="Good", color="blue", description="Well done!")
        if percentage >= 70:
            return PerformanceLevel(
                level="Average", color="yellow", description="Decent performance"
            )
        if percentage >= 60:
            return PerformanceLevel(
                level="Below Average", color="orange3", description="Room for improvement"
            )
        return PerformanceLevel(
            level="Poor", color="red", description="Needs significant improvement"
        )

    @staticmethod
    def get_category_performance(category_score: CategoryScore) -> CategoryPerformance:
        """Map a category score to one of four bands."""
        percentage = category_score.percentage
        if percentage >= 85:
            return CategoryPerformance(level="Strong", color="green")
        if percentage >= 70:
            return CategoryPerformance(level="Good", color="blue")
        if percentage >= 55:
            return CategoryPerformance(level="Average", color="yellow")
        return CategoryPerformance(level="Weak", color="red")

    @staticmethod
    def generate_study_recommendations(score: QuizScore) -> list[str]:
        """
        Free-text study tips.

        Categories without questions in the session are ignored.

        Args:
            score: Score to advise on

        Returns:
            Recommendations, weakest areas first, praise last
        """
        recommendations = []

        if score.percentage < 70:
            recommendations.append(
                "Consider taking more practice quizzes to improve overall performance"
            )

        if score.average_time_per_question > SLOW_ANSWER_SECONDS:
            recommendations.append(
                "Work on improving speed - aim for under 18 seconds per question"
            )

        attempted = {
            category: tally
            for category, tally in score.category_scores.items()
            if tally.total > 0
        }
        for category, tally in attempted.items():
            if tally.percentage < 60:
                recommendations.append(CATEGORY_TIPS[category])

        strong = [
            category.display_name
            for category, tally in attempted.items()
            if tally.percentage >= 80
        ]
        if strong:
            recommendations.append(
                f"Great job in {', '.join(strong)}! Keep up the good work."
            )

        return recommendations

    @staticmethod
    def compare_with_previous(
        current: QuizScore, previous: QuizScore | None = None
    ) -> ScoreComparison:
        """Classify the change from ``previous`` as improving, declining or stable."""
        if previous is None:
            return ScoreComparison(
                improvement=0.0,
                trend="stable",
                message="This is your first quiz - great start!",
            )

        improvement = current.percentage - previous.percentage
        if improvement > TREND_THRESHOLD:
            return ScoreComparison(
                improvement=improvement,
                trend="improving",
                message=f"Great improvement! You're {improvement:.1f}% better than last time.",
            )
        if improvement < -TREND_THRESHOLD:
            return ScoreComparison(
                improvement=improvement,
                trend="declining",
                message=f"Performance dropped by {abs(improvement):.1f}%. Keep practicing!",
            )
        return ScoreComparison(
            improvement=improvement,
            trend="stable",
            message="Performance is consistent with your previous attempt.",
        )
