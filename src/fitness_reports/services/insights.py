"""Plain-language summary of a report."""

from fitness_reports.domain.reports import Report

PROTEIN_DROP_ALERT_PERCENT = 10
NO_INSIGHTS_MESSAGE = (
    "Keep up the consistent tracking! Your data shows stable progress."
)


def summarize_report(report: Report) -> str:
    """Describe the notable changes in a report in one short paragraph."""
    insights: list[str] = []
    recommendations: list[str] = []

    weight_change = report.weight.change
    if weight_change:
        direction = "reduced" if weight_change.is_positive else "increased"
        insights.append(f"Weight {direction} by {abs(weight_change.absolute):g}kg")

    waist_change = report.waist.change
    if waist_change:
        direction = "reduced" if waist_change.is_positive else "increased"
        insights.append(f"Waist {direction} by {abs(waist_change.absolute):g}cm")

    protein_change = report.protein.change
    if protein_change:
        if (
            not protein_change.is_positive
            and abs(protein_change.percent) > PROTEIN_DROP_ALERT_PERCENT
        ):
            insights.append(
                "Average protein intake dropped by "
                f"{abs(protein_change.percent):.1f}%"
            )
            recommendations.append("Try increasing daily protein to maintain muscle")
        elif protein_change.is_positive:
            insights.append(
                f"Protein intake improved by {protein_change.percent:.1f}%"
            )

    steps_change = report.steps.change
    if steps_change and steps_change.is_positive:
        insights.append(f"Steps increased by {steps_change.percent:.1f}%")

    workout_change = report.workout.change
    if workout_change and workout_change.is_positive:
        insights.append("Workout activity increased")

    if not insights:
        return NO_INSIGHTS_MESSAGE

    summary = " and ".join(insights) + "."
    if recommendations:
        summary += " " + " ".join(recommendations)
    return summary
