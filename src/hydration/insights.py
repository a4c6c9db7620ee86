"""
Insight Generation.

Derives short human-readable strings from grades and period totals
that have already been computed, plus the static circadian guidance
and motivational messages shown alongside them.
"""

from typing import Dict, List, Sequence

from .calculators import round_half_up
from .intake_warnings import WARNING_CAFFEINE_DAILY
from .models import Grade, TimePeriod

_POOR = (Grade.D, Grade.F)


def generate_insights(
    periods: Sequence[TimePeriod],
    distribution: Grade,
    spacing: Grade,
    timing: Grade,
    caffeine_mg: float,
) -> List[str]:
    """
    Build the insight list in a fixed order.

    Order: best period, distribution, spacing, timing, caffeine.

    Args:
        periods: Output of time_periods for the day
        distribution: Distribution grade
        spacing: Spacing grade
        timing: Timing grade
        caffeine_mg: The day's caffeine total

    Returns:
        List of insight strings (possibly empty)
    """
    insights: List[str] = []

    if periods:
        best = periods[0]
        for period in periods[1:]:
            if period.actual > best.actual:
                best = period
        if best.actual > 0:
            insights.append(f"🌟 Best hydration: {best.name} ({round_half_up(best.actual)}ml)")

    if distribution == Grade.A:
        insights.append("🎯 Excellent distribution throughout the day!")
    elif distribution in _POOR:
        insights.append("💡 Try spreading drinks more evenly across morning, afternoon, and evening")

    if spacing == Grade.A:
        insights.append("⏱️ Perfect spacing between drinks!")
    elif spacing in _POOR:
        insights.append("⏰ Aim to drink every 1-2 hours for optimal absorption")

    if timing == Grade.A:
        insights.append("😴 Great bedtime hydration habits!")

    if 0 < caffeine_mg < WARNING_CAFFEINE_DAILY:
        insights.append(f"☕ Moderate caffeine: {round_half_up(caffeine_mg)}mg (well balanced)")

    return insights


# (start hour, end hour, period, recommendation, emoji); anything else is night
CIRCADIAN_GUIDANCE = [
    (6, 9, "Early Morning", "Start your day with 500ml within 30 minutes of waking", "🌅"),
    (9, 12, "Morning", "Maintain steady intake - aim for 250-500ml per hour", "☀️"),
    (12, 14, "Lunch Time", "Drink 300ml 20-30 minutes before meals to aid digestion", "🍽️"),
    (14, 18, "Afternoon", "Keep hydrating regularly - your body needs consistent intake", "🌤️"),
    (18, 20, "Evening", "Continue light hydration, but start tapering off", "🌆"),
    (20, 22, "Pre-Bedtime", "Minimize intake to avoid sleep disruptions", "🌙"),
]


def circadian_guidance(hour: int) -> Dict[str, str]:
    """Recommendation for the given local hour of day."""
    for start, end, period, recommendation, emoji in CIRCADIAN_GUIDANCE:
        if start <= hour < end:
            return {"period": period, "recommendation": recommendation, "emoji": emoji}
    return {
        "period": "Night",
        "recommendation": "Avoid drinking to ensure uninterrupted sleep",
        "emoji": "😴",
    }


def motivational_message(percentage: float) -> str:
    """Encouragement keyed off progress toward today's goal."""
    if percentage >= 100:
        return "🎉 Amazing! You've hit your goal! Keep it up!"
    if percentage >= 75:
        return "💪 Almost there! Just a bit more to reach your goal!"
    if percentage >= 50:
        return "🌊 Great progress! You're halfway there!"
    if percentage >= 25:
        return "💧 Good start! Let's keep the momentum going!"
    return "🚰 Time to hydrate! Your body will thank you!"
