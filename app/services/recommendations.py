"""Prioritized remediation advice derived from the score and severity counts."""
from typing import List

from app.schemas.analysis import SeverityCounts

POOR_POSTURE_THRESHOLD = 50

CLOSING_RECOMMENDATIONS = (
    "Refer to Cisco security best practices.",
    "Regularly audit your network configurations.",
)


def generate_recommendations(counts: SeverityCounts, security_score: int) -> List[str]:
    recommendations = []

    if counts.critical > 0:
        recommendations.append("URGENT: Address all critical vulnerabilities immediately.")

    if counts.high > 0:
        recommendations.append("HIGH PRIORITY: Fix high-severity issues as soon as possible.")

    if security_score < POOR_POSTURE_THRESHOLD:
        recommendations.append("Overall security posture is poor.")

    recommendations.extend(CLOSING_RECOMMENDATIONS)
    return recommendations
