"""Display colours for resource service types."""

SERVICE_COLORS: dict[str, str] = {
    "Speech Therapy": "#8B5CF6",
    "Occupational Therapy": "#10B981",
    "Physical Therapy": "#3B82F6",
    "Counseling": "#F59E0B",
    "Reading Support": "#EF4444",
    "Math Support": "#F97316",
    "ESL": "#EC4899",
}

DEFAULT_SERVICE_COLOR = "#6B7280"


def service_color(service_type: str) -> str:
    return SERVICE_COLORS.get(service_type, DEFAULT_SERVICE_COLOR)
