"""
Display helpers for sound values and NC ratings
"""

from .result_types import round_half_up


NC_DESCRIPTIONS = {
    15: "Very quiet - Concert halls, broadcasting studios, private offices",
    20: "Quiet - Executive offices, conference rooms, libraries",
    25: "Moderately quiet - Open offices, classrooms, hospitals",
    30: "Moderate - General offices, retail spaces, restaurants",
    35: "Moderately noisy - Cafeterias, gymnasiums, lobbies",
    40: "Noisy - Light industrial, workshops, kitchens",
    45: "Very noisy - Heavy industrial, mechanical rooms",
    50: "Extremely noisy - Factories, transportation terminals",
    55: "Unacceptable for most occupied spaces",
    60: "Unacceptable for occupied spaces except very briefly",
    65: "Hearing protection recommended",
    70: "Hearing protection required - top of the NC scale",
}


def format_sound_value(value: float, unit: str, precision: int = 1) -> str:
    """
    Format a sound value for display

    Examples: "2.5 sones", "NC-35", "44.2 dBA"
    """
    formatted_value = f"{value:.{precision}f}"
    unit_key = unit.lower()

    if unit_key == "sones":
        return f"{formatted_value} sones"
    if unit_key == "nc":
        return f"NC-{int(round_half_up(value))}"
    if unit_key == "dba":
        return f"{formatted_value} dBA"
    return f"{formatted_value} {unit}"


def get_nc_description(nc_rating: float) -> str:
    """
    Get description of NC rating suitability

    Non-standard ratings are described by the closest standard rating.
    """
    closest_nc = min(NC_DESCRIPTIONS, key=lambda x: abs(x - nc_rating))
    base_desc = NC_DESCRIPTIONS[closest_nc]

    if nc_rating != closest_nc:
        return f"NC-{nc_rating:g}: Between NC-{closest_nc} criteria - {base_desc}"
    return f"NC-{closest_nc}: {base_desc}"
