"""Team name to abbreviation and ESPN logo URL mapping for college football."""

# ESPN CDN base URL for team logos
_ESPN_LOGO_BASE = "https://a.espncdn.com/i/teamlogos/ncaa"

# Mapping: school name as published by CFBD -> (ESPN team id, abbreviation)
_CFB_TEAMS: dict[str, tuple[int, str]] = {
    # ── SEC ──────────────────────────────────────────────────
    "Alabama": (333, "ALA"),
    "Auburn": (2, "AUB"),
    "Florida": (57, "FLA"),
    "Georgia": (61, "UGA"),
    "LSU": (99, "LSU"),
    "Oklahoma": (201, "OU"),
    "Tennessee": (2633, "TENN"),
    "Texas": (251, "TEX"),
    "Texas A&M": (245, "TA&M"),
    # ── Big Ten ──────────────────────────────────────────────
    "Iowa": (2294, "IOWA"),
    "Michigan": (130, "MICH"),
    "Ohio State": (194, "OSU"),
    "Oregon": (2483, "ORE"),
    "Penn State": (213, "PSU"),
    "USC": (30, "USC"),
    "Washington": (264, "WASH"),
    "Wisconsin": (275, "WIS"),
    # ── ACC / Independents ───────────────────────────────────
    "Clemson": (228, "CLEM"),
    "Florida State": (52, "FSU"),
    "Miami": (2390, "MIA"),
    "Notre Dame": (87, "ND"),
    # ── Group of Five ────────────────────────────────────────
    "Boise State": (68, "BSU"),
    "Fresno State": (278, "FRES"),
    "Georgia Southern": (290, "GASO"),
}

_SCOPE_TEAMS: dict[str, dict[str, tuple[int, str]]] = {
    "cfb": _CFB_TEAMS,
}


def team_logo_url(team_name: str, size: int = 500) -> str:
    """Return ESPN CDN logo URL for a school name.

    Falls back to an empty string when the team isn't recognized.
    """
    entry = _CFB_TEAMS.get(team_name)
    if entry:
        espn_id, _abbr = entry
        return f"{_ESPN_LOGO_BASE}/{size}/{espn_id}.png"
    return ""


def team_metadata(scope: str) -> dict[str, dict[str, str]]:
    """Return the ``{name: {abbr, logo}}`` lookup for a scope (may be empty)."""
    teams = _SCOPE_TEAMS.get(scope.lower(), {})
    return {
        name: {"abbr": abbr, "logo": team_logo_url(name)}
        for name, (_espn_id, abbr) in teams.items()
    }
