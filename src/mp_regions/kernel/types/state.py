"""United States states (plus the District of Columbia)."""

from __future__ import annotations

import enum


class State(enum.Enum):
    """A US state or DC, identified by its postal abbreviation."""

    ALABAMA = ("AL", "Alabama")
    ALASKA = ("AK", "Alaska")
    ARIZONA = ("AZ", "Arizona")
    ARKANSAS = ("AR", "Arkansas")
    CALIFORNIA = ("CA", "California")
    COLORADO = ("CO", "Colorado")
    CONNECTICUT = ("CT", "Connecticut")
    DELAWARE = ("DE", "Delaware")
    DISTRICT_OF_COLUMBIA = ("DC", "District of Columbia")
    FLORIDA = ("FL", "Florida")
    GEORGIA = ("GA", "Georgia")
    HAWAII = ("HI", "Hawaii")
    IDAHO = ("ID", "Idaho")
    ILLINOIS = ("IL", "Illinois")
    INDIANA = ("IN", "Indiana")
    IOWA = ("IA", "Iowa")
    KANSAS = ("KS", "Kansas")
    KENTUCKY = ("KY", "Kentucky")
    LOUISIANA = ("LA", "Louisiana")
    MAINE = ("ME", "Maine")
    MARYLAND = ("MD", "Maryland")
    MASSACHUSETTS = ("MA", "Massachusetts")
    MICHIGAN = ("MI", "Michigan")
    MINNESOTA = ("MN", "Minnesota")
    MISSISSIPPI = ("MS", "Mississippi")
    MISSOURI = ("MO", "Missouri")
    MONTANA = ("MT", "Montana")
    NEBRASKA = ("NE", "Nebraska")
    NEVADA = ("NV", "Nevada")
    NEW_HAMPSHIRE = ("NH", "New Hampshire")
    NEW_JERSEY = ("NJ", "New Jersey")
    NEW_MEXICO = ("NM", "New Mexico")
    NEW_YORK = ("NY", "New York")
    NORTH_CAROLINA = ("NC", "North Carolina")
    NORTH_DAKOTA = ("ND", "North Dakota")
    OHIO = ("OH", "Ohio")
    OKLAHOMA = ("OK", "Oklahoma")
    OREGON = ("OR", "Oregon")
    PENNSYLVANIA = ("PA", "Pennsylvania")
    RHODE_ISLAND = ("RI", "Rhode Island")
    SOUTH_CAROLINA = ("SC", "South Carolina")
    SOUTH_DAKOTA = ("SD", "South Dakota")
    TENNESSEE = ("TN", "Tennessee")
    TEXAS = ("TX", "Texas")
    UTAH = ("UT", "Utah")
    VERMONT = ("VT", "Vermont")
    VIRGINIA = ("VA", "Virginia")
    WASHINGTON = ("WA", "Washington")
    WEST_VIRGINIA = ("WV", "West Virginia")
    WISCONSIN = ("WI", "Wisconsin")
    WYOMING = ("WY", "Wyoming")

    def __init__(self, abbreviation: str, display_name: str) -> None:
        self.abbreviation = abbreviation
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def value_of_abbreviation(cls, abbreviation: str | None) -> "State | None":
        """Case-insensitive lookup by two-letter abbreviation; ``None`` if unknown."""
        if not abbreviation:
            return None
        wanted = abbreviation.strip().upper()
        return next((s for s in cls if s.abbreviation == wanted), None)

    @classmethod
    def value_of_name(cls, name: str | None) -> "State | None":
        """Case-insensitive lookup by display name; ``None`` if unknown."""
        if not name:
            return None
        wanted = name.strip().casefold()
        return next((s for s in cls if s.display_name.casefold() == wanted), None)


__all__ = ["State"]
