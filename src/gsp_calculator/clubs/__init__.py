"""Static club catalog."""

from gsp_calculator.clubs.catalog import CLUBS, ClubEnvelope, club_index, get_club

__all__ = ["CLUBS", "ClubEnvelope", "club_index", "get_club"]
