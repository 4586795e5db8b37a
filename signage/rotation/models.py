"""Datamodels describing the display presentation.

:class:`PresentationState` is the single mutable-by-replacement value owned by
a rotation engine. Renderers never see it directly; they receive one of the two
read-only views instead: :class:`SpotlightView` for today's honoree or
:class:`MonthlyView` for the month's roster together with a
:class:`DensityHint` that tells them how much room each name gets.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Mapping, Tuple

from signage.core.enums import DisplayMode, SizeClass
from signage.data_source.models import RosterEntry


@dataclass(frozen=True, slots=True)
class PresentationState:
    """Current mode plus the honoree lists it was derived from.

    A transition replaces the whole object, so the mode flip and the spotlight
    index advance are observed together or not at all.
    """

    mode: DisplayMode
    spotlight_index: int
    todays: Tuple[RosterEntry, ...]
    monthly: Tuple[RosterEntry, ...]

    def __post_init__(self) -> None:
        if self.todays:
            if not 0 <= self.spotlight_index < len(self.todays):
                raise ValueError(f"spotlight_index {self.spotlight_index} out of range for {len(self.todays)} honorees")
        elif self.mode is DisplayMode.SPOTLIGHT:
            raise ValueError("SPOTLIGHT mode requires at least one honoree today")


@dataclass(frozen=True, slots=True)
class DensityHint:
    """Size classes for the monthly roster, derived only from its length."""

    count: int
    name_size: SizeClass
    date_size: SizeClass
    spacing: SizeClass


@dataclass(frozen=True, slots=True)
class SpotlightView:
    """Today's honoree at ``index`` out of ``total`` (for position markers)."""

    honoree: RosterEntry
    index: int
    total: int

    mode = DisplayMode.SPOTLIGHT

    @property
    def show_position_markers(self) -> bool:
        return self.total > 1


@dataclass(frozen=True, slots=True)
class SeasonalTheme:
    """Month-keyed title and emoji shown above the monthly roster."""

    name: str
    emoji: str


SEASONAL_THEMES: Mapping[int, SeasonalTheme] = {
    1: SeasonalTheme("Winter Wonderland", "❄️"),
    2: SeasonalTheme("Love & Hearts", "💝"),
    3: SeasonalTheme("Spring Awakening", "🌷"),
    4: SeasonalTheme("Spring Blossoms", "🌸"),
    5: SeasonalTheme("Sunshine Days", "🌻"),
    6: SeasonalTheme("Summer Vibes", "☀️"),
    7: SeasonalTheme("Summer Fun", "🎆"),
    8: SeasonalTheme("Beach Days", "🏖️"),
    9: SeasonalTheme("Autumn Begins", "🍂"),
    10: SeasonalTheme("Fall Harvest", "🎃"),
    11: SeasonalTheme("Cozy Season", "🍁"),
    12: SeasonalTheme("Winter Holidays", "🎄"),
}


@dataclass(frozen=True, slots=True)
class MonthlyView:
    """Everyone born in ``month``; may be empty ("no birthdays this month")."""

    month: int
    honorees: Tuple[RosterEntry, ...]
    hint: DensityHint

    mode = DisplayMode.MONTHLY

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def theme(self) -> SeasonalTheme:
        return SEASONAL_THEMES[self.month]

    @property
    def is_empty(self) -> bool:
        return not self.honorees


DisplayView = SpotlightView | MonthlyView


__all__ = [
    "SEASONAL_THEMES",
    "DensityHint",
    "DisplayView",
    "MonthlyView",
    "PresentationState",
    "SeasonalTheme",
    "SpotlightView",
]
