"""Display rotation package."""
from .models import DensityHint, MonthlyView, PresentationState, SpotlightView
from .rotation_engine import RotationEngine, density_hint, monthly_honorees, todays_honorees
from .scheduler import Scheduler, ThreadingScheduler
from .session import DisplaySession

__all__ = [
    "DensityHint",
    "DisplaySession",
    "MonthlyView",
    "PresentationState",
    "RotationEngine",
    "Scheduler",
    "SpotlightView",
    "ThreadingScheduler",
    "density_hint",
    "monthly_honorees",
    "todays_honorees",
]
