"""Fitness tracker: step and training records, distance, speed and calories."""

__version__ = "0.1.0"
__all__ = ["actioninfo", "cli", "daysteps", "durations", "personaldata", "spentenergy", "trainings"]