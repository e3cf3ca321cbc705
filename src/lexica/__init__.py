"""lexica: personal vocabulary manager with score-weighted recall quizzes."""

__version__ = "0.1.0"
