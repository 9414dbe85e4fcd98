"""TrigonQuest - interactive geometry construction exercises.

Main namespace package containing the construction core:
- trigonquest.schema: Shared data model (points, lines, angles, questions, answers)
- trigonquest.geometry: Angle primitives, snapping and bisector geometry
- trigonquest.engine: Per-session drawing state driven by pointer events
- trigonquest.validation: Answer validators for construction questions
"""

__version__ = "0.1.0"

__all__ = []
