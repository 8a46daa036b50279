"""Data models for the course planner."""

from dataclasses import dataclass, asdict, field
from typing import List, Optional, Dict, Any
import json
import time

@dataclass
class Course:
    """Represents a course."""
    course_number: str
    title: str
    prerequisites: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary for JSON serialization."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert course to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_summary(self) -> str:
        return f"{self.course_number}, {self.title}"

    def format_prerequisites(self) -> str:
        if not self.prerequisites:
            return "None"
        return ", ".join(self.prerequisites)

@dataclass
class LoadStats:
    """Statistics for a single load of a course file."""
    source: str
    start_time: float = field(default_factory=time.time)
    total_lines: int = 0
    loaded_courses: int = 0
    skipped_lines: int = 0
    duplicate_courses: int = 0
    end_time: Optional[float] = None

    def finish(self) -> None:
        self.end_time = time.time()

    @property
    def elapsed_time(self) -> float:
        """Calculate elapsed time in seconds."""
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time
