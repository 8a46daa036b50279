"""Configuration settings for the course planner."""

import logging
from dataclasses import dataclass

BACKENDS = ("map", "list", "bst", "sqlite")

@dataclass
class PlannerConfig:
    """Configuration for the course planner."""
    default_file: str = "CS 300 ABCU_Advising_Program_Input.csv"
    database: str = "courses.db"
    backend: str = "bst"
    log_level: str = "WARNING"

def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)
