"""Configuration management."""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration."""

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("VIDPLAN_WORKSPACE", ".")),
        description="Workspace directory"
    )
    plan_file: str = Field(
        default_factory=lambda: os.getenv("VIDPLAN_PLAN_FILE", "plan.yaml"),
        description="Plan document file name, relative to the workspace"
    )

    # Prompt settings
    prompt_model: str = Field(
        default_factory=lambda: os.getenv("VIDPLAN_PROMPT_MODEL", "Veo 3.1"),
        description="Model name written into the prompt payload"
    )

    @property
    def plan_path(self) -> Path:
        """Return the default plan document path."""
        return self.workspace / self.plan_file


# Global config instance
config = Config()
