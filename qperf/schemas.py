"""Pydantic schemas for report options and configuration."""

from pydantic import BaseModel, Field, field_validator

from .constants import QUESTION_TYPES


class ReportOptions(BaseModel):
    """Options for a single tabulation run."""

    question_types: list[str] = Field(default_factory=lambda: list(QUESTION_TYPES))
    delimiter: str = Field(default=',', min_length=1)
    tournament: str = ''
    display_rounds: bool = False
    missing_round_type: str = Field(default='G', pattern=r'^[AGIQRSXV]$')

    @field_validator('question_types', mode='before')
    @classmethod
    def split_type_string(cls, v):
        """Accept 'AGQ' as shorthand for ['A', 'G', 'Q']."""
        if isinstance(v, str):
            return [c for c in v.replace(',', '') if not c.isspace()]
        return v

    @field_validator('question_types')
    @classmethod
    def validate_question_types(cls, v):
        """Ensure all requested question types exist."""
        for qtype in v:
            if qtype not in QUESTION_TYPES:
                raise ValueError(f"Invalid question type '{qtype}'")
        return v

    class Config:
        extra = 'forbid'


class ReportConfig(ReportOptions):
    """Defaults read from data/qperf_config.json."""

    log_dir: str = 'logs'
