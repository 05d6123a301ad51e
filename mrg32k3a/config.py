"""
Engine Positioning Config
=========================

An absolute stream position (seed, sequence, subsequence, offset), validated
with pydantic so that a job file handed to a worker cannot name a position
outside the unsigned 64-bit range of each coordinate.

Example file:
    {
        "seed": "0x2a",
        "sequence": 0,
        "subsequence": 17,
        "offset": 1000
    }

Integers may be written as JSON numbers or as strings with a base prefix.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_SEED, MASK64

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    seed: int = Field(DEFAULT_SEED, ge=0, le=MASK64, description="Seed; 0 selects the default seed")
    sequence: int = Field(0, ge=0, le=MASK64, description="Blocks of 2^127 values to skip")
    subsequence: int = Field(0, ge=0, le=MASK64, description="Blocks of 2^67 values to skip")
    offset: int = Field(0, ge=0, le=MASK64, description="Single values to skip")

    @field_validator('seed', 'sequence', 'subsequence', 'offset', mode='before')
    @classmethod
    def parse_prefixed_int(cls, value):
        if isinstance(value, str):
            try:
                return int(value, 0)
            except ValueError:
                raise ValueError(f"not an integer literal: {value!r}") from None
        return value


def load_engine_config(path: Union[str, Path]) -> EngineConfig:
    """Read and validate an EngineConfig from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    config = EngineConfig.model_validate(data)
    logger.debug(f"Loaded engine config from {path}: {config}")
    return config
