"""
MRG32k3a - reproducible, jump-ahead capable random streams for parallel lanes
"""
from .boxmuller import BoxMullerCache
from .config import EngineConfig, load_engine_config
from .constants import DEFAULT_SEED, M1, M2, SEQUENCE_LENGTH, SUBSEQUENCE_LENGTH
from .engine import Mrg32k3aEngine
from .reference import get_engine_info, list_available_engines, mrg32k3a_cpu
from .state import EngineState

__version__ = '1.0.0'

__all__ = [
    'BoxMullerCache',
    'EngineConfig',
    'EngineState',
    'Mrg32k3aEngine',
    'load_engine_config',
    'mrg32k3a_cpu',
    'get_engine_info',
    'list_available_engines',
    'DEFAULT_SEED',
    'M1',
    'M2',
    'SUBSEQUENCE_LENGTH',
    'SEQUENCE_LENGTH',
]
