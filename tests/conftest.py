# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for corpus_match

Provides common test fixtures used across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root and tests dir to path for imports
TESTS_ROOT = Path(__file__).parent
PROJECT_ROOT = TESTS_ROOT.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(TESTS_ROOT))

from corpus_match.classification import CpcClassification, UspcClassification


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'CORPUS_MATCH_ENVIRONMENT': 'test',
        'CORPUS_MATCH_DEBUG': 'true',
        'CORPUS_MATCH_LOG_DIR': str(temp_dir / 'logs'),
        'CORPUS_MATCH_LOG_LEVEL': 'debug',
        'CORPUS_MATCH_LOG_CONSOLE': 'false',
        'CORPUS_MATCH_EVALUATION_ENGINE': 'structural',
        'CORPUS_MATCH_ENCODING_FALLBACKS': 'utf-8, latin-1',
        'CORPUS_MATCH_OUTPUT_FORMAT': 'json',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset singleton instances between tests."""
    from corpus_match.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# CLASSIFICATION FIXTURES
# ==============================================================================

@pytest.fixture
def cpc_h04n21():
    """CPC H04N 21 main group."""
    return CpcClassification(section='H', main_class='04', sub_class='N', main_group='21')


@pytest.fixture
def cpc_g06f16():
    """CPC G06F 16 main group."""
    return CpcClassification(section='G', main_class='06', sub_class='F', main_group='16')


@pytest.fixture
def uspc_705():
    """USPC main class 705."""
    return UspcClassification(main_class='705')


# ==============================================================================
# FILE FIXTURES
# ==============================================================================

@pytest.fixture
def write_document(temp_dir):
    """Write markup to a file in temp_dir and return its path."""
    def _write(name: str, text: str, encoding: str = 'utf-8') -> Path:
        path = temp_dir / name
        path.write_bytes(text.encode(encoding))
        return path
    return _write
