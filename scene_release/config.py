"""
Configuration management for scene_release
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

TOKEN_SECTIONS = ('providers', 'languages', 'flags')


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = field(default_factory=lambda: os.getenv("SCENE_RELEASE_LOG_LEVEL", "INFO"))


@dataclass
class ParserConfig:
    """Parser defaults"""
    default_type: str = field(default_factory=lambda: os.getenv("SCENE_RELEASE_DEFAULT_TYPE", "movie"))
    tokens_file: Optional[str] = field(default_factory=lambda: os.getenv("SCENE_RELEASE_TOKENS_FILE") or None)


@dataclass
class Config:
    """Main configuration class"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def load_tokens(cls, tokens_path: str) -> Dict[str, Dict[str, str]]:
        """Load extra lookup tokens from a YAML file

        The file maps each of ``providers``, ``languages`` and ``flags`` to a
        table of ``token: value`` entries, e.g. ``languages: {Latvian: lv}``.
        """
        tokens_file = Path(tokens_path)
        if not tokens_file.exists():
            raise FileNotFoundError(f"Tokens file not found: {tokens_path}")

        with open(tokens_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Tokens file must contain a mapping: {tokens_path}")

        tokens = {}
        for section in TOKEN_SECTIONS:
            entries = data.get(section) or {}
            if isinstance(entries, list):
                # Bare flag lists display as written
                entries = {str(entry): str(entry) for entry in entries}
            if not isinstance(entries, dict):
                raise ValueError(f"Section '{section}' in {tokens_path} must be a mapping or a list")
            tokens[section] = {str(k): str(v) for k, v in entries.items()}
        return tokens

    def tokens(self) -> Dict[str, Any]:
        """Extra tokens from the configured file, empty when none is set"""
        if not self.parser.tokens_file:
            return {}
        return self.load_tokens(self.parser.tokens_file)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls()
