"""
Content Manager for the Guess The Word game

Handles loading and validation of the YAML file containing the vocabulary
the word queue is filled from.
"""

import yaml
from typing import Any, List, Optional
import logging

from src.core.vocabulary import DEFAULT_WORDS

logger = logging.getLogger(__name__)


class ContentValidationError(Exception):
    """Raised when YAML content validation fails."""
    pass


class ContentManager:
    """Manages loading and validation of game words from YAML files."""

    def __init__(self, yaml_file_path: Optional[str] = "words.yaml"):
        """
        Initialize ContentManager with path to YAML file.

        Args:
            yaml_file_path: Path to the YAML file containing the words, or None
                to use the built-in vocabulary
        """
        self.yaml_file_path = yaml_file_path
        self.words: List[str] = []
        self._loaded = False

    def load_words_from_yaml(self) -> None:
        """
        Load the vocabulary from the YAML file.

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ContentValidationError: If YAML structure is invalid
            yaml.YAMLError: If YAML parsing fails
        """
        try:
            with open(self.yaml_file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file)

            self.validate_yaml_structure(data)
            self.words = self._parse_words(data)
            self._loaded = True
            logger.info(f"Successfully loaded {len(self.words)} words from {self.yaml_file_path}")

        except FileNotFoundError:
            logger.error(f"YAML file not found: {self.yaml_file_path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            raise
        except ContentValidationError as e:
            logger.error(f"Content validation error: {e}")
            raise

    def load_default_words(self) -> None:
        """Use the built-in vocabulary."""
        self.words = list(DEFAULT_WORDS)
        self._loaded = True
        logger.info(f"Using {len(self.words)} built-in words")

    def load(self) -> None:
        """Load from the configured file, or the built-in vocabulary when no file is set."""
        if self.yaml_file_path:
            self.load_words_from_yaml()
        else:
            self.load_default_words()

    def validate_yaml_structure(self, data: Any) -> None:
        """
        Validate the structure of loaded YAML data.

        Args:
            data: Parsed YAML data to validate

        Raises:
            ContentValidationError: If structure is invalid
        """
        if not isinstance(data, dict):
            raise ContentValidationError("YAML root must be a dictionary")

        if 'words' not in data:
            raise ContentValidationError("YAML must contain 'words' key")

        words = data['words']
        if not isinstance(words, list):
            raise ContentValidationError("'words' must be a list")

        if len(words) == 0:
            raise ContentValidationError("'words' list cannot be empty")

        for i, word in enumerate(words):
            if not isinstance(word, str):
                raise ContentValidationError(f"Word {i} must be a string")
            if not word.strip():
                raise ContentValidationError(f"Word {i} cannot be empty")

        # Check for duplicates
        normalized = [word.strip() for word in words]
        if len(normalized) != len(set(normalized)):
            raise ContentValidationError("Duplicate words found")

    def _parse_words(self, data: dict) -> List[str]:
        return [word.strip() for word in data['words']]

    def get_vocabulary(self) -> List[str]:
        """
        Get all loaded words.

        Returns:
            Copy of the vocabulary

        Raises:
            RuntimeError: If no words are loaded
        """
        if not self._loaded:
            raise RuntimeError("No words loaded. Call load_words_from_yaml() first.")

        return self.words.copy()

    def is_loaded(self) -> bool:
        """Check if words have been loaded."""
        return self._loaded

    def get_word_count(self) -> int:
        """Get the number of loaded words."""
        return len(self.words) if self._loaded else 0
